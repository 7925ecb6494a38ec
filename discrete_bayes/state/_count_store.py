import copy
import pandas as pd

#Local Imports
from discrete_bayes.utils import InvalidInputError, check_state


class CountStore:
    """Marginal and pairwise joint counts of categorical observations.

    Counts are kept in explicit nested dicts. Entries are only ever created
    through the ``_ensure_*`` steps below, never on access.

    Attributes
    ----------
    features : dict
        ``features[F][a]`` is the number of observations with F = a.

    correlations : dict
        ``correlations[F][a][G][b]`` is the number of observations with
        F = a and G = b at the same time, for F != G. Kept symmetric.

    expansions : int
        Number of times ``expand_schema`` has run on this store.
    """

    def __init__(self):
        self.features = dict()
        self.correlations = dict()
        self.expansions = 0

    @classmethod
    def from_snapshot(cls, state):
        """Builds a store from a snapshot produced by ``snapshot``"""
        check_state(state)
        store = cls()
        store.features = copy.deepcopy(state["features"])
        store.correlations = copy.deepcopy(state["correlations"])
        store.expand_schema()
        return store

    def snapshot(self):
        return {
            "features": copy.deepcopy(self.features),
            "correlations": copy.deepcopy(self.correlations),
        }

    # Create-if-absent steps
    def _ensure_marginal(self, feature, attribute):
        if feature not in self.features:
            self.features[feature] = dict()
        if attribute not in self.features[feature]:
            self.features[feature][attribute] = 0

    def _ensure_joint(self, feature_a, attr_a, feature_b, attr_b):
        if feature_a not in self.correlations:
            self.correlations[feature_a] = dict()
        if attr_a not in self.correlations[feature_a]:
            self.correlations[feature_a][attr_a] = dict()
        peers = self.correlations[feature_a][attr_a]
        if feature_b not in peers:
            peers[feature_b] = dict()
        if attr_b not in peers[feature_b]:
            peers[feature_b][attr_b] = 0

    # Mutations
    def bump_marginal(self, feature, attribute):
        self._ensure_marginal(feature, attribute)
        self.features[feature][attribute] += 1

    def bump_joint(self, feature_a, attr_a, feature_b, attr_b):
        """Increments one direction of a joint count. The caller bumps the mirror entry."""
        if feature_a == feature_b:
            raise InvalidInputError(f"Cannot record a joint count of feature '{feature_a}' with itself")
        self._ensure_joint(feature_a, attr_a, feature_b, attr_b)
        self.correlations[feature_a][attr_a][feature_b][attr_b] += 1

    def expand_schema(self):
        """Backfills zero joint counts between every pair of known feature/attribute pairs.

        Quadratic in the number of known (feature, attribute) pairs, so it
        should only run when the schema has grown.
        """
        known = [(feature, list(attributes)) for feature, attributes in self.features.items()]
        for left_feature, left_attributes in known:
            for right_feature, right_attributes in known:
                if left_feature == right_feature:
                    continue
                for left_attribute in left_attributes:
                    for right_attribute in right_attributes:
                        self._ensure_joint(left_feature, left_attribute, right_feature, right_attribute)
        self.expansions += 1

    # Read accessors
    def has_feature(self, feature):
        return feature in self.features and len(self.features[feature]) > 0

    def has_attribute(self, feature, attribute):
        return feature in self.features and attribute in self.features[feature]

    def get_features(self):
        return list(self.features)

    def get_attributes(self, feature):
        return list(self.features.get(feature, ()))

    def marginal(self, feature, attribute):
        return self.features.get(feature, {}).get(attribute, 0)

    def joint(self, feature_a, attr_a, feature_b, attr_b):
        """Stored joint count, or None when the entry does not exist"""
        peers = self.correlations.get(feature_a, {}).get(attr_a)
        if peers is None or feature_b not in peers:
            return None
        return peers[feature_b].get(attr_b)

    # Inspection
    def marginal_frame(self):
        rows = [(feature, attribute, count)
                for feature, attributes in self.features.items()
                for attribute, count in attributes.items()]
        return pd.DataFrame(rows, columns=["feature", "attribute", "count"])

    def joint_frame(self, feature_a, feature_b):
        """Contingency table of feature_a (rows) against feature_b (columns)"""
        index = self.get_attributes(feature_a)
        columns = self.get_attributes(feature_b)
        table = pd.DataFrame(0, index=pd.Index(index, name=feature_a),
                             columns=pd.Index(columns, name=feature_b), dtype=int)
        for attr_a in index:
            for attr_b in columns:
                count = self.joint(feature_a, attr_a, feature_b, attr_b)
                if count is not None:
                    table.loc[attr_a, attr_b] = count
        return table
