import numpy as np

#Local Imports
from discrete_bayes.utils import check_feature, check_observation


def _normalize(scores):
    """Scales scores to sum 1, or returns zeros when they sum 0"""
    total = scores.sum()
    return np.divide(scores, total, out=np.zeros_like(scores), where=total > 0)


class InferenceEngine:
    """Estimates the distribution of a feature from the counts of a CountStore.

    Parameters
    ----------
    store : CountStore
        Counts to read from. The engine never mutates it.
    """

    def __init__(self, store):
        self.store = store

    def _marginal_distribution(self, feature, attributes):
        counts = np.array([self.store.marginal(feature, a) for a in attributes], dtype=float)
        return _normalize(counts)

    def _joint_counts(self, feature, attributes, evidence):
        """Matrix of joint counts, attributes of ``feature`` by evidence items.

        Entries missing from the store are 0 so they neither contribute to
        the numerator nor to the per-evidence totals.
        """
        counts = np.zeros((len(attributes), len(evidence)))
        for i, attribute in enumerate(attributes):
            for j, (inner_feature, value) in enumerate(evidence):
                count = self.store.joint(feature, attribute, inner_feature, value)
                if count is not None:
                    counts[i, j] = count
        return counts

    def _conditional_distribution(self, feature, attributes, observation):
        evidence = list(observation.items())
        counts = self._joint_counts(feature, attributes, evidence)
        totals = counts.sum(axis=0)
        probabilities = np.divide(counts, totals, out=np.zeros_like(counts), where=totals > 0)
        scores = probabilities.prod(axis=1)
        return _normalize(scores)

    def classify(self, feature, observation=None):
        """Distribution over the known attributes of ``feature``.

        Parameters
        ----------
        feature : str
            Feature to classify.

        observation : Mapping[str, str], default=None
            Conditioning features. When absent or empty the marginal
            distribution is returned.

        Returns
        -------
        result : dict
            Attribute to probability. Empty when the feature was never
            trained, all zeros when no attribute has support for the evidence.
        """
        check_feature(feature)
        observation = check_observation(observation, allow_none=True)
        if not self.store.has_feature(feature):
            return {}
        attributes = self.store.get_attributes(feature)
        if not observation:
            distribution = self._marginal_distribution(feature, attributes)
        else:
            distribution = self._conditional_distribution(feature, attributes, observation)
        return {attribute: float(p) for attribute, p in zip(attributes, distribution)}
