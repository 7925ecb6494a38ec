from itertools import permutations

#Local Imports
from discrete_bayes.utils import check_observation


class Trainer:
    """Accumulates observations into a CountStore.

    Schema expansion is quadratic in the number of known feature/attribute
    pairs, so it only runs when an observation brings a pair the store has
    not seen before.
    """

    def __init__(self, store):
        self.store = store

    def _is_novel(self, observation):
        return any(not self.store.has_attribute(feature, attribute)
                   for feature, attribute in observation.items())

    def train(self, observation):
        observation = check_observation(observation)
        needs_expansion = self._is_novel(observation)

        for feature, attribute in observation.items():
            self.store.bump_marginal(feature, attribute)
        for left, right in permutations(observation, 2):
            self.store.bump_joint(left, observation[left], right, observation[right])

        if needs_expansion:
            self.store.expand_schema()
