from collections.abc import Mapping


class InvalidInputError(ValueError):
    """Raised when an observation, a feature name or a state snapshot is malformed."""


def check_feature(feature):
    if not isinstance(feature, str):
        raise InvalidInputError(f"Feature names must be strings, got {type(feature).__name__} instead")
    return feature


def check_observation(observation, allow_none=False):
    """Validates an observation before it touches any count.

    Parameters
    ----------
    observation : Mapping[str, str] or None
        Feature to attribute mapping.

    allow_none : bool, default=False
        Accept None as an absent observation (used for conditioning).

    Returns
    -------
    observation : dict
        A plain dict copy of the observation, or None.
    """
    if observation is None and allow_none:
        return None
    if not isinstance(observation, Mapping):
        raise InvalidInputError(f"Expected a mapping of features to attributes, got {type(observation).__name__} instead")
    for feature, attribute in observation.items():
        check_feature(feature)
        if not isinstance(attribute, str):
            raise InvalidInputError(
                f"Attribute of feature '{feature}' must be a string, got {type(attribute).__name__} instead")
    return dict(observation)


def _check_count(count, path):
    if isinstance(count, bool) or not isinstance(count, int) or count < 0:
        raise InvalidInputError(f"Count at {path} must be a non-negative integer, got {count!r}")


def _check_level(value, path):
    if not isinstance(value, dict):
        raise InvalidInputError(f"Expected a dict at {path}, got {type(value).__name__} instead")
    for key in value:
        if not isinstance(key, str):
            raise InvalidInputError(f"Keys must be strings, got {key!r} at {path}")
    return value


def _known(features, feature, attribute):
    return feature in features and attribute in features[feature]


def _mirror_count(correlations, left_feature, left_attribute, right_feature, right_attribute):
    peers = correlations.get(right_feature, {}).get(right_attribute, {})
    return peers.get(left_feature, {}).get(left_attribute, 0)


def check_state(state):
    """Validates the shape of a state snapshot.

    A snapshot is ``{"features": {F: {a: n}}, "correlations": {F: {a: {G: {b: n}}}}}``
    with string keys, non-negative integer counts and no F == G pairs.
    Every joint count must refer to pairs known in ``features`` and be
    equal to its mirror entry (a missing mirror counts as 0).
    """
    _check_level(state, "state")
    for key in ("features", "correlations"):
        if key not in state:
            raise InvalidInputError(f"State snapshot is missing '{key}'")

    features = _check_level(state["features"], "features")
    for feature, attributes in features.items():
        for attribute, count in _check_level(attributes, f"features[{feature!r}]").items():
            _check_count(count, f"features[{feature!r}][{attribute!r}]")

    correlations = _check_level(state["correlations"], "correlations")
    for left_feature, left_attributes in correlations.items():
        path = f"correlations[{left_feature!r}]"
        for left_attribute, peers in _check_level(left_attributes, path).items():
            for right_feature, right_attributes in _check_level(peers, f"{path}[{left_attribute!r}]").items():
                if right_feature == left_feature:
                    raise InvalidInputError(f"Self pair recorded for feature '{left_feature}'")
                inner_path = f"{path}[{left_attribute!r}][{right_feature!r}]"
                for right_attribute, count in _check_level(right_attributes, inner_path).items():
                    _check_count(count, f"{inner_path}[{right_attribute!r}]")

    for left_feature, left_attributes in correlations.items():
        for left_attribute, peers in left_attributes.items():
            if not _known(features, left_feature, left_attribute):
                raise InvalidInputError(
                    f"Joint counts recorded for unknown pair ({left_feature!r}, {left_attribute!r})")
            for right_feature, right_attributes in peers.items():
                for right_attribute, count in right_attributes.items():
                    if not _known(features, right_feature, right_attribute):
                        raise InvalidInputError(
                            f"Joint counts recorded for unknown pair ({right_feature!r}, {right_attribute!r})")
                    mirror = _mirror_count(correlations, left_feature, left_attribute, right_feature, right_attribute)
                    if mirror != count:
                        raise InvalidInputError(
                            f"Joint count ({left_feature!r}, {left_attribute!r}, {right_feature!r}, {right_attribute!r})"
                            f" is {count} but its mirror is {mirror}")
    return state
