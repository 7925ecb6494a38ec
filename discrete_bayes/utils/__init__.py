from ._validation import InvalidInputError
from ._validation import check_feature
from ._validation import check_observation
from ._validation import check_state
from ._utils import iter_observations
from ._utils import column_values
from ._utils import get_scorer
from ._utils import generate_xor_data
from ._utils import make_categorical


__all__ = [
    "InvalidInputError",
    "check_feature",
    "check_observation",
    "check_state",
    "iter_observations",
    "column_values",
    "get_scorer",
    "generate_xor_data",
    "make_categorical",
]
