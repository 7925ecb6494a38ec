from discrete_bayes.naive_bayes import NaiveBayes
from discrete_bayes.utils import InvalidInputError


__version__ = "0.1.0"

__all__ = [
    "NaiveBayes",
    "InvalidInputError",
]
