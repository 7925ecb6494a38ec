from ._naive_bayes import NaiveBayes
from ._trainer import Trainer
from ._inference import InferenceEngine


__all__ = [
    "NaiveBayes",
    "Trainer",
    "InferenceEngine",
]
