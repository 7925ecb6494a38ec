import numpy as np
import pandas as pd

from sklearn.base import BaseEstimator
from sklearn.exceptions import NotFittedError
from tqdm.autonotebook import tqdm

#Local Imports
from discrete_bayes.state import CountStore
from discrete_bayes.utils import column_values, get_scorer, iter_observations
from ._trainer import Trainer
from ._inference import InferenceEngine

# Placeholder prediction for rows without support; never equal to a str attribute
_NO_PREDICTION = "\x00"


def _materialize(X):
    """Turns a one-shot iterable of rows into a list so it can be read more than once"""
    if isinstance(X, (pd.DataFrame, np.ndarray)):
        return X
    return list(X)


class NaiveBayes(BaseEstimator):
    """A naive Bayes classifier over categorical observations.

    Any feature can be classified given any subset of the others. Training
    is incremental: every observation updates the marginal and pairwise
    joint counts, so training and classification can interleave freely.

    Parameters
    ----------
    state : dict, default=None
        Snapshot returned by ``get_state`` to resume from. An empty
        classifier is created when it is None.

    verbose : int, default=0
        Print a summary and show a progress bar during batch training.

    Attributes
    ----------
    store_ : CountStore
        Marginal and joint counts learnt so far.

    trainer_ : Trainer
        Updates ``store_`` with new observations.

    engine_ : InferenceEngine
        Computes distributions from ``store_``.
    """

    def __init__(self, state=None, verbose=0):
        self.state = state
        self.verbose = verbose

    def _reset(self):
        self.store_ = CountStore() if self.state is None else CountStore.from_snapshot(self.state)
        self.trainer_ = Trainer(self.store_)
        self.engine_ = InferenceEngine(self.store_)

    def _check_initialized(self):
        """Builds the counts from the ``state`` parameter on first use"""
        if not hasattr(self, "store_"):
            self._reset()

    def set_params(self, **params):
        super().set_params(**params)
        if "state" in params:
            self._reset()
        return self

    def train(self, observation):
        """Updates the counts with one observation (mapping of feature to attribute)"""
        self._check_initialized()
        self.trainer_.train(observation)

    def classify(self, feature, observation=None):
        """Probability of each known attribute of ``feature`` given ``observation``"""
        self._check_initialized()
        return self.engine_.classify(feature, observation)

    def get_state(self):
        self._check_initialized()
        return self.store_.snapshot()

    def fit(self, X, columns=None):
        """ Trains the classifier from scratch.

        The counts are reset to the ``state`` snapshot (empty if None)
        before training.

        Parameters
        ----------
        X : DataFrame, array-like of shape (n_samples, n_features) or iterable of mappings
            Observations. Missing cells are skipped.

        columns : list of str, default=None
            Feature names, required when X is a numpy array.

        Returns
        -------
        self : object
        """
        self._reset()
        return self.partial_fit(X, columns=columns)

    def partial_fit(self, X, columns=None):
        """Trains on every row of X on top of the current counts"""
        self._check_initialized()
        expansions = self.store_.expansions
        rows = iter_observations(X, columns=columns)
        if self.verbose:
            rows = tqdm(rows, total=len(X) if hasattr(X, "__len__") else None, leave=False)
        n_rows = 0
        for observation in rows:
            self.trainer_.train(observation)
            n_rows += 1
        if self.verbose:
            print(f"Trained {n_rows} observations - Features: {len(self.store_.get_features())}"
                  f" - Schema expansions: {self.store_.expansions - expansions}")
        return self

    def _check_trained(self):
        self._check_initialized()
        if not self.store_.get_features():
            raise NotFittedError(f"This {type(self).__name__} instance has not been trained yet. "
                                 "Call 'train' or 'fit' before using this method.")

    def predict_proba(self, X, feature, columns=None):
        """ Distribution of ``feature`` for each row of X.

        The feature itself is dropped from the rows, the rest of each row
        is the conditioning observation.

        Returns
        -------
        proba : DataFrame of shape (n_samples, n_attributes)
            One column per known attribute of ``feature``.
        """
        self._check_initialized()
        X = _materialize(X)
        attributes = self.store_.get_attributes(feature)
        rows = [self.classify(feature, observation)
                for observation in iter_observations(X, columns=columns, exclude=feature)]
        index = X.index if isinstance(X, pd.DataFrame) else None
        return pd.DataFrame(rows, columns=attributes, index=index, dtype=float)

    def predict(self, X, feature, columns=None):
        """ Most probable attribute of ``feature`` for each row of X.

        Returns
        -------
        y : array-like of shape (n_samples,)
            Predicted attribute, None where no attribute has support.
        """
        self._check_trained()
        X = _materialize(X)
        proba = self.predict_proba(X, feature, columns=columns)
        output = np.empty(proba.shape[0], dtype=object)
        if proba.shape[1] == 0:
            return output
        values = proba.to_numpy()
        best = proba.columns.to_numpy(dtype=object)[np.argmax(values, axis=1)]
        supported = values.sum(axis=1) > 0
        output[supported] = best[supported]
        return output

    def score(self, X, feature, scoring="accuracy", columns=None):
        """Compares the predictions of ``feature`` against its own values in X.

        Rows where the feature is missing are ignored. Rows without support
        count as wrong predictions.
        """
        scorer = get_scorer(scoring)
        X = _materialize(X)
        y_true = column_values(X, feature, columns=columns)
        y_pred = self.predict(X, feature, columns=columns)
        mask = np.array([value is not None for value in y_true], dtype=bool)
        y_pred = np.array([_NO_PREDICTION if value is None else value for value in y_pred[mask]], dtype=object)
        return scorer(y_true[mask].astype(str), y_pred.astype(str))
