import numpy as np
import pandas as pd

from collections.abc import Mapping
from sklearn.metrics import accuracy_score, f1_score


def _is_missing(value):
    return value is None or value is pd.NA or (isinstance(value, float) and np.isnan(value))


def iter_observations(X, columns=None, exclude=None):
    """Yields one observation dict per row of X.

    X may be a DataFrame (column names are the features), a 2D array
    together with ``columns`` or an iterable of mappings. Missing cells
    (None or NaN) are left out of the observation, so rows can carry
    different feature sets. ``exclude`` drops a feature from every row.
    """
    if isinstance(X, pd.DataFrame):
        columns = [str(c) for c in X.columns]
        rows = X.itertuples(index=False, name=None)
    elif isinstance(X, np.ndarray):
        if X.ndim != 2:
            raise ValueError(f"Expected a 2D array, got {X.ndim} dimensions instead")
        if columns is None or len(columns) != X.shape[1]:
            raise ValueError(f"Expected {X.shape[1]} column names, got {None if columns is None else len(columns)} instead")
        rows = X.tolist()
    else:
        rows = X
        columns = None

    for row in rows:
        if columns is None:
            if not isinstance(row, Mapping):
                raise ValueError(f"Expected a mapping per row, got {type(row).__name__} instead")
            items = row.items()
        else:
            items = zip(columns, row)
        yield {feature: value for feature, value in items
               if feature != exclude and not _is_missing(value)}


def column_values(X, feature, columns=None):
    """Returns the value of ``feature`` for every row of X (None when missing)."""
    values = []
    for row in iter_observations(X, columns=columns):
        values.append(row.get(feature))
    return np.array(values, dtype=object)


def _macro_f1_score(y_true, y_pred):
    """Macro F1 over the labels of y_true; other predicted values only count as misses"""
    return f1_score(y_true, y_pred, labels=np.unique(y_true), average="macro", zero_division=0)


def get_scorer(scoring):
    scores = {"accuracy": accuracy_score,
              "f1_score": _macro_f1_score,
    }
    if scoring in scores:
        return scores[scoring]
    raise ValueError(f"The specified scoring {scoring} is not valid. Expected one of {tuple(scores.keys())}")


def generate_xor_data():
    """Categorical XOR table: 'class' is '+' when x0 == x1."""
    data = np.array(
        ([["1", "1", "+"]]*10) +
        ([["1", "0", "-"]]*10) +
        ([["0", "1", "-"]]*10) +
        ([["0", "0", "+"]]*10)
    )
    return pd.DataFrame(data, columns=["x0", "x1", "class"])


def make_categorical(n_samples, n_features, n_values, seed=None):
    """Random categorical DataFrame with features 'f0'.. and values 'v0'.."""
    rng = np.random.default_rng(seed)
    codes = rng.integers(0, n_values, size=(n_samples, n_features))
    values = np.char.add("v", codes.astype(str))
    return pd.DataFrame(values, columns=[f"f{j}" for j in range(n_features)]).astype(object)
