import numpy as np
import pandas as pd

from itertools import product
from time import time
from tqdm.autonotebook import tqdm

from discrete_bayes.naive_bayes import NaiveBayes
from discrete_bayes.utils import make_categorical


def evaluate(X, clf, fit_time, refit_time, classify_time):
    """Times a fresh fit, a second pass without schema growth and one classify per feature"""
    ts = time()
    clf.fit(X)
    fit_time.append(time()-ts)
    expansions = clf.store_.expansions

    ts = time()
    clf.partial_fit(X)
    refit_time.append(time()-ts)

    evidence = X.iloc[0].to_dict()
    ts = time()
    for feature in X.columns:
        clf.classify(feature, {k: v for k, v in evidence.items() if k != feature})
    classify_time.append(time()-ts)
    return expansions


def training_time_comparison(combinations=None, n_iterations=5, verbose=0, seed=200):
    column_names = ["n_samples",
                    "n_features",
                    "n_values",
                    "Average Fit Time",
                    "STD Fit Time",
                    "Average Refit Time",
                    "Average Classify Time",
                    "Expansions"]

    results = []
    if combinations is None:
        combinations = list(product([100, 1000], [2, 5, 10], [2, 5, 10]))

    clf = NaiveBayes()
    progress_bar = tqdm(total=len(combinations), bar_format='{l_bar}{bar:20}{r_bar}{bar:-10b}') if verbose else None
    for n_samples, n_features, n_values in combinations:
        if verbose:
            progress_bar.set_postfix({"n_samples": n_samples, "n_features": n_features, "n_values": n_values})
            progress_bar.update(1)
            progress_bar.refresh()
        X = make_categorical(n_samples, n_features, n_values, seed=seed)

        fit_time = []
        refit_time = []
        classify_time = []
        expansions = 0
        for _ in range(n_iterations):
            expansions = evaluate(X, clf, fit_time, refit_time, classify_time)

        results.append([n_samples,
                        n_features,
                        n_values,
                        np.mean(fit_time),
                        np.std(fit_time),
                        np.mean(refit_time),
                        np.mean(classify_time),
                        expansions])
    if verbose:
        progress_bar.close()
    results = pd.DataFrame(results, columns=column_names)
    results.drop_duplicates(["n_samples", "n_features", "n_values"], inplace=True)
    return results
