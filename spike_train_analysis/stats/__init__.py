import numpy as np
import pandas as pd

from .kernels import *
from .correlation import *
from .intensity import *


def pairwise(trains, measure=sttc, symmetric=True, **kwargs):
    """
    Compare every pair in a collection of spike trains.

    For a list, dict, or Series of spike trains, computes ``measure(a, b,
    **kwargs)`` for each pair of trains and returns them as a labelled square
    DataFrame, whose entry ``[i, j]`` compares train *i* to train *j*.

    If *symmetric* is True (the default, correct for :func:`sttc` and
    :func:`stoic` without a lag), only the upper triangle is computed and
    then mirrored.
    """
    if isinstance(trains, pd.Series):
        labels = trains.index
        trains = list(trains.values)
    elif isinstance(trains, dict):
        labels = pd.Index(list(trains.keys()))
        trains = list(trains.values())
    else:
        trains = list(trains)
        labels = pd.RangeIndex(len(trains))
    num_trains = len(trains)
    scores = np.full((num_trains, num_trains), np.nan)
    for i in range(num_trains):
        for j in range(i if symmetric else 0, num_trains):
            scores[i, j] = measure(trains[i], trains[j], **kwargs)
            if symmetric:
                scores[j, i] = scores[i, j]
    return pd.DataFrame(scores, index=labels, columns=labels)
