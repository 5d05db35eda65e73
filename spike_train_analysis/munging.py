import numpy as np
import pandas as pd


def timestamps(x, lag=0.0):
    """
    Project an event source down to a plain array of spike times.

    Parameters
    ----------
    x : pd.Series, pd.DataFrame or (N,) array_like
        A boolean :class:`pd.Series` is treated as an event indicator indexed
        by time, and the times at which it is ``True`` are returned. Any other
        Series or DataFrame contributes its index, and anything else is taken
        to already be a sequence of times. A column of spike times such as
        ``df['t']`` is therefore reduced to its (row) index, not its values;
        pass ``df['t'].to_numpy()``, or use :func:`trains_from_frame`.
    lag : float, default: 0
        Added to every time, so that a positive lag delays the train.

    Returns
    -------
    t : (N,) np.ndarray of float
        The (shifted) spike times, in the order they were given.
    """
    if isinstance(x, pd.Series) and pd.api.types.is_bool_dtype(x.dtype):
        t = x.index.to_numpy()[x.to_numpy()]
    elif isinstance(x, (pd.Series, pd.DataFrame)):
        t = x.index.to_numpy()
    else:
        t = np.asarray(x)
    t = np.asarray(t, dtype=float)
    if t.ndim == 0:
        t = t.reshape(1)
    if t.ndim != 1:
        raise ValueError(f"Spike times must be one-dimensional, got shape "
                         f"{t.shape}.")
    if lag != 0:
        t = t + lag
    return t


def trains_from_frame(df, t_col='t', train_cols=['unit']):
    """
    Split a long-form table of spikes into one spike train per unit.

    Parameters
    ----------
    df : pd.DataFrame
        One row per spike, with the spike time in *t_col*.
    t_col : str, default: 't'
        Column holding the spike times.
    train_cols : List<str>, default: ['unit']
        Columns that together identify which train a spike belongs to.

    Returns
    -------
    trains : pd.Series
        Indexed by *train_cols*, each value a sorted (N,) np.ndarray of spike
        times.

    Examples
    --------
    >>> df = pd.DataFrame({'unit': [1, 2, 1], 't': [0.3, 0.1, 0.2]})
    >>> trains_from_frame(df)
    unit
    1    [0.2, 0.3]
    2         [0.1]
    Name: t, dtype: object
    """
    missing = [col for col in [t_col] + list(train_cols)
               if col not in df.columns]
    if missing:
        raise ValueError(f"Columns {missing} not found in spike table.")
    return df.groupby(list(train_cols))[t_col] \
        .apply(lambda t: np.sort(t.to_numpy(dtype=float)))
