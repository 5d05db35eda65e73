import warnings

import numpy as np

from .kernels import normal
from ..munging import timestamps


def convolve(train, kernel=None, sigma=None, family=normal, range=0.0,
             lag=0.0):
    """
    Smooth a spike train into a continuous intensity (firing rate) function.

    Parameters
    ----------
    train : (N,) array_like or pd.Series
        Spike times, or anything :func:`timestamps` understands. Need not be
        sorted.
    kernel : callable, optional
        Weight given to a spike as a function of (an array of) separations
        from the query time. Defaults to ``family(sigma)``.
    sigma : float, optional
        Width passed to *family* when no *kernel* is given.
    family : callable, default: :func:`normal`
        Kernel factory used with *sigma*.
    range : float, default: 0
        If positive, only spikes strictly closer than *range* to the query
        time are summed over. This is only a speed-up, and is only accurate
        if *kernel* is negligible beyond *range*; choosing it is up to the
        caller.
    lag : float, default: 0
        Shift applied to the spike times first.

    Returns
    -------
    intensity : callable
        ``intensity(t)`` is the sum of ``kernel(t - s)`` over the spike times
        ``s``, or 0.0 if there are none (within *range*). Array-valued *t* is
        evaluated point by point and returns an array of the same shape. Each
        call re-scans the spike train; nothing is cached.
    """
    if kernel is None:
        if sigma is None:
            raise ValueError("Either a kernel or a kernel width sigma must "
                             "be given.")
        kernel = family(sigma)
    if range < 0:
        warnings.warn('Negative range passed to convolve! Summing over all '
                      'spikes instead...')
    times = timestamps(train, lag=lag)

    def intensity(t):
        if np.ndim(t) > 0:
            t = np.asarray(t, dtype=float)
            return np.array([intensity(ti) for ti in t.flat]).reshape(t.shape)
        dx = t - times
        if range > 0:
            dx = dx[np.abs(dx) < range]
        if dx.size == 0:
            return 0.0
        return float(np.sum(kernel(dx)))
    return intensity
