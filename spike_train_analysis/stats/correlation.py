r"""
Pairwise correlation measures between spike trains.

Two measures are provided, both built on the sorted-train scans of
:mod:`spike_train_analysis.neighbours`:

:func:`spike_time_tiling_coefficient` (alias :func:`sttc`)
    The spike time tiling coefficient of Cutts & Eglen (J. Neurosci. 2014),

    .. math::

        STTC = \frac{1}{2}\left(\frac{P_A - T_B}{1 - P_A T_B}
            + \frac{P_B - T_A}{1 - P_B T_A}\right),

    where :math:`T_A` is the fraction of the recording covered by windows of
    half-width :math:`\Delta t` around the spikes of A, and :math:`P_A` is the
    fraction of A's spikes that have a spike of B within :math:`\Delta t`.

:func:`overlap_integral_covariance` (alias :func:`stoic`)
    The spike train overlap-integral covariance: the inner product of the two
    trains after each spike has been smoothed by a kernel, normalized so that
    each train has unit energy. Only pairs of spikes closer than
    :math:`\Delta t` contribute, which is accurate as long as the kernel
    overlap is negligible beyond that distance.

Both accept a *lag* that delays the second train before comparing, e.g. for
computing either measure as a function of lag.
"""
import warnings

import numpy as np

from ..neighbours import (map_neighbours, check_sorted, check_nonempty,
                          check_window)
from ..munging import timestamps
from .kernels import npi

DEFAULT_DT = 0.025
DEFAULT_SIGMA = 0.025


def tiling_coverage(train, dt=DEFAULT_DT):
    """
    Fraction of the recording covered by the windows around each spike.

    Each spike is given a window of half-width *dt*. Where a window overlaps
    the previous one, only the remainder beyond the previous window is
    counted, so the total is the length of the union of windows. The
    recording is taken to run from ``dt`` before the first spike to ``dt``
    after the last.

    The previous window is taken to end at zero before the first spike, so
    for a first spike earlier than *dt* only the part of its window after
    time zero is counted, and spikes at negative times are counted as
    negative coverage.
    """
    check_window(dt)
    check_sorted(train)
    check_nonempty(train)
    train = np.asarray(train, dtype=float)
    covered = 0.0
    window_end = 0.0
    for t in train.tolist():
        covered += min(t + dt - window_end, 2*dt)
        window_end = t + dt
    return covered / (train[-1] - train[0] + 2*dt)


def membership_proportion(x, y, dt=DEFAULT_DT):
    """
    Fraction of the spikes of *x* that have a neighbour in *y*.

    For each spike of *x*, a pointer into *y* is advanced past spikes whose
    window ends before it, and the spike is counted if it falls in the window
    of the spike the pointer lands on, ``y[k] - dt < x[i] <= y[k] + dt``.
    Only that one candidate is tested, and spikes of *x* are counted once no
    matter how many neighbours they have.
    """
    check_window(dt)
    check_sorted(x, y)
    check_nonempty(x, y)
    x = np.asarray(x, dtype=float).tolist()
    y = np.asarray(y, dtype=float).tolist()
    k = 0
    last = len(y) - 1
    count = 0
    for a in x:
        while a > y[k] + dt and k < last:
            k += 1
        if y[k] - dt < a <= y[k] + dt:
            count += 1
    return count / len(x)


def spike_time_tiling_coefficient(x, y, dt=DEFAULT_DT, lag=0.0):
    """
    Spike time tiling coefficient between two spike trains.

    Parameters
    ----------
    x, y : (N,), (M,) array_like or pd.Series
        Sorted spike times, or anything :func:`timestamps` understands.
    dt : float, default: 0.025
        Half-width of the synchronicity window.
    lag : float, default: 0
        Delay applied to *y* before comparing. Tiling coverage measures
        windows from time zero (see :func:`tiling_coverage`), so spikes at
        negative times, e.g. after a negative lag, give a negative coverage
        and can push the result outside :math:`[-1, 1]`.

    Returns
    -------
    sttc : float
        Nominally in :math:`[-1, 1]`, and 1 for a train compared with itself
        (unless its windows cover the whole recording). If either denominator
        :math:`1 - P T` vanishes the result is ``inf`` or ``nan``; this is
        warned about but not raised, so check ``np.isfinite`` if it matters.

    Raises
    ------
    UnsortedTrainError
        If either train is not sorted.
    EmptyTrainError
        If either train has no spikes. A train with a single spike is fine.

    Notes
    -----
    Alias: `sttc`. To fix the parameters ahead of time, e.g. for
    :func:`pairwise`, use ``functools.partial(sttc, dt=...)``.
    """
    x = timestamps(x)
    y = timestamps(y, lag=lag)
    check_window(dt)
    check_sorted(x, y)
    check_nonempty(x, y)

    Ta = np.float64(tiling_coverage(x, dt))
    Tb = np.float64(tiling_coverage(y, dt))
    Pa = np.float64(membership_proportion(x, y, dt))
    Pb = np.float64(membership_proportion(y, x, dt))
    with np.errstate(divide='ignore', invalid='ignore'):
        index = 0.5*((Pa - Tb)/(1 - Pa*Tb) + (Pb - Ta)/(1 - Pb*Ta))
    if not np.isfinite(index):
        warnings.warn(f'STTC is {index}: P*T == 1 for '
                      f'(Pa, Tb, Pb, Ta) = ({Pa}, {Tb}, {Pb}, {Ta}).',
                      RuntimeWarning)
    return float(index)


sttc = spike_time_tiling_coefficient


def overlap_integral_covariance(x, y, kpi=npi, sigma=DEFAULT_SIGMA, dt=None,
                                normalize=True, lag=0.0):
    """
    Spike train overlap-integral covariance (STOIC) of two spike trains.

    Parameters
    ----------
    x, y : (N,), (M,) array_like or pd.Series
        Sorted spike times, or anything :func:`timestamps` understands.
    kpi : callable, default: :func:`npi`
        Kernel product integral. ``kpi(sigma)`` should return the overlap of
        two kernels as a function of the distance between them. The default is
        for unit-mass Gaussian kernels.
    sigma : float, default: 0.025
        Width of the kernel.
    dt : float, optional
        Spikes further apart than this are not compared. Defaults to
        ``10*sigma``.
    normalize : bool, default: True
        Divide by the square root of the self-overlaps of *x* and *y*. If
        False the trains are assumed to be normalized already.
    lag : float, default: 0
        Delay applied to *y* before comparing.

    Returns
    -------
    stoic : float
        Exactly 0.0 if no spikes of *x* and *y* are within *dt* of each
        other, and exactly 1.0 for a (non-empty) train compared with itself.

    Notes
    -----
    Alias: `stoic`.
    """
    if dt is None:
        dt = 10*sigma
    x = timestamps(x)
    y = timestamps(y, lag=lag)
    overlap = kpi(sigma)
    total = 0.0
    num_pairs = 0

    def accumulate(a, b, i, j):
        nonlocal total, num_pairs
        total += overlap(abs(a - b))
        num_pairs += 1

    map_neighbours(x, y, accumulate, dt)
    if num_pairs == 0:
        return 0.0
    if normalize:
        energy_x = overlap_integral_covariance(x, x, kpi=kpi, sigma=sigma,
                                               dt=dt, normalize=False)
        energy_y = overlap_integral_covariance(y, y, kpi=kpi, sigma=sigma,
                                               dt=dt, normalize=False)
    else:
        energy_x = energy_y = 1.0
    return float(total/np.sqrt(energy_x*energy_y))


stoic = overlap_integral_covariance
