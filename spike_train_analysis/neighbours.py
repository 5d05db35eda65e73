r"""
Finding pairs of nearby events in two sorted spike trains.

Every pairwise measure in this package is built on the same scan: walk
through the shorter train, and for each of its events "catch up" a pointer
into the longer train to the start of that event's window, then visit every
event of the longer train that falls inside the window. Since both trains
are sorted, the pointer never has to move backwards, so the scan costs
:math:`O(l_x + l_y)` plus the number of neighbouring pairs found.

Two events :math:`x_i` and :math:`y_j` are neighbours when

.. math::

    y_j - \Delta t < x_i \leq y_j + \Delta t.

.. warning::

    The cost is linear in the number of neighbouring pairs, and so is the
    memory used by :func:`close_neighbours`. If *dt* is larger than the
    typical spacing between events, almost every pair of events is a
    neighbour, and both grow like :math:`l_x l_y`.
"""
import numpy as np
import scipy.sparse


class UnsortedTrainError(ValueError):
    """A spike train was not sorted in non-decreasing order."""


class EmptyTrainError(ValueError):
    """A spike train had no events where at least one is required."""


def check_sorted(*trains):
    """Raise :class:`UnsortedTrainError` unless each train is non-decreasing.

    Trains containing NaN are rejected too, including single-spike ones.
    """
    for k, train in enumerate(trains):
        train = np.asarray(train, dtype=float)
        if train.ndim != 1:
            raise ValueError(f"Spike train {k} must be one-dimensional, got "
                             f"shape {train.shape}.")
        if np.any(np.isnan(train)) or not np.all(np.diff(train) >= 0):
            raise UnsortedTrainError(f"Spike train {k} must be sorted.")


def check_nonempty(*trains):
    for k, train in enumerate(trains):
        if len(train) == 0:
            raise EmptyTrainError(f"Spike train {k} has no events.")


def check_window(dt):
    if not dt > 0:
        raise ValueError(f"Window dt must be > 0, found: {dt}")


def map_neighbours(x, y, f, dt):
    """
    Call *f* on every pair of neighbouring events in two sorted spike trains.

    Parameters
    ----------
    x, y : (N,), (M,) array_like
        Sorted spike times.
    f : callable
        Called as ``f(x[i], y[j], i, j)`` once for each pair with
        ``y[j] - dt < x[i] <= y[j] + dt``. The arguments are always in the
        ``(x, y)`` order, whichever train the scan runs over. Calls are
        ordered by the index into the shorter train, and nothing more should
        be assumed about their order.
    dt : float
        Half-width of the neighbour window.

    Raises
    ------
    UnsortedTrainError
        If either train is not sorted. *f* is not called in this case.
    """
    check_window(dt)
    check_sorted(x, y)
    # plain floats are much faster to index than numpy scalars
    x = np.asarray(x).tolist()
    y = np.asarray(y).tolist()
    lx = len(x)
    ly = len(y)
    if lx <= ly:
        j0 = 0
        for i, a in enumerate(x):
            while j0 < ly and a > y[j0] + dt:
                j0 += 1
            j = j0
            while j < ly and y[j] - dt < a:
                f(a, y[j], i, j)
                j += 1
    else:
        i0 = 0
        for j, b in enumerate(y):
            while i0 < lx and x[i0] <= b - dt:
                i0 += 1
            i = i0
            while i < lx and x[i] <= b + dt:
                f(x[i], b, i, j)
                i += 1


mapneighbours = map_neighbours


def close_neighbours(x, y, dt):
    """
    Sparse matrix of distances between neighbouring spikes of two trains.

    Parameters
    ----------
    x, y : (N,), (M,) array_like
        Sorted spike times.
    dt : float
        Largest separation (see :func:`map_neighbours` for which end of the
        window is open) at which two spikes count as neighbours.

    Returns
    -------
    D : scipy.sparse.coo_matrix
        Of shape ``(min(N, M), max(N, M))``. Rows index the shorter train: if
        ``N <= M`` then ``D[i, j] = |x[i] - y[j]|``, otherwise
        ``D[j, i] = |x[i] - y[j]|``. Only neighbouring pairs are stored
        (coincident spikes are stored as explicit zeros), so ``D.nnz`` is the
        number of neighbouring pairs and ``D.row``, ``D.col``, ``D.data`` list
        them.
    """
    rows = []
    cols = []
    dists = []

    def record(a, b, i, j):
        rows.append(i)
        cols.append(j)
        dists.append(abs(a - b))

    map_neighbours(x, y, record, dt)
    lx = len(x)
    ly = len(y)
    dists = np.array(dists, dtype=float)
    if lx > ly:
        rows, cols = cols, rows
    rows = np.array(rows, dtype=np.intp)
    cols = np.array(cols, dtype=np.intp)
    return scipy.sparse.coo_matrix(
        (dists, (rows, cols)), shape=(min(lx, ly), max(lx, ly))
    )


closeneighbours = close_neighbours
