"""Module for comparing spike trains.

Spike trains are sorted arrays of spike times. Anything with a time index (a
:class:`pd.Series`, or a boolean event indicator indexed by time) can be
passed instead, and is reduced to its spike times by :func:`timestamps`.

The pairwise measures all share the windowed scan in :mod:`.neighbours`, so
for trains of lengths N and M they cost O(N + M) as long as each spike only
has a few neighbours within the window.

Example
-------

.. code-block:: python

    >>> import spike_train_analysis as sta
    >>> a = [0.0, 1.0, 2.0]
    >>> b = [0.05, 1.05, 5.0]
    >>> sta.closeneighbours(a, b, dt=0.1).nnz
    2
    >>> sta.stoic(a, a)
    1.0
    >>> rate = sta.convolve(a, sigma=0.1)
"""
from .neighbours import *
from .munging import *
from .stats import *

__version__ = "0.1.0"
