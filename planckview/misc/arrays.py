# -*- coding: utf-8 -*-
"""
Description
------------

Functions to deal with numpy arrays:

- :py:func:`~planckview.misc.arrays.logspace`
- :py:func:`~planckview.misc.arrays.is_strictly_increasing`
- :py:func:`~planckview.misc.arrays.trapezoid_areas`
- :py:func:`~planckview.misc.arrays.readonly`





-------------------------------------------------------------------------------

"""


import numba
import numpy as np


def logspace(xmin, xmax, npoints):
    """Returns points from xmin to xmax regularly distributed on a logarithm
    space.

    Exponents follow ``log10(xmin) + i/(npoints-1) * (log10(xmax) - log10(xmin))``
    so that the first and last points are ``xmin`` and ``xmax`` up to
    floating point accuracy. Numpy's :py:func:`numpy.logspace` does the same
    from 10**xmin to 10**xmax
    """

    logmin = np.log10(xmin)
    logmax = np.log10(xmax)
    i = np.arange(npoints)
    return 10 ** (logmin + (i / (npoints - 1)) * (logmax - logmin))


@numba.njit
def is_strictly_increasing(a):
    """Returns whether ``a`` is sorted in ascending order, without repeated
    values.

    From B.M. answer on StackOverflow: https://stackoverflow.com/a/47004533/5622825
    """
    for i in range(a.size - 1):
        if a[i + 1] <= a[i]:
            return False
    return True


def trapezoid_areas(y, x):
    """Returns the area of each trapezoid between consecutive samples.

    ``np.sum(trapezoid_areas(y, x))`` is the trapezoidal integral of ``y``
    over ``x``; keeping the individual areas allows integrating on a subset
    of intervals.

    Parameters
    ----------
    y, x: array
        same length ``N``

    Returns
    -------
    array of length ``N-1``
    """
    y = np.asarray(y, dtype=float)
    x = np.asarray(x, dtype=float)
    if y.shape != x.shape:
        raise ValueError(
            "Cannot integrate arrays of different shapes: {0} and {1}".format(
                y.shape, x.shape
            )
        )
    return 0.5 * (y[1:] + y[:-1]) * np.diff(x)


def readonly(a):
    """Returns a copy of ``a`` that cannot be modified in place."""
    a = np.array(a, dtype=float)
    a.flags.writeable = False
    return a
