# -*- coding: utf-8 -*-
"""Path and rounding utilities

-------------------------------------------------------------------------------


"""


from math import floor
from os.path import dirname


def getProjectRoot():
    """Return the full path of the project root."""

    return dirname(dirname(__file__))


def round_half_up(x):
    """Round to the nearest integer, halves away from -inf (``2.5`` gives
    ``3``, ``-2.5`` gives ``-2``), as web renderers do.

    Python's builtin :py:func:`round` rounds halves to even instead.
    """
    return int(floor(x + 0.5))
