# -*- coding: utf-8 -*-
"""Conversion formulas between wavelength units (works with numpy arrays)

Examples
--------

Get the wavelength grid in meters::

    >>> from planckview.phys.convert import um2m
    >>> um2m(grid.wavelength_um)


-------------------------------------------------------------------------------
"""

# %% Wavelength units


def um2m(wl):
    """µm to m."""
    return wl * 1e-6


def m2um(wl):
    """m to µm."""
    return wl * 1e6


def um2nm(wl):
    """µm to nm."""
    return wl * 1e3


def nm2um(wl):
    """nm to µm."""
    return wl * 1e-3
