# -*- coding: utf-8 -*-
"""Integrate a spectrum over the whole wavelength grid and over the visible
band.

Routine Listing
---------------

- :py:func:`~planckview.spectrum.integrate.integrate_energy`
- :py:func:`~planckview.spectrum.integrate.visible_mask`

-------------------------------------------------------------------------------

"""

from typing import NamedTuple

import numpy as np

from planckview.misc.arrays import trapezoid_areas

VISIBLE_BAND_UM = (0.4, 0.75)
"""tuple: visible band (µm)"""


class EnergyFractions(NamedTuple):
    """Integrated radiance (W.sr-1.m-2) over the grid and over the visible
    band, and their ratio."""

    total: float
    visible: float
    fraction: float


def visible_mask(wavelength_um, visible_band=VISIBLE_BAND_UM):
    """Returns a boolean array of length ``N-1``: True for the grid intervals
    whose midpoint wavelength is in the visible band (bounds included)."""
    wavelength_um = np.asarray(wavelength_um, dtype=float)
    mid = 0.5 * (wavelength_um[1:] + wavelength_um[:-1])
    wmin, wmax = visible_band
    return (mid >= wmin) & (mid <= wmax)


def integrate_energy(radiance, wavelength_m, wavelength_um, visible_band=VISIBLE_BAND_UM):
    r"""Integrate radiance with the trapezoidal rule.

    .. math::
        E = \sum_i \frac{B_i + B_{i+1}}{2} (\lambda_{i+1} - \lambda_i)

    over all grid intervals for the total, and over the intervals whose
    midpoint is in ``visible_band`` for the visible part.

    Parameters
    ----------
    radiance: np.array  (W.sr-1.m-3)
        spectrum on the grid
    wavelength_m: np.array  (m)
        grid, used for the interval widths
    wavelength_um: np.array  (µm)
        same grid, used to select the visible intervals
    visible_band: (float, float)  (µm)

    Returns
    -------
    EnergyFractions
        ``(total, visible, fraction)``. ``fraction`` is ``visible/total``,
        or ``0`` if the total is ``0``
    """
    if len(wavelength_m) != len(wavelength_um):
        raise ValueError(
            "Wavelength arrays have different lengths: {0} (m) and {1} (µm)".format(
                len(wavelength_m), len(wavelength_um)
            )
        )

    areas = trapezoid_areas(radiance, wavelength_m)
    total = float(np.sum(areas))
    visible = float(np.sum(areas[visible_mask(wavelength_um, visible_band)]))
    fraction = visible / total if total > 0 else 0.0

    return EnergyFractions(total, visible, fraction)
