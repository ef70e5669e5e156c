# -*- coding: utf-8 -*-
"""Wavelength grid on which all spectra are computed.

The grid is log-spaced so that it covers from the far UV to the radio range
with a constant relative resolution. It is built once and shared by all
calculations::

    grid = WavelengthGrid.from_bounds(3000, 0.01, 300)
    grid.wavelength_um[0], grid.wavelength_um[-1]
    >>> (0.01, 300.0)

-------------------------------------------------------------------------------

"""

from dataclasses import dataclass, field

import numpy as np

from planckview.misc.arrays import is_strictly_increasing, logspace, readonly
from planckview.phys.convert import um2m


@dataclass(frozen=True)
class GridConfig:
    """Number of points and bounds (µm) of the wavelength grid"""

    npoints: int = 3000
    wmin_um: float = 0.01
    wmax_um: float = 300.0

    def __post_init__(self):
        if self.npoints < 2:
            raise ValueError(
                "Wavelength grid needs at least 2 points. Got {0}".format(
                    self.npoints
                )
            )
        if not (0 < self.wmin_um < self.wmax_um):
            raise ValueError(
                "Wavelength grid bounds must verify 0 < wmin < wmax. Got "
                + "wmin={0} µm, wmax={1} µm".format(self.wmin_um, self.wmax_um)
            )


@dataclass(frozen=True, eq=False)
class WavelengthGrid:
    """Immutable log-spaced wavelength grid, in µm and m.

    Both arrays have the same length and indexing, are strictly increasing,
    and cannot be modified in place.

    Parameters
    ----------
    wavelength_um: np.array (µm)
    wavelength_m: np.array (m)

    See Also
    --------
    :py:func:`~planckview.spectrum.grid.make_wavelength_grid`
    """

    wavelength_um: np.ndarray = field(repr=False)
    wavelength_m: np.ndarray = field(repr=False)

    def __post_init__(self):
        w_um = readonly(self.wavelength_um)
        w_m = readonly(self.wavelength_m)
        if w_um.ndim != 1 or w_um.shape != w_m.shape:
            raise ValueError(
                "Wavelength arrays must be 1-D with the same length. Got {0} and {1}".format(
                    w_um.shape, w_m.shape
                )
            )
        if not is_strictly_increasing(w_um):
            raise ValueError("Wavelengths must be strictly increasing")
        object.__setattr__(self, "wavelength_um", w_um)
        object.__setattr__(self, "wavelength_m", w_m)

    @classmethod
    def from_bounds(cls, npoints, wmin_um, wmax_um):
        """Build a grid of ``npoints`` log-spaced wavelengths between
        ``wmin_um`` and ``wmax_um`` (µm)"""
        conf = GridConfig(npoints, wmin_um, wmax_um)
        w_um = logspace(conf.wmin_um, conf.wmax_um, conf.npoints)
        return cls(wavelength_um=w_um, wavelength_m=um2m(w_um))

    @classmethod
    def from_config(cls, conf):
        """Build a grid from a :py:class:`~planckview.spectrum.grid.GridConfig`"""
        return cls.from_bounds(conf.npoints, conf.wmin_um, conf.wmax_um)

    def __len__(self):
        return len(self.wavelength_um)

    def __repr__(self):
        return "WavelengthGrid({0} points, {1:.3g}-{2:.3g} µm)".format(
            len(self), self.wavelength_um[0], self.wavelength_um[-1]
        )

    def count_intervals(self, wmin_um, wmax_um):
        """Number of grid intervals whose midpoint lies in [wmin_um, wmax_um]"""
        mid = 0.5 * (self.wavelength_um[1:] + self.wavelength_um[:-1])
        return int(np.count_nonzero((mid >= wmin_um) & (mid <= wmax_um)))


def make_wavelength_grid(npoints=3000, wmin_um=0.01, wmax_um=300):
    r"""Returns a :py:class:`~planckview.spectrum.grid.WavelengthGrid` of
    ``npoints`` log-spaced wavelengths:

    .. math::
        \log_{10}(\lambda_i) = \log_{10}(\lambda_{min}) + \frac{i}{N-1} (\log_{10}(\lambda_{max}) - \log_{10}(\lambda_{min}))

    Examples
    --------
    ::

        grid = make_wavelength_grid(3000, 0.01, 300)
        grid.wavelength_m     # in meters
    """
    return WavelengthGrid.from_bounds(npoints, wmin_um, wmax_um)
