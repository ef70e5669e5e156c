# -*- coding: utf-8 -*-
"""
Summary
-------

Assemble everything a renderer needs to draw the blackbody spectrum at a given
temperature: the spectrum on the wavelength grid, the peak wavelength, the
energy fractions, the curve color, and the colored highlights of the visible
band.

The renderer (web page, Plotly figure, animation driver) never computes
spectral values itself: it calls :py:func:`~planckview.spectrum.dataset.compute_dataset`
with the current temperature and draws the
:py:class:`~planckview.spectrum.dataset.RenderableDataset` it gets back.

Examples
--------
::

    from planckview import compute_dataset
    d = compute_dataset(5850)
    d.peak_wavelength_um
    >>> 0.4953...
    d.curve_color
    >>> '#00fffe'

Every call recomputes everything: nothing is cached between temperatures.

Routine Listing
---------------

- :py:class:`~planckview.spectrum.dataset.SimulatorConfig`
- :py:class:`~planckview.spectrum.dataset.HighlightBand`
- :py:class:`~planckview.spectrum.dataset.RenderableDataset`
- :py:class:`~planckview.spectrum.dataset.DatasetAssembler`
- :py:func:`~planckview.spectrum.dataset.compute_dataset`

-------------------------------------------------------------------------------

"""

from dataclasses import dataclass, field
from math import isfinite
from typing import Tuple

import astropy.units as u
import numpy as np

from planckview.misc.arrays import readonly
from planckview.misc.debug import printdbg
from planckview.misc.printer import printg
from planckview.misc.warning import (
    InvalidTemperatureError,
    default_warning_status,
    warn,
)
from planckview.phys.blackbody import planck, wien_peak_um
from planckview.phys.convert import um2nm
from planckview.phys.units import RADIANCE_UNIT, conv2
from planckview.phys.units_astropy import convert_and_strip_units
from planckview.spectrum.colors import (
    ColorConfig,
    curve_color,
    rgb_to_rgba_string,
    wavelength_to_rgb,
)
from planckview.spectrum.grid import GridConfig, WavelengthGrid
from planckview.spectrum.integrate import EnergyFractions, integrate_energy

# %% Configuration


@dataclass(frozen=True)
class HighlightConfig:
    """Number of colored segments drawn over the visible band, and their
    translucency"""

    segments: int = 40
    alpha: float = 0.14

    def __post_init__(self):
        if self.segments < 1:
            raise ValueError(
                "Need at least 1 highlight segment. Got {0}".format(self.segments)
            )


@dataclass(frozen=True)
class SimulatorConfig:
    """All fixed parameters of the simulator.

    Parameters
    ----------
    grid: GridConfig
        wavelength grid
    color: ColorConfig
        color mapping and curve color policy
    highlight: HighlightConfig
        visible band highlights
    visible_band_um: (float, float)
        visible band used for the integration and the highlights (µm)
    temperature_range_k: (float, float)
        range allowed by the temperature controls (K). Temperatures out of
        this range are computed, but trigger an
        :py:class:`~planckview.misc.warning.OutOfRangeTemperatureWarning`

    See Also
    --------
    :py:meth:`~planckview.spectrum.dataset.SimulatorConfig.from_config`
    """

    grid: GridConfig = field(default_factory=GridConfig)
    color: ColorConfig = field(default_factory=ColorConfig)
    highlight: HighlightConfig = field(default_factory=HighlightConfig)
    visible_band_um: Tuple[float, float] = (0.4, 0.75)
    temperature_range_k: Tuple[float, float] = (200.0, 12000.0)

    @classmethod
    def from_config(cls, config=None):
        """Build from a planckview config dictionary (default
        :py:attr:`planckview.config`, i.e. ``default_planckview.json``
        overridden by ``~/planckview.json``)"""
        if config is None:
            import planckview

            config = planckview.config

        wmin, wmax = config["VISIBLE_BAND_UM"]
        Tmin, Tmax = config["TEMPERATURE_RANGE_K"]
        return cls(
            grid=GridConfig(
                npoints=int(config["GRID_NPOINTS"]),
                wmin_um=float(config["GRID_WMIN_UM"]),
                wmax_um=float(config["GRID_WMAX_UM"]),
            ),
            color=ColorConfig(
                gamma=float(config["COLOR_GAMMA"]),
                white_threshold=float(config["WHITE_FRACTION_THRESHOLD"]),
                visible_nm=(um2nm(float(wmin)), um2nm(float(wmax))),
            ),
            highlight=HighlightConfig(
                segments=int(config["HIGHLIGHT_SEGMENTS"]),
                alpha=float(config["HIGHLIGHT_ALPHA"]),
            ),
            visible_band_um=(float(wmin), float(wmax)),
            temperature_range_k=(float(Tmin), float(Tmax)),
        )


# %% Output


@dataclass(frozen=True)
class HighlightBand:
    """A colored segment of the visible band

    Parameters
    ----------
    start_um, end_um: float (µm)
    rgb: (int, int, int)
        color of the wavelength at the middle of the segment
    alpha: float
        translucency
    """

    start_um: float
    end_um: float
    rgb: Tuple[int, int, int]
    alpha: float

    @property
    def center_nm(self):
        return um2nm(0.5 * (self.start_um + self.end_um))

    @property
    def rgba(self):
        """Color as a ``'rgba(r,g,b,a)'`` string"""
        return rgb_to_rgba_string(self.rgb, self.alpha)


@dataclass(frozen=True, eq=False)
class RenderableDataset:
    """Everything needed to draw the blackbody spectrum at one temperature.

    Parameters
    ----------
    temperature: float (K)
    wavelength_um: np.array (µm)
        read-only wavelength grid
    radiance: np.array (W.sr-1.m-3)
        read-only spectral radiance on the grid
    peak_wavelength_um: float (µm)
        Wien's law
    energy: EnergyFractions
        integrated radiance (W.sr-1.m-2), total and visible
    curve_color: str
        hex color of the curve
    highlights: tuple of HighlightBand
        colored segments of the visible band, by increasing wavelength
    """

    temperature: float
    wavelength_um: np.ndarray = field(repr=False)
    radiance: np.ndarray = field(repr=False)
    peak_wavelength_um: float
    energy: EnergyFractions
    curve_color: str
    highlights: Tuple[HighlightBand, ...] = field(repr=False)

    @property
    def peak_wavelength_nm(self):
        return um2nm(self.peak_wavelength_um)

    @property
    def total_radiance(self):
        return self.energy.total

    @property
    def visible_radiance(self):
        return self.energy.visible

    @property
    def visible_fraction(self):
        return self.energy.fraction

    @property
    def max_radiance(self):
        """Maximum of the spectrum on the grid (W.sr-1.m-3)"""
        return float(np.max(self.radiance))

    def points(self):
        """Returns the ordered list of ``(wavelength_µm, radiance)`` pairs"""
        return list(zip(self.wavelength_um.tolist(), self.radiance.tolist()))

    def get_radiance(self, Iunit="W/sr/m3"):
        """Returns the spectral radiance, converted to ``Iunit`` (ex:
        ``"W/sr/m2/nm"``)"""
        if Iunit == RADIANCE_UNIT:
            return self.radiance
        return conv2(self.radiance, RADIANCE_UNIT, Iunit)

    def to_dict(self):
        """Returns the dataset with builtin types only, ready to be
        serialized in JSON for a web renderer"""
        return {
            "temperature": self.temperature,
            "wavelength_um": self.wavelength_um.tolist(),
            "radiance": self.radiance.tolist(),
            "peak_wavelength_um": self.peak_wavelength_um,
            "total_radiance": self.total_radiance,
            "visible_radiance": self.visible_radiance,
            "visible_fraction": self.visible_fraction,
            "curve_color": self.curve_color,
            "highlights": [
                {"start_um": b.start_um, "end_um": b.end_um, "color": b.rgba}
                for b in self.highlights
            ],
        }


# %% Assembler


class DatasetAssembler(object):
    """Computes :py:class:`~planckview.spectrum.dataset.RenderableDataset`
    for any temperature, on a wavelength grid built once.

    Parameters
    ----------
    config: SimulatorConfig, or None
        if None, built from :py:attr:`planckview.config`
    grid: WavelengthGrid, or None
        if None, built from ``config.grid``. A grid is read-only and can be
        shared between assemblers and threads

    Other Parameters
    ----------------
    verbose: int
        ``1`` prints one line per calculation, ``2`` adds the energy
        breakdown. Default ``0``
    warnings: dict, or False
        status of warning categories, see
        :py:data:`~planckview.misc.warning.default_warning_status`.
        ``False`` disables all warnings.

    Examples
    --------
    ::

        sim = DatasetAssembler(SimulatorConfig(grid=GridConfig(npoints=500)))
        for T in range(3000, 8000, 100):
            d = sim.compute(T)

    See Also
    --------
    :py:func:`~planckview.spectrum.dataset.compute_dataset`
    """

    def __init__(self, config=None, grid=None, verbose=0, warnings=None):
        if config is None:
            config = SimulatorConfig.from_config()
        if grid is None:
            grid = WavelengthGrid.from_config(config.grid)
        if warnings is None:
            warnings = default_warning_status.copy()

        self.config = config
        self.grid = grid
        self.verbose = verbose
        self.warnings = warnings

        self._highlight_bounds = self._get_highlight_bounds()

        wmin, wmax = config.visible_band_um
        if grid.count_intervals(wmin, wmax) < 2:
            warn(
                "Only {0} grid intervals in the visible band ({1}-{2} µm). ".format(
                    grid.count_intervals(wmin, wmax), wmin, wmax
                )
                + "Visible energy fraction will be inaccurate. Increase the number of grid points",
                "CoarseGridWarning",
                self.warnings,
            )

    def _get_highlight_bounds(self):
        """Bounds (µm) of equal-width highlight segments over the visible band"""
        start, end = self.config.visible_band_um
        n = self.config.highlight.segments
        return [
            (start + (i / n) * (end - start), start + ((i + 1) / n) * (end - start))
            for i in range(n)
        ]

    def check_temperature(self, T):
        """Returns ``T`` as a float in Kelvin (astropy quantities are
        converted). Raises :py:class:`~planckview.misc.warning.InvalidTemperatureError`
        if ``T`` is not finite or not strictly positive, and warns if it is out
        of the range of the simulator controls"""
        T = convert_and_strip_units(T, u.K)
        try:
            T = float(T)
        except (TypeError, ValueError) as err:
            raise InvalidTemperatureError(
                "Temperature must be a number of Kelvin. Got {0!r}".format(T)
            ) from err
        if not isfinite(T) or T <= 0:
            raise InvalidTemperatureError(
                "Temperature must be finite and strictly positive. Got {0} K".format(T)
            )
        Tmin, Tmax = self.config.temperature_range_k
        if not (Tmin <= T <= Tmax):
            warn(
                "Temperature {0} K out of the range of the simulator controls ({1}-{2} K)".format(
                    T, Tmin, Tmax
                ),
                "OutOfRangeTemperatureWarning",
                self.warnings,
            )
        return T

    def compute(self, T):
        """Compute the renderable dataset at temperature ``T``.

        Parameters
        ----------
        T: float (K), or astropy Quantity
            temperature

        Returns
        -------
        RenderableDataset
        """
        T = self.check_temperature(T)
        grid = self.grid

        if __debug__:
            printdbg("computing dataset at T={0} K on {1}".format(T, grid))

        radiance = readonly(planck(grid.wavelength_m, T))
        peak_um = wien_peak_um(T)
        energy = integrate_energy(
            radiance,
            grid.wavelength_m,
            grid.wavelength_um,
            visible_band=self.config.visible_band_um,
        )
        color = curve_color(energy.fraction, um2nm(peak_um), config=self.config.color)
        highlights = self.get_highlights()

        if self.verbose:
            print(
                "T={0:.0f} K: peak at {1:.3f} µm, visible fraction {2:.3f}, curve {3}".format(
                    T, peak_um, energy.fraction, color
                )
            )
        if self.verbose >= 2:
            printg(
                "... total {0:.4g} W/sr/m2, visible {1:.4g} W/sr/m2".format(
                    energy.total, energy.visible
                )
            )

        return RenderableDataset(
            temperature=T,
            wavelength_um=grid.wavelength_um,
            radiance=radiance,
            peak_wavelength_um=peak_um,
            energy=energy,
            curve_color=color,
            highlights=highlights,
        )

    def get_highlights(self):
        """Returns the colored segments of the visible band. They do not
        depend on temperature."""
        gamma = self.config.color.gamma
        alpha = self.config.highlight.alpha
        return tuple(
            HighlightBand(
                start_um=a,
                end_um=b,
                rgb=wavelength_to_rgb(um2nm((a + b) / 2), gamma=gamma),
                alpha=alpha,
            )
            for a, b in self._highlight_bounds
        )

    __call__ = compute


_default_assembler = None


def get_default_assembler():
    """Returns the assembler built from :py:attr:`planckview.config`. The
    grid is created on the first call only."""
    global _default_assembler
    if _default_assembler is None:
        _default_assembler = DatasetAssembler()
    return _default_assembler


def compute_dataset(temperature):
    """Compute the :py:class:`~planckview.spectrum.dataset.RenderableDataset`
    at ``temperature`` (K), with the default configuration.

    Examples
    --------
    ::

        d = compute_dataset(3000)
        d.peak_wavelength_um
        >>> 0.9659...

    See Also
    --------
    :py:class:`~planckview.spectrum.dataset.DatasetAssembler`
    """
    return get_default_assembler().compute(temperature)
