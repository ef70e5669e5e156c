# -*- coding: utf-8 -*-
"""Spectral model: wavelength grid, integration, colors and renderable
datasets."""

from .colors import ColorConfig, curve_color, rgb_to_hex, wavelength_to_rgb
from .dataset import (
    DatasetAssembler,
    HighlightBand,
    HighlightConfig,
    RenderableDataset,
    SimulatorConfig,
    compute_dataset,
)
from .grid import GridConfig, WavelengthGrid, make_wavelength_grid
from .integrate import EnergyFractions, integrate_energy

__all__ = [
    "ColorConfig",
    "curve_color",
    "rgb_to_hex",
    "wavelength_to_rgb",
    "DatasetAssembler",
    "HighlightBand",
    "HighlightConfig",
    "RenderableDataset",
    "SimulatorConfig",
    "compute_dataset",
    "GridConfig",
    "WavelengthGrid",
    "make_wavelength_grid",
    "EnergyFractions",
    "integrate_energy",
]
