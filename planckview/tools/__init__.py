# -*- coding: utf-8 -*-
"""Tools : simulator controls, Plotly figures."""


from .controls import TemperatureRange, TemperatureSweep, YRangeStepper, clamp_temperature
from .plot_plotly import make_figure, plot_dataset

__all__ = [
    "TemperatureRange",
    "TemperatureSweep",
    "YRangeStepper",
    "clamp_temperature",
    "make_figure",
    "plot_dataset",
]
