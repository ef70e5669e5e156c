# -*- coding: utf-8 -*-
"""
=============================
Plot the spectrum of the Sun
=============================

Compute the blackbody spectrum of the Sun photosphere (5850 K) and plot it
with Plotly: the curve takes the color of the peak wavelength, and the
visible band is highlighted.

See Also
--------
:py:func:`~planckview.spectrum.dataset.compute_dataset`,
:py:func:`~planckview.tools.plot_plotly.plot_dataset`

"""

from planckview import compute_dataset
from planckview.tools.controls import YRangeStepper
from planckview.tools.plot_plotly import plot_dataset

d = compute_dataset(5850)

print("Peak wavelength: {0:.4f} µm".format(d.peak_wavelength_um))
print("Visible fraction: {0:.1%}".format(d.visible_fraction))
print("Curve color: {0}".format(d.curve_color))

stepper = YRangeStepper()
stepper.decrease()  # zoom in on [0, 1e13] to see colder spectra

plot_dataset(d, yrange=stepper.yrange, writefile="planck_5850K.html", auto_open=True)
