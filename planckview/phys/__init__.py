# -*- coding: utf-8 -*-
"""Physical constants and conversion.
"""

from .blackbody import planck, planck_integral, planck_lambda, wien_peak_um
from .convert import m2um, nm2um, um2m, um2nm
from .units import conv2, is_homogeneous
from .units_astropy import convert_and_strip_units

__all__ = ["planck", "planck_lambda", "planck_integral", "wien_peak_um"]
