# -*- coding: utf-8 -*-
"""

planckview: spectral radiance of a blackbody (Planck's law) as a function of
wavelength and temperature, ready to be drawn by an interactive renderer.

Examples
--------
::

    import planckview

    d = planckview.compute_dataset(5850)
    d.peak_wavelength_um, d.visible_fraction, d.curve_color

"""

import os

from .misc.config import get_config
from .misc.utils import getProjectRoot

# %% Config files

config = get_config()
"""dict: planckview configuration parameters

Parameters
----------
"DEBUG_MODE": False

    bool: change this at runtime with::

        import planckview
        planckview.config["DEBUG_MODE"] = True

    Use the :py:func:`~planckview.misc.debug.printdbg` function in ``planckview.misc``, typically with::

        if __debug__: printdbg(...)

    so that printdbg are removed by the Python preprocessor when running in
    optimize mode::

        python -O *.py

"GRID_NPOINTS": 3000, "GRID_WMIN_UM": 0.01, "GRID_WMAX_UM": 300

    number of points and bounds (µm) of the log-spaced wavelength grid.

    See Also
    --------
    :py:class:`~planckview.spectrum.grid.WavelengthGrid`

"VISIBLE_BAND_UM": [0.4, 0.75]

    visible band (µm), used to integrate the visible energy, to draw the
    highlights, and to decide the curve color.

"COLOR_GAMMA": 0.8

    gamma correction of the wavelength colors.

    See Also
    --------
    :py:func:`~planckview.spectrum.colors.wavelength_to_rgb`

"WHITE_FRACTION_THRESHOLD": 0.6

    the curve is drawn white if the visible energy fraction is above.

    See Also
    --------
    :py:func:`~planckview.spectrum.colors.curve_color`

"HIGHLIGHT_SEGMENTS": 40, "HIGHLIGHT_ALPHA": 0.14

    number and translucency of the colored segments of the visible band.

"TEMPERATURE_RANGE_K": [200, 12000]

    range of the temperature controls. Temperatures out of this range
    are computed, but trigger an
    :py:class:`~planckview.misc.warning.OutOfRangeTemperatureWarning`

"TEMPERATURE_DEFAULT_K": 5850

    initial temperature of the simulator.


Notes
-----

Default values are read from the ``planckview/default_planckview.json`` file.

All values are overriden at runtime by the keys in the user JSON file ``~/planckview.json (json)``
"""


# %% Version


def get_version():
    """Reads `__version__.txt` and retrieve version number.

    Examples
    --------

    ::

        import planckview
        print(planckview.get_version())
        >>> '0.1.0'
    """

    with open(os.path.join(getProjectRoot(), "__version__.txt")) as version_file:
        version = version_file.read().strip()

    return version


__version__ = get_version()
version = get_version()

__all__ = [
    "config",
    "get_version",
    "version",
    "__version__",
]

from . import misc, phys, spectrum, tools
from .phys import *  # Planck functions
from .spectrum import *  # grid, colors, datasets
from .tools import *  # controls, plots

__all__ += phys.__all__
__all__ += spectrum.__all__
__all__ += tools.__all__
