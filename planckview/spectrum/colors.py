# -*- coding: utf-8 -*-
"""Perceptual colors of visible wavelengths, and color of the blackbody curve.

Summary
-------

- :py:func:`~planckview.spectrum.colors.wavelength_to_rgb`: approximate color
  of a monochromatic light, with piecewise-linear ramps between the named
  bands of :py:data:`~planckview.spectrum.colors.BANDS`
- :py:func:`~planckview.spectrum.colors.curve_color`: color used to draw the
  spectrum, from its visible energy fraction and its peak wavelength

Examples
--------
::

    wavelength_to_rgb(550)
    >>> (0, 255, 89)
    curve_color(0.1, peak_nm=2000)
    >>> '#000000'

-------------------------------------------------------------------------------

"""

from dataclasses import dataclass

from planckview.misc.utils import round_half_up

WHITE = "#ffffff"
BLACK = "#000000"

BANDS = (
    ("violet", 400, 450),
    ("blue", 450, 495),
    ("green", 495, 570),
    ("yellow", 570, 590),
    ("orange", 590, 620),
    ("red", 620, 700),
    ("fading red", 700, 750),
)
"""tuple: named bands of the visible spectrum ``(name, start_nm, end_nm)``"""


@dataclass(frozen=True)
class ColorConfig:
    """Parameters of the color mapping

    Parameters
    ----------
    gamma: float
        gamma correction applied to each normalized channel
    white_threshold: float
        the curve is white when the visible energy fraction is above
    visible_nm: (float, float)
        wavelengths outside this range are black
    """

    gamma: float = 0.8
    white_threshold: float = 0.6
    visible_nm: tuple = (400.0, 750.0)


def wavelength_to_rgb(w, gamma=0.8):
    """Approximate color of a monochromatic light.

    Parameters
    ----------
    w: float (nm)
        wavelength
    gamma: float
        gamma correction. Default ``0.8``

    Returns
    -------
    (r, g, b): tuple of int in [0, 255]
        ``(0, 0, 0)`` outside [400, 750] nm

    See Also
    --------
    :py:data:`~planckview.spectrum.colors.BANDS`
    """
    r = g = b = 0.0

    if w < 400 or w > 750:
        return (0, 0, 0)

    if w < 450:  # violet
        r = (450 - w) / (450 - 400)
        b = 1.0
    elif w < 495:  # blue
        g = (w - 450) / (495 - 450)
        b = 1.0
    elif w < 570:  # green
        g = 1.0
        b = (570 - w) / (570 - 495)
    elif w < 590:  # yellow
        r = (w - 570) / (590 - 570)
        g = 1.0
    elif w < 620:  # orange
        r = 1.0
        g = (620 - w) / (620 - 590)
    elif w <= 700:  # red
        r = 1.0
    else:  # fading red: 1 at 700 nm, 0 at 750 nm
        r = (750 - w) / (750 - 700)

    return tuple(round_half_up(255 * c**gamma) for c in (r, g, b))


def band_name(w):
    """Name of the visible band of wavelength ``w`` (nm), or ``None``
    outside the visible spectrum."""
    for name, start, end in BANDS:
        if start <= w < end:
            return name
    if w == BANDS[-1][2]:
        return BANDS[-1][0]
    return None


def rgb_to_hex(r, g, b):
    """``(255, 128, 0)`` to ``'#ff8000'``. Values are clamped to [0, 255]"""
    return "#" + "".join(
        "{0:02x}".format(round_half_up(max(0, min(255, x)))) for x in (r, g, b)
    )


def rgb_to_rgba_string(rgb, alpha):
    """``(255, 128, 0), 0.14`` to ``'rgba(255,128,0,0.14)'``"""
    return "rgba({0},{1},{2},{3})".format(rgb[0], rgb[1], rgb[2], alpha)


def curve_color(visible_fraction, peak_nm, config=ColorConfig()):
    """Color of the blackbody curve.

    - white if the visible energy fraction is above ``config.white_threshold``
    - else, the color of the peak wavelength if it is visible
    - else black

    Parameters
    ----------
    visible_fraction: float
        visible energy / total energy
    peak_nm: float (nm)
        peak wavelength
    config: ColorConfig

    Returns
    -------
    str: hex color
    """
    wmin, wmax = config.visible_nm
    if visible_fraction > config.white_threshold:
        return WHITE
    elif wmin <= peak_nm <= wmax:
        return rgb_to_hex(*wavelength_to_rgb(peak_nm, gamma=config.gamma))
    else:
        return BLACK
