# -*- coding: utf-8 -*-
"""

Notes
-----

Planck functions:
- planck_lambda: planck radiation of a single wavelength
- planck: planck radiation over an array of wavelengths
- wien_peak_um: wavelength of maximum emission
- planck_integral: radiance integrated over all wavelengths (Stefan's law)

Example
-------

Radiance of the Sun photosphere at 500 nm::

    planck_lambda(500e-9, T=5850)

-------------------------------------------------------------------------------


"""

from math import expm1, isfinite

import numpy as np

from planckview.phys.constants import EXP_OVERFLOW_LIMIT, b_wien, c, h, k_b, sigma_sb
from planckview.phys.units import RADIANCE_UNIT, conv2


def planck_lambda(lmbda, T):
    r"""Planck function for blackbody radiation, for a single wavelength.

    .. math::
        \frac{2h c^2}{{\lambda}^5} \frac{1}{\operatorname{exp}\left(\frac{h c}{\lambda k T}\right)-1}

    Parameters
    ----------
    lmbda: float   (m)
       wavelength
    T: float    (K)
        equilibrium temperature

    Returns
    -------
    float :  (W.sr-1.m-3)
        equilibrium radiance, finite and non-negative. Never raises: returns
        ``0`` where the exponent overflows (``hc/λkT > 700``), where the
        radiance itself overflows (extreme temperatures), and for
        non-positive or non-finite inputs.

    See Also
    --------
    :py:func:`~planckview.phys.blackbody.planck`
    """
    if not (isfinite(lmbda) and isfinite(T)) or lmbda <= 0 or T <= 0:
        return 0.0
    lmbda, T = float(lmbda), float(T)
    lkT = lmbda * k_b * T
    if lkT == 0:
        return 0.0  # hc/λkT is infinite
    x = h * c / lkT
    if x > EXP_OVERFLOW_LIMIT:
        return 0.0  # avoid overflow in exp
    denom = expm1(x)  # exp(x)-1 without cancellation for small x
    if denom <= 0:
        return 0.0
    l5 = lmbda * lmbda * lmbda * lmbda * lmbda  # float product: inf or 0, never raises
    if l5 == 0:
        return 0.0
    iplanck = 2 * h * c**2 / l5 / denom
    if not isfinite(iplanck):
        return 0.0  # overflow at extreme temperatures
    return iplanck


def planck(lmbda, T, eps=1, unit="W/sr/m3"):
    r"""Planck function for blackbody radiation, over an array of wavelengths.

    .. math::
        \epsilon \frac{2h c^2}{{\lambda}^5} \frac{1}{\operatorname{exp}\left(\frac{h c}{\lambda k T}\right)-1}

    Same numerical policy as :py:func:`~planckview.phys.blackbody.planck_lambda`:
    zero radiance where the exponent or the radiance overflows, or for
    non-positive wavelengths and temperatures. The result is always finite.

    Parameters
    ----------
    lmbda: np.array   (m)
       wavelength
    T: float    (K)
        equilibrium temperature
    eps: grey-body emissivity
        default 1
    unit: output unit
        default 'W/sr/m3'

    Returns
    -------
    np.array :  (W.sr-1.m-3)
        equilibrium radiance, unless ``unit`` is different

    See Also
    --------
    :py:func:`~planckview.phys.blackbody.planck_lambda`
    """
    lbd = np.asarray(lmbda, dtype=float)
    iplanck = np.zeros_like(lbd)

    if np.isfinite(T) and T > 0:
        valid = np.isfinite(lbd) & (lbd > 0)
        x = np.full_like(lbd, np.inf)
        with np.errstate(over="ignore", divide="ignore", invalid="ignore"):
            x[valid] = h * c / (lbd[valid] * k_b * T)
            b = x <= EXP_OVERFLOW_LIMIT
            denom = np.expm1(x[b])
            ib = np.zeros_like(denom)
            pos = denom > 0
            ib[pos] = eps * 2 * h * c**2 / lbd[b][pos] ** 5 / denom[pos]  # S.I  (W.sr-1.m-3)
        ib[~np.isfinite(ib)] = 0  # overflow at extreme temperatures
        iplanck[b] = ib

    if unit != RADIANCE_UNIT:
        iplanck = conv2(iplanck, RADIANCE_UNIT, unit)

    return iplanck


def wien_peak_um(T):
    """Wavelength of maximum emission (µm), from Wien's displacement law.

    Parameters
    ----------
    T: float    (K)
        equilibrium temperature, strictly positive

    Returns
    -------
    float (µm)
    """
    return b_wien / T * 1e6


def planck_integral(T, eps=1):
    r"""Radiance integrated over all wavelengths (W.sr-1.m-2).

    .. math::
        \epsilon \frac{\sigma T^4}{\pi}

    Used as a reference for the numerical integration on the wavelength grid.
    """
    return eps * sigma_sb * T**4 / np.pi
