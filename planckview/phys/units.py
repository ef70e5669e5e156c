# -*- coding: utf-8 -*-
"""Radiance units, parsed with :py:mod:`astropy.units`.

Spectra are always computed in SI (:py:data:`~planckview.phys.units.RADIANCE_UNIT`)
and converted on demand, for instance for a plot in ``"W/sr/m2/nm"``.

-------------------------------------------------------------------------------


"""

import warnings

RADIANCE_UNIT = "W/sr/m3"
"""str: unit of the spectral radiance returned by
:py:func:`~planckview.phys.blackbody.planck`"""


def Unit(st, *args, **kwargs):
    """Parse a unit string with :py:class:`~astropy.units.Unit`, with two
    changes:

    - "µm" is accepted and converted to "um"
    - no warning for multiple slashes, e.g. "W/sr/m2/nm"

    Examples
    --------
    ::

        from planckview.phys.units import Unit
        I = 1.5e13 * Unit("W/sr/m3")
        I.to(Unit("W/sr/m2/µm"))
    """

    import astropy.units as u

    if isinstance(st, str):
        st = st.replace("µ", "u")

    with warnings.catch_warnings():
        warnings.filterwarnings(
            "ignore", ".*multiple slashes.*", category=u.UnitsWarning
        )
        return u.Unit(st, *args, **kwargs)


def conv2(quantity, fromunit, tounit):
    """Converts `quantity` from unit `fromunit` to unit `tounit`, and returns
    it without units

    Parameters
    ----------
    quantity: float or array
    fromunit, tounit: str

    Notes
    -----
    Arrays are not kept as astropy Quantities in the datasets, because they
    are recomputed at every animation frame.
    """

    import astropy.units as u

    try:
        return (quantity * Unit(fromunit)).to_value(Unit(tounit))
    except u.UnitConversionError as err:
        raise TypeError(
            f"Cannot convert `{fromunit}` to `{tounit}`. Please check the dimensions."
        ) from err


def is_homogeneous(unit1, unit2):
    """Tells if unit1 and unit2 can be converted into each other

    Examples
    --------
    ::

        is_homogeneous("W/sr/m3", "mW/sr/cm2/nm")
        >>> True
    """

    return Unit(unit1).is_equivalent(Unit(unit2))
