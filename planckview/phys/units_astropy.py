# -*- coding: utf-8 -*-
"""Accept :py:mod:`astropy.units` quantities wherever a plain number is
expected, e.g. ``compute_dataset(5576.85 * u.deg_C)``

-------------------------------------------------------------------------------


"""

import astropy.units as u


def convert_and_strip_units(quantity, output_unit=None, digit=10):
    """Returns the numerical value of ``quantity`` in ``output_unit``.

    Plain numbers (and anything that is not a Quantity) are returned
    unchanged: they are assumed to already be in ``output_unit``.

    Parameters
    ----------
    quantity : float, array, or `~astropy.units.quantity.Quantity`
    output_unit : `~astropy.units.core.UnitBase`
        unit of the returned value. Temperatures (``u.K``, ``u.deg_C``) are
        converted with the :py:func:`~astropy.units.temperature` equivalency,
        wavelengths with :py:func:`~astropy.units.spectral`

    Other Parameters
    ----------------
    digit: int
        round to that number of digit after conversion, so that
        ``5576.85 °C`` gives ``5850`` K and not ``5850.000000000001``. Default
        ``10``. Set to ``None`` to disable.

    Examples
    --------
    ::

        convert_and_strip_units(5576.85 * u.deg_C, u.K)
        >>> 5850.0
        convert_and_strip_units(0.5 * u.um, u.nm)
        >>> 500.0

    Raises
    ------
    TypeError
        if ``quantity`` is a Quantity and ``output_unit`` is not a unit
    """

    if not isinstance(quantity, u.Quantity):
        return quantity

    if not isinstance(output_unit, u.UnitBase):
        raise TypeError(
            "'output_unit' parameter is not a valid astropy unit: {0}".format(
                output_unit
            )
        )

    if output_unit.physical_type == "temperature":
        value = quantity.to_value(output_unit, equivalencies=u.temperature())
    else:
        value = quantity.to_value(output_unit, equivalencies=u.spectral())

    if digit:
        value = round(value, digit)

    return value
