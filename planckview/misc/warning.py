# -*- coding: utf-8 -*-
"""
Define warnings for the blackbody simulator, and how to deal with them

----------


Main warning classes :
- :py:class:`~planckview.misc.warning.AccuracyWarning`
- :py:class:`~planckview.misc.warning.OutOfRangeTemperatureWarning`
- default ``UserWarning``


"""


import warnings

from planckview.misc.printer import printr

# %% Dataset warnings / errors
# ----------------------------


class InvalidTemperatureError(ValueError):
    """Temperature is not a finite, strictly positive number of Kelvin"""

    pass


class AccuracyWarning(UserWarning):
    """Warning triggered when it seems accuracy is low."""

    pass


class OutOfRangeTemperatureWarning(UserWarning):
    """Temperature is outside the range the simulator controls allow
    (see the ``"TEMPERATURE_RANGE_K"`` key of :py:attr:`planckview.config`)"""

    pass


class CoarseGridWarning(AccuracyWarning):
    """Wavelength grid has too few intervals in the visible band to
    integrate it."""

    pass


# @dev: list all your custom warnings below so they are handled by user params.
WarningClasses = {
    "default": UserWarning,
    "AccuracyWarning": AccuracyWarning,
    "CoarseGridWarning": CoarseGridWarning,
    "OutOfRangeTemperatureWarning": OutOfRangeTemperatureWarning,
}
""" dict: warnings used in planckview dataset calculations.

Setup individual warnings. Value of keys can be:
- 'warning' (default: just trigger a warning)
- 'error' (raises an error on this warning)
- 'ignore'  (do nothing)

The key self.warnings['default'] will set the warning behavior for all
other warnings

See Also
--------

:py:data:`~planckview.misc.warning.default_warning_status`
"""
default_warning_status = {
    "default": "warn",  # default
    "AccuracyWarning": "warn",
    "CoarseGridWarning": "once",  # the grid is built once
    "OutOfRangeTemperatureWarning": "warn",
}
""" dict: default status of warnings used in planckview dataset calculations.

Value of keys can be:

- ``'warn'`` (default: just trigger a warning)
- ``'once'`` (trigger the warning, then ignore this category)
- ``'print'`` (print the message in red)
- ``'error'`` (raises an error on this warning)
- ``'ignore'``  (do nothing)

All warnings can be disabled by setting the
:py:attr:`~planckview.spectrum.dataset.DatasetAssembler.warnings` attribute
to ``False``.

See Also
--------

:py:data:`~planckview.misc.warning.WarningClasses`,
:py:func:`~planckview.misc.warning.reset_warnings`

"""


def reset_warnings(status):
    """Reactivate warnings that are set 'once' per session
    (unless all warnings have been set to False)

    Parameters
    ----------
    status: dict
        dictionary of Warnings with associated status
    """

    if status is False:
        return

    for k, v in status.items():
        if v == "once":
            WarningType = WarningClasses[k]
            warnings.simplefilter("default", WarningType)


def warn(message, category="default", status={}):
    """Trigger a warning, an error or just ignore based on the value defined in
    the ``status`` dictionary.

    Parameters
    ----------
    message: str
        what to print
    category: str
        one of the keys of :py:data:`~planckview.misc.warning.WarningClasses`
    status: dict
        status for all warning categories. Can be one of ``'warn'``, ``'once'``,
        ``'ignore'``, ``'print'``, ``'error'``. Categories missing from
        ``status`` fall back on :py:data:`~planckview.misc.warning.default_warning_status`

    Examples
    --------
    ::

        if not (Tmin <= T <= Tmax):
            warn(
                "Temperature outside of the slider range",
                "OutOfRangeTemperatureWarning",
                self.warnings,
            )

    """

    if status is False:
        return

    action = status.get(category, default_warning_status[category])

    WarningType = WarningClasses[category]

    if action == "warn":
        warnings.warn(WarningType(message))
    elif action == "once":
        warnings.warn(WarningType(message))
        # keep 'once' but ignore WarningType with simplefilters
        warnings.simplefilter("ignore", WarningType)
    elif action == "ignore":
        pass
    elif action == "print":  # just print the message, in red
        printr(message)
    elif action == "error":
        raise WarningType(message)
    else:
        raise ValueError("Unexpected action for warning: {0}".format(action))


#%% Tests (on module load)


# ... test warnings are well defined
for k in default_warning_status.keys():
    assert k in WarningClasses

# ... and reciprocally, but they all have a default value
for k in WarningClasses.keys():
    assert k in default_warning_status
