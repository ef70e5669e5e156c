# -*- coding: utf-8 -*-
"""
Controls of the blackbody simulator: temperature input, animated sweep and
y-axis range stepping.

These only decide *which* temperature or y-range to show. They never compute
spectral values: the driver passes the temperature to
:py:func:`~planckview.spectrum.dataset.compute_dataset`.

Examples
--------
::

    from planckview import compute_dataset
    from planckview.tools.controls import TemperatureSweep

    sweep = TemperatureSweep()
    for T in sweep.frames(fps=30):
        d = compute_dataset(T)
        ...  # draw d


-------------------------------------------------------------------------------

"""

from math import cos, floor, isnan, log10, pi

from planckview.misc.utils import round_half_up


def clamp_temperature(value, Tmin=200, Tmax=12000, default=None):
    """Parse a temperature typed by the user, rounded and clamped to
    ``[Tmin, Tmax]``.

    Parameters
    ----------
    value: str, float or None
        raw user input
    Tmin, Tmax: float (K)
    default: float, or None
        returned if ``value`` is empty or not a number. If None, such values
        are rejected and None is returned, which means the input should be
        ignored (while typing). Use ``default=Tmin`` when the input is
        validated.

    Returns
    -------
    int, or None
    """
    if value is None or (isinstance(value, str) and value.strip() == ""):
        return default
    try:
        v = float(value)
    except (TypeError, ValueError):
        return default
    if isnan(v):
        return default
    return round_half_up(max(Tmin, min(Tmax, v)))


def _format_exp(x):
    """``1.03e15`` to ``'1.03e15'``, ``1e14`` to ``'1e14'``"""
    e = int(floor(log10(x)))
    return "{0:.3g}e{1}".format(x / 10**e, e)


class TemperatureRange:
    """Temperature control with bounds, like a slider synchronized with a
    numeric input.

    Parameters
    ----------
    valmin, valmax: float (K)
        bounds of the control
    valinit: float (K)
        initial value. Default ``valmin``
    """

    def __init__(self, valmin=200, valmax=12000, valinit=None):
        self.valmin = valmin
        self.valmax = valmax

        if valinit is None:
            valinit = valmin
        self.valinit = valinit
        self.val = valinit

    @classmethod
    def from_config(cls, config=None):
        """Bounds and initial value read from the ``"TEMPERATURE_RANGE_K"``
        and ``"TEMPERATURE_DEFAULT_K"`` keys of :py:attr:`planckview.config`"""
        if config is None:
            import planckview

            config = planckview.config

        Tmin, Tmax = config["TEMPERATURE_RANGE_K"]
        return cls(Tmin, Tmax, valinit=config["TEMPERATURE_DEFAULT_K"])

    def set(self, value):
        """Set the value from a validated user input (empty or invalid input
        resets to ``valmin``). Returns the new value"""
        self.val = clamp_temperature(
            value, self.valmin, self.valmax, default=self.valmin
        )
        return self.val

    def update(self, value):
        """Set the value while the user is typing: empty or invalid input is
        ignored. Returns the new value"""
        v = clamp_temperature(value, self.valmin, self.valmax, default=None)
        if v is not None:
            self.val = v
        return self.val

    def __repr__(self):
        return "TemperatureRange({0!r} .. {1!r} [{2!r}] @ {3!r})".format(
            self.valmin, self.valmax, self.valinit, self.val
        )


class TemperatureSweep:
    """Temperatures of an animated back-and-forth sweep.

    The phase ``p`` goes from 0 to 1 every ``duration`` ms. The temperature
    follows a cosine ease, from ``Tmin`` at ``p=0`` to ``Tmax`` at ``p=0.5``
    and back.

    Parameters
    ----------
    Tmin, Tmax: float (K)
        Default ``3865``, ``7600``
    duration: float (ms)
        duration of a full cycle. Default ``8000``
    """

    def __init__(self, Tmin=3865, Tmax=7600, duration=8000):
        if duration <= 0:
            raise ValueError("duration must be positive. Got {0}".format(duration))
        self.Tmin = Tmin
        self.Tmax = Tmax
        self.duration = duration

    def temperature_at(self, elapsed):
        """Temperature (K, rounded) after ``elapsed`` ms"""
        t = (elapsed % self.duration) / self.duration
        ease = 0.5 - 0.5 * cos(pi * 2 * t)
        return round_half_up(self.Tmin + ease * (self.Tmax - self.Tmin))

    def frames(self, fps=60, cycles=1):
        """Generate the temperatures of ``cycles`` full cycles at ``fps``
        frames per second"""
        nframes = int(round(self.duration / 1000 * fps * cycles))
        for i in range(nframes):
            yield self.temperature_at(i * 1000 / fps)


class YRangeStepper:
    """Step through preset y-axis ranges ``[0, max]`` with +/- buttons.

    Parameters
    ----------
    ranges: list of float  (W.sr-1.m-3)
        upper bounds, in increasing order
    index: int
        initial preset. Default ``5`` (1e14)
    """

    DEFAULT_RANGES = (7e8, 1e10, 1e11, 1e12, 1e13, 1e14, 1.03e15)

    def __init__(self, ranges=DEFAULT_RANGES, index=5):
        if not 0 <= index < len(ranges):
            raise IndexError(
                "Initial index {0} out of the {1} presets".format(index, len(ranges))
            )
        self.ranges = tuple(ranges)
        self.index = index

    @property
    def ymax(self):
        return self.ranges[self.index]

    @property
    def yrange(self):
        return (0, self.ymax)

    @property
    def label(self):
        return "Y range: [0, {0}]".format(_format_exp(self.ymax))

    @property
    def can_decrease(self):
        return self.index > 0

    @property
    def can_increase(self):
        return self.index < len(self.ranges) - 1

    def decrease(self):
        """Go to the previous preset (no-op on the first one). Returns the
        new range"""
        if self.can_decrease:
            self.index -= 1
        return self.yrange

    def increase(self):
        """Go to the next preset (no-op on the last one). Returns the new
        range"""
        if self.can_increase:
            self.index += 1
        return self.yrange
