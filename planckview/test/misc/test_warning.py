# -*- coding: utf-8 -*-
"""
Test the warning status taxonomy

-------------------------------------------------------------------------------


"""

import warnings

import pytest

from planckview.misc.warning import (
    AccuracyWarning,
    CoarseGridWarning,
    OutOfRangeTemperatureWarning,
    WarningClasses,
    default_warning_status,
    reset_warnings,
    warn,
)


@pytest.mark.fast
def test_warning_classes(*args, **kwargs):

    assert set(WarningClasses) == set(default_warning_status)
    assert issubclass(CoarseGridWarning, AccuracyWarning)
    assert issubclass(OutOfRangeTemperatureWarning, UserWarning)


@pytest.mark.fast
def test_warn_actions(capsys, *args, **kwargs):

    with pytest.warns(OutOfRangeTemperatureWarning):
        warn("out of range", "OutOfRangeTemperatureWarning", {})

    with pytest.warns(AccuracyWarning):
        warn("inaccurate", "AccuracyWarning", {"AccuracyWarning": "warn"})

    with pytest.raises(OutOfRangeTemperatureWarning):
        warn(
            "out of range",
            "OutOfRangeTemperatureWarning",
            {"OutOfRangeTemperatureWarning": "error"},
        )

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        warn("ignored", "AccuracyWarning", {"AccuracyWarning": "ignore"})
        warn("disabled", "AccuracyWarning", False)

        warn("printed", "AccuracyWarning", {"AccuracyWarning": "print"})
        assert "printed" in capsys.readouterr().out

    with pytest.raises(ValueError):
        warn("typo", "AccuracyWarning", {"AccuracyWarning": "warning"})


@pytest.mark.fast
def test_warn_once(*args, **kwargs):

    status = {"CoarseGridWarning": "once"}

    with warnings.catch_warnings(record=True) as w:
        warnings.simplefilter("always")
        warn("coarse", "CoarseGridWarning", status)
        warn("coarse", "CoarseGridWarning", status)
        assert len(w) == 1

        reset_warnings(status)
        warn("coarse", "CoarseGridWarning", status)
        assert len(w) == 2

    reset_warnings(False)


def _run_testcases(verbose=True, *args, **kwargs):

    test_warning_classes()
    test_warn_once()

    return True


if __name__ == "__main__":
    print("test_warning:", _run_testcases(verbose=True))
