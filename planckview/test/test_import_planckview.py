# -*- coding: utf-8 -*-
"""Test planckview import, and the public API exposed at the top level.

Start-up time can be monitored with Python 3.7:
https://dev.to/methane/how-to-speed-up-python-application-startup-time-nkf
"""

import pytest

import planckview


@pytest.mark.fast
def test_public_api(*args, **kwargs):

    for name in [
        "config",
        "compute_dataset",
        "make_wavelength_grid",
        "wavelength_to_rgb",
        "planck",
        "planck_lambda",
        "wien_peak_um",
        "DatasetAssembler",
        "RenderableDataset",
        "TemperatureSweep",
        "YRangeStepper",
        "make_figure",
    ]:
        assert name in planckview.__all__
        assert hasattr(planckview, name)

    assert planckview.__version__ == planckview.get_version()
    assert planckview.version.count(".") == 2
