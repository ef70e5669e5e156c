# -*- coding: utf-8 -*-
"""
Test the renderable dataset assembled at a given temperature

-------------------------------------------------------------------------------


"""

import warnings

import astropy.units as u
import numpy as np
import pytest

from planckview.misc.warning import (
    CoarseGridWarning,
    InvalidTemperatureError,
    OutOfRangeTemperatureWarning,
)
from planckview.spectrum.colors import BLACK, WHITE, ColorConfig, wavelength_to_rgb
from planckview.spectrum.dataset import (
    DatasetAssembler,
    HighlightConfig,
    RenderableDataset,
    SimulatorConfig,
    compute_dataset,
)
from planckview.spectrum.grid import GridConfig


@pytest.mark.fast
def test_sun_like(verbose=True, *args, **kwargs):
    """At 5850 K the peak is in the blue-green, and about 40% of the energy
    is visible"""

    sim = DatasetAssembler(SimulatorConfig())
    d = sim.compute(5850)

    if verbose:
        print(d)

    assert isinstance(d, RenderableDataset)
    assert d.temperature == 5850
    assert len(d.wavelength_um) == len(d.radiance) == 3000
    assert np.isclose(d.peak_wavelength_um, 0.4954, atol=1e-4)
    assert np.isclose(d.peak_wavelength_nm, 495.34, atol=0.01)
    assert 0.3 < d.visible_fraction < 0.6
    assert d.visible_radiance < d.total_radiance

    # peak is visible but fraction is below the white threshold: peak color
    assert d.curve_color not in [WHITE, BLACK]
    assert d.curve_color == "#00fffe"

    # maximum of the spectrum is close to the peak wavelength
    imax = d.radiance.argmax()
    assert np.isclose(d.wavelength_um[imax], d.peak_wavelength_um, rtol=5e-3)
    assert d.max_radiance == d.radiance[imax]


@pytest.mark.fast
def test_cold_blackbodies(*args, **kwargs):
    """Red dwarfs and room-temperature objects peak in the infrared: the
    curve is black"""

    sim = DatasetAssembler(SimulatorConfig())

    d = sim.compute(3000)
    assert np.isclose(d.peak_wavelength_um, 0.9659, atol=1e-4)
    assert d.visible_fraction < 0.2
    assert d.curve_color == BLACK

    d = sim.compute(200)
    assert np.isclose(d.peak_wavelength_um, 14.489, atol=1e-3)
    assert d.visible_fraction < 1e-20
    assert d.curve_color == BLACK
    assert np.isfinite(d.radiance).all()


@pytest.mark.fast
def test_curve_color_threshold(*args, **kwargs):
    """A low white threshold makes hot blackbodies white"""

    conf = SimulatorConfig(grid=GridConfig(npoints=1000))
    conf_white = SimulatorConfig(
        grid=GridConfig(npoints=1000),
        color=ColorConfig(white_threshold=0.3),
    )

    assert DatasetAssembler(conf).compute(5850).curve_color != WHITE
    assert DatasetAssembler(conf_white).compute(5850).curve_color == WHITE


@pytest.mark.fast
def test_highlights(*args, **kwargs):

    sim = DatasetAssembler(SimulatorConfig())
    d = sim.compute(5850)

    assert len(d.highlights) == 40
    assert np.isclose(d.highlights[0].start_um, 0.4)
    assert np.isclose(d.highlights[-1].end_um, 0.75)
    for b1, b2 in zip(d.highlights[:-1], d.highlights[1:]):
        assert np.isclose(b1.end_um, b2.start_um)
        assert b1.center_nm < b2.center_nm
    for b in d.highlights:
        assert np.isclose(b.end_um - b.start_um, 0.35 / 40)
        assert b.rgb == wavelength_to_rgb(b.center_nm)
        assert b.alpha == 0.14
        assert b.rgba.startswith("rgba(") and b.rgba.endswith(",0.14)")

    # highlights do not depend on temperature
    assert sim.compute(3000).highlights == d.highlights

    sim = DatasetAssembler(
        SimulatorConfig(highlight=HighlightConfig(segments=7, alpha=0.5))
    )
    assert len(sim.get_highlights()) == 7
    assert sim.get_highlights()[3].alpha == 0.5

    with pytest.raises(ValueError):
        HighlightConfig(segments=0)


@pytest.mark.fast
def test_invalid_temperatures(*args, **kwargs):
    """Here we test that the code actually crashes properly!"""

    sim = DatasetAssembler(SimulatorConfig(grid=GridConfig(npoints=500)))

    for T in [0, -5, float("nan"), float("inf"), "abc", None]:
        with pytest.raises(InvalidTemperatureError):
            sim.compute(T)

    # InvalidTemperatureError is a ValueError
    with pytest.raises(ValueError):
        sim.compute(-273.15)


@pytest.mark.fast
def test_out_of_range_temperatures(*args, **kwargs):
    """Temperatures outside the controls range are computed, with a warning"""

    sim = DatasetAssembler(SimulatorConfig(grid=GridConfig(npoints=500)))

    with pytest.warns(OutOfRangeTemperatureWarning):
        d = sim.compute(100)
    assert d.curve_color == BLACK

    with pytest.warns(OutOfRangeTemperatureWarning):
        sim.compute(20000)

    # Warnings as errors
    sim = DatasetAssembler(
        SimulatorConfig(grid=GridConfig(npoints=500)),
        warnings={"OutOfRangeTemperatureWarning": "error"},
    )
    with pytest.raises(OutOfRangeTemperatureWarning):
        sim.compute(20000)

    # All warnings disabled
    sim = DatasetAssembler(SimulatorConfig(grid=GridConfig(npoints=500)), warnings=False)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        sim.compute(20000)
        sim.compute(12000)  # bounds are in the range


@pytest.mark.fast
def test_coarse_grid(*args, **kwargs):
    """A 10-point grid has a single interval in the visible band"""

    conf = SimulatorConfig(grid=GridConfig(npoints=10))
    with pytest.warns(CoarseGridWarning):
        sim = DatasetAssembler(conf)

    d = sim.compute(5850)
    assert 0 <= d.visible_fraction <= 1


@pytest.mark.fast
def test_astropy_temperature(*args, **kwargs):

    sim = DatasetAssembler(SimulatorConfig(grid=GridConfig(npoints=500)))

    d1 = sim.compute(5850)
    d2 = sim.compute(5850 * u.K)
    d3 = sim(5576.85 * u.deg_C)

    assert d2.temperature == 5850
    assert np.isclose(d3.temperature, 5850)
    assert np.allclose(d1.radiance, d2.radiance)
    assert np.allclose(d1.radiance, d3.radiance)


@pytest.mark.fast
def test_dataset_outputs(*args, **kwargs):

    sim = DatasetAssembler(SimulatorConfig(grid=GridConfig(npoints=500)))
    d = sim.compute(4000)

    # read-only, and shares the grid of the assembler
    with pytest.raises(ValueError):
        d.radiance[0] = 1
    with pytest.raises(AttributeError):
        d.temperature = 5000
    assert d.wavelength_um is sim.grid.wavelength_um

    # points
    points = d.points()
    assert len(points) == 500
    assert points[0] == (d.wavelength_um[0], d.radiance[0])
    assert all(p[0] < q[0] for p, q in zip(points[:-1], points[1:]))

    # units
    assert d.get_radiance() is d.radiance
    assert np.allclose(d.get_radiance("W/sr/m2/nm"), d.radiance * 1e-9)

    # serialization
    out = d.to_dict()
    assert out["temperature"] == 4000
    assert isinstance(out["radiance"], list) and len(out["radiance"]) == 500
    assert out["curve_color"] == d.curve_color
    assert out["visible_fraction"] == d.visible_fraction
    assert len(out["highlights"]) == 40
    assert out["highlights"][0]["color"] == d.highlights[0].rgba


@pytest.mark.fast
def test_verbose(capsys, *args, **kwargs):

    sim = DatasetAssembler(SimulatorConfig(grid=GridConfig(npoints=500)), verbose=2)
    sim.compute(5850)

    out = capsys.readouterr().out
    assert "T=5850 K" in out
    assert "visible fraction" in out
    assert "total" in out

    sim.verbose = 0
    sim.compute(5850)
    assert capsys.readouterr().out == ""


@pytest.mark.fast
def test_compute_dataset(*args, **kwargs):
    """Default assembler uses the planckview config"""

    import planckview

    d = compute_dataset(5850)

    assert len(d.wavelength_um) == planckview.config["GRID_NPOINTS"]
    assert np.isclose(d.peak_wavelength_um, 0.4954, atol=1e-4)

    # the grid is built once
    assert compute_dataset(3000).wavelength_um is d.wavelength_um


def _run_testcases(verbose=True, *args, **kwargs):

    test_sun_like(verbose=verbose)
    test_cold_blackbodies()
    test_curve_color_threshold()
    test_highlights()
    test_invalid_temperatures()
    test_out_of_range_temperatures()
    test_coarse_grid()
    test_astropy_temperature()
    test_dataset_outputs()
    test_compute_dataset()

    return True


if __name__ == "__main__":
    print("test_dataset:", _run_testcases(verbose=True))
