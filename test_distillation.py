import pytest

from antoine import Component
from config import BENZENE, TOLUENE, GridSettings, MixtureContext, benzene_toluene
from distillation import simulate, to_frames
from errors import SingularityError
from rayleigh import UNSOLVED

GRID = GridSettings(vapor_points=101, temperature_step=0.5, ratio_points=21)


def test_simulate_benzene_toluene():
    result = simulate(benzene_toluene(), GRID)

    assert result["alpha"] > 1
    assert set(result["vapor_pressure"]) == {"Benzene", "Toluene"}
    assert len(result["equilibrium"]) == GRID.equilibrium_points
    assert len(result["trace"]) == GRID.ratio_points
    assert result["bubble_dew"][0].x1 == pytest.approx(1.0, abs=1e-9)
    assert isinstance(result["message"], str)


def test_unsolved_ratios_become_warnings():
    grid = GridSettings(vapor_points=11, temperature_step=1.0, ratio_points=21,
                        grid_step=0.05, tolerance=1e-3)
    result = simulate(benzene_toluene(), grid)
    assert any(p.status == UNSOLVED for p in result["trace"])
    assert any("unsolved" in w for w in result["warnings"])
    assert result["message"].startswith("Computed with warnings")


def test_singular_mixture_aborts_the_run():
    twin = Component("Benzene copy", BENZENE.a, BENZENE.b, BENZENE.c, BENZENE.t_min, BENZENE.t_max)
    with pytest.raises(SingularityError):
        simulate(MixtureContext(light=BENZENE, heavy=twin), GRID)


def test_frames():
    frames = to_frames(simulate(benzene_toluene(), GRID))

    assert list(frames["trace"].columns) == ["ratio", "x1", "x2", "y1", "y2", "status"]
    assert list(frames["equilibrium"].columns) == ["x1", "x2", "y1", "y2"]
    assert list(frames["bubble_dew"].columns) == ["T", "x1", "y1"]
    assert len(frames["vapor_pressure"]) == 2 * GRID.vapor_points

    eq = frames["equilibrium"]
    assert ((eq["x1"] + eq["x2"] - 1).abs() < 1e-12).all()
    assert "ratio" in frames["trace"].to_csv(index=False)


def test_grid_settings_validation():
    with pytest.raises(ValueError):
        GridSettings(method="newton")
    with pytest.raises(ValueError):
        GridSettings(ratio_points=1)
    with pytest.raises(ValueError):
        MixtureContext(light=BENZENE, heavy=BENZENE, x0=1.0)
    with pytest.raises(ValueError):
        MixtureContext(light=BENZENE, heavy=BENZENE, pressure=0.0)


def test_reference_temperature_below_asymptote_aborts_cleanly():
    with pytest.raises(SingularityError):
        simulate(MixtureContext(light=BENZENE, heavy=TOLUENE, temperature=-222.0), GRID)


def test_pressure_without_boiling_point_aborts_cleanly():
    with pytest.raises(SingularityError):
        simulate(MixtureContext(light=BENZENE, heavy=TOLUENE, pressure=2e7), GRID)


def test_skipped_bubble_dew_samples_become_warnings(monkeypatch):
    monkeypatch.setattr("distillation.bubble_dew_samples", lambda ctx, step: ([], [85.0]))
    result = simulate(benzene_toluene(), GRID)
    assert result["bubble_dew"] == []
    assert any("skipped" in w and "85.00" in w for w in result["warnings"])


def test_grid_step_must_divide_unit_interval():
    with pytest.raises(ValueError):
        GridSettings(grid_step=0.3)
