import pytest

from wavesim import config
from wavesim.model.state import SimulationSettings


def test_defaults():
    settings = SimulationSettings()

    assert settings.grid_size == 250
    assert settings.render_period_ms == 60.0
    assert settings.splash_amplitude == -3.0
    assert settings.splash_delta == 1.0
    assert settings.raindrop_period_ms == 35.0
    assert settings.drop_size == 1
    assert settings.wave_height == 15.0


def test_peak_height_slider_is_negated_amplitude():
    settings = SimulationSettings()

    assert settings.peak_height == 3.0
    settings.set_peak_height(12)
    assert settings.splash_amplitude == -12.0
    settings.set_peak_height(0)
    assert settings.splash_amplitude == 0.0


def test_drops_per_second_slider_inverts_period():
    settings = SimulationSettings()

    settings.set_drops_per_second(1000)
    assert settings.raindrop_period_ms == pytest.approx(1.0)
    settings.set_drops_per_second(1)
    assert settings.raindrop_period_ms == pytest.approx(1000.0)
    settings.set_drops_per_second(20)
    assert settings.drops_per_second == pytest.approx(20.0)


def test_drops_per_second_must_be_positive():
    with pytest.raises(ValueError):
        SimulationSettings().set_drops_per_second(0)


def test_drop_size_slider_is_truncated():
    settings = SimulationSettings()
    settings.set_drop_size(3.0)
    assert settings.drop_size == 3
    assert isinstance(settings.drop_size, int)


def test_reset_restores_defaults_but_keeps_grid():
    settings = SimulationSettings(grid_size=50, render_period_ms=50.0)
    settings.set_peak_height(20)
    settings.set_drops_per_second(500)
    settings.set_drop_size(4)
    settings.wave_height = 3.0

    settings.reset()

    assert settings == SimulationSettings(grid_size=50, render_period_ms=50.0)
    assert settings.raindrop_period_ms == config.RAINDROP_PERIOD_MS
