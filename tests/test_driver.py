import sys
import threading

import numpy as np
import pytest

from wavesim.controller.driver import FrameDriver
from wavesim.model.state import SimulationSettings
from wavesim.model.wave_grid import WaveGrid


@pytest.fixture
def settings() -> SimulationSettings:
    # 70 ms frames at one drop per 35 ms: exactly two drops per frame
    return SimulationSettings(grid_size=20, render_period_ms=70.0, splash_delta=0.0, raindrop_period_ms=35.0)


@pytest.fixture
def driver(settings) -> FrameDriver:
    grid = WaveGrid(settings.grid_size, rng=np.random.default_rng(1))
    return FrameDriver(grid, settings, rng=np.random.default_rng(2))


def test_from_settings_sizes_the_grid(settings):
    driver = FrameDriver.from_settings(settings)
    assert driver.grid.dimension == 20
    assert driver.settings is settings


def test_tick_is_ignored_until_started(driver):
    assert driver.tick(1000.0) is False
    assert driver.frames_processed == 0
    assert np.all(driver.grid.heights == 0.0)


def test_start_flattens_the_grid(driver):
    driver.grid.raise_block(3, 3, -3.0, 2)
    driver.grid.step()

    driver.start()

    assert driver.is_running
    assert np.all(driver.grid.heights == 0.0)
    assert np.all(driver.grid.scratch_heights == 0.0)


def test_ticks_are_gated_by_render_period(driver):
    driver.start()

    assert driver.tick(1000.0) is True
    after_first = driver.snapshot()

    # Not due yet: nothing may change
    for now in (1010.0, 1050.0, 1070.0):
        assert driver.tick(now) is False
    assert driver.frames_processed == 1
    np.testing.assert_array_equal(driver.snapshot(), after_first)

    assert driver.tick(1071.0) is True
    assert driver.frames_processed == 2


def test_advance_drops_then_steps(driver):
    driver.start()

    drops = driver.advance(70.0)

    assert drops == 2
    # From a flat surface the new heights are just the damped, negated drops
    assert driver.grid.heights.sum() == pytest.approx(0.96 * 3.0 * 2)
    assert np.all(driver.grid.scratch_heights == 0.0)


def test_first_tick_uses_render_period(driver, settings):
    settings.raindrop_period_ms = 7.0
    driver.start()

    driver.tick(123456.0)

    # 70 ms / 7 ms = 10 drops of -3
    assert driver.grid.heights.sum() == pytest.approx(0.96 * 3.0 * 10)


def test_settings_changes_apply_on_next_frame(driver, settings):
    driver.start()
    settings.set_peak_height(0)

    driver.advance(70.0)

    assert np.all(driver.grid.heights == 0.0)


def test_stop_keeps_surface(driver):
    driver.start()
    driver.advance(140.0)
    before = driver.snapshot()

    driver.stop()

    assert not driver.is_running
    assert driver.tick(10_000.0) is False
    np.testing.assert_array_equal(driver.snapshot(), before)


def test_induce_wave_uses_configured_height(driver, settings):
    settings.wave_height = 4.0
    driver.induce_wave()

    scratch = driver.grid.scratch_heights
    assert np.all(scratch[9:, :] == 4.0)
    assert np.all(scratch[:9, :] == 0.0)


def test_snapshot_is_an_independent_copy(driver):
    snap = driver.snapshot()
    snap[:, 1] = 99.0

    assert snap.flags.writeable
    assert np.all(driver.grid.heights == 0.0)


def test_same_seeds_give_same_animation(settings):
    def run():
        grid = WaveGrid(settings.grid_size, rng=np.random.default_rng(10))
        drv = FrameDriver(grid, settings, rng=np.random.default_rng(20))
        drv.start()
        for i in range(30):
            drv.advance(45.0)
        return drv.snapshot()

    np.testing.assert_array_equal(run(), run())


def test_snapshots_from_another_thread_are_whole(settings):
    def make_driver():
        grid = WaveGrid(settings.grid_size, rng=np.random.default_rng(1))
        return FrameDriver(grid, settings, rng=np.random.default_rng(2))

    # Every surface a reader may legally see: the flat start plus each finished frame
    replay = make_driver()
    replay.start()
    frames = {replay.snapshot().tobytes()}
    for _ in range(200):
        replay.advance(70.0)
        frames.add(replay.snapshot().tobytes())

    driver = make_driver()
    driver.start()
    snapshots = []

    def reader():
        for _ in range(400):
            snapshots.append(driver.snapshot())

    switch_interval = sys.getswitchinterval()
    sys.setswitchinterval(1e-6)
    try:
        thread = threading.Thread(target=reader)
        thread.start()
        for _ in range(200):
            driver.advance(70.0)
        thread.join()
    finally:
        sys.setswitchinterval(switch_interval)

    np.testing.assert_array_equal(driver.snapshot(), replay.snapshot())
    for snap in snapshots:
        assert snap.shape == (400, 3)
        assert snap.tobytes() in frames
