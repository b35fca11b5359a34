"""
Frame Driver
============
Advances the water surface once per processed frame.

Why is this file needed?
------------------------
1. Timing: The GUI timer fires more often than frames are processed. The driver
   gates those ticks so the water only moves once a render period has passed.
2. Orchestration: Per frame it asks the scheduler how many raindrops fall,
   applies them to the grid and runs one propagation step.
3. Publishing: It hands out full snapshots of the current surface under a lock,
   so a consumer never reads a buffer mid-update.

Note: This module should NOT import PySide6.
"""
from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Optional

import numpy as np

from wavesim import config
from wavesim.model.scheduler import next_event_count
from wavesim.model.state import SimulationSettings
from wavesim.model.wave_grid import WaveGrid

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class FrameDriver:
    """
    Drives a WaveGrid from a frame clock and the current SimulationSettings.
    """

    def __init__(
        self,
        grid: WaveGrid,
        settings: SimulationSettings,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        """
        Args:
            grid: The water surface to animate.
            settings: Live raindrop/wave parameters (read on every frame).
            rng: Random source for the raindrop coin-flip. Independent of the
                grid's own generator. Defaults to a generator seeded with
                config.DRIVER_SEED.
        """
        self.grid = grid
        self.settings = settings
        self._rng = rng if rng is not None else np.random.default_rng(config.DRIVER_SEED)

        self._lock = threading.Lock()
        self._last_frame_ms: Optional[float] = None
        self.is_running: bool = False
        self.frames_processed: int = 0

    @classmethod
    def from_settings(cls, settings: SimulationSettings) -> FrameDriver:
        """Build a grid sized by the settings and a driver for it."""
        return cls(grid=WaveGrid(settings.grid_size), settings=settings)

    # ------------------------------------------------------------------------------
    # Start / Stop
    # ------------------------------------------------------------------------------

    def start(self) -> None:
        """Flatten the water and start accepting ticks."""
        with self._lock:
            self.grid.flatten()
            self._last_frame_ms = None
            self.frames_processed = 0
            self.is_running = True
        logger.info("Simulation started.")

    def stop(self) -> None:
        """Stop accepting ticks. The surface is left as it is."""
        self.is_running = False
        logger.info(f"Simulation stopped after {self.frames_processed} frames.")

    # ------------------------------------------------------------------------------
    # Frames
    # ------------------------------------------------------------------------------

    def tick(self, now_ms: float) -> bool:
        """
        Process a frame if one is due.

        Ticks arriving less than a render period after the last processed frame
        are skipped without touching any state.

        Args:
            now_ms: Current time of the frame clock, in milliseconds.

        Returns:
            True if a frame was processed.
        """
        if not self.is_running:
            return False

        if self._last_frame_ms is None:
            elapsed = self.settings.render_period_ms
        else:
            elapsed = now_ms - self._last_frame_ms
            if elapsed <= self.settings.render_period_ms:
                return False

        self.advance(elapsed)
        self._last_frame_ms = now_ms
        return True

    def advance(self, frame_dt: float) -> int:
        """
        Run one frame: drop the scheduled raindrops, then propagate.

        Args:
            frame_dt: Time covered by this frame, in milliseconds.

        Returns:
            Number of raindrops applied.
        """
        settings = self.settings
        num_drops = next_event_count(settings.raindrop_period_ms, frame_dt, self._rng)

        with self._lock:
            for _ in range(num_drops):
                self.grid.set_random_peak(settings.splash_amplitude, settings.splash_delta, settings.drop_size)
            self.grid.step()
            self.frames_processed += 1

        logger.debug(f"Frame {self.frames_processed}: dt={frame_dt:.1f} ms, {num_drops} drops.")
        return num_drops

    def induce_wave(self) -> None:
        """Raise a wave wall of the configured height."""
        with self._lock:
            self.grid.induce_wave(self.settings.wave_height)
        logger.info(f"Wave induced (height {self.settings.wave_height}).")

    def snapshot(self) -> npt.NDArray[np.float64]:
        """Copy of the current (dimension**2, 3) positions, taken between frames."""
        with self._lock:
            return np.array(self.grid.points, copy=True)
