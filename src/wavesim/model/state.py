"""
Simulation Settings (Data Model)
================================
This module defines the values the user can tune while the water is running.

Why is this file needed?
------------------------
1. State Management: It holds the raindrop and wave parameters in one place.
2. Decoupling: Views write slider values into this object; the frame driver
   reads from it on every frame.

Classes:
    SimulationSettings: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging

from wavesim import config

logger = logging.getLogger(__name__)


@dataclass
class SimulationSettings:
    """
    Raindrop and wave parameters, plus the fixed grid/frame configuration.
    Pass this instance to the frame driver and to the control panel.
    """
    grid_size: int = config.GRID_SIZE
    render_period_ms: float = config.RENDER_PERIOD_MS

    splash_amplitude: float = config.SPLASH_AMPLITUDE  # Average height (depth, since negative) of splashes
    splash_delta: float = config.SPLASH_DELTA  # Actual splash height is amplitude +/- delta
    raindrop_period_ms: float = config.RAINDROP_PERIOD_MS
    drop_size: int = config.DROP_SIZE
    wave_height: float = config.WAVE_HEIGHT

    # --- Slider conversions ---

    @property
    def peak_height(self) -> float:
        """Slider value for the splash amplitude. Slider runs [0, 30], amplitude runs [-30, 0]."""
        return -1.0 * self.splash_amplitude

    def set_peak_height(self, value: float) -> None:
        self.splash_amplitude = -1.0 * float(value)

    @property
    def drops_per_second(self) -> float:
        """Slider value for the raindrop rate. More drops per second means a shorter period."""
        return 1000.0 / self.raindrop_period_ms

    def set_drops_per_second(self, value: float) -> None:
        if value <= 0:
            raise ValueError(f"Drops per second must be positive, got {value}.")
        self.raindrop_period_ms = (1.0 / float(value)) * 1000.0

    def set_drop_size(self, value: float) -> None:
        self.drop_size = int(value)

    def reset(self) -> None:
        """Restore the tunable values to their defaults."""
        self.splash_amplitude = config.SPLASH_AMPLITUDE
        self.splash_delta = config.SPLASH_DELTA
        self.raindrop_period_ms = config.RAINDROP_PERIOD_MS
        self.drop_size = config.DROP_SIZE
        self.wave_height = config.WAVE_HEIGHT
        logger.info("Simulation settings have been reset.")
