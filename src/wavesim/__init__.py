"""Rippling water surface simulation rendered as an animated 3D mesh."""
from wavesim.model.errors import InvalidArgumentError, InvalidConfigurationError, WaveSimError
from wavesim.model.scheduler import next_event_count
from wavesim.model.wave_grid import WaveGrid

__all__ = [
    "InvalidArgumentError",
    "InvalidConfigurationError",
    "WaveGrid",
    "WaveSimError",
    "next_event_count",
]
