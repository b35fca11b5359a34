"""
Perturbation Scheduler
Converts an average event period into a whole number of events per frame.
"""
from __future__ import annotations

import math
from typing import Protocol

from wavesim.model.errors import InvalidArgumentError


class UniformSource(Protocol):
    """Anything with a ``random()`` method returning a float in [0, 1)."""
    def random(self) -> float: ...


def next_event_count(period_ms: float, frame_dt: float, rng: UniformSource) -> int:
    """
    Number of events to fire during a frame of length frame_dt.

    The expected count frame_dt / period_ms is split into its integer part,
    which always fires, and a fractional remainder, which fires one extra event
    with probability equal to the remainder. E.g. 2.25 expected drops gives 2
    drops plus a 25% chance of a third. The long-run mean therefore matches the
    expected count exactly.

    This is a single coin-flip per frame, not a Poisson arrival process: only
    the mean is preserved, not the variance.

    Args:
        period_ms: Average time between two events.
        frame_dt: Time elapsed since the last processed frame, same unit as period_ms.
        rng: Source of uniform samples in [0, 1).

    Returns:
        Non-negative event count.

    Raises:
        InvalidArgumentError: If period_ms is not positive or frame_dt is negative.
    """
    if not period_ms > 0.0:
        raise InvalidArgumentError(f"Event period must be positive, got {period_ms}.")
    if frame_dt < 0.0:
        raise InvalidArgumentError(f"Frame duration must not be negative, got {frame_dt}.")

    expected = frame_dt / period_ms
    count = math.floor(expected)

    remainder = expected - count
    if remainder > 0.0 and rng.random() <= remainder:
        count += 1

    return int(count)
