"""
Wave Grid (Height Field Engine)
===============================
The core implementation of the rippling water surface.

Why is this file needed?
------------------------
1. State: It owns the two height buffers (double buffering) and knows which one
   is "current" (shown on screen) and which one is "scratch" (written next).
2. Physics: It implements the per-frame propagation rule that spreads ripples
   outward and damps them over time.
3. Disturbances: It provides the raindrop splash, the wave wall and the full
   reset operators.

Note: This module should be pure NumPy and should NOT import PySide6.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Tuple

import numpy as np

from wavesim import config
from wavesim.model.errors import InvalidArgumentError
from wavesim.model.topology import build_lattice, neighbor_counts, validate_dimension

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

# Propagation constants
DAMPING: float = 0.96
SMOOTHING_FACTOR: float = 2.0  # Gives more weight to smoothing than to velocity

# Wave wall
WAVE_MIN_DIMENSION: int = 15
WAVE_NUM_ROWS: int = 20

# Column of the point buffers holding the height
_Y = 1


def _read_only(array: npt.NDArray) -> npt.NDArray:
    view = array.view()
    view.flags.writeable = False
    return view


class WaveGrid:
    """
    Square height field with two time-adjacent snapshots of the surface.

    The buffers never move. Only the label saying which of them is "current"
    is swapped after every step, so no data is copied between frames.
    """

    def __init__(self, dimension: int, rng: Optional[np.random.Generator] = None) -> None:
        """
        Construct a new flat grid.

        Args:
            dimension: Number of cells along each axis (same for X and Z).
            rng: Random source for splash placement and magnitude.
                Defaults to a generator seeded with config.GRID_SEED.

        Raises:
            InvalidConfigurationError: If the dimension is below the minimum.
        """
        self._dimension: int = validate_dimension(dimension)
        self._rng = rng if rng is not None else np.random.default_rng(config.GRID_SEED)

        points, triangles = build_lattice(self._dimension)
        # Second buffer exists only to hold a second set of heights
        self._buffers: Tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]] = (points, points.copy())
        self._triangle_indices: npt.NDArray[np.int32] = _read_only(triangles)
        self._neighbor_counts: npt.NDArray[np.float64] = neighbor_counts(self._dimension)

        self._current: int = 1

        logger.info(f"Created wave grid {self._dimension}x{self._dimension}.")

    # ------------------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------------------

    @property
    def dimension(self) -> int:
        """Dimension of grid, same for both axes."""
        return self._dimension

    @property
    def points(self) -> npt.NDArray[np.float64]:
        """Read-only (dimension**2, 3) view of the current buffer."""
        return _read_only(self._buffers[self._current])

    def positions(self) -> npt.NDArray[np.float64]:
        """Read-only flat (x, y, z, x, y, z, ...) view of the current buffer."""
        return _read_only(self._buffers[self._current].reshape(-1))

    @property
    def triangle_indices(self) -> npt.NDArray[np.int32]:
        """Triangle vertex indices, three per triangle. Constant for the grid's lifetime."""
        return self._triangle_indices

    @property
    def heights(self) -> npt.NDArray[np.float64]:
        """Copy of the current heights as a (dimension, dimension) array."""
        return self._heights(self._buffers[self._current]).copy()

    @property
    def scratch_heights(self) -> npt.NDArray[np.float64]:
        """Copy of the scratch heights (the two-steps-back snapshot) as a (dimension, dimension) array."""
        return self._heights(self._buffers[1 - self._current]).copy()

    def _heights(self, buffer: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        return buffer[:, _Y].reshape(self._dimension, self._dimension)

    @property
    def _scratch(self) -> npt.NDArray[np.float64]:
        return self._buffers[1 - self._current]

    # ------------------------------------------------------------------------------
    # Disturbances
    # ------------------------------------------------------------------------------

    def set_random_peak(self, base_peak: float, delta: float, width: int) -> None:
        """
        Induce a new disturbance at a random location.

        The height added is base_peak +/- delta (uniform), truncated toward zero.
        It lands in the scratch buffer, so it acts as the "two steps back" source
        of the next propagation step.

        Args:
            base_peak: Base height of the new peak. A value of 0.0 always adds 0.0.
            delta: Max amount added to or subtracted from base_peak.
            width: Edge length of the square block, in cells.

        Raises:
            InvalidArgumentError: If width is outside [1, dimension // 2].
        """
        self._check_width(width)

        # Continuous sample truncated to int (slightly favours low indices)
        row = int(self._rng.random() * (self._dimension - 1.0))
        col = int(self._rng.random() * (self._dimension - 1.0))

        # Caller asking for a 0.0 peak always gets 0.0
        if base_peak == 0.0:
            delta = 0.0

        peak_value = base_peak + (self._rng.random() * 2.0 * delta) - delta
        self.raise_block(row, col, peak_value, width)

    def raise_block(self, row: int, col: int, peak_value: float, width: int) -> None:
        """
        Add int(peak_value) to a width x width block of the scratch buffer.

        row/col give the top-left corner. If the block would stick out of the
        grid the corner is shifted back so the whole block fits.

        Raises:
            InvalidArgumentError: If width is outside [1, dimension // 2] or the
                corner lies outside the grid.
        """
        self._check_width(width)
        if not (0 <= row < self._dimension and 0 <= col < self._dimension):
            raise InvalidArgumentError(f"Block corner ({row}, {col}) lies outside the grid.")

        row = min(row, self._dimension - width)
        col = min(col, self._dimension - width)

        heights = self._heights(self._scratch)
        heights[row:row + width, col:col + width] += int(peak_value)

    def induce_wave(self, wave_height: float) -> None:
        """
        Induce a wave by raising a wall of rows in the middle of the grid.

        Adds wave_height to WAVE_NUM_ROWS rows of the scratch buffer, starting at
        row dimension // 2 - 1 and clipped to the grid. Grids smaller than
        WAVE_MIN_DIMENSION are left untouched.
        """
        if self._dimension < WAVE_MIN_DIMENSION:
            logger.debug(f"Grid {self._dimension} too small for a wave, ignoring.")
            return

        start_row = self._dimension // 2 - 1
        stop_row = min(start_row + WAVE_NUM_ROWS, self._dimension)
        self._scratch[start_row * self._dimension:stop_row * self._dimension, _Y] += wave_height
        logger.debug(f"Induced wave of height {wave_height} on rows {start_row}..{stop_row - 1}.")

    def flatten(self) -> None:
        """
        Set the height of every point to 0.0 and restore the original buffer roles.
        """
        for buffer in self._buffers:
            buffer[:, _Y] = 0.0
        self._current = 1
        logger.info("Grid flattened.")

    def _check_width(self, width: int) -> None:
        if width < 1 or width > self._dimension // 2:
            raise InvalidArgumentError(
                f"Peak width must be in [1, {self._dimension // 2}], got {width}."
            )

    # ------------------------------------------------------------------------------
    # Propagation
    # ------------------------------------------------------------------------------

    def step(self) -> None:
        """
        Determine the next state of the grid from the previous two states.

        New heights are written into the scratch buffer, which then becomes the
        current one. The old current buffer becomes the scratch buffer of the
        next step.
        """
        current = self._heights(self._buffers[self._current])
        velocity = -self._heights(self._scratch)

        # Sum of existing cardinal neighbours; the edges simply have fewer
        smoothed = np.zeros_like(current)
        smoothed[1:, :] += current[:-1, :]   # row-1
        smoothed[:-1, :] += current[1:, :]   # row+1
        smoothed[:, 1:] += current[:, :-1]   # col-1
        smoothed[:, :-1] += current[:, 1:]   # col+1
        smoothed /= self._neighbor_counts

        new_heights = DAMPING * (smoothed * SMOOTHING_FACTOR + velocity)

        self._scratch[:, _Y] = new_heights.ravel()
        self._swap_buffers()

    def _swap_buffers(self) -> None:
        self._current = 1 - self._current
