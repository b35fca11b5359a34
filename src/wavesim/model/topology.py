"""
Grid Topology Builder
=====================
Generates the static vertex lattice and the triangle index list of a square grid.

Why is this file needed?
------------------------
1. Layout: The water surface is a regular lattice. Its X/Z coordinates and its
   triangulation never change, so they are built exactly once per grid.
2. Rendering: The triangle list is what a renderer needs to draw the lattice
   as a surface mesh.

Note: This module should be pure NumPy and should NOT import PySide6.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Tuple

import numpy as np

from wavesim.model.errors import InvalidConfigurationError

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

# Smallest lattice that still has interior cells on every side
MIN_DIMENSION: int = 5


def validate_dimension(dimension: int) -> int:
    """
    Check that a grid dimension is usable.

    Args:
        dimension: Number of cells along each axis.

    Returns:
        The dimension as a plain int.

    Raises:
        InvalidConfigurationError: If the dimension is not an integer or is below MIN_DIMENSION.
    """
    if isinstance(dimension, bool) or not isinstance(dimension, (int, np.integer)):
        raise InvalidConfigurationError(f"Dimension must be an integer, got {dimension!r}.")
    if dimension < MIN_DIMENSION:
        raise InvalidConfigurationError(f"Dimension must be at least {MIN_DIMENSION}, got {dimension}.")
    return int(dimension)


def build_lattice(dimension: int) -> Tuple[npt.NDArray[np.float64], npt.NDArray[np.int32]]:
    """
    Build the flat point buffer and the triangle index list of a square lattice.

    Points are stored row-major: the point at (row, col) lives at index
    ``row * dimension + col`` and has coordinates (X=col, Y=0, Z=row).

    For every cell with row > 0 and col > 0 two triangles are emitted, closing
    the quad formed with its row-1 / col-1 neighbours:

        A = (idx - dim - 1, idx, idx - dim)
        B = (idx - dim - 1, idx - 1, idx)

    Args:
        dimension: Number of cells along each axis.

    Returns:
        (points, triangles): a (dimension**2, 3) float array and a flat int array
        of length 6 * (dimension - 1)**2.

    Raises:
        InvalidConfigurationError: If the dimension is too small.
    """
    dim = validate_dimension(dimension)

    rows, cols = np.meshgrid(np.arange(dim), np.arange(dim), indexing="ij")
    points = np.zeros((dim * dim, 3), dtype=np.float64)
    points[:, 0] = cols.ravel()
    points[:, 2] = rows.ravel()

    # Flat index of every cell that completes a quad, in construction order
    idx = (rows[1:, 1:] * dim + cols[1:, 1:]).ravel()
    triangles = np.column_stack((
        idx - dim - 1, idx, idx - dim,  # Triangle A
        idx - dim - 1, idx - 1, idx,    # Triangle B
    )).astype(np.int32).ravel()

    logger.debug(f"Built lattice {dim}x{dim}: {len(points)} points, {len(triangles) // 3} triangles.")
    return points, triangles


def neighbor_counts(dimension: int) -> npt.NDArray[np.float64]:
    """
    Number of existing cardinal neighbours of every cell.

    Returns:
        (dimension, dimension) array holding 2 at corners, 3 on edges and 4 inside.
    """
    dim = validate_dimension(dimension)
    counts = np.full((dim, dim), 4.0, dtype=np.float64)
    counts[0, :] -= 1.0
    counts[-1, :] -= 1.0
    counts[:, 0] -= 1.0
    counts[:, -1] -= 1.0
    return counts
