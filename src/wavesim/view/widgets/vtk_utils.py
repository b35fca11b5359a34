"""
VTK and Geometry Utilities
Helper functions for converting the wave grid buffers into PyVista data.
"""
import numpy as np
import numpy.typing as npt
import pyvista as pv

import logging

logger = logging.getLogger(__name__)


class VtkUtils:
    @staticmethod
    def triangles_to_faces(triangles: npt.NDArray[np.integer]) -> npt.NDArray[np.int64]:
        """
        Converts a flat triangle index list into the VTK cell array layout.

        Args:
            triangles: Flat array of vertex indices, three per triangle.

        Returns:
            Flat array [3, a, b, c, 3, d, e, f, ...] as expected by pv.PolyData.

        Raises:
            ValueError: If the index count is not a multiple of 3.
        """
        tri = np.asarray(triangles, dtype=np.int64).ravel()
        if tri.size % 3 != 0:
            raise ValueError(f"Triangle index count must be a multiple of 3, got {tri.size}.")

        tri = tri.reshape(-1, 3)
        sizes = np.full((tri.shape[0], 1), 3, dtype=np.int64)
        return np.hstack((sizes, tri)).ravel()

    @staticmethod
    def build_surface(
        points: npt.NDArray[np.float64],
        triangles: npt.NDArray[np.integer]
    ) -> pv.PolyData:
        """
        Builds a triangulated surface from an (N, 3) point array and a flat triangle list.
        """
        pts = np.array(points, dtype=np.float64).reshape(-1, 3)
        surface = pv.PolyData(pts, VtkUtils.triangles_to_faces(triangles))
        logger.debug(f"Built surface with {surface.n_points} points and {surface.n_cells} cells.")
        return surface
