"""
3D Visualization Widget (PyVista Wrapper) - Water Surface
"""

from __future__ import annotations

from typing import Optional, Tuple

import logging
import numpy as np
import numpy.typing as npt

from PySide6.QtWidgets import QWidget, QVBoxLayout
from PySide6.QtGui import QCloseEvent

from pyvistaqt import QtInteractor
import pyvista as pv

from wavesim import config
from wavesim.view.widgets.vtk_utils import VtkUtils

logger = logging.getLogger(__name__)


class PyVistaWidget(QWidget):
    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)

        self.layout_box: QVBoxLayout = QVBoxLayout(self)
        self.layout_box.setContentsMargins(0, 0, 0, 0)

        self.plotter: QtInteractor = QtInteractor(self)
        self.layout_box.addWidget(self.plotter)

        self._init_plotter()

        # --- Actors state ---
        self._surface: Optional[pv.PolyData] = None
        self._surface_actor: Optional[pv.Actor] = None

        # Camera step for one wheel notch, fixed when the surface is first shown
        self._zoom_delta: Optional[Tuple[float, float, float]] = None

        self._attach_observers()

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def set_surface(
        self,
        points: npt.NDArray[np.float64],
        triangles: npt.NDArray[np.integer],
        reset_camera: bool = True
    ) -> None:
        """
        Replaces the displayed surface. Called once per grid, since the
        triangulation never changes afterwards.
        """
        logger.info("Creating water surface actor.")
        if self._surface_actor is not None:
            self.plotter.remove_actor(self._surface_actor)

        self._surface = VtkUtils.build_surface(points, triangles)
        self._surface_actor = self.plotter.add_mesh(
            self._surface,
            color="#2a6fdb",
            specular=0.5,
            show_edges=False,
            show_scalar_bar=False,
            pickable=False,
        )

        if reset_camera:
            self._reset_camera()

        self.plotter.render()

    def update_points(self, points: npt.NDArray[np.float64]) -> None:
        """Pushes new vertex positions into the existing surface (triangles unchanged)."""
        if self._surface is None:
            return
        self._surface.points = np.asarray(points, dtype=np.float64).reshape(-1, 3)
        self.plotter.render()

    def zoom(self, direction: int) -> None:
        """
        Moves the camera along its look direction by a fixed step.

        Args:
            direction: Positive to zoom in, negative to zoom out.
        """
        if self._zoom_delta is None or direction == 0:
            return

        sign = 1.0 if direction > 0 else -1.0
        cam = self.plotter.camera
        cam.position = tuple(p + sign * d for p, d in zip(cam.position, self._zoom_delta))
        self.plotter.render()

    # ------------------------------------------------------------------------------
    # Internal: Setup & Observers
    # ------------------------------------------------------------------------------

    def _init_plotter(self) -> None:
        self.plotter.set_background("black")
        self.plotter.add_light(pv.Light(position=(0.0, 1.0, 1.0), light_type="scene light", intensity=0.6))

    def _reset_camera(self) -> None:
        # Heights live on Y, so look down onto the X/Z plane at an angle
        self.plotter.camera_position = "xz"
        self.plotter.camera.up = (0.0, 1.0, 0.0)
        self.plotter.camera.elevation = 35.0
        self.plotter.reset_camera()

        cam = self.plotter.camera
        look = np.subtract(cam.focal_point, cam.position)
        self._zoom_delta = tuple(float(v) for v in config.ZOOM_PCT_EACH_WHEEL_CHANGE * look)

    def _attach_observers(self) -> None:
        iren = self.plotter.iren
        # Replace the default dolly-on-wheel with fixed steps
        iren.interactor.RemoveObservers("MouseWheelForwardEvent")
        iren.interactor.RemoveObservers("MouseWheelBackwardEvent")
        iren.add_observer("MouseWheelForwardEvent", lambda *_: self.zoom(1))
        iren.add_observer("MouseWheelBackwardEvent", lambda *_: self.zoom(-1))

    def closeEvent(self, event: QCloseEvent) -> None:
        self.plotter.close()
        event.accept()
