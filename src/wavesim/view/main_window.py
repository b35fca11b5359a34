"""
Main Application Window
=======================
The primary GUI container that holds the control panel and the 3D view.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It forwards every processed frame from the control panel to the
   3D surface widget.
"""
from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QSplitter
from PySide6.QtCore import Qt
from PySide6.QtGui import QAction, QCloseEvent

from wavesim import config
from wavesim.controller.driver import FrameDriver
from wavesim.view.widgets.plot_3d import PyVistaWidget
from wavesim.view.panels.control_panel import SimulationControlPanel


class MainWindow(QMainWindow):
    def __init__(self, driver: FrameDriver) -> None:
        super().__init__()
        self.driver: FrameDriver = driver

        dim = self.driver.grid.dimension
        self.setWindowTitle(f"{config.VISIBLE_APP_NAME} - [{dim}x{dim}]")
        self.resize(1400, 900)

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        self.setCentralWidget(main_widget)

        main_layout = QVBoxLayout(main_widget)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        splitter = QSplitter(Qt.Horizontal)
        main_layout.addWidget(splitter)

        # --- LEFT SIDE: Controls ---
        self.control_panel = SimulationControlPanel(self.driver)
        splitter.addWidget(self.control_panel)

        # --- RIGHT SIDE: 3D Visualization ---
        self.visualizer = PyVistaWidget()
        splitter.addWidget(self.visualizer)

        # Set initial proportions (1 part sidebar : 4 parts 3D view)
        splitter.setSizes([300, 1100])

        # --- SIGNAL CONNECTIONS ---
        self.control_panel.frame_ready.connect(self.visualizer.update_points)

        self._create_actions()
        self._create_menus()

        # Initial Render
        self.visualizer.set_surface(self.driver.snapshot(), self.driver.grid.triangle_indices)

    def _create_actions(self) -> None:
        self.act_start = QAction("Start / Stop", self)
        self.act_start.setShortcut("Space")
        self.act_start.triggered.connect(self.control_panel.toggle_running)

        self.act_wave = QAction("Wave", self)
        self.act_wave.setShortcut("W")
        self.act_wave.triggered.connect(self.control_panel.on_wave_clicked)

        self.act_exit = QAction("Exit", self)
        self.act_exit.triggered.connect(self.close)

    def _create_menus(self) -> None:
        menu_bar = self.menuBar()

        sim_menu = menu_bar.addMenu("&Simulation")
        sim_menu.addAction(self.act_start)
        sim_menu.addAction(self.act_wave)
        sim_menu.addSeparator()
        sim_menu.addAction(self.act_exit)

    def closeEvent(self, event: QCloseEvent) -> None:
        self.control_panel.stop()
        self.visualizer.close()
        event.accept()
