"""
Application Initialization
==========================
This module wires the simulation core to the Qt front end and starts the
Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the settings (model) and the frame driver (controller).
2. Instantiates the Main Window (View), passing the driver in.
3. Prevents circular import errors by being the orchestrator.
"""
import logging
import sys
from PySide6.QtWidgets import QApplication

from wavesim import config
from wavesim.controller.driver import FrameDriver
from wavesim.logging_config import setup_logging
from wavesim.model.state import SimulationSettings
from wavesim.view.main_window import MainWindow


def main() -> None:
    # 1. Setup Logging (Console + Optional File)
    # Use logging.DEBUG to see every frame during development
    setup_logging(level=logging.INFO)

    # 2. Create the Qt Application
    app = QApplication(sys.argv)
    app.setApplicationName(config.VISIBLE_APP_NAME)

    # 3. Initialize the simulation
    settings = SimulationSettings()
    driver = FrameDriver.from_settings(settings)

    # 4. Initialize the Main Window, passing the driver
    window = MainWindow(driver)
    window.show()

    # 5. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
