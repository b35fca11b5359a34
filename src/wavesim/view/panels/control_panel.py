from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QLabel, QPushButton, QSlider, QGroupBox, QFormLayout, QHBoxLayout
)
from PySide6.QtCore import Qt, Signal, QTimer, QElapsedTimer
import logging

from wavesim import config
from wavesim.controller.driver import FrameDriver

logger = logging.getLogger(__name__)


class SimulationControlPanel(QWidget):
    # Signal: (positions) emitted after every processed frame
    frame_ready = Signal(object)

    def __init__(self, driver: FrameDriver) -> None:
        super().__init__()
        self.driver = driver
        self.settings = driver.settings

        # Frame clock. The timer fires often; the driver decides when a frame is due.
        self.clock = QElapsedTimer()
        self.timer = QTimer()
        self.timer.setInterval(config.TIMER_INTERVAL_MS)
        self.timer.timeout.connect(self.on_timer)

        layout = QVBoxLayout(self)

        # --- Run ---
        grp_run = QGroupBox("Simulation")
        l_run = QVBoxLayout(grp_run)

        hbox_buttons = QHBoxLayout()
        self.btn_start = QPushButton("Start")
        self.btn_start.setMinimumHeight(40)
        self.btn_start.clicked.connect(self.toggle_running)
        hbox_buttons.addWidget(self.btn_start)

        self.btn_wave = QPushButton("Wave")
        self.btn_wave.setMinimumHeight(40)
        self.btn_wave.clicked.connect(self.on_wave_clicked)
        hbox_buttons.addWidget(self.btn_wave)
        l_run.addLayout(hbox_buttons)

        self.lbl_status = QLabel("Stopped.")
        self.lbl_status.setAlignment(Qt.AlignCenter)
        l_run.addWidget(self.lbl_status)

        layout.addWidget(grp_run)

        # --- Raindrops ---
        grp_drops = QGroupBox("Raindrops")
        form_drops = QFormLayout(grp_drops)

        self.slider_peak, self.lbl_peak = self._make_slider(
            config.PEAK_HEIGHT_RANGE, round(self.settings.peak_height), self.on_peak_height_changed
        )
        form_drops.addRow("Peak height:", self._with_label(self.slider_peak, self.lbl_peak))

        self.slider_drops, self.lbl_drops = self._make_slider(
            config.DROPS_PER_SECOND_RANGE, round(self.settings.drops_per_second), self.on_drops_changed
        )
        form_drops.addRow("Drops / second:", self._with_label(self.slider_drops, self.lbl_drops))

        # A drop may not be wider than half the grid
        size_range = (config.DROP_SIZE_RANGE[0], min(config.DROP_SIZE_RANGE[1], self.driver.grid.dimension // 2))
        self.slider_size, self.lbl_size = self._make_slider(
            size_range, self.settings.drop_size, self.on_drop_size_changed
        )
        form_drops.addRow("Drop size:", self._with_label(self.slider_size, self.lbl_size))

        layout.addWidget(grp_drops)
        layout.addStretch()

    def _make_slider(self, value_range, value, slot):
        slider = QSlider(Qt.Horizontal)
        slider.setRange(*value_range)
        slider.setValue(int(value))
        label = QLabel(str(slider.value()))
        label.setMinimumWidth(40)
        slider.valueChanged.connect(slot)
        return slider, label

    @staticmethod
    def _with_label(slider: QSlider, label: QLabel) -> QWidget:
        box = QWidget()
        hbox = QHBoxLayout(box)
        hbox.setContentsMargins(0, 0, 0, 0)
        hbox.addWidget(slider)
        hbox.addWidget(label)
        return box

    # --- Slots ---

    def toggle_running(self) -> None:
        """Start/stop animation."""
        if not self.driver.is_running:
            self.driver.start()
            self.frame_ready.emit(self.driver.snapshot())
            self.clock.start()
            self.timer.start()
            self.btn_start.setText("Stop")
            self.lbl_status.setText("Running...")
        else:
            self.stop()

    def stop(self) -> None:
        self.timer.stop()
        if self.driver.is_running:
            self.driver.stop()
        self.btn_start.setText("Start")
        self.lbl_status.setText(f"Stopped after {self.driver.frames_processed} frames.")

    def on_timer(self) -> None:
        if self.driver.tick(float(self.clock.elapsed())):
            self.frame_ready.emit(self.driver.snapshot())

    def on_wave_clicked(self) -> None:
        self.driver.induce_wave()

    def on_peak_height_changed(self, value: int) -> None:
        # Negative amplitude: each drop makes a little tower of water jump up
        self.settings.set_peak_height(value)
        self.lbl_peak.setText(str(value))

    def on_drops_changed(self, value: int) -> None:
        self.settings.set_drops_per_second(value)
        self.lbl_drops.setText(str(value))

    def on_drop_size_changed(self, value: int) -> None:
        self.settings.set_drop_size(value)
        self.lbl_size.setText(str(value))
