"""
Main Application Window
=======================
The GUI container that hosts the 3D view and drives the frame loop.

Why is this file needed?
------------------------
1. Layout: It holds the PyVista widget as its central widget.
2. Routing: It turns Qt key events into key names for the key bindings.
3. Frame loop: A QTimer advances the animation and refreshes the scene.
"""
import logging

from PySide6.QtWidgets import QMainWindow
from PySide6.QtCore import Qt, QTimer, QElapsedTimer, QEvent, QObject
from PySide6.QtGui import QKeyEvent, QCloseEvent, QResizeEvent

from lorenzattractor.config import FRAME_INTERVAL_MS, WINDOW_TITLE, WINDOW_SIZE
from lorenzattractor.controller.keybindings import handle_key
from lorenzattractor.model.state import LorenzState
from lorenzattractor.view.widgets.plot_3d import PyVistaWidget

logger = logging.getLogger(__name__)

ARROW_KEYS = {
    int(Qt.Key_Left): "left",
    int(Qt.Key_Right): "right",
    int(Qt.Key_Up): "up",
    int(Qt.Key_Down): "down",
}


class MainWindow(QMainWindow):
    def __init__(self, state: LorenzState) -> None:
        super().__init__()
        self.state: LorenzState = state

        self.setWindowTitle(WINDOW_TITLE)

        # --- Shared 3D Visualization ---
        self.visualizer = PyVistaWidget()
        self.setCentralWidget(self.visualizer)
        self.resize(*WINDOW_SIZE)

        # Keys must not reach VTK's own handlers ('q' quits, 'r' resets the camera...)
        self.visualizer.plotter.installEventFilter(self)

        # --- Frame loop ---
        self.clock = QElapsedTimer()
        self.clock.start()

        self.timer = QTimer(self)
        self.timer.setInterval(FRAME_INTERVAL_MS)
        self.timer.timeout.connect(self.advance_frame)

        # The animation starts counting from window creation
        if self.state.animation.enabled:
            self.state.animation.enable(self.now())

        # Initial Render
        self.visualizer.update_scene(self.state, force=True)
        self.timer.start()

    def now(self) -> float:
        """Seconds since the window was created."""
        return self.clock.elapsed() / 1000.0

    def advance_frame(self) -> None:
        self.state.tick(self.now())
        self.visualizer.update_scene(self.state)

    # --- INPUT ---

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        if event.type() == QEvent.KeyPress:
            self.keyPressEvent(event)
            return True
        return super().eventFilter(watched, event)

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if event.key() == Qt.Key_Escape:
            self.close()
            return

        key = ARROW_KEYS.get(int(event.key()), event.text())
        if key and handle_key(self.state, key, self.now()):
            self.visualizer.update_scene(self.state)
        else:
            super().keyPressEvent(event)

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        self.state.set_aspect(self.visualizer.width(), self.visualizer.height())

    def closeEvent(self, event: QCloseEvent, /) -> None:
        """Stop the frame loop and close the PyVista plotter safely."""
        self.timer.stop()
        if self.visualizer and self.visualizer.plotter:
            self.visualizer.plotter.close()
        event.accept()
