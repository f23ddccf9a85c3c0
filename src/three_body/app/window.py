"""Main window for the desktop app."""

from __future__ import annotations

import logging

from PySide6 import QtCore, QtGui, QtWidgets

import numpy as np

from ..io.config import SimulationConfig
from .sim_controller import SimulationController, parse_star_count
from .viewport import StarCanvasWidget


logger = logging.getLogger(__name__)

_QT_KEYS = {
    QtCore.Qt.Key.Key_R: "r",
    QtCore.Qt.Key.Key_P: "p",
    QtCore.Qt.Key.Key_A: "a",
    QtCore.Qt.Key.Key_Z: "z",
    QtCore.Qt.Key.Key_Left: "left",
    QtCore.Qt.Key.Key_Right: "right",
    QtCore.Qt.Key.Key_Up: "up",
    QtCore.Qt.Key.Key_Down: "down",
}


class MainWindow(QtWidgets.QMainWindow):
    def __init__(
        self,
        config: SimulationConfig | None = None,
        number_of_stars: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        super().__init__()
        self.resize(1200, 800)
        self.setWindowTitle("Three Body")

        self._config = config or SimulationConfig()
        self._controller = SimulationController(config=self._config, rng=rng)
        self._timer = QtCore.QTimer(self)
        self._timer.setInterval(self._config.frame_interval_ms)
        self._timer.timeout.connect(self._on_tick)

        self._canvas = StarCanvasWidget(self, bgcolor=self._config.background_color)
        self._canvas.key_pressed.connect(self._on_key)
        self.setCentralWidget(self._canvas)

        self._build_toolbar()
        if number_of_stars is not None:
            self._stars_edit.setText(str(number_of_stars))
        self._restart()
        self._timer.start()
        self._canvas.focus_canvas()

    def _build_toolbar(self) -> None:
        self._toolbar = QtWidgets.QToolBar("Main", self)
        self._toolbar.setMovable(False)
        self.addToolBar(QtCore.Qt.ToolBarArea.TopToolBarArea, self._toolbar)

        stars_label = QtWidgets.QLabel("Stars")
        stars_label.setContentsMargins(6, 0, 6, 0)
        self._toolbar.addWidget(stars_label)

        self._stars_edit = QtWidgets.QLineEdit(self)
        self._stars_edit.setText(str(self._config.default_number_of_stars))
        self._stars_edit.setMaximumWidth(80)
        self._stars_edit.setValidator(
            QtGui.QIntValidator(0, self._config.max_number_of_stars, self)
        )
        self._stars_edit.returnPressed.connect(self._on_restart)
        self._toolbar.addWidget(self._stars_edit)

        self._action_restart = QtGui.QAction("Restart", self)
        self._action_restart.triggered.connect(self._on_restart)
        self._toolbar.addAction(self._action_restart)

        self._toolbar.addSeparator()

        self._action_pause = QtGui.QAction("Pause", self)
        self._action_pause.setCheckable(True)
        self._action_pause.triggered.connect(self._on_pause)
        self._toolbar.addAction(self._action_pause)

        self._action_reset = QtGui.QAction("Reset", self)
        self._action_reset.triggered.connect(self._on_reset)
        self._toolbar.addAction(self._action_reset)

        self._toolbar.addSeparator()
        hint = QtWidgets.QLabel("R reset  P pause  A/Z zoom  arrows pan")
        hint.setContentsMargins(6, 0, 6, 0)
        self._toolbar.addWidget(hint)

    def keyPressEvent(self, event: QtGui.QKeyEvent) -> None:  # noqa: N802
        name = _QT_KEYS.get(QtCore.Qt.Key(event.key()))
        if name is None:
            super().keyPressEvent(event)
            return
        self._on_key(name)

    def _restart(self) -> None:
        n = parse_star_count(self._stars_edit.text(), self._config)
        self._stars_edit.setText(str(n))
        self._sync_viewport()
        try:
            self._controller.reset(n)
        except ValueError as exc:  # pragma: no cover - Qt error path
            logger.exception("restart failed")
            QtWidgets.QMessageBox.critical(self, "Restart Failed", str(exc))
            return
        self._redraw()

    def _on_restart(self) -> None:
        self._restart()
        self._update_action_state()
        self._canvas.focus_canvas()

    def _on_pause(self) -> None:
        self._controller.toggle_pause()
        self._update_action_state()
        self._canvas.focus_canvas()

    def _on_reset(self) -> None:
        self._on_key("r")
        self._canvas.focus_canvas()

    def _on_key(self, name: str) -> None:
        if name.lower() == "r":
            self._sync_viewport()
        if not self._controller.handle_key(name):
            return
        self._redraw()
        self._update_action_state()

    def _on_tick(self) -> None:
        self._sync_viewport()
        if self._controller.tick():
            self._redraw()
        self._update_status()

    def _sync_viewport(self) -> None:
        width, height = self._canvas.canvas_size()
        self._controller.set_viewport(width, height)

    def _redraw(self) -> None:
        self._canvas.set_frame(self._controller.render_data())

    def _update_action_state(self) -> None:
        self._action_pause.setChecked(self._controller.paused)

    def _update_status(self) -> None:
        info = self._controller.diagnostics()
        if "stars" not in info:
            self.statusBar().showMessage("No simulation")
            return
        msg = (
            f"stars={info['stars']}  t={info['time']:.2f}s  frame={info['frame']}  "
            f"zoom={info['scale']:.3f}  KE={info['kinetic_energy']:.4g}  "
            f"|p|={info['momentum']:.3g}"
        )
        if info["paused"]:
            msg += "  PAUSED"
        self.statusBar().showMessage(msg)
