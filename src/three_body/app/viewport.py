"""2D star canvas backed by VisPy."""

from __future__ import annotations

import numpy as np
from PySide6 import QtCore, QtWidgets
from vispy import app, scene

from .sim_controller import FrameData

app.use_app("pyside6")


class StarCanvasWidget(QtWidgets.QWidget):
    """Draws bodies as filled discs in screen pixel coordinates.

    Visuals are parented to the canvas root scene, so positions are pixels
    with the origin at the top-left corner and y pointing down.
    """

    key_pressed = QtCore.Signal(str)

    def __init__(
        self,
        parent: QtWidgets.QWidget | None = None,
        bgcolor: str = "#000000",
    ) -> None:
        super().__init__(parent)

        self._canvas = scene.SceneCanvas(
            keys=None,
            bgcolor=bgcolor,
            size=(800, 600),
        )
        self._stars = scene.visuals.Markers(parent=self._canvas.scene)
        self._stars.set_gl_state("translucent", depth_test=False)
        self._stars.visible = False
        self._canvas.events.key_press.connect(self._on_key_press)

        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self._canvas.native)
        self._canvas.native.setFocusPolicy(QtCore.Qt.FocusPolicy.StrongFocus)

    def canvas_size(self) -> tuple[int, int]:
        width, height = self._canvas.size
        return int(width), int(height)

    def set_frame(self, frame: FrameData) -> None:
        if frame.count == 0:
            self._stars.visible = False
            self._canvas.update()
            return
        self._stars.antialias = 1.0 if frame.antialias else 0.0
        self._stars.set_data(
            np.asarray(frame.positions, dtype=np.float32),
            size=2.0 * np.asarray(frame.radii, dtype=np.float32),
            face_color=frame.colors,
            edge_width=0.0,
        )
        self._stars.visible = True
        self._canvas.update()

    def focus_canvas(self) -> None:
        self._canvas.native.setFocus()

    def _on_key_press(self, event: object) -> None:
        key = getattr(event, "key", None)
        if key is None:
            return
        self.key_pressed.emit(str(key.name))
