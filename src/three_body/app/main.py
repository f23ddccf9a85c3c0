"""Desktop app launcher."""

from __future__ import annotations

import sys

import numpy as np
from PySide6 import QtWidgets

from ..io.config import SimulationConfig
from .window import MainWindow


def run_app(
    config: SimulationConfig | None = None,
    number_of_stars: int | None = None,
    seed: int | None = None,
) -> int:
    qt_app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(sys.argv)
    window = MainWindow(
        config=config,
        number_of_stars=number_of_stars,
        rng=np.random.default_rng(seed),
    )
    window.show()
    return int(qt_app.exec())
