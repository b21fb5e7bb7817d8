from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

from PySide6.QtWidgets import QApplication, QMainWindow, QWidget

from .models import PlotConfig
from .plot_widget import FunctionPlotWidget


class PlotWindow(QMainWindow):
    """Top-level window hosting a ``FunctionPlotWidget``."""

    def __init__(
        self,
        parent: Optional[QWidget] = None,
        *,
        config: Optional[PlotConfig] = None,
    ) -> None:
        super().__init__(parent)
        config = config or PlotConfig()
        self.setWindowTitle(config.title)
        self.setMinimumSize(*config.minimum_size)

        self.plot = FunctionPlotWidget(config=config)
        self.setCentralWidget(self.plot)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Show the plot window and run the Qt event loop."""
    logging.basicConfig(level=logging.WARNING)

    app = QApplication.instance() or QApplication(list(argv or sys.argv))
    window = PlotWindow()
    window.resize(800, 600)
    window.show()
    return app.exec()
