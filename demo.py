import sys

from PySide6.QtCore import Qt
from PySide6.QtGui import QStandardItemModel, QStandardItem
from PySide6.QtWidgets import (
    QApplication,
    QMainWindow,
    QWidget,
    QSplitter,
    QVBoxLayout,
    QLabel,
    QTableView,
)

from pyfuncplotqt import FunctionPlotWidget, PlotConfig, reduce_range, sample


def main():
    app = QApplication(sys.argv)
    config = PlotConfig()

    win = QMainWindow()
    win.setWindowTitle(config.title)

    plot = FunctionPlotWidget(config=config)

    # Right side: sampled points
    points = sample(config.domain)
    model = QStandardItemModel(len(points), 2)
    model.setHorizontalHeaderLabels(["x", "y"])
    for row, p in enumerate(points):
        model.setItem(row, 0, QStandardItem(f"{p.x:.4f}"))
        model.setItem(row, 1, QStandardItem(f"{p.y:.6f}"))

    table = QTableView()
    table.setModel(model)
    table.setEditTriggers(QTableView.NoEditTriggers)

    y_range = reduce_range(points)
    info = QLabel()

    def show_info(style):
        span = f"y in [{y_range.min:.4f}, {y_range.max:.4f}]" if y_range else "no data"
        info.setText(f"{len(points)} point(s), {span}, line: {style.label}")

    plot.lineStyleChanged.connect(show_info)
    show_info(plot.line_style)

    side = QWidget()
    side_layout = QVBoxLayout(side)
    side_layout.addWidget(info)
    side_layout.addWidget(table, 1)

    splitter = QSplitter(Qt.Horizontal)
    splitter.addWidget(plot)
    splitter.addWidget(side)
    splitter.setStretchFactor(0, 3)
    splitter.setStretchFactor(1, 1)

    win.setCentralWidget(splitter)
    win.resize(1100, 650)
    win.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
