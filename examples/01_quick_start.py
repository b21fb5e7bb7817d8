#!/usr/bin/env python3
"""Quick Start Example

This example shows the most basic usage of pyfuncplotqt:
- Creating a plot widget
- Picking the initial dash style
- Reacting to style changes
- Displaying the plot
"""

import sys

from PySide6 import QtWidgets

from pyfuncplotqt import FunctionPlotWidget, LineStyle, PlotConfig

def main():
    """Run the quick start example."""
    app = QtWidgets.QApplication(sys.argv)

    # Start with a dashed curve
    plot = FunctionPlotWidget(config=PlotConfig(line_style=LineStyle.DASH))
    plot.setWindowTitle(PlotConfig().title)

    # Print every style the user picks
    plot.lineStyleChanged.connect(lambda style: print(f"Line style: {style.label}"))

    # Show the plot
    plot.resize(800, 600)
    plot.show()
    sys.exit(app.exec())

if __name__ == "__main__":
    main()
