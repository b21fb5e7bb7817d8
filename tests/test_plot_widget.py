"""Tests for FunctionPlotWidget and PlotWindow."""

import pytest

from pyfuncplotqt.app import PlotWindow
from pyfuncplotqt.models import LineStyle, PlotConfig
from pyfuncplotqt.plot_widget import FunctionPlotWidget


class TestFunctionPlotWidget:
    """Tests for the line style selector wiring."""

    def test_selector_options(self, qapp):
        widget = FunctionPlotWidget()
        combo = widget.style_combo

        labels = [combo.itemText(i) for i in range(combo.count())]
        assert labels == ["Solid", "Dash", "Dot", "DashDot", "DashDotDot"]
        assert combo.currentIndex() == 0
        assert widget.line_style is LineStyle.SOLID

    def test_config_initial_style(self, qapp):
        widget = FunctionPlotWidget(config=PlotConfig(line_style=LineStyle.DOT))
        assert widget.line_style is LineStyle.DOT
        assert widget.style_combo.currentText() == "Dot"

    def test_selector_change_updates_style_and_emits(self, qapp):
        widget = FunctionPlotWidget()
        received = []
        widget.lineStyleChanged.connect(received.append)

        widget.style_combo.setCurrentIndex(3)

        assert widget.line_style is LineStyle.DASH_DOT
        assert received == [LineStyle.DASH_DOT]

    def test_set_line_style(self, qapp):
        widget = FunctionPlotWidget()
        received = []
        widget.lineStyleChanged.connect(received.append)

        widget.set_line_style(LineStyle.DASH_DOT_DOT)
        widget.set_line_style(LineStyle.DASH_DOT_DOT)

        assert widget.style_combo.currentText() == "DashDotDot"
        assert received == [LineStyle.DASH_DOT_DOT]

    def test_set_line_style_type_check(self, qapp):
        widget = FunctionPlotWidget()
        with pytest.raises(TypeError):
            widget.set_line_style("Dash")

    def test_minimum_size(self, qapp):
        widget = FunctionPlotWidget()
        assert widget.minimumWidth() == 400
        assert widget.minimumHeight() == 300

    def test_paint_records_layout(self, qapp):
        """Test that painting runs the renderer below the visible selector."""
        widget = FunctionPlotWidget()
        widget.resize(600, 400)
        widget.show()
        widget.grab()

        layout = widget.last_layout
        assert layout is not None
        assert len(layout.points) == 10
        assert layout.area.top > widget.style_combo.geometry().bottom()
        widget.close()


class TestPlotWindow:
    """Tests for PlotWindow."""

    def test_window(self, qapp):
        window = PlotWindow()
        assert window.windowTitle() == "Plot: y = (1.5x - ln(2x)) / (3x + 1)"
        assert isinstance(window.centralWidget(), FunctionPlotWidget)
        assert window.plot.domain.step == 0.8
