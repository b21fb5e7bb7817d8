"""Function plot widget with a line style selector.

The widget paints the sampled function with ``PlotRenderer`` on every paint
event. A dropdown in the top-left corner picks the dash style of the curve;
it is the only piece of state the widget keeps between repaints.

Typical usage:

    plot = FunctionPlotWidget()
    plot.lineStyleChanged.connect(lambda style: print(style.label))
    plot.set_line_style(LineStyle.DASH_DOT)

Google-style docstrings + PEP8.
"""

from __future__ import annotations

import logging
from typing import Optional

from PySide6 import QtGui
from PySide6.QtCore import Signal
from PySide6.QtGui import QPainter
from PySide6.QtWidgets import QComboBox, QWidget

from .models import Domain, LineStyle, PlotConfig
from .renderer import PlotLayout, PlotRenderer

logger = logging.getLogger(__name__)

_SELECTOR_MARGIN = 8


class FunctionPlotWidget(QWidget):
    """Widget that draws the plotted function.

    Attributes:
        lineStyleChanged: Signal emitted with the new ``LineStyle`` when the
            selector changes.
    """

    lineStyleChanged = Signal(object)

    def __init__(
        self,
        parent: Optional[QWidget] = None,
        *,
        config: Optional[PlotConfig] = None,
    ) -> None:
        """Initialize the plot widget.

        Args:
            parent: Parent widget.
            config: Plot configuration. Defaults to ``PlotConfig()``.
        """
        super().__init__(parent)

        self._config = config or PlotConfig()
        self._renderer = PlotRenderer(self._config.style)
        self._line_style = self._config.line_style
        self._last_layout: Optional[PlotLayout] = None

        self.setMinimumSize(*self._config.minimum_size)
        palette = self.palette()
        palette.setColor(
            QtGui.QPalette.Window, QtGui.QColor(self._config.style.background_color)
        )
        self.setPalette(palette)
        self.setAutoFillBackground(True)

        self._build_ui()

    def _build_ui(self) -> None:
        """Build the line style selector."""
        self.style_combo = QComboBox(self)
        self.style_combo.addItems(LineStyle.labels())
        self.style_combo.setCurrentIndex(self._line_style.index)
        self.style_combo.adjustSize()
        self.style_combo.move(_SELECTOR_MARGIN, _SELECTOR_MARGIN)
        self.style_combo.currentIndexChanged.connect(self._on_style_index_changed)

    @property
    def domain(self) -> Domain:
        return self._config.domain

    @property
    def line_style(self) -> LineStyle:
        """Currently selected dash style."""
        return self._line_style

    @property
    def last_layout(self) -> Optional[PlotLayout]:
        """Layout painted by the most recent paint event, if any."""
        return self._last_layout

    def set_line_style(self, style: LineStyle) -> None:
        """Select ``style`` in the dropdown, which triggers a redraw.

        Raises:
            TypeError: If ``style`` is not a ``LineStyle``.
        """
        if not isinstance(style, LineStyle):
            raise TypeError(f"Expected LineStyle, got {type(style)}")
        self.style_combo.setCurrentIndex(style.index)

    def _on_style_index_changed(self, index: int) -> None:
        """Handle selector change: the single place the line style mutates."""
        if index < 0:
            return
        style = LineStyle.from_index(index)
        if style is self._line_style:
            return
        logger.debug("Line style changed: %s -> %s", self._line_style, style)
        self._line_style = style
        self.lineStyleChanged.emit(style)
        self.update()

    def _top_reserved(self) -> int:
        if self.style_combo.isVisible():
            return self.style_combo.geometry().bottom()
        return 0

    def resizeEvent(self, event: QtGui.QResizeEvent) -> None:
        super().resizeEvent(event)
        self.update()

    def paintEvent(self, event: QtGui.QPaintEvent) -> None:
        painter = QPainter(self)
        try:
            self._last_layout = self._renderer.draw(
                painter,
                self.width(),
                self.height(),
                self._config.domain,
                self._line_style,
                top_reserved=self._top_reserved(),
            )
        finally:
            painter.end()
