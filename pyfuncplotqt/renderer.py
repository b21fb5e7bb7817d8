"""QPainter-based renderer for the function plot.

Rendering is split in two steps:
  - ``compute_layout`` samples the function, reduces the y range and works
    out every pixel position (gridlines, tick labels, axis lines, axis-name
    anchors, data points) as plain data.
  - ``PlotRenderer.draw`` paints that layout with a ``QPainter``.

Typical usage:

    renderer = PlotRenderer()
    painter = QPainter(widget)
    try:
        renderer.draw(painter, widget.width(), widget.height(), domain,
                      LineStyle.DASH)
    finally:
        painter.end()

Google-style docstrings + PEP8.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

import pyqtgraph as pg
from PySide6 import QtCore, QtGui
from PySide6.QtCore import QLineF, QPointF, QRectF
from PySide6.QtGui import QFont, QFontMetricsF, QImage, QPainter, QPolygonF

from .models import (
    DEFAULT_RANGE,
    AxisRange,
    Domain,
    LineStyle,
    PlotArea,
    PlotStyle,
    Point,
)
from .ranges import reduce_range
from .sampling import sample
from .transform import to_screen_xy
from .utils import format_tick_label, tick_count

logger = logging.getLogger(__name__)

_PEN_STYLES = {
    LineStyle.SOLID: QtCore.Qt.SolidLine,
    LineStyle.DASH: QtCore.Qt.DashLine,
    LineStyle.DOT: QtCore.Qt.DotLine,
    LineStyle.DASH_DOT: QtCore.Qt.DashDotLine,
    LineStyle.DASH_DOT_DOT: QtCore.Qt.DashDotDotLine,
}

# Offsets of labels from the plot border, in pixels.
_X_LABEL_GAP = 2.0
_Y_LABEL_GAP = 4.0
_AXIS_NAME_INSET = 12.0


@dataclass(frozen=True)
class Tick:
    """A gridline position and its label.

    ``position`` is pixel x for ticks on the x axis and pixel y for ticks on
    the y axis.
    """

    value: float
    position: float
    label: str


@dataclass(frozen=True)
class PlotLayout:
    """Pixel geometry of one frame of the plot."""

    area: PlotArea
    x_range: AxisRange
    y_range: AxisRange
    x_ticks: Tuple[Tick, ...]
    y_ticks: Tuple[Tick, ...]
    x_axis_y: Optional[float]  # pixel y of the y = 0 line, if visible
    y_axis_x: Optional[float]  # pixel x of the x = 0 line, if visible
    x_name_pos: Tuple[float, float]
    y_name_pos: Tuple[float, float]
    points: Tuple[Point, ...]
    screen_points: Tuple[Tuple[float, float], ...]

    @property
    def has_data(self) -> bool:
        return bool(self.points)


def tick_values(axis_range: AxisRange) -> List[float]:
    """Values of the ticks along an axis, both ends included."""
    ticks = tick_count(axis_range.span)
    return [axis_range.min + i * axis_range.span / ticks for i in range(ticks + 1)]


def build_layout(
    points: Sequence[Point],
    x_range: AxisRange,
    y_range: AxisRange,
    area: PlotArea,
) -> PlotLayout:
    """Compute the pixel layout for already sampled points and ranges."""
    x_ticks = []
    for xv in tick_values(x_range):
        sx, _ = to_screen_xy(Point(xv, 0.0), area, x_range, y_range)
        x_ticks.append(Tick(xv, sx, format_tick_label(xv)))

    y_ticks = []
    for yv in tick_values(y_range):
        _, sy = to_screen_xy(Point(0.0, yv), area, x_range, y_range)
        y_ticks.append(Tick(yv, sy, format_tick_label(yv)))

    origin_x, origin_y = to_screen_xy(Point(0.0, 0.0), area, x_range, y_range)
    x_axis_y = origin_y if y_range.contains(0.0) else None
    y_axis_x = origin_x if x_range.contains(0.0) else None

    # "x" sits at the right end of the y = 0 line, "y" at the top of x = 0;
    # otherwise they are pinned to the bottom-right / top-left corners.
    if x_axis_y is not None:
        x_name_pos = (area.right - _AXIS_NAME_INSET, x_axis_y - _Y_LABEL_GAP)
    else:
        x_name_pos = (area.right - _AXIS_NAME_INSET, area.bottom - _Y_LABEL_GAP)
    if y_axis_x is not None:
        y_name_pos = (y_axis_x + _Y_LABEL_GAP, area.top + _AXIS_NAME_INSET)
    else:
        y_name_pos = (area.left + _Y_LABEL_GAP, area.top + _AXIS_NAME_INSET)

    screen_points = tuple(
        to_screen_xy(p, area, x_range, y_range) for p in points
    )

    return PlotLayout(
        area=area,
        x_range=x_range,
        y_range=y_range,
        x_ticks=tuple(x_ticks),
        y_ticks=tuple(y_ticks),
        x_axis_y=x_axis_y,
        y_axis_x=y_axis_x,
        x_name_pos=x_name_pos,
        y_name_pos=y_name_pos,
        points=tuple(points),
        screen_points=screen_points,
    )


def compute_layout(
    domain: Domain,
    width: float,
    height: float,
    *,
    padding: float = PlotStyle.padding,
    top_reserved: float = 0.0,
) -> PlotLayout:
    """Sample ``domain`` and lay the plot out in a ``width`` x ``height`` client.

    With no valid samples the y range falls back to ``DEFAULT_RANGE`` and the
    layout carries no points.
    """
    area = PlotArea.from_client(width, height, padding, top_reserved)
    points = sample(domain)
    y_range = reduce_range(points)
    if y_range is None:
        logger.debug("No valid samples for %s; drawing axes only", domain)
        y_range = DEFAULT_RANGE
    logger.debug(
        "Layout: %d points, x=[%g, %g], y=[%g, %g]",
        len(points),
        domain.x_min,
        domain.x_max,
        y_range.min,
        y_range.max,
    )
    return build_layout(points, domain.x_range, y_range, area)


@contextmanager
def painter_state(
    painter: QPainter,
    *,
    pen: Optional[QtGui.QPen] = None,
    brush: Optional[QtGui.QBrush] = None,
    font: Optional[QFont] = None,
) -> Iterator[QPainter]:
    """Temporarily apply pen/brush/font, restoring the painter on exit."""
    painter.save()
    try:
        if pen is not None:
            painter.setPen(pen)
        if brush is not None:
            painter.setBrush(brush)
        if font is not None:
            painter.setFont(font)
        yield painter
    finally:
        painter.restore()


class PlotRenderer:
    """Paints the function plot with a QPainter.

    Args:
        style: Colors, widths, font and padding. Defaults to ``PlotStyle()``.
    """

    def __init__(self, style: Optional[PlotStyle] = None) -> None:
        self.style = style or PlotStyle()

    def line_pen(self, line_style: LineStyle) -> QtGui.QPen:
        """Pen for the function polyline in the given dash style."""
        if not isinstance(line_style, LineStyle):
            raise TypeError(f"Expected LineStyle, got {type(line_style)}")
        return pg.mkPen(
            color=self.style.line_color,
            width=self.style.line_width,
            style=_PEN_STYLES[line_style],
        )

    def draw(
        self,
        painter: QPainter,
        width: float,
        height: float,
        domain: Domain,
        line_style: LineStyle,
        top_reserved: float = 0.0,
    ) -> Optional[PlotLayout]:
        """Draw the whole plot into a ``width`` x ``height`` client area.

        Args:
            painter: Active painter on the target device.
            width: Client width in pixels.
            height: Client height in pixels.
            domain: Sampling domain; also the x range.
            line_style: Dash style of the polyline.
            top_reserved: Height of controls overlaying the top of the client.

        Returns:
            The layout that was painted, or ``None`` for an empty client.
        """
        if width <= 0 or height <= 0:
            return None

        pen = self.line_pen(line_style)
        layout = compute_layout(
            domain,
            width,
            height,
            padding=self.style.padding,
            top_reserved=top_reserved,
        )

        painter.setRenderHint(QPainter.Antialiasing, True)
        painter.setRenderHint(QPainter.TextAntialiasing, True)

        self._draw_axes(painter, layout)
        if layout.has_data:
            self._draw_curve(painter, layout, pen)
        return layout

    def _draw_axes(self, painter: QPainter, layout: PlotLayout) -> None:
        """Draw border, gridlines, tick labels, zero lines and axis names."""
        area = layout.area
        thin_pen = pg.mkPen(color=self.style.grid_color, width=self.style.grid_width)
        axis_pen = pg.mkPen(color=self.style.axis_color, width=self.style.axis_width)
        text_pen = pg.mkPen(color=self.style.text_color)
        font = QFont(self.style.font_family, self.style.font_size)
        metrics = QFontMetricsF(font)

        with painter_state(painter, pen=thin_pen, brush=QtGui.QBrush(QtCore.Qt.NoBrush)):
            painter.drawRect(QRectF(area.left, area.top, area.width, area.height))
            for tick in layout.x_ticks:
                painter.drawLine(QLineF(tick.position, area.top, tick.position, area.bottom))
            for tick in layout.y_ticks:
                painter.drawLine(QLineF(area.left, tick.position, area.right, tick.position))

        with painter_state(painter, pen=text_pen, font=font):
            for tick in layout.x_ticks:
                w = metrics.horizontalAdvance(tick.label)
                painter.drawText(
                    QPointF(
                        tick.position - w / 2.0,
                        area.bottom + _X_LABEL_GAP + metrics.ascent(),
                    ),
                    tick.label,
                )
            for tick in layout.y_ticks:
                w = metrics.horizontalAdvance(tick.label)
                painter.drawText(
                    QPointF(
                        area.left - w - _Y_LABEL_GAP,
                        tick.position - metrics.height() / 2.0 + metrics.ascent(),
                    ),
                    tick.label,
                )
            painter.drawText(QPointF(*layout.x_name_pos), "x")
            painter.drawText(QPointF(*layout.y_name_pos), "y")

        with painter_state(painter, pen=axis_pen):
            if layout.x_axis_y is not None:
                painter.drawLine(
                    QLineF(area.left, layout.x_axis_y, area.right, layout.x_axis_y)
                )
            if layout.y_axis_x is not None:
                painter.drawLine(
                    QLineF(layout.y_axis_x, area.top, layout.y_axis_x, area.bottom)
                )

    def _draw_curve(
        self, painter: QPainter, layout: PlotLayout, pen: QtGui.QPen
    ) -> None:
        """Stroke the polyline (or a lone circle) and the point markers."""
        r = self.style.point_radius
        screen = [QPointF(sx, sy) for sx, sy in layout.screen_points]

        with painter_state(painter, pen=pen, brush=QtGui.QBrush(QtCore.Qt.NoBrush)):
            if len(screen) >= 2:
                painter.drawPolyline(QPolygonF(screen))
            elif len(screen) == 1:
                painter.drawEllipse(screen[0], r, r)

        with painter_state(
            painter,
            pen=QtGui.QPen(QtCore.Qt.NoPen),
            brush=pg.mkBrush(self.style.marker_color),
        ):
            for p in screen:
                painter.drawEllipse(p, r, r)


def render_image(
    width: int,
    height: int,
    line_style: LineStyle = LineStyle.SOLID,
    *,
    domain: Optional[Domain] = None,
    style: Optional[PlotStyle] = None,
) -> Tuple[QImage, Optional[PlotLayout]]:
    """Paint the plot into an in-memory image.

    A ``QGuiApplication`` must exist (fonts need it).

    Returns:
        Tuple of (image, layout).
    """
    renderer = PlotRenderer(style)
    image = QImage(int(width), int(height), QImage.Format_ARGB32)
    image.fill(pg.mkColor(renderer.style.background_color))

    painter = QPainter(image)
    try:
        layout = renderer.draw(
            painter, width, height, domain or Domain(), line_style
        )
    finally:
        painter.end()
    return image, layout
