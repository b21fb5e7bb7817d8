"""Mapping from data coordinates to pixel coordinates."""

from __future__ import annotations

from typing import Tuple

from PySide6.QtCore import QPointF

from .models import AxisRange, PlotArea, Point


def to_screen_xy(
    point: Point, area: PlotArea, x_range: AxisRange, y_range: AxisRange
) -> Tuple[float, float]:
    """Map ``point`` into ``area``; pixel y is inverted.

    A zero span on either axis maps to the centre of the area on that axis.
    """
    x_span = x_range.span
    y_span = y_range.span

    if x_span == 0:
        sx = area.center_x
    else:
        sx = area.left + (point.x - x_range.min) / x_span * area.width

    if y_span == 0:
        sy = area.center_y
    else:
        sy = area.bottom - (point.y - y_range.min) / y_span * area.height

    return sx, sy


def to_screen(
    point: Point, area: PlotArea, x_range: AxisRange, y_range: AxisRange
) -> QPointF:
    sx, sy = to_screen_xy(point, area, x_range, y_range)
    return QPointF(sx, sy)
