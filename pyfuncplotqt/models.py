"""Data models for the function plot.

Provides frozen dataclasses for the sampled points, the sampling domain,
axis ranges, the pixel plot area, and the style/config defaults used by
the renderer and the widget. Nothing here imports Qt, so the numeric core
can be used and tested without a display.

Google-style docstrings + PEP8.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

# Compensates floating-point drift in step arithmetic and range checks.
EPSILON = 1e-12

# Minimum pixel size of the plot area on either axis.
MIN_AREA_SIZE = 10


@dataclass(frozen=True)
class Point:
    """A sampled (x, y) pair in data coordinates."""

    x: float
    y: float


@dataclass(frozen=True)
class Domain:
    """Sampling domain: bounds and step along the x axis.

    A non-positive ``step`` or ``x_min > x_max`` is not an error; sampling
    simply produces no points.
    """

    x_min: float = 2.5
    x_max: float = 9.0
    step: float = 0.8

    @property
    def x_range(self) -> "AxisRange":
        return AxisRange(self.x_min, self.x_max)


@dataclass(frozen=True)
class AxisRange:
    """Numeric range of one axis.

    Ranges produced by ``ranges.reduce_range`` always satisfy
    ``max > min``; ranges built directly may have a zero span.
    """

    min: float
    max: float

    @property
    def span(self) -> float:
        return self.max - self.min

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max


DEFAULT_RANGE = AxisRange(-1.0, 1.0)


@dataclass(frozen=True)
class PlotArea:
    """Pixel rectangle the data is mapped into (y grows downward)."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def center_x(self) -> float:
        return self.left + self.width / 2.0

    @property
    def center_y(self) -> float:
        return self.top + self.height / 2.0

    @classmethod
    def from_client(
        cls,
        width: float,
        height: float,
        padding: float,
        top_reserved: float = 0.0,
    ) -> "PlotArea":
        """Build the plot area inside a client rectangle.

        Args:
            width: Client width in pixels.
            height: Client height in pixels.
            padding: Inside padding applied on every side.
            top_reserved: Height taken by controls at the top of the client
                (e.g. the line style selector). When positive, the plot
                starts ``padding`` pixels below it instead of at ``padding``.

        Returns:
            PlotArea whose width and height are at least ``MIN_AREA_SIZE``.
        """
        top = top_reserved + padding if top_reserved > 0 else padding
        return cls(
            left=float(padding),
            top=float(top),
            width=float(max(MIN_AREA_SIZE, width - 2 * padding)),
            height=float(max(MIN_AREA_SIZE, height - top - padding)),
        )


class LineStyle(Enum):
    """Dash pattern of the function's polyline.

    Values are the labels shown in the style selector.
    """

    SOLID = "Solid"
    DASH = "Dash"
    DOT = "Dot"
    DASH_DOT = "DashDot"
    DASH_DOT_DOT = "DashDotDot"

    @property
    def label(self) -> str:
        return self.value

    @property
    def index(self) -> int:
        return list(LineStyle).index(self)

    @classmethod
    def labels(cls) -> List[str]:
        return [style.value for style in cls]

    @classmethod
    def from_label(cls, label: str) -> "LineStyle":
        """Look up a style by its selector label.

        Raises:
            ValueError: If ``label`` is not one of ``LineStyle.labels()``.
        """
        for style in cls:
            if style.value == label:
                return style
        raise ValueError(
            f"Unknown line style {label!r}; expected one of {cls.labels()}"
        )

    @classmethod
    def from_index(cls, index: int) -> "LineStyle":
        styles = list(cls)
        if not 0 <= index < len(styles):
            raise ValueError(f"Line style index out of range: {index}")
        return styles[index]


@dataclass(frozen=True)
class PlotStyle:
    """Colors, pen widths, fonts and spacing used when painting."""

    background_color: str = "#ffffff"
    line_color: str = "#0000ff"
    line_width: float = 2.0
    marker_color: str = "#ff0000"
    point_radius: float = 2.5
    grid_color: str = "#808080"
    grid_width: float = 1.0
    axis_color: str = "#000000"
    axis_width: float = 1.5
    text_color: str = "#000000"
    font_family: str = "Segoe UI"
    font_size: int = 9
    padding: int = 40


@dataclass(frozen=True)
class PlotConfig:
    """Overall plot window configuration."""

    title: str = "Plot: y = (1.5x - ln(2x)) / (3x + 1)"
    domain: Domain = Domain()
    style: PlotStyle = PlotStyle()
    line_style: LineStyle = LineStyle.SOLID
    minimum_size: Tuple[int, int] = (400, 300)
