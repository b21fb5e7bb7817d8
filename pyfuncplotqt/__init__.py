from .models import (
    Point,
    Domain,
    AxisRange,
    PlotArea,
    LineStyle,
    PlotStyle,
    PlotConfig,
    DEFAULT_RANGE,
)

from .sampling import evaluate, sample
from .ranges import reduce_range
from .transform import to_screen, to_screen_xy
from .renderer import PlotLayout, PlotRenderer, Tick, compute_layout, render_image
from .plot_widget import FunctionPlotWidget
from .app import PlotWindow, main

__all__ = [
    "Point",
    "Domain",
    "AxisRange",
    "PlotArea",
    "LineStyle",
    "PlotStyle",
    "PlotConfig",
    "DEFAULT_RANGE",
    # Numeric core
    "evaluate",
    "sample",
    "reduce_range",
    "to_screen",
    "to_screen_xy",
    # Rendering
    "Tick",
    "PlotLayout",
    "PlotRenderer",
    "compute_layout",
    "render_image",
    # Qt widgets
    "FunctionPlotWidget",
    "PlotWindow",
    "main",
]
