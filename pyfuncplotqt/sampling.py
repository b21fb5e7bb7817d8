"""Sampling of the plotted function over a domain.

The plotted function is ``y = (1.5x - ln(2x)) / (3x + 1)``. Points where the
logarithm is undefined, the denominator vanishes, or the result is not
finite are skipped rather than reported as errors.

Typical usage:

    points = sample(Domain(2.5, 9.0, 0.8))
    xs = [p.x for p in points]
"""

from __future__ import annotations

import logging
from typing import List, Optional

import numpy as np

from .models import EPSILON, Domain, Point

logger = logging.getLogger(__name__)


def evaluate(x: float) -> Optional[float]:
    """Evaluate the plotted function at ``x``.

    Args:
        x: Abscissa in data coordinates.

    Returns:
        The function value, or ``None`` when ``x`` is outside the function's
        domain (``2x <= 0`` or ``|3x + 1| < 1e-12``) or the value is not
        finite.
    """
    if 2.0 * x <= 0.0:
        return None
    denom = 3.0 * x + 1.0
    if abs(denom) < EPSILON:
        return None

    with np.errstate(over="ignore", invalid="ignore", divide="ignore"):
        y = (1.5 * x - np.log(2.0 * x)) / denom
    if not np.isfinite(y):
        return None
    return float(y)


def sample(domain: Domain) -> List[Point]:
    """Sample the plotted function over ``domain``.

    Args:
        domain: Bounds and step of the sampling grid.

    Returns:
        Valid points in increasing x order. The point at ``domain.x_max`` is
        appended when the grid does not land on it and the function is
        defined there. Returns an empty list for a non-positive step or an
        inverted domain.
    """
    points: List[Point] = []
    if domain.step <= 0:
        return points

    steps = (domain.x_max - domain.x_min) / domain.step + EPSILON
    if not np.isfinite(steps):
        return points
    n = int(np.floor(steps))
    if n < 0:
        return points

    for i in range(n + 1):
        x = domain.x_min + i * domain.step
        # floating drift
        if x < domain.x_min:
            x = domain.x_min
        elif x > domain.x_max:
            x = domain.x_max

        y = evaluate(x)
        if y is None:
            logger.debug("Skipping x=%g: outside function domain", x)
            continue
        points.append(Point(x, y))

    if not points or abs(points[-1].x - domain.x_max) > EPSILON:
        y = evaluate(domain.x_max)
        if y is not None:
            logger.debug("Appending boundary point at x=%g", domain.x_max)
            points.append(Point(float(domain.x_max), y))

    return points
