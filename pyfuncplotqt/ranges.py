from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np

from .models import DEFAULT_RANGE, EPSILON, AxisRange, Point

logger = logging.getLogger(__name__)

PADDING = 1.0


def reduce_range(points: Sequence[Point]) -> Optional[AxisRange]:
    """Compute the y range of ``points``.

    Non-finite y values are ignored. Zero-width ranges are widened by
    ``PADDING`` on each side; with no finite value at all the result is
    ``DEFAULT_RANGE``.

    Args:
        points: Sampled points.

    Returns:
        AxisRange with ``max > min``, or ``None`` when ``points`` is empty.
    """
    if not points:
        return None

    ys = np.asarray([p.y for p in points], dtype=float)
    finite = ys[np.isfinite(ys)]
    if finite.size == 0:
        logger.debug("No finite y values, using default %s", DEFAULT_RANGE)
        return DEFAULT_RANGE

    lo = float(finite.min())
    hi = float(finite.max())
    if hi - lo >= EPSILON:
        return AxisRange(lo, hi)

    new_lo, new_hi = lo - PADDING, hi + PADDING
    if new_hi <= new_lo:
        # 1.0 is lost to rounding at this magnitude
        pad = max(abs(lo), abs(hi)) * 1e-9
        new_lo, new_hi = lo - pad, hi + pad
    if not (np.isfinite(new_lo) and np.isfinite(new_hi)) or new_hi <= new_lo:
        logger.debug("Degenerate y range, using default %s", DEFAULT_RANGE)
        return DEFAULT_RANGE

    logger.debug("Padded degenerate y range to [%g, %g]", new_lo, new_hi)
    return AxisRange(new_lo, new_hi)
