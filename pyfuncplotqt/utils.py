from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext

import numpy as np

MIN_TICKS = 2
MAX_TICKS = 20


def clamp(value: float, vmin: float, vmax: float) -> float:
    """Clamp to [vmin, vmax]; non-finite values map to vmin."""
    v = float(value)
    if not np.isfinite(v):
        return float(vmin)
    return float(np.clip(v, vmin, vmax))


def tick_count(span: float) -> int:
    """Number of tick intervals for an axis span, within [2, 20]."""
    return int(clamp(np.ceil(span), MIN_TICKS, MAX_TICKS))


def format_tick_label(value: float) -> str:
    """Format a tick value with at most two decimals, trailing zeros trimmed.

    Ties round away from zero (0.125 -> "0.13").
    """
    if not np.isfinite(value):
        return str(value)
    with localcontext() as ctx:
        ctx.prec = 400
        rounded = Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    text = f"{rounded:f}".rstrip("0").rstrip(".")
    if text in ("", "-0"):
        return "0"
    return text
