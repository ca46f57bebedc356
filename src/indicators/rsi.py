# src/indicators/rsi.py
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

import numpy as np

from settings import make_rng
from viz.contracts import OscillatorPoint, PricePoint

log = logging.getLogger(__name__)

RSI_PERIOD = 14
OVERBOUGHT = 70.0
OVERSOLD = 30.0

# warm-up readings are 50 +/- this amount
WARMUP_SPREAD = 10.0
TREND_GAIN = 2.0


def compute_rsi(
    points: Sequence[PricePoint],
    rng: Optional[np.random.Generator] = None,
    period: int = RSI_PERIOD,
) -> List[OscillatorPoint]:
    """
    Simplified momentum oscillator shown as "RSI" on the dashboard.

    NOTE: this is not Wilder's RSI. The first `period` readings are random
    values around 50; after that each reading is the previous one plus twice
    the day's price change, clamped to [0, 100]. Warm-up readings are not
    clamped (they can only fall in [40, 60]).
    """
    if isinstance(period, bool) or not isinstance(period, int) or period < 1:
        raise ValueError(f"period must be a positive integer, got {period!r}")
    if not points:
        return []
    if rng is None:
        rng = make_rng()

    out: List[OscillatorPoint] = []
    for i, point in enumerate(points):
        if i < period:
            value = 50.0 + rng.uniform(-WARMUP_SPREAD, WARMUP_SPREAD)
        else:
            trend = point.value - points[i - 1].value
            value = out[i - 1].value + trend * TREND_GAIN
            value = max(0.0, min(100.0, value))
        out.append(OscillatorPoint(timestamp=point.timestamp, value=float(value)))

    log.debug("computed %d oscillator readings (period=%d)", len(out), period)
    return out


def rsi_zone(value: float) -> str:
    if value >= OVERBOUGHT:
        return "overbought"
    if value <= OVERSOLD:
        return "oversold"
    return "neutral"


__all__ = ["compute_rsi", "rsi_zone", "RSI_PERIOD", "OVERBOUGHT", "OVERSOLD"]
