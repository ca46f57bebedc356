# src/ingest/synthetic.py
from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import List, Optional

import numpy as np

from settings import make_rng
from viz.contracts import PricePoint

log = logging.getLogger(__name__)

# max daily move as a fraction of the base price
STEP_FRACTION = 0.01


class InvalidHorizon(ValueError):
    """Raised when a negative (or non-integer) day count is requested."""


def _check_horizon(horizon_days) -> int:
    if isinstance(horizon_days, bool) or not isinstance(horizon_days, (int, np.integer)):
        raise InvalidHorizon(f"horizon_days must be an integer, got {horizon_days!r}")
    if horizon_days < 0:
        raise InvalidHorizon(f"horizon_days must be >= 0, got {horizon_days}")
    return int(horizon_days)


def generate_history(
    base_price: float,
    horizon_days: int,
    rng: Optional[np.random.Generator] = None,
    today: Optional[date] = None,
) -> List[PricePoint]:
    """
    Random-walk price history from `horizon_days` days ago through `today`.

    Each day after the first moves the price by uniform(-1, 1) * 1% of the
    base price. The walk compounds on the unrounded value; emitted values
    are rounded to cents. Prices are not clamped and may go negative.
    """
    days = _check_horizon(horizon_days)
    if rng is None:
        rng = make_rng()
    if today is None:
        today = date.today()

    step = float(base_price) * STEP_FRACTION
    current = float(base_price)
    points: List[PricePoint] = []
    for i in range(days, -1, -1):
        if points:
            current += rng.uniform(-1.0, 1.0) * step
        points.append(PricePoint(timestamp=today - timedelta(days=i), value=round(current, 2)))

    log.debug("generated %d points from base %.2f ending %s", len(points), base_price, today)
    return points

