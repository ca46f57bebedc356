# src/tests/test_rsi.py
from datetime import date, timedelta

import numpy as np
import pytest

from indicators.rsi import RSI_PERIOD, compute_rsi, rsi_zone
from ingest.synthetic import generate_history
from viz.contracts import PricePoint


def _series(values, start=date(2025, 1, 1)):
    return [PricePoint(start + timedelta(days=i), float(v)) for i, v in enumerate(values)]


def test_empty_series_gives_empty_output(rng):
    assert compute_rsi([], rng=rng) == []


def test_single_point_is_one_warmup_reading(rng):
    pts = _series([100.0])
    out = compute_rsi(pts, rng=rng)
    assert len(out) == 1
    assert out[0].timestamp == pts[0].timestamp
    assert 40.0 <= out[0].value <= 60.0


def test_timestamps_aligned(rng, today):
    pts = generate_history(11.24, 90, rng=rng, today=today)
    out = compute_rsi(pts, rng=rng)
    assert [o.timestamp for o in out] == [p.timestamp for p in pts]


def test_warmup_readings_near_fifty(rng):
    out = compute_rsi(_series(range(100, 130)), rng=rng)
    for o in out[:RSI_PERIOD]:
        assert 40.0 <= o.value <= 60.0


@pytest.mark.parametrize("seed", range(10))
def test_steady_state_within_bounds(today, seed):
    r = np.random.default_rng(seed)
    # volatile: big base so trend*2 hits both clamps
    pts = generate_history(10000.0, 365, rng=r, today=today)
    out = compute_rsi(pts, rng=r)
    for o in out[RSI_PERIOD:]:
        assert 0.0 <= o.value <= 100.0


def test_follows_price_direction_when_unclamped(rng, today):
    # small base keeps the oscillator away from the clamps over 90 days
    pts = generate_history(10.0, 90, rng=rng, today=today)
    out = compute_rsi(pts, rng=rng)
    for i in range(RSI_PERIOD, len(pts)):
        dp = pts[i].value - pts[i - 1].value
        do = out[i].value - out[i - 1].value
        assert np.sign(do) == np.sign(dp)


def test_recurrence_is_previous_plus_twice_trend(mid_rng):
    prices = [100.0] * RSI_PERIOD + [101.0, 100.5, 103.0]
    out = compute_rsi(_series(prices), rng=mid_rng)
    vals = [o.value for o in out]
    assert vals[:RSI_PERIOD] == [50.0] * RSI_PERIOD
    assert vals[RSI_PERIOD:] == pytest.approx([52.0, 51.0, 56.0])


def test_rising_prices_rise_then_hold_at_100(mid_rng):
    out = compute_rsi(_series(range(100, 300, 10)), rng=mid_rng)
    after = [o.value for o in out[RSI_PERIOD:]]
    assert after == [70.0, 90.0, 100.0, 100.0, 100.0, 100.0]


def test_rising_by_one_is_monotonic(rng):
    out = compute_rsi(_series(range(100, 120)), rng=rng)
    after = [o.value for o in out[RSI_PERIOD - 1:]]
    assert all(b > a for a, b in zip(after, after[1:]))


def test_falling_prices_clamp_at_zero(mid_rng):
    out = compute_rsi(_series(range(300, 100, -10)), rng=mid_rng)
    assert [o.value for o in out[-3:]] == [0.0, 0.0, 0.0]


def test_custom_period(mid_rng):
    out = compute_rsi(_series([10, 11, 12, 13]), rng=mid_rng, period=2)
    assert [o.value for o in out] == [50.0, 50.0, 52.0, 54.0]


@pytest.mark.parametrize("value,zone", [
    (0.0, "oversold"), (30.0, "oversold"), (30.1, "neutral"),
    (50.0, "neutral"), (70.0, "overbought"), (100.0, "overbought"),
])
def test_rsi_zone(value, zone):
    assert rsi_zone(value) == zone


@pytest.mark.parametrize("period", [0, -1, 1.5, None, True])
def test_rejects_non_positive_period(rng, period):
    with pytest.raises(ValueError):
        compute_rsi(_series([100.0, 101.0]), rng=rng, period=period)


def test_rejects_bad_period_even_on_empty_input(rng):
    with pytest.raises(ValueError):
        compute_rsi([], rng=rng, period=0)
