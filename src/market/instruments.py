# src/market/instruments.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

import numpy as np

from ingest.synthetic import generate_history
from settings import make_rng
from viz.contracts import PricePoint

log = logging.getLogger(__name__)

# label -> horizon in days (1 día, 1 semana, 1 mes, 3 meses, 1 año)
TIME_FRAMES: Dict[str, int] = {
    "1D": 1,
    "1S": 7,
    "1M": 30,
    "3M": 90,
    "1A": 365,
}
DEFAULT_TIME_FRAME = "1D"
LONGEST_TIME_FRAME = "1A"

INDEX_SYMBOL = "IBEX 35"
INDEX_NAME = "IBEX 35"
INDEX_BASE = 10000.0

# symbol, name, price, change, change %
SAMPLE_QUOTES: List[Tuple[str, str, float, float, float]] = [
    ("SAN", "Banco Santander", 3.85, 0.45, 1.23),
    ("TEF", "Telefónica", 3.62, -0.12, -0.89),
    ("IBE", "Iberdrola", 11.24, 0.28, 2.15),
    ("BBVA", "BBVA", 8.12, 0.15, 1.78),
    ("ITX", "Inditex", 42.65, 1.23, 3.12),
    ("REP", "Repsol", 14.85, -0.32, -2.11),
]


class UnknownInstrument(KeyError):
    pass


@dataclass(frozen=True)
class Instrument:
    symbol: str
    name: str
    price: float
    change: float
    change_percent: float
    history: Mapping[str, Tuple[PricePoint, ...]] = field(repr=False)

    def series(self, time_frame: str) -> List[PricePoint]:
        return list(self.history[time_frame])


@dataclass(frozen=True)
class Universe:
    index: Instrument
    stocks: Tuple[Instrument, ...]

    def find(self, symbol: str) -> Optional[Instrument]:
        if symbol == self.index.symbol:
            return self.index
        for s in self.stocks:
            if s.symbol == symbol:
                return s
        return None

    def get(self, symbol: str) -> Instrument:
        inst = self.find(symbol)
        if inst is None:
            raise UnknownInstrument(symbol)
        return inst

    @property
    def symbols(self) -> List[str]:
        return [self.index.symbol] + [s.symbol for s in self.stocks]


def build_time_frames(
    base_price: float,
    rng: Optional[np.random.Generator] = None,
    today: Optional[date] = None,
) -> Mapping[str, Tuple[PricePoint, ...]]:
    """Each time frame is an independent walk, not a slice of the longest one."""
    if rng is None:
        rng = make_rng()
    frames = {
        label: tuple(generate_history(base_price, days, rng=rng, today=today))
        for label, days in TIME_FRAMES.items()
    }
    return MappingProxyType(frames)


def make_instrument(
    symbol: str,
    name: str,
    price: float,
    change: float,
    change_percent: float,
    rng: Optional[np.random.Generator] = None,
    today: Optional[date] = None,
    base_price: Optional[float] = None,
) -> Instrument:
    return Instrument(
        symbol=symbol,
        name=name,
        price=price,
        change=change,
        change_percent=change_percent,
        history=build_time_frames(price if base_price is None else base_price, rng=rng, today=today),
    )


def build_universe(
    rng: Optional[np.random.Generator] = None,
    today: Optional[date] = None,
) -> Universe:
    if rng is None:
        rng = make_rng()
    stocks = tuple(
        make_instrument(sym, name, price, chg, pct, rng=rng, today=today)
        for sym, name, price, chg, pct in SAMPLE_QUOTES
    )
    # the index has no quote of its own; derive it from its 1D series
    index_frames = build_time_frames(INDEX_BASE, rng=rng, today=today)
    first, last = index_frames[DEFAULT_TIME_FRAME][0].value, index_frames[DEFAULT_TIME_FRAME][-1].value
    index = Instrument(
        symbol=INDEX_SYMBOL,
        name=INDEX_NAME,
        price=last,
        change=round(last - first, 2),
        change_percent=round((last / first - 1.0) * 100.0, 2) if first else 0.0,
        history=index_frames,
    )
    log.info("built universe: %d stocks + %s", len(stocks), INDEX_SYMBOL)
    return Universe(index=index, stocks=stocks)


__all__ = [
    "TIME_FRAMES",
    "DEFAULT_TIME_FRAME",
    "LONGEST_TIME_FRAME",
    "INDEX_SYMBOL",
    "SAMPLE_QUOTES",
    "Instrument",
    "Universe",
    "UnknownInstrument",
    "build_time_frames",
    "build_universe",
    "make_instrument",
]
