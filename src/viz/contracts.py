from dataclasses import dataclass
from datetime import date

import pandas as pd


@dataclass(frozen=True)
class PricePoint:
    timestamp: date
    value: float


@dataclass(frozen=True)
class OscillatorPoint:
    timestamp: date
    value: float


@dataclass(frozen=True)
class PriceFrame:
    df: pd.DataFrame  # index: DatetimeIndex; cols: close, rsi
