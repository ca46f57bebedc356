from typing import Optional, Sequence

import numpy as np
import pandas as pd
from viz.contracts import OscillatorPoint, PriceFrame, PricePoint

NEEDED = ["close", "rsi"]

def load_price_frame(
    points: Sequence[PricePoint],
    oscillator: Optional[Sequence[OscillatorPoint]] = None,
) -> PriceFrame:
    idx = pd.DatetimeIndex([pd.Timestamp(p.timestamp) for p in points], name="date")
    df = pd.DataFrame({"close": [p.value for p in points]}, index=idx, dtype=float)
    if oscillator is not None:
        if len(oscillator) != len(points):
            raise ValueError(f"oscillator has {len(oscillator)} points, prices have {len(points)}")
        df["rsi"] = [o.value for o in oscillator]
    for c in NEEDED:
        if c not in df.columns:
            df[c] = np.nan
    return PriceFrame(df=df[NEEDED].sort_index())
