# src/viz/static.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Tuple, Union

# Headless plotting backend (CI/server safe)
import matplotlib
matplotlib.use("Agg")  # noqa: E402
import matplotlib.pyplot as plt  # noqa: E402

from indicators.rsi import OVERBOUGHT, OVERSOLD  # noqa: E402
from viz.charts import PRICE_COLOR, RSI_COLOR  # noqa: E402
from viz.contracts import PriceFrame  # noqa: E402

log = logging.getLogger(__name__)

__all__ = ["render_pngs", "png_stem"]


def png_stem(symbol: str) -> str:
    """'IBEX 35' -> 'ibex_35'"""
    return symbol.strip().lower().replace(" ", "_")


def _plot_price(pf: PriceFrame, symbol: str, time_frame: str, out_png: Path) -> None:
    df = pf.df
    fig = plt.figure()
    ax = fig.add_subplot(111)
    ax.plot(df.index, df["close"], color=PRICE_COLOR, label="Precio")
    ax.set_title(f"Evolución {symbol} ({time_frame})")
    ax.set_xlabel("Fecha")
    ax.set_ylabel("EUR")
    ax.grid(linestyle="--", alpha=0.5)
    ax.legend()
    fig.autofmt_xdate()
    out_png.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out_png, bbox_inches="tight")
    plt.close(fig)


def _plot_rsi(pf: PriceFrame, symbol: str, time_frame: str, out_png: Path) -> None:
    df = pf.df
    fig = plt.figure(figsize=(6.4, 2.4))
    ax = fig.add_subplot(111)
    ax.plot(df.index, df["rsi"].astype(float), color=RSI_COLOR, label="RSI")
    ax.axhline(OVERBOUGHT, color="red", linestyle="--", linewidth=1)
    ax.axhline(OVERSOLD, color="red", linestyle="--", linewidth=1)
    ax.set_ylim(0, 100)
    ax.set_yticks([0, OVERSOLD, OVERBOUGHT, 100])
    ax.set_title(f"RSI {symbol} ({time_frame})")
    ax.set_ylabel("RSI")
    ax.grid(linestyle="--", alpha=0.5)
    fig.autofmt_xdate()
    out_png.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out_png, bbox_inches="tight")
    plt.close(fig)


def render_pngs(
    pf: PriceFrame,
    symbol: str,
    time_frame: str,
    out_dir: Union[str, Path] = "output/visuals",
) -> Tuple[Path, Path]:
    """
    Writes (under out_dir/<symbol>/):
      - price_<tf>.png
      - rsi_<tf>.png
    Returns both paths (price first).
    """
    target_dir = Path(out_dir) / png_stem(symbol)
    price_png = target_dir / f"price_{time_frame.lower()}.png"
    rsi_png = target_dir / f"rsi_{time_frame.lower()}.png"
    _plot_price(pf, symbol, time_frame, price_png)
    _plot_rsi(pf, symbol, time_frame, rsi_png)
    log.info("wrote %s and %s", price_png, rsi_png)
    return price_png, rsi_png
