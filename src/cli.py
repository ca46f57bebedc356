from __future__ import annotations

import argparse
import logging
from datetime import date
from pathlib import Path
from typing import Optional, Sequence

from dataio.loaders import load_price_frame
from export.excel import export_to_excel
from indicators.rsi import compute_rsi
from ingest.synthetic import InvalidHorizon, generate_history
from market.instruments import (
    INDEX_SYMBOL,
    LONGEST_TIME_FRAME,
    TIME_FRAMES,
    UnknownInstrument,
    Universe,
    build_universe,
)
from settings import EXPORT_DIR, configure_logging, make_rng
from viz.static import render_pngs

log = logging.getLogger("cli")


def _symbol(raw: str) -> str:
    # "IBEX35" / "ibex-35" are accepted for the index
    norm = raw.strip().upper().replace("-", " ")
    if norm.replace(" ", "") == INDEX_SYMBOL.replace(" ", ""):
        return INDEX_SYMBOL
    return norm


def series(base: float, days: int, seed: Optional[int] = None, today: Optional[date] = None,
           with_rsi: bool = False) -> None:
    rng = make_rng(seed)
    points = generate_history(base, days, rng=rng, today=today)
    if with_rsi:
        rsi = compute_rsi(points, rng=rng)
        print("date,price,rsi")
        for p, r in zip(points, rsi):
            print(f"{p.timestamp.isoformat()},{p.value:.2f},{r.value:.2f}")
    else:
        print("date,price")
        for p in points:
            print(f"{p.timestamp.isoformat()},{p.value:.2f}")


def export(universe: Universe, symbol: str, time_frame: str, out_dir: str) -> Path:
    inst = universe.get(symbol)
    return export_to_excel(inst.series(time_frame), inst.symbol, out_dir)


def plot(universe: Universe, symbol: str, time_frame: str, out_dir: str, seed: Optional[int] = None):
    inst = universe.get(symbol)
    points = inst.series(time_frame)
    pf = load_price_frame(points, compute_rsi(points, rng=make_rng(seed)))
    return render_pngs(pf, inst.symbol, time_frame, out_dir)


def main(argv: Optional[Sequence[str]] = None) -> None:
    ap = argparse.ArgumentParser(prog="ibex-dashboard")
    ap.add_argument("--log-level", default=None)
    sub = ap.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("series", help="print a synthetic price history as CSV")
    s.add_argument("--base", type=float, required=True)
    s.add_argument("--days", type=int, required=True)
    s.add_argument("--seed", type=int, default=None)
    s.add_argument("--today", type=date.fromisoformat, default=None, help="YYYY-MM-DD (default: today)")
    s.add_argument("--rsi", action="store_true", help="add the RSI column")

    e = sub.add_parser("export", help="write precios_historicos_<symbol>.xlsx")
    e.add_argument("--symbol", default="TEF")
    e.add_argument("--time-frame", choices=list(TIME_FRAMES), default=LONGEST_TIME_FRAME)
    e.add_argument("--out-dir", default=EXPORT_DIR)
    e.add_argument("--seed", type=int, default=None)

    p = sub.add_parser("plot", help="render price + RSI charts as PNG")
    p.add_argument("--symbol", default=INDEX_SYMBOL)
    p.add_argument("--time-frame", choices=list(TIME_FRAMES), default="1M")
    p.add_argument("--out-dir", default="output/visuals")
    p.add_argument("--seed", type=int, default=None)

    args = ap.parse_args(argv)
    configure_logging(args.log_level)
    log.debug("running %s", args.cmd)

    if args.cmd == "series":
        try:
            series(args.base, args.days, seed=args.seed, today=args.today, with_rsi=args.rsi)
        except InvalidHorizon as exc:
            ap.error(str(exc))
        return

    universe = build_universe(rng=make_rng(args.seed))
    try:
        if args.cmd == "export":
            out = export(universe, _symbol(args.symbol), args.time_frame, args.out_dir)
            print(f"Wrote {out}")
        elif args.cmd == "plot":
            price_png, rsi_png = plot(universe, _symbol(args.symbol), args.time_frame, args.out_dir, seed=args.seed)
            print(f"Wrote {price_png}")
            print(f"Wrote {rsi_png}")
    except UnknownInstrument as exc:
        ap.error(f"unknown symbol {exc.args[0]!r}; choose from: {', '.join(universe.symbols)}")


if __name__ == "__main__":
    main()
