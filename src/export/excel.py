# src/export/excel.py
from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Sequence, Union

import pandas as pd

from viz.contracts import PricePoint

log = logging.getLogger(__name__)

EXCEL_ENGINE = "openpyxl"
XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
# Excel's hard limit on sheet names
MAX_SHEET_NAME = 31


def export_filename(symbol: str) -> str:
    return f"precios_historicos_{symbol.lower()}.xlsx"


def sheet_name(symbol: str) -> str:
    return f"Precios {symbol}"[:MAX_SHEET_NAME]


def price_column(symbol: str) -> str:
    return f"Precio {symbol} (EUR)"


def export_rows(points: Sequence[PricePoint], symbol: str) -> pd.DataFrame:
    """One row per day: Fecha (date), Precio <SYMBOL> (EUR)."""
    return pd.DataFrame(
        {
            "Fecha": [p.timestamp for p in points],
            price_column(symbol): [p.value for p in points],
        }
    )


def _write(df: pd.DataFrame, target, symbol: str) -> None:
    with pd.ExcelWriter(target, engine=EXCEL_ENGINE) as writer:
        df.to_excel(writer, sheet_name=sheet_name(symbol), index=False)


def to_excel_bytes(points: Sequence[PricePoint], symbol: str) -> bytes:
    """Workbook bytes for a browser download (st.download_button)."""
    buf = io.BytesIO()
    _write(export_rows(points, symbol), buf, symbol)
    return buf.getvalue()


def export_to_excel(points: Sequence[PricePoint], symbol: str, out_dir: Union[str, Path] = ".") -> Path:
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    out_path = out_dir / export_filename(symbol)
    _write(export_rows(points, symbol), out_path, symbol)
    log.info("exported %d rows for %s to %s", len(points), symbol, out_path)
    return out_path

