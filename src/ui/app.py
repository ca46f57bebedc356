# src/ui/app.py
from __future__ import annotations

import logging
from typing import List, Optional

import pandas as pd
import streamlit as st

from dataio.loaders import load_price_frame
from export.excel import XLSX_MIME, export_filename, to_excel_bytes
from indicators.rsi import compute_rsi, rsi_zone
from market.instruments import LONGEST_TIME_FRAME, TIME_FRAMES, Universe, build_universe
from settings import configure_logging, make_rng
from ui.selection import (
    Selection,
    back_to_index,
    change_time_frame,
    initial_selection,
    is_index,
    select_instrument,
)
from viz.charts import make_price_chart, make_rsi_chart

log = logging.getLogger(__name__)

EXPORT_SYMBOL = "TEF"
SEL_KEY = "selection"
TABLE_ROW_KEY = "last_table_row"
TABLE_EPOCH_KEY = "table_epoch"


# -----------------------
# Data (built once per process)
# -----------------------
@st.cache_resource(show_spinner=False)
def _universe() -> Universe:
    configure_logging()
    return build_universe(rng=make_rng())


def _fmt_signed(v: float, suffix: str) -> str:
    return f"{'+' if v >= 0 else ''}{v:.2f}{suffix}"


def _quotes_table(universe: Universe) -> pd.DataFrame:
    rows = []
    for s in universe.stocks:
        rows.append({
            "Símbolo": s.symbol,
            "Empresa": s.name,
            "Precio": f"{s.price:.2f} €",
            "Cambio": _fmt_signed(s.change, " €"),
            "Variación %": _fmt_signed(s.change_percent, "%"),
        })
    return pd.DataFrame(rows)


def _color_change(v: str) -> str:
    return "color: #dc2626" if str(v).startswith("-") else "color: #16a34a"


# -----------------------
# Selection state
# -----------------------
def _selection(universe: Universe) -> Selection:
    if SEL_KEY not in st.session_state:
        st.session_state[SEL_KEY] = initial_selection(universe)
    return st.session_state[SEL_KEY]


def _set_selection(sel: Selection) -> None:
    st.session_state[SEL_KEY] = sel


def _on_time_frame(label: str) -> None:
    _set_selection(change_time_frame(st.session_state[SEL_KEY], _universe(), label))


def _table_key() -> str:
    return f"stocks_table_{st.session_state.get(TABLE_EPOCH_KEY, 0)}"


def _on_back() -> None:
    _set_selection(back_to_index(st.session_state[SEL_KEY], _universe()))
    # new widget key clears the row highlight
    st.session_state[TABLE_EPOCH_KEY] = st.session_state.get(TABLE_EPOCH_KEY, 0) + 1
    st.session_state[TABLE_ROW_KEY] = None


def _table_pick(universe: Universe, rows: List[int]) -> Optional[str]:
    """Symbol for a newly clicked row; None if the table selection did not change."""
    row = rows[0] if rows else None
    if row == st.session_state.get(TABLE_ROW_KEY):
        return None
    st.session_state[TABLE_ROW_KEY] = row
    if row is None or row >= len(universe.stocks):
        return None
    return universe.stocks[row].symbol


# -----------------------
# APP
# -----------------------
def main() -> None:
    st.set_page_config(layout="wide", page_title="IBEX 35 - Principales Cotizaciones")
    universe = _universe()
    sel = _selection(universe)

    st.title("IBEX 35 - Principales Cotizaciones")

    # -----------------------
    # Market overview
    # -----------------------
    chart_box = st.container(border=True)

    # -----------------------
    # Stocks table (read first so a click updates the charts in this run)
    # -----------------------
    table_box = st.container(border=True)
    with table_box:
        head_l, head_r = st.columns([3, 1])
        with head_l:
            st.subheader("Valores Principales")
        with head_r:
            tef = universe.find(EXPORT_SYMBOL)
            if tef is not None:
                try:
                    st.download_button(
                        f"Exportar datos {tef.symbol} a Excel",
                        data=to_excel_bytes(tef.series(LONGEST_TIME_FRAME), tef.symbol),
                        file_name=export_filename(tef.symbol),
                        mime=XLSX_MIME,
                    )
                except Exception as e:
                    log.exception("export for %s failed", tef.symbol)
                    st.error(f"Failed to build export: {e}")

        table = _quotes_table(universe)
        event = st.dataframe(
            table.style.map(_color_change, subset=["Cambio", "Variación %"]),
            hide_index=True,
            on_select="rerun",
            selection_mode="single-row",
            key=_table_key(),
        )
        picked = _table_pick(universe, list(event.selection.rows))
        if picked:
            sel = select_instrument(sel, universe, picked)
            _set_selection(sel)

    with chart_box:
        title_col, tf_col = st.columns([2, 3])
        with title_col:
            st.subheader(f"Evolución {sel.symbol}")
            if not is_index(sel, universe):
                st.button(f"Volver al {universe.index.symbol}", on_click=_on_back, key="back_btn")
        with tf_col:
            for col, label in zip(st.columns(len(TIME_FRAMES)), TIME_FRAMES):
                with col:
                    st.button(
                        label,
                        key=f"tf_{label}",
                        type="primary" if label == sel.time_frame else "secondary",
                        on_click=_on_time_frame,
                        args=(label,),
                    )

        points = sel.series
        rsi = compute_rsi(points)
        pf = load_price_frame(points, rsi)
        try:
            st.plotly_chart(make_price_chart(pf, title=f"Evolución {sel.symbol}"),
                            config={"displayModeBar": False, "responsive": True})
        except Exception as e:
            st.error(f"Failed to render price chart: {e}")

        try:
            st.plotly_chart(make_rsi_chart(pf), config={"displayModeBar": False, "responsive": True})
        except Exception as e:
            st.error(f"Failed to render RSI panel: {e}")

        if rsi:
            last = rsi[-1].value
            c1, c2 = st.columns(2)
            with c1:
                st.metric("Último precio", f"{points[-1].value:.2f} €")
            with c2:
                zone = rsi_zone(last)
                st.metric("RSI", f"{last:.1f}", help=zone)


if __name__ == "__main__":
    main()
