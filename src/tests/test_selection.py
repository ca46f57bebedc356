# src/tests/test_selection.py
from ui.selection import (
    back_to_index,
    change_time_frame,
    initial_selection,
    is_index,
    select_instrument,
)


def test_initial_selection_is_index_one_day(universe):
    sel = initial_selection(universe)
    assert sel.symbol == universe.index.symbol
    assert sel.time_frame == "1D"
    assert sel.points == universe.index.history["1D"]
    assert is_index(sel, universe)


def test_select_instrument_keeps_time_frame(universe):
    sel = change_time_frame(initial_selection(universe), universe, "3M")
    sel = select_instrument(sel, universe, "ITX")
    assert sel.symbol == "ITX"
    assert sel.time_frame == "3M"
    assert sel.points == universe.get("ITX").history["3M"]
    assert not is_index(sel, universe)


def test_change_time_frame_keeps_instrument(universe):
    sel = select_instrument(initial_selection(universe), universe, "REP")
    sel = change_time_frame(sel, universe, "1A")
    assert sel.symbol == "REP"
    assert len(sel.points) == 366


def test_back_to_index(universe):
    sel = change_time_frame(initial_selection(universe), universe, "1M")
    sel = select_instrument(sel, universe, "BBVA")
    sel = back_to_index(sel, universe)
    assert sel.symbol == universe.index.symbol
    assert sel.points == universe.index.history["1M"]


def test_unknown_symbol_is_a_noop(universe):
    sel = initial_selection(universe)
    assert select_instrument(sel, universe, "NOPE") is sel


def test_unknown_time_frame_is_a_noop(universe):
    sel = initial_selection(universe)
    assert change_time_frame(sel, universe, "5Y") is sel


def test_stale_symbol_is_a_noop_on_time_frame_change(universe):
    from dataclasses import replace

    stale = replace(initial_selection(universe), symbol="GONE")
    assert change_time_frame(stale, universe, "1M") is stale
