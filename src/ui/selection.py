# src/ui/selection.py
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Tuple

from market.instruments import DEFAULT_TIME_FRAME, TIME_FRAMES, Universe
from viz.contracts import PricePoint


@dataclass(frozen=True)
class Selection:
    """What the charts currently show. Transitions return a new value."""

    symbol: str
    time_frame: str
    points: Tuple[PricePoint, ...]

    @property
    def series(self) -> List[PricePoint]:
        return list(self.points)


def initial_selection(universe: Universe, time_frame: str = DEFAULT_TIME_FRAME) -> Selection:
    index = universe.index
    return Selection(symbol=index.symbol, time_frame=time_frame, points=tuple(index.history[time_frame]))


def select_instrument(selection: Selection, universe: Universe, symbol: str) -> Selection:
    """Row click. Unknown symbols leave the selection unchanged."""
    inst = universe.find(symbol)
    if inst is None:
        return selection
    return replace(selection, symbol=inst.symbol, points=tuple(inst.history[selection.time_frame]))


def change_time_frame(selection: Selection, universe: Universe, time_frame: str) -> Selection:
    if time_frame not in TIME_FRAMES:
        return selection
    inst = universe.find(selection.symbol)
    if inst is None:
        return selection
    return replace(selection, time_frame=time_frame, points=tuple(inst.history[time_frame]))


def back_to_index(selection: Selection, universe: Universe) -> Selection:
    return select_instrument(selection, universe, universe.index.symbol)


def is_index(selection: Selection, universe: Universe) -> bool:
    return selection.symbol == universe.index.symbol
