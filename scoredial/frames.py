# scoredial/frames.py
# -*- coding: utf-8 -*-
"""
Кадр шкалы, то есть всё, что нужно рендеру на один тик:
оценка, категория, цвет, маркер, концы частичной дуги и закрашенные сегменты.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

import pandas as pd

from scoredial.geometry import DialPoint, arc_endpoints, marker_point
from scoredial.interpreter import interpret
from scoredial.ratings import RATINGS, Rating


FRAME_COLUMNS = [
    "tick", "displayed", "rating", "color",
    "marker_x", "marker_y",
    "arc_start_x", "arc_start_y", "arc_end_x", "arc_end_y",
    "filled",
]


@dataclass(frozen=True)
class DialFrame:
    displayed: int
    rating: Rating
    color: str
    marker: DialPoint
    arc_start: DialPoint
    arc_end: DialPoint
    filled: Tuple[Rating, ...]   # сегменты ниже текущего: закрашены целиком

    @property
    def label(self) -> str:
        return self.rating.label

    @property
    def text(self) -> str:
        # в подписи: целая часть
        return str(int(self.displayed))


def build_frame(displayed: int) -> DialFrame:
    it = interpret(displayed)
    start, end = arc_endpoints(displayed)
    return DialFrame(
        displayed=displayed,
        rating=it.rating,
        color=it.color,
        marker=marker_point(displayed),
        arc_start=start,
        arc_end=end,
        filled=RATINGS[:it.rating.rank],
    )


def frame_table(values: Iterable[int]) -> pd.DataFrame:
    """Таблица кадров (одна строка на тик): для отладки и выгрузки."""
    rows = []
    for tick, v in enumerate(values):
        f = build_frame(v)
        rows.append({
            "tick": tick,
            "displayed": f.displayed,
            "rating": f.label,
            "color": f.color,
            "marker_x": f.marker.x,
            "marker_y": f.marker.y,
            "arc_start_x": f.arc_start.x,
            "arc_start_y": f.arc_start.y,
            "arc_end_x": f.arc_end.x,
            "arc_end_y": f.arc_end.y,
            "filled": len(f.filled),
        })
    return pd.DataFrame(rows, columns=FRAME_COLUMNS).set_index("tick")
