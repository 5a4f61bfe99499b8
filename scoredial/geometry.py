# scoredial/geometry.py
# -*- coding: utf-8 -*-
"""
Углы и координаты на окружности шкалы.

Сегменты разделены визуальными зазорами, поэтому угол на одно очко
считается отдельно в каждой категории: внутри категории маркер едет
равномерно, на границе категорий прыгает через зазор.
"""

from __future__ import annotations

import math
from typing import NamedTuple, Tuple

import numpy as np
import pandas as pd

from scoredial.interpreter import interpret, threshold_of
from scoredial.ratings import CATEGORY_VISUALS, ORIGIN, RADIUS, RATINGS, SEGMENT_BOUNDARIES, Rating


class DialPoint(NamedTuple):
    x: float
    y: float


def per_point_angular_step(score: float) -> float:
    it = interpret(score)
    width = it.range_end - it.range_start
    return abs(it.ending_angle - it.starting_angle) / width


def angle_for_score(score: float) -> float:
    # угол убывает с ростом оценки, движение по часовой стрелке
    it = interpret(score)
    return it.starting_angle - (score - threshold_of(score)) * per_point_angular_step(score)


def coordinates_for_angle(angle: float) -> DialPoint:
    # y инвертирован: в экранных координатах ось вниз
    x = ORIGIN[0] + RADIUS * math.cos(angle)
    y = ORIGIN[1] - RADIUS * math.sin(angle)
    return DialPoint(x, y)


def arc_endpoints(score: float) -> Tuple[DialPoint, DialPoint]:
    """
    Концы частично закрашенной дуги текущей категории:
    от входа в категорию до текущего положения маркера.
    Порог берём от той же оценки, без кэша между вызовами.
    """
    start = coordinates_for_angle(angle_for_score(threshold_of(score)))
    end = coordinates_for_angle(angle_for_score(score))
    return start, end


def marker_point(score: float) -> DialPoint:
    return coordinates_for_angle(angle_for_score(score))


def arc_path(start: Tuple[float, float], end: Tuple[float, float]) -> str:
    """SVG `d` для дуги по окружности шкалы (малая дуга, по часовой)."""
    return f"M {start[0]} {start[1]} A {RADIUS} {RADIUS} 0 0 1 {end[0]} {end[1]}"


# -----------------------------
# Статические границы сегментов
# -----------------------------

def segment_endpoints(rating: Rating) -> Tuple[DialPoint, DialPoint]:
    v = CATEGORY_VISUALS[rating]
    return coordinates_for_angle(v.starting_angle), coordinates_for_angle(v.ending_angle)


def static_segment_endpoints(rating: Rating) -> Tuple[DialPoint, DialPoint]:
    """Готовые литералы из ratings.SEGMENT_BOUNDARIES (для разметки фона)."""
    (sx, sy), (ex, ey) = SEGMENT_BOUNDARIES[rating]
    return DialPoint(sx, sy), DialPoint(ex, ey)


def boundary_table(radius: float = RADIUS, origin: Tuple[float, float] = ORIGIN) -> pd.DataFrame:
    """
    Пересчёт концов всех пяти фоновых дуг для заданной геометрии.
    Колонки: rating, start_x, start_y, end_x, end_y.
    """
    start = np.array([CATEGORY_VISUALS[r].starting_angle for r in RATINGS], dtype=float)
    end = np.array([CATEGORY_VISUALS[r].ending_angle for r in RATINGS], dtype=float)
    ox, oy = float(origin[0]), float(origin[1])
    return pd.DataFrame({
        "rating": [r.name for r in RATINGS],
        "start_x": ox + radius * np.cos(start),
        "start_y": oy - radius * np.sin(start),
        "end_x": ox + radius * np.cos(end),
        "end_y": oy - radius * np.sin(end),
    })
