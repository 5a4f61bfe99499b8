# scoredial/ratings.py
# -*- coding: utf-8 -*-
"""
Статическая модель категорий шкалы.
Даёт:
    - Rating / RATINGS: пять упорядоченных категорий
    - THRESHOLDS: нижние (включительные) границы категорий
    - CATEGORY_VISUALS: цвет, углы и диапазон для интерполяции
    - SEGMENT_BOUNDARIES: готовые точки концов фоновых дуг (только для RADIUS=44, ORIGIN=(50,50))
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


MIN_SCORE = 0
MAX_SCORE = 1000

# !Внимание! При смене радиуса/центра нужно пересчитать SEGMENT_BOUNDARIES
# (scripts/regen_boundaries.py), иначе фон разъедется с маркером.
RADIUS = 44
ORIGIN: Tuple[float, float] = (50.0, 50.0)
VIEWBOX: Tuple[int, int] = (100, 80)

TRACK_COLOR = "#E1E7EB"
STROKE_WIDTH = 4


class OutOfRangeError(ValueError):
    """Оценка вне [MIN_SCORE; MAX_SCORE]."""

    def __init__(self, score):
        self.score = score
        super().__init__(f"Score {score!r} is outside of accepted range [{MIN_SCORE}, {MAX_SCORE}]")


class Rating(Enum):
    VERY_LOW = "Very Low"
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    VERY_HIGH = "Very High"

    @property
    def label(self) -> str:
        return self.value

    @property
    def rank(self) -> int:
        return RATINGS.index(self)


# по возрастанию оценки
RATINGS: Tuple[Rating, ...] = (
    Rating.VERY_LOW,
    Rating.LOW,
    Rating.MEDIUM,
    Rating.HIGH,
    Rating.VERY_HIGH,
)

THRESHOLDS: Dict[Rating, int] = {
    Rating.VERY_LOW: MIN_SCORE,
    Rating.LOW: 450,
    Rating.MEDIUM: 650,
    Rating.HIGH: 750,
    Rating.VERY_HIGH: 850,
}


@dataclass(frozen=True)
class CategoryVisual:
    color: str
    starting_angle: float   # радианы, от 0° по стандартной параметризации окружности
    ending_angle: float
    range_start: int
    range_end: int


# -----------------------------
# Таблица углов
# -----------------------------
# Углы подобраны вручную под разрывы между сегментами, общей формулы нет.
# Значения точные, не округлять. В скобках исходные градусы.
CATEGORY_VISUALS: Dict[Rating, CategoryVisual] = {
    Rating.VERY_LOW: CategoryVisual(
        color="#EF2D56",
        starting_angle=3.5814156251,    # 205.2°
        ending_angle=1.7965372122,      # 102.934°
        range_start=THRESHOLDS[Rating.VERY_LOW],
        range_end=THRESHOLDS[Rating.LOW],
    ),
    Rating.LOW: CategoryVisual(
        color="#f4743b",
        starting_angle=1.664468,        # 205.2° - 109.833°
        ending_angle=1.2870232437,      # 73.741°
        range_start=THRESHOLDS[Rating.LOW],
        range_end=THRESHOLDS[Rating.MEDIUM],
    ),
    Rating.MEDIUM: CategoryVisual(
        color="#FFD324",
        starting_angle=1.154972,        # 205.2° - 139.025°
        ending_angle=0.77750927518,     # 44.548°
        range_start=THRESHOLDS[Rating.MEDIUM],
        range_end=THRESHOLDS[Rating.HIGH],
    ),
    Rating.HIGH: CategoryVisual(
        color="#7dbb42",
        starting_angle=0.645458,        # 205.2° - 168.218°
        ending_angle=0.33197907702,     # 19.021°
        range_start=THRESHOLDS[Rating.HIGH],
        range_end=THRESHOLDS[Rating.VERY_HIGH] - 1,
    ),
    Rating.VERY_HIGH: CategoryVisual(
        color="#41d895",
        starting_angle=0.199927,        # 11.455°
        ending_angle=-0.4398229715,     # -25.2°
        range_start=THRESHOLDS[Rating.VERY_HIGH],
        range_end=MAX_SCORE,
    ),
}

# (start_xy, end_xy) фоновой дуги каждого сегмента, по часовой стрелке
SEGMENT_BOUNDARIES: Dict[Rating, Tuple[Tuple[float, float], Tuple[float, float]]] = {
    Rating.VERY_LOW: ((10.187609691495148, 68.73428882886321), (40.15168157318339, 7.116312843179813)),
    Rating.LOW: ((45.88425608935777, 6.192915503745162), (62.31904483262065, 7.759721421232527)),
    Rating.MEDIUM: ((67.77387663242357, 9.749666964664904), (81.35697639031021, 19.133512806645328)),
    Rating.HIGH: ((85.1483635955568, 23.531291369722304), (91.59754139263299, 35.65968793616452)),
    Rating.VERY_HIGH: ((93.1236326880653, 41.26201946758718), (89.81239030850486, 68.73428882886319)),
}


def _check_table() -> None:
    if THRESHOLDS[RATINGS[0]] != MIN_SCORE:
        raise RuntimeError("Порог нижней категории должен совпадать с MIN_SCORE.")
    prev = None
    for r in RATINGS:
        t = THRESHOLDS[r]
        if prev is not None and t <= prev:
            raise RuntimeError(f"Пороги должны строго возрастать: {r.name}={t} <= {prev}.")
        if CATEGORY_VISUALS[r].range_start != t:
            raise RuntimeError(f"range_start для {r.name} не совпадает с порогом {t}.")
        prev = t
    if prev > MAX_SCORE:
        raise RuntimeError("Порог верхней категории выходит за MAX_SCORE.")


_check_table()
