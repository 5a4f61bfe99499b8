# scoredial/interpreter.py
# -*- coding: utf-8 -*-
from __future__ import annotations

from dataclasses import dataclass

from scoredial.ratings import (
    CATEGORY_VISUALS,
    MAX_SCORE,
    MIN_SCORE,
    RATINGS,
    THRESHOLDS,
    OutOfRangeError,
    Rating,
)


@dataclass(frozen=True)
class Interpretation:
    rating: Rating
    color: str
    starting_angle: float
    ending_angle: float
    range_start: int
    range_end: int


def classify(score: float) -> Rating:
    """
    Категория оценки. Границы [порог; следующий порог), у верхней [850; 1000].
    Вне [0; 1000] OutOfRangeError (без клиппинга).
    """
    if score < MIN_SCORE or score > MAX_SCORE:
        raise OutOfRangeError(score)
    # идём сверху вниз: первая категория, чей порог не выше оценки
    for r in reversed(RATINGS):
        if score >= THRESHOLDS[r]:
            return r
    raise OutOfRangeError(score)


def interpret(score: float) -> Interpretation:
    rating = classify(score)
    v = CATEGORY_VISUALS[rating]
    return Interpretation(
        rating=rating,
        color=v.color,
        starting_angle=v.starting_angle,
        ending_angle=v.ending_angle,
        range_start=v.range_start,
        range_end=v.range_end,
    )


def threshold_of(score: float) -> int:
    """Нижняя граница категории: якорь интерполяции угла."""
    return THRESHOLDS[classify(score)]
