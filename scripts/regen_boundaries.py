# -*- coding: utf-8 -*-
"""
Пересчёт концов фоновых дуг (ratings.SEGMENT_BOUNDARIES) под новую геометрию.

Запуск из корня проекта:
    export PYTHONPATH="$(pwd)"
    python scripts/regen_boundaries.py            # текущие RADIUS/ORIGIN
    python scripts/regen_boundaries.py 40 50 48   # радиус, центр X, центр Y
Печатает таблицу и блок для вставки в scoredial/ratings.py.
"""
from __future__ import annotations

import sys

from scoredial.geometry import boundary_table
from scoredial.ratings import ORIGIN, RADIUS


def main(argv):
    radius = float(argv[0]) if len(argv) > 0 else RADIUS
    ox = float(argv[1]) if len(argv) > 1 else ORIGIN[0]
    oy = float(argv[2]) if len(argv) > 2 else ORIGIN[1]

    df = boundary_table(radius=radius, origin=(ox, oy))
    print(df.to_string(index=False))
    print()
    print("SEGMENT_BOUNDARIES = {")
    for row in df.itertuples(index=False):
        print(f"    Rating.{row.rating}: (({row.start_x!r}, {row.start_y!r}), ({row.end_x!r}, {row.end_y!r})),")
    print("}")


if __name__ == "__main__":
    main(sys.argv[1:])
