# -*- coding: utf-8 -*-
"""
Выгрузка анимации шкалы: таблица кадров (CSV) и итоговый SVG.

Запуск из корня проекта:
    export PYTHONPATH="$(pwd)"
    python scripts/export_frames.py 800
Файлы: out/frames_800.csv, out/dial_800.svg
"""
from __future__ import annotations

import pathlib
import sys

from scoredial.animation import animation_table
from scoredial.visuals_svg import render_score_svg

OUT_DIR = pathlib.Path("out")


def main(argv):
    score = int(argv[0]) if argv else 800

    df = animation_table(score)
    OUT_DIR.mkdir(parents=True, exist_ok=True)
    csv_path = OUT_DIR / f"frames_{score}.csv"
    svg_path = OUT_DIR / f"dial_{score}.svg"
    df.to_csv(csv_path)
    svg_path.write_text(render_score_svg(score), encoding="utf-8")

    print(f"[ok] {score}: ticks={len(df) - 1}, last={int(df['displayed'].iloc[-1])}")
    print(f"Saved: {csv_path}, {svg_path}")


if __name__ == "__main__":
    main(sys.argv[1:])
