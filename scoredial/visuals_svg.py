# -*- coding: utf-8 -*-
from __future__ import annotations

from typing import List

from scoredial.frames import DialFrame, build_frame
from scoredial.geometry import arc_path, static_segment_endpoints
from scoredial.ratings import ORIGIN, RATINGS, STROKE_WIDTH, TRACK_COLOR, VIEWBOX


def _arc(d: str, stroke: str) -> str:
    return (
        f'<path d="{d}" stroke="{stroke}" fill="none" '
        f'stroke-width="{STROKE_WIDTH}" stroke-linecap="round"></path>'
    )


def render_dial_svg(frame: DialFrame) -> str:
    """
    SVG-документ шкалы для одного кадра:
    серый фон, закрашенные сегменты ниже текущей категории, частичная дуга, маркер и подписи.
    """
    cx, cy = ORIGIN
    w, h = VIEWBOX

    background: List[str] = []
    filled: List[str] = []
    for r in RATINGS:
        start, end = static_segment_endpoints(r)
        background.append(_arc(arc_path(start, end), TRACK_COLOR))
        # сегменты ниже текущего: целиком цветом текущей категории
        if r in frame.filled:
            filled.append(_arc(arc_path(start, end), frame.color))
    partial = _arc(arc_path(frame.arc_start, frame.arc_end), frame.color)
    mx, my = frame.marker

    return f"""<svg style="width:100%;height:100%" viewBox="0 0 {w} {h}" class="ScoreDial-dial" aria-labelledby="title">
  <title>Score</title>
  <g>{"".join(background)}</g>
  <g>
    <g>{"".join(filled)}{partial}</g>
    <g>
      <circle r="6" fill="{frame.color}" cx="{mx}" cy="{my}"></circle>
      <circle r="2.5" fill="#fff" cx="{mx}" cy="{my}"></circle>
    </g>
  </g>
  <g>
    <text x="{cx:g}" text-anchor="middle" y="{cy + 4:g}" font-size="28">{frame.text}</text>
    <text x="{cx:g}" text-anchor="middle" y="{cy + 20:g}" font-size="8">{frame.label}</text>
  </g>
</svg>
"""


def render_score_svg(score: int) -> str:
    return render_dial_svg(build_frame(score))
