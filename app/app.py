# app/app.py
# -*- coding: utf-8 -*-

import os
import time

import streamlit as st

# ядро
from scoredial.animation import TICK_DELAY, animation_table, play
from scoredial.frames import DialFrame, build_frame
from scoredial.ratings import CATEGORY_VISUALS, RATINGS, THRESHOLDS, OutOfRangeError
# svg-шкала
from scoredial.visuals_svg import render_dial_svg

DEFAULT_SCORE = int(os.getenv("SCOREDIAL_DEFAULT_SCORE", "800"))


# -----------------------------
# Вспомогательные функции
# -----------------------------
def _render_gauge(slot, frame: DialFrame) -> None:
    slot.markdown(
        f'<div style="width:360px">{render_dial_svg(frame)}</div>',
        unsafe_allow_html=True,
    )


def _legend() -> str:
    parts = []
    for r in RATINGS:
        v = CATEGORY_VISUALS[r]
        parts.append(f'<span style="color:{v.color}">●</span> {r.label} (от {THRESHOLDS[r]})')
    return " · ".join(parts)


# -----------------------------
# UI
# -----------------------------
st.set_page_config(page_title="Score Dial", page_icon="🎯", layout="centered")

st.title("🎯 Score Dial")
st.caption("Шкала 0…1000: пять категорий, маркер доезжает до оценки с замедлением.")

st.sidebar.header("Параметры")
score = int(st.sidebar.number_input("Оценка", value=DEFAULT_SCORE, step=1))
animate = st.sidebar.toggle("Анимация", value=True)
dev_mode = st.sidebar.toggle("Режим разработчика", value=False)

try:
    final = build_frame(score)
except OutOfRangeError as e:
    st.error("Оценка вне допустимого диапазона: " + str(e))
    st.stop()

slot = st.empty()
if animate:
    # живое воспроизведение: ManualScheduler спит между тиками
    play(score, on_frame=lambda f: _render_gauge(slot, f), sleep=time.sleep)
else:
    _render_gauge(slot, final)

st.markdown(_legend(), unsafe_allow_html=True)
st.write("**Категория:**", final.label)

if dev_mode:
    with st.expander("Кадры анимации", expanded=False):
        st.caption(f"Тик: {TICK_DELAY * 1000:.0f} мс")
        st.dataframe(animation_table(score))
