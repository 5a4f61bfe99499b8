# scoredial/animation.py
# -*- coding: utf-8 -*-
"""
Анимация шкалы: отображаемая оценка догоняет целевую с замедлением.

Шаг тика: displayed := ceil((target - displayed) / 50 + displayed),
пока ceil(displayed) < target. Прирост: 1/50 остатка, округлённый вверх,
поэтому значение строго растёт, не перескакивает цель и садится ровно на неё.

Таймер подключаемый: scheduler(delay_seconds, callback) -> handle (опционально с cancel()).
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
import logging
import math
import os
from enum import Enum
from typing import Any, Callable, Iterator, List, Optional, Tuple

import pandas as pd

from scoredial.frames import DialFrame, build_frame, frame_table
from scoredial.interpreter import classify
from scoredial.ratings import MIN_SCORE

log = logging.getLogger(__name__)

TICK_DELAY = float(os.getenv("SCOREDIAL_TICK_MS", "10")) / 1000.0
EASING_DIVISOR = 50

Scheduler = Callable[[float, Callable[[], None]], Any]


class Phase(Enum):
    ANIMATING = "animating"
    SETTLED = "settled"


# -----------------------------
# Чистая функция тика
# -----------------------------

def is_settled(displayed: float, target: float) -> bool:
    return math.ceil(displayed) >= target


def next_displayed(displayed: int, target: int) -> int:
    if is_settled(displayed, target):
        return displayed
    return math.ceil((target - displayed) / EASING_DIVISOR + displayed)


def animation_steps(target: int, start: int = MIN_SCORE) -> Iterator[int]:
    """Последовательные значения после каждого тика (без start), последнее == target."""
    classify(target)
    d = start
    while not is_settled(d, target):
        d = next_displayed(d, target)
        yield d


def animation_table(target: int) -> pd.DataFrame:
    return frame_table([MIN_SCORE, *animation_steps(target)])


# -----------------------------
# Планировщики
# -----------------------------

class Timer:
    def __init__(self, due: float, callback: Callable[[], None]):
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """
    Детерминированная очередь с виртуальными часами.
    Для тестов: без реального ожидания; sleep=time.sleep даёт живое воспроизведение.
    """

    def __init__(self, sleep: Optional[Callable[[float], None]] = None):
        self.now = 0.0
        self._sleep = sleep
        self._queue: List[Tuple[float, int, Timer]] = []
        self._seq = itertools.count()

    def __call__(self, delay: float, callback: Callable[[], None]) -> Timer:
        timer = Timer(self.now + max(0.0, float(delay)), callback)
        heapq.heappush(self._queue, (timer.due, next(self._seq), timer))
        return timer

    @property
    def pending(self) -> int:
        return sum(1 for _, _, t in self._queue if not t.cancelled)

    def run_next(self) -> bool:
        while self._queue:
            due, _, timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            if self._sleep is not None and due > self.now:
                self._sleep(due - self.now)
            self.now = max(self.now, due)
            timer.callback()
            return True
        return False

    def run_until_idle(self, max_ticks: int = 10_000) -> int:
        n = 0
        while n < max_ticks and self.run_next():
            n += 1
        if self.pending:
            raise RuntimeError(f"Очередь не опустела за {max_ticks} тиков.")
        return n


def asyncio_scheduler(loop: Optional[asyncio.AbstractEventLoop] = None) -> Scheduler:
    """Адаптер на loop.call_later; без loop: берётся текущий запущенный."""
    def schedule(delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        lp = loop or asyncio.get_running_loop()
        return lp.call_later(delay, callback)
    return schedule


# -----------------------------
# Аниматор (состояние одной шкалы)
# -----------------------------

class DialAnimator:
    """
    Владеет отображаемой оценкой одной шкалы.
    start() рисует первый кадр и ставит тик; каждый тик: новый кадр и следующий тик.
    close() снимает компонент: отложенный тик отменяется, поздний тик игнорируется.
    """

    def __init__(
        self,
        target: int,
        scheduler: Scheduler,
        on_frame: Optional[Callable[[DialFrame], None]] = None,
        delay: float = TICK_DELAY,
    ):
        classify(target)
        self.target = target
        self.displayed = MIN_SCORE
        self.ticks = 0
        self.closed = False
        self._scheduler = scheduler
        self._on_frame = on_frame
        self._delay = delay
        self._handle: Any = None
        self._has_pending = False

    @property
    def phase(self) -> Phase:
        return Phase.SETTLED if is_settled(self.displayed, self.target) else Phase.ANIMATING

    @property
    def has_pending(self) -> bool:
        return self._has_pending

    def frame(self) -> DialFrame:
        return build_frame(self.displayed)

    def start(self) -> DialFrame:
        if self.closed:
            raise RuntimeError("Аниматор уже закрыт.")
        return self._render()

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        handle, self._handle = self._handle, None
        self._has_pending = False
        cancel = getattr(handle, "cancel", None)
        if callable(cancel):
            cancel()
        log.debug("dial closed at %s/%s after %d ticks", self.displayed, self.target, self.ticks)

    def _render(self) -> DialFrame:
        frame = self.frame()
        if self._on_frame is not None:
            self._on_frame(frame)
        if self.phase is Phase.ANIMATING:
            self._schedule()
        else:
            log.debug("dial settled at %s after %d ticks", self.displayed, self.ticks)
        return frame

    def _schedule(self) -> None:
        # не больше одного тика в полёте
        if self._has_pending or self.closed:
            return
        self._has_pending = True
        handle = self._scheduler(self._delay, self._tick)
        if self._has_pending:
            self._handle = handle

    def _tick(self) -> None:
        self._has_pending = False
        self._handle = None
        if self.closed:
            log.debug("late tick ignored: dial already closed")
            return
        self.displayed = next_displayed(self.displayed, self.target)
        self.ticks += 1
        self._render()


def play(
    target: int,
    on_frame: Optional[Callable[[DialFrame], None]] = None,
    sleep: Optional[Callable[[float], None]] = None,
    delay: float = TICK_DELAY,
) -> DialAnimator:
    """Проиграть анимацию до конца синхронно (страница, скрипты)."""
    scheduler = ManualScheduler(sleep=sleep)
    animator = DialAnimator(target, scheduler, on_frame=on_frame, delay=delay)
    animator.start()
    scheduler.run_until_idle()
    return animator
