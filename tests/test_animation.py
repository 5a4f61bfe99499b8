"""
Animation Driver Tests
======================

Eased stepping toward the target, the state machine around it,
pluggable schedulers and teardown.
"""

import asyncio

import pytest

from scoredial.animation import (
    DialAnimator,
    ManualScheduler,
    Phase,
    animation_steps,
    animation_table,
    asyncio_scheduler,
    is_settled,
    next_displayed,
    play,
)
from scoredial.ratings import OutOfRangeError, Rating


class TestNextDisplayed:

    def test_first_tick_toward_800(self):
        assert next_displayed(0, 800) == 16

    def test_small_gap_moves_by_one(self):
        assert next_displayed(799, 800) == 800
        assert next_displayed(760, 800) == 761

    def test_settled_value_is_unchanged(self):
        assert next_displayed(800, 800) == 800
        assert next_displayed(900, 800) == 900

    def test_never_overshoots(self):
        for target in (1, 37, 450, 999, 1000):
            for d in range(0, target):
                nxt = next_displayed(d, target)
                assert d < nxt <= target

    def test_is_settled(self):
        assert is_settled(800, 800)
        assert not is_settled(799, 800)
        assert is_settled(0, 0)


class TestAnimationSteps:

    def test_sequence_to_800(self):
        steps = list(animation_steps(800))
        assert steps[0] == 16
        assert steps[-1] == 800
        assert all(a < b for a, b in zip(steps, steps[1:]))
        assert max(steps) == 800
        assert len(steps) < 400

    def test_zero_target_has_no_steps(self):
        assert list(animation_steps(0)) == []

    def test_full_scale(self):
        steps = list(animation_steps(1000))
        assert steps[0] == 20
        assert steps[-1] == 1000

    @pytest.mark.parametrize("target", [-1, 1001])
    def test_out_of_range_fails(self, target):
        with pytest.raises(OutOfRangeError):
            list(animation_steps(target))

    def test_table(self):
        df = animation_table(800)
        assert df.index.name == "tick"
        assert df["displayed"].iloc[0] == 0
        assert df["displayed"].iloc[-1] == 800
        assert df["rating"].iloc[-1] == Rating.HIGH.label
        assert df["displayed"].is_monotonic_increasing


class TestDialAnimator:

    def test_initial_state(self):
        a = DialAnimator(800, ManualScheduler())
        assert a.displayed == 0
        assert a.phase is Phase.ANIMATING
        assert not a.has_pending

    def test_runs_to_exact_target(self):
        frames = []
        sched = ManualScheduler()
        a = DialAnimator(800, sched, on_frame=frames.append)
        a.start()

        assert [f.displayed for f in frames] == [0]
        assert sched.pending == 1

        sched.run_next()
        assert a.displayed == 16

        ticks = sched.run_until_idle()
        assert a.displayed == 800
        assert a.phase is Phase.SETTLED
        assert sched.pending == 0
        assert a.ticks == ticks + 1
        assert [f.displayed for f in frames] == [0, *animation_steps(800)]

    def test_frames_follow_pipeline(self):
        frames = []
        play(800, on_frame=frames.append, delay=0)
        ratings = [f.rating for f in frames]
        assert ratings[0] is Rating.VERY_LOW
        assert ratings[-1] is Rating.HIGH
        assert frames[-1].color == "#7dbb42"

    def test_single_tick_in_flight(self):
        sched = ManualScheduler()
        a = DialAnimator(500, sched)
        a.start()
        a._schedule()
        assert sched.pending == 1

    def test_zero_target_settles_immediately(self):
        sched = ManualScheduler()
        a = DialAnimator(0, sched)
        frame = a.start()
        assert frame.displayed == 0
        assert a.phase is Phase.SETTLED
        assert sched.pending == 0

    def test_uses_configured_delay(self):
        sched = ManualScheduler()
        a = DialAnimator(100, sched, delay=0.25)
        a.start()
        sched.run_next()
        assert sched.now == pytest.approx(0.25)

    @pytest.mark.parametrize("target", [-1, 1001])
    def test_rejects_out_of_range_target(self, target):
        with pytest.raises(OutOfRangeError):
            DialAnimator(target, ManualScheduler())

    def test_play_paces_with_sleep(self):
        slept = []
        a = play(100, sleep=slept.append, delay=0.01)
        assert a.displayed == 100
        assert len(slept) == a.ticks
        assert all(s == pytest.approx(0.01) for s in slept)


class TestTeardown:

    def test_close_cancels_pending_tick(self):
        sched = ManualScheduler()
        a = DialAnimator(800, sched)
        a.start()
        sched.run_next()
        sched.run_next()
        value = a.displayed

        a.close()
        assert a.closed
        assert sched.pending == 0
        assert sched.run_until_idle() == 0
        assert a.displayed == value

    def test_late_tick_after_close_is_ignored(self):
        """Schedulers without cancel() may still fire; the tick must not mutate state."""
        callbacks = []

        def scheduler(delay, callback):
            callbacks.append(callback)

        frames = []
        a = DialAnimator(800, scheduler, on_frame=frames.append)
        a.start()
        a.close()

        callbacks[0]()
        assert a.displayed == 0
        assert len(frames) == 1
        assert len(callbacks) == 1

    def test_start_after_close_fails(self):
        a = DialAnimator(800, ManualScheduler())
        a.close()
        with pytest.raises(RuntimeError):
            a.start()

    def test_close_is_idempotent(self):
        a = DialAnimator(800, ManualScheduler())
        a.start()
        a.close()
        a.close()
        assert a.closed

    def test_instances_do_not_share_state(self):
        sched = ManualScheduler()
        a = DialAnimator(800, sched)
        b = DialAnimator(300, sched)
        a.start()
        b.start()
        a.close()
        sched.run_until_idle()
        assert b.displayed == 300
        assert a.displayed == 0


class TestAsyncioScheduler:

    def test_runs_on_event_loop(self):
        async def run():
            loop = asyncio.get_running_loop()
            done = loop.create_future()

            def on_frame(frame):
                if frame.displayed == 500 and not done.done():
                    done.set_result(frame)

            a = DialAnimator(500, asyncio_scheduler(), on_frame=on_frame, delay=0)
            a.start()
            frame = await asyncio.wait_for(done, timeout=10)
            return a, frame

        a, frame = asyncio.run(run())
        assert frame.rating is Rating.LOW
        assert a.phase is Phase.SETTLED

    def test_close_cancels_timer_handle(self):
        async def run():
            a = DialAnimator(500, asyncio_scheduler(), delay=0.01)
            a.start()
            await asyncio.sleep(0.05)
            a.close()
            value = a.displayed
            await asyncio.sleep(0.05)
            return a, value

        a, value = asyncio.run(run())
        assert a.displayed == value
        assert 0 < value < 500
