"""Tests for the stopwatch engine and the ticker."""

import datetime as dt

from core.ticker import Ticker
from core.timer_engine import TimerEngine

T0 = dt.datetime(2024, 5, 14, 9, 0, 0).astimezone()


class TestTimerEngine:
    def test_idle_ignores_ticks(self):
        eng = TimerEngine()
        assert eng.tick() is False
        snap = eng.snapshot()
        assert snap.is_idle
        assert snap.elapsed_sec == 0

    def test_start_resets_and_counts(self):
        eng = TimerEngine()
        eng.start(T0)
        eng.tick()
        eng.tick()
        eng.start(T0)
        assert eng.tick() is True
        snap = eng.snapshot()
        assert snap.elapsed_sec == 1
        assert snap.started_at == T0
        assert snap.is_counting

    def test_pause_and_resume(self):
        eng = TimerEngine()
        eng.start(T0)
        eng.tick()
        eng.pause()
        assert eng.tick() is False
        assert eng.snapshot().running
        eng.resume()
        eng.tick()
        assert eng.snapshot().elapsed_sec == 2

    def test_pause_when_idle_is_ignored(self):
        eng = TimerEngine()
        eng.pause()
        assert not eng.snapshot().paused

    def test_reset(self):
        eng = TimerEngine()
        eng.start(T0)
        eng.tick()
        eng.pause()
        eng.reset()
        snap = eng.snapshot()
        assert (snap.elapsed_sec, snap.running, snap.paused, snap.started_at) == (
            0,
            False,
            False,
            None,
        )


class TestTicker:
    def test_fires_repeatedly(self, scheduler):
        calls = []
        ticker = Ticker(scheduler, interval_ms=1000)
        ticker.start(lambda: calls.append(1))
        scheduler.advance(3)
        assert len(calls) == 3
        assert ticker.active
        assert all(ms == 1000 for ms, _ in scheduler.jobs.values())

    def test_stop_cancels_pending_job(self, scheduler):
        ticker = Ticker(scheduler)
        ticker.start(lambda: None)
        ticker.stop()
        assert scheduler.pending == 0
        assert not ticker.active

    def test_start_twice_keeps_one_job(self, scheduler):
        ticker = Ticker(scheduler)
        ticker.start(lambda: None)
        ticker.start(lambda: None)
        assert scheduler.pending == 1

    def test_callback_may_stop_ticker(self, scheduler):
        ticker = Ticker(scheduler)
        calls = []

        def once():
            calls.append(1)
            ticker.stop()

        ticker.start(once)
        scheduler.advance(5)
        assert calls == [1]
        assert scheduler.pending == 0

    def test_stop_tolerates_failed_cancel(self, scheduler):
        def boom(job):
            raise RuntimeError("widget destroyed")

        scheduler.after_cancel = boom
        ticker = Ticker(scheduler)
        ticker.start(lambda: None)
        ticker.stop()
        assert not ticker.active
