"""Tests for the Throttled limiter."""

import threading

import pytest

from utilbox.timing.throttle import Throttled


class TestThrottledWindow:
    def test_scenario(self, recorder, clock):
        t = Throttled(recorder, delay=100, clock=clock)

        t("a")
        clock.advance(50)
        t("b")
        clock.advance(50)
        t("c")

        assert recorder.args == [("a",), ("c",)]

    def test_first_call_always_accepted(self, recorder, clock):
        clock.now = 1_000_000.0
        t = Throttled(recorder, delay=10_000_000, clock=clock)
        t("first")
        assert recorder.args == [("first",)]

    def test_call_inside_window_dropped(self, recorder, clock):
        t = Throttled(recorder, delay=1.0, clock=clock)
        t(1)
        clock.advance(0.999)
        t(2)
        assert recorder.args == [(1,)]

    def test_window_measured_from_last_accepted_call(self, recorder, clock):
        t = Throttled(recorder, delay=1.0, clock=clock)
        t(1)
        clock.advance(0.6)
        t(2)
        clock.advance(0.6)
        t(3)
        assert recorder.args == [(1,), (3,)]

    def test_dropped_calls_are_not_replayed(self, recorder, clock):
        t = Throttled(recorder, delay=1.0, clock=clock)
        t(1)
        t(2)
        t(3)
        clock.advance(5.0)
        assert recorder.args == [(1,)]

    def test_zero_delay_accepts_every_call(self, recorder, clock):
        t = Throttled(recorder, delay=0, clock=clock)
        t(1)
        t(2)
        assert recorder.args == [(1,), (2,)]

    def test_real_clock_drops_immediate_repeat(self, recorder):
        t = Throttled(recorder, delay=60.0)
        t(1)
        t(2)
        assert recorder.args == [(1,)]


class TestThrottledReturn:
    def test_accepted_call_returns_result(self, clock):
        t = Throttled(lambda x: x + 1, delay=1.0, clock=clock)
        assert t(1) == 2

    def test_dropped_call_returns_none(self, clock):
        t = Throttled(lambda x: x + 1, delay=1.0, clock=clock)
        t(1)
        assert t(2) is None

    def test_runs_synchronously(self, recorder, clock):
        t = Throttled(recorder, delay=1.0, clock=clock)
        t("now")
        assert recorder.called.is_set()

    def test_errors_propagate(self, clock):
        def boom():
            raise ValueError("boom")

        t = Throttled(boom, delay=1.0, clock=clock)
        with pytest.raises(ValueError, match="boom"):
            t()

    async def test_coroutine_target_returns_awaitable(self, clock):
        async def target(x):
            return x * 2

        t = Throttled(target, delay=1.0, clock=clock)
        assert await t(4) == 8
        assert await t(5) is None

    async def test_dropped_coroutine_call_is_awaitable(self, clock):
        seen = []

        async def target(x):
            seen.append(x)
            return x

        t = Throttled(target, delay=60.0, clock=clock)
        assert await t(1) == 1
        assert await t(2) is None
        clock.advance(60.0)
        assert await t(3) == 3
        assert seen == [1, 3]


class TestThrottledReset:
    def test_last_call_tracking(self, recorder, clock):
        t = Throttled(recorder, delay=1.0, clock=clock)
        assert t.last_call is None
        clock.advance(3.0)
        t()
        assert t.last_call == 3.0

    def test_reset_allows_next_call(self, recorder, clock):
        t = Throttled(recorder, delay=1.0, clock=clock)
        t(1)
        t.reset()
        t(2)
        assert recorder.args == [(1,), (2,)]
        assert t.last_call == 0.0

    def test_cancel_is_reset(self, recorder, clock):
        t = Throttled(recorder, delay=1.0, clock=clock)
        t(1)
        t.cancel()
        assert t.last_call is None


class TestThrottledClose:
    def test_close_refuses_calls(self, recorder, clock):
        t = Throttled(recorder, delay=1.0, clock=clock)
        t.close()
        with pytest.raises(RuntimeError, match="Throttled is closed"):
            t(1)


class TestThrottledThreads:
    def test_one_call_per_window_across_threads(self, recorder, clock):
        t = Throttled(recorder, delay=1.0, clock=clock)
        barrier = threading.Barrier(8)

        def worker(n):
            barrier.wait()
            t(n)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(recorder.calls) == 1
