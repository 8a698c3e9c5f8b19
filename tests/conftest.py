"""Shared fixtures for utilbox tests."""

import threading

import pytest


class Recorder:
    """Callable that remembers every call it receives."""

    def __init__(self, result=None):
        self.calls = []
        self.result = result
        self.called = threading.Event()

    def __call__(self, *args, **kwargs):
        self.calls.append((args, kwargs))
        self.called.set()
        return self.result

    @property
    def args(self):
        return [args for args, _ in self.calls]


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def clock():
    return FakeClock()
