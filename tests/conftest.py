"""Pytest configuration for perf_tracker tests."""

import pytest

from perf_tracker import TimingRegistry, fixed_grouping


class FakeClock:
    """Monotonic nanosecond clock advanced by hand."""

    def __init__(self, start: int = 1_000_000_000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, nanoseconds: int) -> None:
        self.now += nanoseconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def registry(clock):
    return TimingRegistry(clock=clock, formatter=fixed_grouping(), width=75, allow_repeat_end=False)
