import pytest

from scheduler import DeferredScheduler


class FakeClock:
    """Millisecond clock the tests advance by hand."""

    def __init__(self, start: int = 0) -> None:
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> int:
        self.now += ms
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def scheduler(clock: FakeClock) -> DeferredScheduler:
    return DeferredScheduler(clock)
