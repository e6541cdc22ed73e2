import pytest


class FakeClock:
    """Returns the given readings in order, one per call."""

    def __init__(self, readings):
        self.readings = list(readings)
        self.calls = 0

    def __call__(self) -> int:
        value = self.readings[self.calls]
        self.calls += 1
        return value


@pytest.fixture
def fake_clock():
    return FakeClock
