import pytest


class LastPivot:
    """rng stand-in: always picks the last index of the range and records calls."""

    def __init__(self):
        self.calls = []

    def randrange(self, start, stop):
        self.calls.append((start, stop))
        return stop - 1


class FakeClock:
    def __init__(self, t=0.0):
        self.t = t

    def __call__(self):
        return self.t

    def advance(self, seconds):
        self.t += seconds


@pytest.fixture
def last_pivot():
    return LastPivot()


@pytest.fixture
def fake_clock():
    return FakeClock()
