import pytest

from fakes import FakeClock, FakeEvent


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def event(clock):
    return FakeEvent(clock)
