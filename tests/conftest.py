"""Pytest fixtures for iron simulator tests."""

import random

import pytest

from ironsim.appliances import new_linen_iron, new_premium_iron, new_regular_iron
from ironsim.config import SimulatorConfig
from ironsim.core.events import Event
from ironsim.core.iron import Iron


class FixedRandom(random.Random):
    """Random source whose randint always returns the same value.

    Values outside the requested range are clamped into it.
    """

    def __init__(self, value: int) -> None:
        super().__init__(0)
        self.value = value
        self.calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        return min(max(self.value, a), b)


@pytest.fixture
def regular_iron() -> Iron:
    """Create a Regular iron with a seeded random source."""
    return new_regular_iron(random.Random(1))


@pytest.fixture
def premium_iron() -> Iron:
    """Create a Premium iron with a seeded random source."""
    return new_premium_iron(random.Random(1))


@pytest.fixture
def linen_iron() -> Iron:
    """Create a Linen iron with a seeded random source."""
    return new_linen_iron(random.Random(1))


@pytest.fixture
def recorded_events(regular_iron: Iron) -> list[Event]:
    """Events emitted by the regular_iron fixture."""
    events: list[Event] = []
    regular_iron.add_listener(events.append)
    return events


@pytest.fixture
def test_config() -> SimulatorConfig:
    """Quiet configuration with a fixed seed."""
    return SimulatorConfig(log_level="DEBUG", seed=42, echo=False)


@pytest.fixture
def fixed_random() -> type[FixedRandom]:
    """Factory for random sources with a fixed draw."""
    return FixedRandom
