"""Event system for iron status reports."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Any, Optional


class EventType(Enum):
    """Types of events in the ironing simulation."""

    # Power events
    TURNED_ON = auto()
    TURNED_OFF = auto()

    # Steam events
    STEAM_ON = auto()
    STEAM_ALREADY_ON = auto()
    STEAM_CONFLICT = auto()

    # Maintenance events
    NEEDS_CLEANING = auto()
    CLEANED = auto()
    WATER_LOW = auto()

    # Ironing events
    IRONED = auto()
    INVALID_TEMPERATURE = auto()
    TEMPERATURE_NOT_SUPPORTED = auto()
    PROGRAM_NOT_SUPPORTED = auto()


@dataclass
class Event:
    """A single status report emitted by an iron.

    Attributes:
        type: The type of event.
        message: Human-readable status line.
        timestamp: When the event occurred.
        data: Optional dictionary of event-specific data.
        source: Name of the iron that emitted the event.
    """

    type: EventType
    message: str
    timestamp: datetime = field(default_factory=datetime.now)
    data: Optional[dict[str, Any]] = None
    source: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert event to dictionary for serialization.

        Returns:
            Dictionary representation of the event.
        """
        return {
            "type": self.type.name,
            "message": self.message,
            "timestamp": self.timestamp.isoformat(),
            "data": self.data,
            "source": self.source,
        }

    def __str__(self) -> str:
        return self.message


def turned_on_event(name: str) -> Event:
    return Event(
        type=EventType.TURNED_ON,
        message=f"{name} iron is turned on.",
        source=name,
    )


def turned_off_event(name: str) -> Event:
    return Event(
        type=EventType.TURNED_OFF,
        message=f"{name} iron is turned off.",
        source=name,
    )


def steam_on_event(name: str, already_on: bool = False) -> Event:
    """Create a STEAM_ON or STEAM_ALREADY_ON event.

    Args:
        name: Iron display name.
        already_on: True if steam was active before the request.

    Returns:
        Steam event.
    """
    if already_on:
        return Event(
            type=EventType.STEAM_ALREADY_ON,
            message="Steam is already on.",
            source=name,
        )
    return Event(type=EventType.STEAM_ON, message="Steam is now on.", source=name)


def steam_conflict_event(name: str, temperature: int, min_steam_temp: int) -> Event:
    """Create a STEAM_CONFLICT event.

    Args:
        name: Iron display name.
        temperature: Temperature that was attempted in °C.
        min_steam_temp: Lowest temperature that allows steam.

    Returns:
        Steam conflict event.
    """
    return Event(
        type=EventType.STEAM_CONFLICT,
        message=(
            f"Attempted to iron at {temperature}°C. Not ironing. "
            "Turning off steam first. To iron with steam, make sure the "
            f"temperature is over {min_steam_temp} degrees"
        ),
        data={"temperature": temperature, "min_steam_temp": min_steam_temp},
        source=name,
    )


def needs_cleaning_event(name: str, usage_count: int) -> Event:
    return Event(
        type=EventType.NEEDS_CLEANING,
        message=f"Machine has been used {usage_count} times and needs cleaning",
        data={"ironing_count": usage_count},
        source=name,
    )


def cleaned_event(name: str) -> Event:
    return Event(
        type=EventType.CLEANED,
        message=f"{name} iron is cleaned.",
        source=name,
    )


def water_low_event(name: str, steam_count: int) -> Event:
    return Event(
        type=EventType.WATER_LOW,
        message="You need to add water to the ironing machine.",
        data={"steam_count": steam_count},
        source=name,
    )


def ironed_event(
    name: str,
    temperature: int,
    program: str,
    with_steam: bool,
) -> Event:
    """Create an IRONED event.

    Args:
        name: Iron display name.
        temperature: Ironing temperature in °C.
        program: Fabric program used.
        with_steam: Whether steam accompanied this ironing pass.

    Returns:
        Ironed event.
    """
    steam_suffix = " with steam" if with_steam else ""
    return Event(
        type=EventType.IRONED,
        message=(
            f"{name} iron is ironing using the {program} program, "
            f"at {temperature}°C{steam_suffix}"
        ),
        data={
            "temperature": temperature,
            "program": program,
            "with_steam": with_steam,
        },
        source=name,
    )


def invalid_temperature_event(name: str, temperature: int) -> Event:
    return Event(
        type=EventType.INVALID_TEMPERATURE,
        message=(
            f"Invalid temperature range ({temperature}°C). "
            "Unable to iron at this temperature."
        ),
        data={"temperature": temperature},
        source=name,
    )


def temperature_not_supported_event(name: str, temperature: int, max_temp: int) -> Event:
    return Event(
        type=EventType.TEMPERATURE_NOT_SUPPORTED,
        message=(
            f"The temperature you entered ({temperature}°C) is not within the "
            f"supported range for the {name} iron"
        ),
        data={"temperature": temperature, "max_temp": max_temp},
        source=name,
    )


def program_not_supported_event(name: str, program: str) -> Event:
    return Event(
        type=EventType.PROGRAM_NOT_SUPPORTED,
        message=f"The {name} iron does not support the {program} ironing mode",
        data={"program": program},
        source=name,
    )
