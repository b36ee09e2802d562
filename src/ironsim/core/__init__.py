"""Core iron simulation logic."""

from .base import IroningMachine
from .events import Event, EventType
from .iron import Iron
from .programs import PROGRAMS, FabricProgram
from .states import IronState

__all__ = [
    "IroningMachine",
    "Event",
    "EventType",
    "Iron",
    "PROGRAMS",
    "FabricProgram",
    "IronState",
]
