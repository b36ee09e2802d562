"""Home ironing appliance simulator."""

from .appliances import (
    MODELS,
    IronModel,
    create_iron,
    new_linen_iron,
    new_premium_iron,
    new_regular_iron,
)
from .core import Event, EventType, FabricProgram, Iron, IroningMachine, IronState

__version__ = "0.1.0"

__all__ = [
    "MODELS",
    "IronModel",
    "create_iron",
    "new_linen_iron",
    "new_premium_iron",
    "new_regular_iron",
    "Event",
    "EventType",
    "FabricProgram",
    "Iron",
    "IroningMachine",
    "IronState",
]
