"""State definitions for the iron state machine."""

from __future__ import annotations

from enum import Enum, auto


class IronState(Enum):
    """Iron operational states.

    OFF: Powered off. Steam may still be armed, it takes effect once ironing.
    IDLE: Powered on, steam not active.
    STEAMING: Powered on with steam active.
    """

    OFF = auto()
    IDLE = auto()
    STEAMING = auto()


def derive_state(powered: bool, steaming: bool) -> IronState:
    """Map the power and steam flags to a single state.

    Args:
        powered: Whether the iron is turned on.
        steaming: Whether steam is active.

    Returns:
        The matching IronState.
    """
    if not powered:
        return IronState.OFF
    if steaming:
        return IronState.STEAMING
    return IronState.IDLE
