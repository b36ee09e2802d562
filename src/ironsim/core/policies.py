"""Cleaning and steam-light policies plugged into an Iron.

A cleaning policy is called before every ironing pass and returns True when
the pass must not run. A steam-light policy is called after steam use with the
current steam counter.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from .events import needs_cleaning_event

if TYPE_CHECKING:
    from .iron import Iron

logger = logging.getLogger(__name__)

# Ironing passes allowed between two descales
CLEANING_INTERVAL = 3

# Steam counter value that lights the water indicator
WATER_LIGHT_STEAM_COUNT = 2

# Type aliases for policy functions
CleaningPolicy = Callable[["Iron"], bool]
SteamLightPolicy = Callable[["Iron", int], None]


def block_until_descaled(iron: Iron) -> bool:
    """Block ironing once the cleaning interval is reached.

    The counter stays at the interval until descale() is called, so every
    later attempt is blocked too.
    """
    if iron.ironing_count == CLEANING_INTERVAL:
        iron.emit(needs_cleaning_event(iron.name, iron.ironing_count))
        logger.debug("%s blocked until descaled", iron.name)
        return True
    return False


def auto_descale(iron: Iron) -> bool:
    """Descale automatically once the cleaning interval is reached.

    The call that triggers the clean still does not iron.
    """
    if iron.ironing_count == CLEANING_INTERVAL:
        iron.emit(needs_cleaning_event(iron.name, iron.ironing_count))
        logger.debug("%s descaling automatically", iron.name)
        iron.descale()
        return True
    return False


def no_water_light(iron: Iron, steam_count: int) -> None:
    """Irons without a water indicator do nothing."""


def water_light(iron: Iron, steam_count: int) -> None:
    """Light the water indicator when the steam counter hits its threshold."""
    if steam_count == WATER_LIGHT_STEAM_COUNT:
        iron.light_water_indicator(steam_count)
