"""Scripted demonstration of the three iron models."""

from __future__ import annotations

import logging
import random
from typing import Callable, Iterable, Optional

from .appliances import MODELS, create_iron
from .core.events import Event
from .core.iron import EventListener, Iron

logger = logging.getLogger(__name__)


def console_listener(event: Event) -> None:
    """Print an event's status line to stdout."""
    print(event.message)


def _regular_script(iron: Iron) -> None:
    iron.turn_on()
    iron.iron_at_temperature(170)
    iron.use_steam()
    iron.use_steam()
    iron.iron_by_program("Cotton")
    iron.iron_by_program("Linen")  # above this model's maximum
    iron.descale()


def _premium_script(iron: Iron) -> None:
    iron.turn_on()
    iron.use_steam()
    iron.iron_at_temperature(150)
    iron.use_steam()
    iron.iron_at_temperature(170)  # second steam pass lights the water indicator
    iron.iron_at_temperature(225)
    iron.iron_by_program("Silk")  # triggers the automatic descale
    iron.use_steam()
    iron.iron_by_program("Silk")
    iron.use_steam()
    iron.iron_by_program("Synthetics")  # too cold for steam
    iron.iron_by_program("Synthetics")
    iron.iron_by_program("Linen")
    iron.use_steam()
    iron.iron_at_temperature(97)


def _linen_script(iron: Iron) -> None:
    iron.turn_on()
    iron.iron_at_temperature(210)
    iron.iron_by_program("Silk")
    iron.use_steam()
    iron.iron_at_temperature(130)
    iron.iron_by_program("Linen")  # blocked until descaled
    iron.descale()


SCRIPTS: dict[str, Callable[[Iron], None]] = {
    "Regular": _regular_script,
    "Premium": _premium_script,
    "Linen": _linen_script,
}


def run_demo(
    models: Optional[Iterable[str]] = None,
    rng: Optional[random.Random] = None,
    echo: bool = True,
    listeners: Iterable[EventListener] = (),
) -> list[Iron]:
    """Run the scripted call sequence for each model.

    Args:
        models: Model names to demonstrate. Defaults to all models.
        rng: Random source shared by every iron.
        echo: Print a header per model and every status line to stdout.
        listeners: Extra listeners attached to every iron.

    Returns:
        The irons created, in model order, after they are turned off.

    Raises:
        ValueError: If a model name is unknown.
    """
    names = list(models) if models is not None else list(MODELS)
    irons = [create_iron(name, rng) for name in names]
    extra_listeners = list(listeners)

    for iron in irons:
        if echo:
            iron.add_listener(console_listener)
        for listener in extra_listeners:
            iron.add_listener(listener)

    for iron in irons:
        if echo:
            print(f"\n=== Testing {iron.name.lower()} ===\n")
        logger.info("Running %s demo", iron.name)
        SCRIPTS[iron.name](iron)

    for iron in reversed(irons):
        iron.turn_off()

    return irons
