"""Iron state machine shared by every appliance model."""

from __future__ import annotations

import logging
import random
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional

from .base import IroningMachine
from .events import (
    Event,
    cleaned_event,
    invalid_temperature_event,
    ironed_event,
    program_not_supported_event,
    steam_conflict_event,
    steam_on_event,
    temperature_not_supported_event,
    turned_off_event,
    turned_on_event,
    water_low_event,
)
from .policies import (
    CleaningPolicy,
    SteamLightPolicy,
    block_until_descaled,
    no_water_light,
)
from .programs import (
    MIN_STEAM_TEMP,
    get_program,
    is_supported_temperature,
    program_for_temperature,
)
from .states import IronState, derive_state

logger = logging.getLogger(__name__)

# Type alias for event listeners
EventListener = Callable[[Event], None]

# Program that always irons with steam
STEAM_PROGRAM = "Linen"


def _check_temperature(temperature: Any) -> int:
    if isinstance(temperature, bool) or not isinstance(temperature, int):
        raise TypeError(
            f"temperature must be an int, got {type(temperature).__name__}"
        )
    return temperature


def _check_program(program: Any) -> str:
    if not isinstance(program, str):
        raise TypeError(f"program must be a str, got {type(program).__name__}")
    return program


class Iron(IroningMachine):
    """Iron state machine.

    Tracks power, steam, and usage counters, and reports every outcome as
    an Event. The two model-specific behaviours are plugged in as policies:
    a cleaning policy consulted before each ironing pass and a steam-light
    policy consulted after steam use.

    Each public operation returns the events it emitted. The same events are
    delivered to registered listeners as they happen.

    Example:
        iron = Iron("Regular", max_temp=199)
        iron.add_listener(console_listener)
        iron.turn_on()
        iron.iron_at_temperature(170)
    """

    def __init__(
        self,
        name: str,
        max_temp: int,
        cleaning_policy: CleaningPolicy = block_until_descaled,
        steam_light_policy: SteamLightPolicy = no_water_light,
        rng: Optional[random.Random] = None,
    ) -> None:
        """Initialize the iron, powered off with zeroed counters.

        Args:
            name: Display name used in reports.
            max_temp: Highest temperature this iron can reach in °C.
            cleaning_policy: Called before each ironing pass.
            steam_light_policy: Called after steam use with the steam counter.
            rng: Random source for program temperature draws.
        """
        self._name = name
        self._max_temp = _check_temperature(max_temp)
        self._cleaning_policy = cleaning_policy
        self._steam_light_policy = steam_light_policy
        self._rng = rng or random.Random()

        self._powered = False
        self._steaming = False
        self._ironing_count = 0
        self._steam_count = 0
        self._needs_water = False

        self._listeners: list[EventListener] = []
        self._reports: list[list[Event]] = []

    @property
    def name(self) -> str:
        """Display name of the iron."""
        return self._name

    @property
    def max_temp(self) -> int:
        """Highest supported temperature in °C."""
        return self._max_temp

    @property
    def powered(self) -> bool:
        return self._powered

    @property
    def steaming(self) -> bool:
        return self._steaming

    @property
    def ironing_count(self) -> int:
        """Ironing passes attempted since the last descale."""
        return self._ironing_count

    @property
    def steam_count(self) -> int:
        """Steam-accompanied passes since the last descale."""
        return self._steam_count

    @property
    def needs_water(self) -> bool:
        """Whether the water indicator is lit."""
        return self._needs_water

    @property
    def state(self) -> IronState:
        """Current state derived from the power and steam flags."""
        return derive_state(self._powered, self._steaming)

    def status(self) -> dict[str, Any]:
        """Snapshot of the iron's configuration and state.

        Returns:
            Dictionary suitable for display or serialization.
        """
        return {
            "name": self._name,
            "max_temp": self._max_temp,
            "state": self.state.name,
            "powered": self._powered,
            "steaming": self._steaming,
            "ironing_count": self._ironing_count,
            "steam_count": self._steam_count,
            "needs_water": self._needs_water,
        }

    def add_listener(self, listener: EventListener) -> None:
        """Add listener for emitted events.

        Args:
            listener: Function taking Event.
        """
        self._listeners.append(listener)

    def remove_listener(self, listener: EventListener) -> None:
        """Remove an event listener.

        Args:
            listener: Previously added listener function.
        """
        if listener in self._listeners:
            self._listeners.remove(listener)

    def emit(self, event: Event) -> None:
        """Record an event in the running reports and notify listeners.

        Policies call this to report their own outcomes.

        Args:
            event: Event to emit.
        """
        for report in self._reports:
            report.append(event)
        for listener in self._listeners:
            try:
                listener(event)
            except Exception as e:
                logger.error("Event listener error: %s", e)

    @contextmanager
    def _operation(self) -> Iterator[list[Event]]:
        """Collect the events emitted during one public operation.

        Nested operations (an automatic descale, steam activated by the
        Linen program) add their events to the outer report as well.
        """
        report: list[Event] = []
        self._reports.append(report)
        try:
            yield report
        finally:
            self._reports.pop()

    def turn_on(self) -> list[Event]:
        with self._operation() as report:
            self._powered = True
            self.emit(turned_on_event(self._name))
            logger.info("%s iron powered on", self._name)
        return report

    def turn_off(self) -> list[Event]:
        with self._operation() as report:
            self._powered = False
            self.emit(turned_off_event(self._name))
            logger.info("%s iron powered off", self._name)
        return report

    def use_steam(self) -> list[Event]:
        with self._operation() as report:
            if self._steaming:
                self.emit(steam_on_event(self._name, already_on=True))
            else:
                self._steaming = True
                self.emit(steam_on_event(self._name))
                logger.info("%s steam activated", self._name)
        return report

    def descale(self) -> list[Event]:
        """Reset the ironing and steam counters.

        Power, steam, and the water indicator are left unchanged.
        """
        with self._operation() as report:
            self._ironing_count = 0
            self._steam_count = 0
            self.emit(cleaned_event(self._name))
            logger.info("%s iron descaled", self._name)
        return report

    def light_water_indicator(self, steam_count: int) -> None:
        """Light the water indicator and report a refill reminder.

        There is no reset: the indicator stays lit for the iron's lifetime.

        Args:
            steam_count: Steam counter value that triggered the indicator.
        """
        self._needs_water = True
        self.emit(water_low_event(self._name, steam_count))
        logger.info("%s water indicator lit", self._name)

    def _turn_off_steam(self) -> None:
        if self._steaming:
            logger.debug("%s steam deactivated", self._name)
        self._steaming = False

    def _begin_pass(self) -> bool:
        """Consult the cleaning policy and count the pass.

        Returns:
            True if the pass may continue.
        """
        if self._cleaning_policy(self):
            return False
        self._ironing_count += 1
        logger.debug("%s ironing count: %d", self._name, self._ironing_count)
        return True

    def _press(self, temperature: int, program: str) -> None:
        """Iron at a temperature already validated for this model.

        Args:
            temperature: Ironing temperature in °C.
            program: Fabric program the temperature belongs to.
        """
        if self._steaming and temperature < MIN_STEAM_TEMP:
            self.emit(steam_conflict_event(self._name, temperature, MIN_STEAM_TEMP))
            logger.warning(
                "%s refused %d°C with steam on, steam turned off",
                self._name,
                temperature,
            )
            self._turn_off_steam()
            return

        if program == STEAM_PROGRAM:
            if not self._steaming:
                self.use_steam()
            self.emit(ironed_event(self._name, temperature, program, with_steam=True))
            self._turn_off_steam()
            self._steam_light_policy(self, self._steam_count)
            self._steam_count += 1
        else:
            with_steam = self._steaming
            if with_steam:
                self._steam_count += 1
            self.emit(ironed_event(self._name, temperature, program, with_steam))
            self._steam_light_policy(self, self._steam_count)
            self._turn_off_steam()

        logger.debug("%s steam count: %d", self._name, self._steam_count)

    def iron_at_temperature(self, temperature: int) -> list[Event]:
        """Iron at an explicit temperature.

        The program is resolved from the temperature. A temperature above
        this model's maximum is rejected after the pass has been counted.

        Args:
            temperature: Requested temperature in °C.

        Returns:
            Events emitted while handling the request.

        Raises:
            TypeError: If temperature is not an int.
        """
        temperature = _check_temperature(temperature)
        with self._operation() as report:
            if not is_supported_temperature(temperature):
                self.emit(invalid_temperature_event(self._name, temperature))
                logger.warning("%s rejected invalid temperature %d°C", self._name, temperature)
                return report

            if not self._begin_pass():
                return report

            if temperature > self._max_temp:
                self.emit(
                    temperature_not_supported_event(self._name, temperature, self._max_temp)
                )
                logger.warning(
                    "%s cannot reach %d°C (max %d°C)",
                    self._name,
                    temperature,
                    self._max_temp,
                )
                return report

            self._press(temperature, program_for_temperature(temperature))
        return report

    def iron_by_program(self, program: str) -> list[Event]:
        """Iron with a named fabric program at a random temperature.

        The temperature is drawn uniformly from the program's inclusive
        range. Programs whose ceiling exceeds this model's maximum are
        rejected even though the name is known.

        Args:
            program: Fabric program name.

        Returns:
            Events emitted while handling the request.

        Raises:
            TypeError: If program is not a str.
        """
        program = _check_program(program)
        with self._operation() as report:
            if not self._begin_pass():
                return report

            fabric = get_program(program)
            if fabric is None:
                self.emit(program_not_supported_event(self._name, program))
                logger.warning("%s rejected unknown program %r", self._name, program)
                return report

            temperature = self._rng.randint(fabric.min_temp, fabric.max_temp)
            logger.debug("%s drew %d°C for %s", self._name, temperature, program)

            if fabric.max_temp > self._max_temp:
                self.emit(program_not_supported_event(self._name, program))
                logger.warning(
                    "%s cannot run %s (needs %d°C, max %d°C)",
                    self._name,
                    program,
                    fabric.max_temp,
                    self._max_temp,
                )
                return report

            self._press(temperature, fabric.name)
        return report

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, max_temp={self._max_temp})"
