"""Abstract interface shared by all ironing machines."""

from abc import ABC, abstractmethod

from .events import Event


class IroningMachine(ABC):
    """Abstract interface for an ironing appliance.

    Every operation is non-fatal: anomalies are reported as events in the
    returned list rather than raised.
    """

    @abstractmethod
    def turn_on(self) -> list[Event]:
        """Power the iron on."""

    @abstractmethod
    def turn_off(self) -> list[Event]:
        """Power the iron off."""

    @abstractmethod
    def use_steam(self) -> list[Event]:
        """Activate steam for the next ironing pass."""

    @abstractmethod
    def descale(self) -> list[Event]:
        """Clean the iron, resetting its usage counters."""

    @abstractmethod
    def iron_at_temperature(self, temperature: int) -> list[Event]:
        """Iron at an explicit temperature.

        Args:
            temperature: Requested temperature in °C.

        Returns:
            Events emitted while handling the request.
        """

    @abstractmethod
    def iron_by_program(self, program: str) -> list[Event]:
        """Iron with a named fabric program.

        Args:
            program: Fabric program name.

        Returns:
            Events emitted while handling the request.
        """
