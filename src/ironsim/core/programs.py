"""Fabric program table mapping ironing presets to temperature ranges."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional


@dataclass(frozen=True)
class FabricProgram:
    """A named ironing preset.

    Attributes:
        name: Program name (Linen, Cotton, Silk, Synthetics).
        min_temp: Lowest temperature of the program in °C, inclusive.
        max_temp: Highest temperature of the program in °C, inclusive.
    """

    name: str
    min_temp: int
    max_temp: int

    def contains(self, temperature: int) -> bool:
        """Check whether a temperature falls inside this program's range."""
        return self.min_temp <= temperature <= self.max_temp


# Name reported when a temperature matches no program
INVALID_PROGRAM = "Invalid"

# Insertion order is the lookup order for program_for_temperature()
PROGRAMS: Mapping[str, FabricProgram] = MappingProxyType({
    "Linen": FabricProgram("Linen", 200, 230),
    "Cotton": FabricProgram("Cotton", 150, 199),
    "Silk": FabricProgram("Silk", 120, 149),
    "Synthetics": FabricProgram("Synthetics", 90, 119),
})

ABSOLUTE_MIN_TEMP = min(p.min_temp for p in PROGRAMS.values())
ABSOLUTE_MAX_TEMP = max(p.max_temp for p in PROGRAMS.values())

# Steam cannot be used below this temperature
MIN_STEAM_TEMP = 120


def get_program(name: str) -> Optional[FabricProgram]:
    """Look up a fabric program by name.

    Args:
        name: Program name, case sensitive.

    Returns:
        The program, or None if the name is not a known program.
    """
    return PROGRAMS.get(name)


def program_for_temperature(temperature: int) -> str:
    """Resolve the program whose range contains a temperature.

    Args:
        temperature: Temperature in °C.

    Returns:
        Name of the first matching program, or INVALID_PROGRAM.
    """
    for program in PROGRAMS.values():
        if program.contains(temperature):
            return program.name
    return INVALID_PROGRAM


def is_supported_temperature(temperature: int) -> bool:
    """Check a temperature against the absolute bounds of all programs."""
    return ABSOLUTE_MIN_TEMP <= temperature <= ABSOLUTE_MAX_TEMP
