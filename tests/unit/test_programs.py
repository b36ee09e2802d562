"""Tests for the fabric program table."""

import pytest

from ironsim.core.programs import (
    ABSOLUTE_MAX_TEMP,
    ABSOLUTE_MIN_TEMP,
    INVALID_PROGRAM,
    PROGRAMS,
    FabricProgram,
    get_program,
    is_supported_temperature,
    program_for_temperature,
)


class TestProgramTable:
    """Test the static program table."""

    def test_four_programs_in_lookup_order(self) -> None:
        """Table should list Linen, Cotton, Silk, Synthetics in order."""
        assert list(PROGRAMS) == ["Linen", "Cotton", "Silk", "Synthetics"]

    def test_program_ranges(self) -> None:
        """Each program should carry its inclusive range."""
        assert PROGRAMS["Linen"] == FabricProgram("Linen", 200, 230)
        assert PROGRAMS["Cotton"] == FabricProgram("Cotton", 150, 199)
        assert PROGRAMS["Silk"] == FabricProgram("Silk", 120, 149)
        assert PROGRAMS["Synthetics"] == FabricProgram("Synthetics", 90, 119)

    def test_table_is_read_only(self) -> None:
        """The table should reject runtime mutation."""
        with pytest.raises(TypeError):
            PROGRAMS["Wool"] = FabricProgram("Wool", 100, 140)  # type: ignore[index]

    def test_program_is_immutable(self) -> None:
        """Programs should be frozen values."""
        with pytest.raises(AttributeError):
            PROGRAMS["Silk"].max_temp = 160  # type: ignore[misc]

    def test_absolute_bounds(self) -> None:
        """Absolute bounds should be the union of all ranges."""
        assert ABSOLUTE_MIN_TEMP == 90
        assert ABSOLUTE_MAX_TEMP == 230


class TestProgramLookup:
    """Test program lookup helpers."""

    @pytest.mark.parametrize(
        ("temperature", "expected"),
        [
            (90, "Synthetics"),
            (119, "Synthetics"),
            (120, "Silk"),
            (149, "Silk"),
            (150, "Cotton"),
            (170, "Cotton"),
            (199, "Cotton"),
            (200, "Linen"),
            (230, "Linen"),
        ],
    )
    def test_program_for_temperature(self, temperature: int, expected: str) -> None:
        """Range boundaries should resolve to the containing program."""
        assert program_for_temperature(temperature) == expected

    def test_unmatched_temperature_is_invalid(self) -> None:
        """Temperatures outside every range should resolve to Invalid."""
        assert program_for_temperature(89) == INVALID_PROGRAM
        assert program_for_temperature(231) == INVALID_PROGRAM

    def test_get_program_known(self) -> None:
        """Known names should return their program."""
        assert get_program("Cotton") is PROGRAMS["Cotton"]

    def test_get_program_unknown(self) -> None:
        """Unknown or differently cased names should return None."""
        assert get_program("Wool") is None
        assert get_program("cotton") is None

    def test_supported_temperature_bounds(self) -> None:
        """Support check should be inclusive at both ends."""
        assert is_supported_temperature(90)
        assert is_supported_temperature(230)
        assert not is_supported_temperature(89)
        assert not is_supported_temperature(231)
