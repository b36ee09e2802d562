"""Tests for appliance models and factory functions."""

import pytest

from ironsim.appliances import (
    MODELS,
    create_iron,
    new_linen_iron,
    new_premium_iron,
    new_regular_iron,
)
from ironsim.core.base import IroningMachine
from ironsim.core.policies import (
    auto_descale,
    block_until_descaled,
    no_water_light,
    water_light,
)


class TestModels:
    """Test the model table."""

    def test_three_models(self) -> None:
        """Table should hold Regular, Premium and Linen."""
        assert list(MODELS) == ["Regular", "Premium", "Linen"]

    def test_model_maximums(self) -> None:
        """Regular and Premium reach 199°C, Linen reaches 230°C."""
        assert MODELS["Regular"].max_temp == 199
        assert MODELS["Premium"].max_temp == 199
        assert MODELS["Linen"].max_temp == 230

    def test_model_policies(self) -> None:
        """Only Premium should use the automatic clean and water light."""
        assert MODELS["Regular"].cleaning_policy is block_until_descaled
        assert MODELS["Regular"].steam_light_policy is no_water_light
        assert MODELS["Premium"].cleaning_policy is auto_descale
        assert MODELS["Premium"].steam_light_policy is water_light
        assert MODELS["Linen"].cleaning_policy is block_until_descaled
        assert MODELS["Linen"].steam_light_policy is no_water_light


class TestFactory:
    """Test create_iron and the named constructors."""

    @pytest.mark.parametrize(
        ("factory", "name", "max_temp"),
        [
            (new_regular_iron, "Regular", 199),
            (new_premium_iron, "Premium", 199),
            (new_linen_iron, "Linen", 230),
        ],
    )
    def test_named_constructors(self, factory, name: str, max_temp: int) -> None:
        """Each constructor should build a fresh iron for its model."""
        iron = factory()
        assert isinstance(iron, IroningMachine)
        assert iron.name == name
        assert iron.max_temp == max_temp
        assert not iron.powered
        assert iron.ironing_count == 0

    def test_create_iron_is_case_insensitive(self) -> None:
        """Model names should match regardless of case."""
        assert create_iron("premium").name == "Premium"
        assert create_iron("LINEN").name == "Linen"

    def test_unknown_model_raises(self) -> None:
        """Unknown models should raise ValueError."""
        with pytest.raises(ValueError, match="Unknown iron model"):
            create_iron("Travel")

    def test_irons_are_independent(self) -> None:
        """Two irons of the same model should not share state."""
        first = new_regular_iron()
        second = new_regular_iron()
        first.iron_at_temperature(170)
        assert second.ironing_count == 0
