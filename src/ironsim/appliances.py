"""Appliance models and factory functions."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Optional

from .core.iron import Iron
from .core.policies import (
    CleaningPolicy,
    SteamLightPolicy,
    auto_descale,
    block_until_descaled,
    no_water_light,
    water_light,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IronModel:
    """Configuration for one appliance model.

    Attributes:
        name: Model name, also used as the iron's display name.
        max_temp: Highest temperature the model can reach in °C.
        cleaning_policy: Policy consulted before each ironing pass.
        steam_light_policy: Policy consulted after steam use.
    """

    name: str
    max_temp: int
    cleaning_policy: CleaningPolicy = block_until_descaled
    steam_light_policy: SteamLightPolicy = no_water_light


REGULAR = IronModel(name="Regular", max_temp=199)
PREMIUM = IronModel(
    name="Premium",
    max_temp=199,
    cleaning_policy=auto_descale,
    steam_light_policy=water_light,
)
LINEN = IronModel(name="Linen", max_temp=230)

MODELS: dict[str, IronModel] = {
    model.name: model for model in (REGULAR, PREMIUM, LINEN)
}


def create_iron(model_name: str, rng: Optional[random.Random] = None) -> Iron:
    """Factory function to create an iron for a named model.

    Args:
        model_name: One of the names in MODELS, case insensitive.
        rng: Random source for program temperature draws.

    Returns:
        A new iron, powered off with zeroed counters.

    Raises:
        ValueError: If the model name is unknown.
    """
    model = MODELS.get(model_name.capitalize())
    if model is None:
        raise ValueError(f"Unknown iron model: {model_name}")

    logger.debug("Creating %s iron (max %d°C)", model.name, model.max_temp)
    return Iron(
        name=model.name,
        max_temp=model.max_temp,
        cleaning_policy=model.cleaning_policy,
        steam_light_policy=model.steam_light_policy,
        rng=rng,
    )


def new_regular_iron(rng: Optional[random.Random] = None) -> Iron:
    """Create a Regular iron: max 199°C, manual descale, no water light."""
    return create_iron(REGULAR.name, rng)


def new_premium_iron(rng: Optional[random.Random] = None) -> Iron:
    """Create a Premium iron: max 199°C, automatic descale, water light."""
    return create_iron(PREMIUM.name, rng)


def new_linen_iron(rng: Optional[random.Random] = None) -> Iron:
    """Create a Linen iron: max 230°C, manual descale, no water light."""
    return create_iron(LINEN.name, rng)
