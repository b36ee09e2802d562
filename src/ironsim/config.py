"""Configuration management for the iron simulator."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_MODELS = ["Regular", "Premium", "Linen"]

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class SimulatorConfig:
    """Main configuration class for the iron simulator.

    The fabric program table is fixed and not part of the configuration.
    """

    # Logging
    log_level: str = "INFO"

    # Seed for program temperature draws, None for a fresh random source
    seed: Optional[int] = None

    # Models run by the demonstration driver, in order
    models: list[str] = field(default_factory=lambda: list(DEFAULT_MODELS))

    # Print status lines to stdout
    echo: bool = True


def load_config(config_path: Path | None = None) -> SimulatorConfig:
    """Load configuration from a YAML file and environment variables.

    Configuration is loaded with the following priority (highest to lowest):
    1. Environment variables (IRONSIM_*)
    2. YAML config file
    3. Hardcoded defaults

    Args:
        config_path: Path to a YAML file. Defaults to IRONSIM_CONFIG, then
            ironsim.yaml in the current directory.

    Returns:
        Loaded SimulatorConfig instance.
    """
    config = SimulatorConfig()

    if config_path is None:
        env_path = os.environ.get("IRONSIM_CONFIG")
        config_path = Path(env_path) if env_path else Path.cwd() / "ironsim.yaml"

    if config_path.exists():
        config = _merge_yaml(config, config_path)
        logger.debug("Loaded config from %s", config_path)
    else:
        logger.debug("No config file at %s, using defaults", config_path)

    config = _apply_env_overrides(config)
    _validate(config)
    return config


def _merge_yaml(config: SimulatorConfig, path: Path) -> SimulatorConfig:
    """Merge YAML file into config."""
    with open(path) as f:
        data = yaml.safe_load(f)

    if data is None:
        return config

    config.log_level = str(data.get("log_level", config.log_level)).upper()
    config.seed = data.get("seed", config.seed)
    echo = data.get("echo", config.echo)
    config.echo = _parse_bool(echo) if isinstance(echo, str) else bool(echo)

    if "models" in data:
        config.models = [str(m) for m in data["models"]]

    return config


def _apply_env_overrides(config: SimulatorConfig) -> SimulatorConfig:
    """Apply environment variable overrides."""
    env_map: dict[str, tuple[str, Any]] = {
        "IRONSIM_LOG_LEVEL": ("log_level", _parse_log_level),
        "IRONSIM_SEED": ("seed", int),
        "IRONSIM_MODELS": ("models", _parse_list),
        "IRONSIM_ECHO": ("echo", _parse_bool),
    }

    for env_var, (attr, converter) in env_map.items():
        value = os.environ.get(env_var)
        if value is not None:
            try:
                converted = converter(value)
                setattr(config, attr, converted)
                logger.debug("Applied env override: %s=%s", env_var, converted)
            except (ValueError, TypeError) as e:
                logger.warning("Invalid env var %s=%s: %s", env_var, value, e)

    return config


def _validate(config: SimulatorConfig) -> None:
    if config.log_level not in LOG_LEVELS:
        raise ValueError(f"Invalid log level: {config.log_level}")
    if config.seed is not None and (
        isinstance(config.seed, bool) or not isinstance(config.seed, int)
    ):
        raise ValueError(f"Seed must be an integer, got {config.seed!r}")


def _parse_bool(value: str) -> bool:
    """Parse boolean from string."""
    return value.lower() in ("true", "1", "yes", "on")


def _parse_log_level(value: str) -> str:
    """Parse a log level name, rejecting unknown levels."""
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Invalid log level: {value}")
    return level


def _parse_list(value: str) -> list[str]:
    """Parse a comma separated list, dropping empty items."""
    return [item.strip() for item in value.split(",") if item.strip()]
