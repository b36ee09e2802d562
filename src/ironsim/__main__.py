"""Entry point for the iron simulator demo."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

from .config import LOG_LEVELS, load_config
from .demo import run_demo


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Home Ironing Appliance Simulator",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to YAML config file (default: IRONSIM_CONFIG or ./ironsim.yaml)",
    )
    parser.add_argument(
        "--model",
        action="append",
        default=None,
        help="Model to demonstrate, may be repeated (default: all models)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for program temperature draws",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=list(LOG_LEVELS),
        help="Logging level (default: from config, INFO)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Do not print status lines",
    )

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ValueError as e:
        parser.error(str(e))

    if args.log_level:
        config.log_level = args.log_level
    if args.seed is not None:
        config.seed = args.seed
    if args.model:
        config.models = args.model
    if args.quiet:
        config.echo = False

    # Configure logging
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    rng = random.Random(config.seed)
    try:
        run_demo(config.models, rng=rng, echo=config.echo)
    except ValueError as e:
        parser.error(str(e))

    return 0


if __name__ == "__main__":
    sys.exit(main())
