"""
Cool Id Generator

This script prints freshly generated ids, one per line.
"""

import argparse
import logging
import os
import random
import sys

from cool_id.core.config import CONFIG_FILE_ENV, get_settings
from cool_id.core.logging import get_logger
from cool_id.core.types import Size
from cool_id.utils.name_generator import generate_batch


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cool-id", description="Generate human-memorable random ids"
    )
    parser.add_argument(
        "--size",
        choices=[size.value for size in Size],
        help="Id size (default from settings)",
    )
    parser.add_argument(
        "-n", "--count", type=_positive_int, help="Number of ids to print"
    )
    parser.add_argument("--seed", type=int, help="Seed for reproducible output")
    parser.add_argument(
        "--max-len",
        action="store_true",
        help="Print the maximum byte length for the size instead of ids",
    )
    parser.add_argument("--config", type=str, help="Path to config file")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    # Set environment variable for config file if specified
    if args.config:
        config_path = os.path.abspath(args.config)
        if os.path.exists(config_path):
            os.environ[CONFIG_FILE_ENV] = config_path
            get_settings.cache_clear()

    settings = get_settings()
    logger = get_logger("cool_id")
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    # Override settings with command line arguments
    size = Size(args.size) if args.size else settings.generator.default_size
    count = args.count or settings.generator.default_count

    if args.max_len:
        print(size.max_len)
        return 0

    rng = random.Random(args.seed) if args.seed is not None else None
    logger.debug(
        f"Generating {count} {size.value} id(s)",
        extra={"size": size.value, "count": count},
    )
    for cool_id in generate_batch(size, count, rng):
        print(cool_id)
    return 0


if __name__ == "__main__":
    sys.exit(main())
