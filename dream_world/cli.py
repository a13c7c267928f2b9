"""Command-line entry point: print the World Model for a dream as JSON."""

import argparse
import logging
import sys
from typing import List, Optional

from dream_world.config.loader import ConfigError, load_config
from dream_world.pipeline.transform import transform_dream

DEFAULT_DREAM = "A floating city above the clouds with glass towers"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dream-world",
        description="Transform a dream description into a world model.",
    )
    parser.add_argument("dream", nargs="?", default=DEFAULT_DREAM)
    parser.add_argument("--config", help="JSON file overriding word lists")
    parser.add_argument("--compact", action="store_true", help="single-line JSON")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    config = None
    if args.config:
        try:
            config = load_config(args.config)
        except ConfigError as e:
            print(f"error: {e}", file=sys.stderr)
            return 2

    world = transform_dream(args.dream, config)
    print(world.to_json(indent=None if args.compact else 2))
    return 0
