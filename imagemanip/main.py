"""
Command line wrapper: load -> operation -> save.

    imagemanip grayscale in.jpg out.png
    imagemanip hue in.jpg out.png --value 180
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .config import Settings
from .engine import OPERATIONS, Engine
from .errors import ImageManipError
from .log import get_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="imagemanip",
        description="Apply a pixel transformation to an image file.",
    )
    parser.add_argument("operation", choices=sorted(OPERATIONS))
    parser.add_argument("source", help="input image")
    parser.add_argument("destination", help="output image")
    parser.add_argument("--value", type=float, default=None,
                        help="parameter for hue (degrees), saturation or lightness (0..1)")
    parser.add_argument("--format", dest="fmt", default=None,
                        help="output format (default: from destination suffix)")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logger = get_logger("DEBUG" if args.verbose else None)
    try:
        settings = Settings.from_env()
        if not args.verbose:
            logger.setLevel(settings.log_level)
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        return 1

    engine = Engine(settings)
    try:
        engine.load(args.source)
        engine.apply(args.operation, args.value)
        engine.save(args.destination, args.fmt)
    except (ImageManipError, ValueError) as e:
        logger.error("%s failed: %s", args.operation, e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
