"""Command line entry point.

    $ pixel-pattern --seed abc --width 128 --height 128 --colors 4 \
        --filename pattern.png

Without ``--filename`` the image is generated but not written.
"""

import argparse
import logging
from typing import Optional, Sequence

from pixel_pattern.errors import PatternError
from pixel_pattern.generate import generate_from_options
from pixel_pattern.options import GenerateOptions
from pixel_pattern.types import (
    DEFAULT_COLORS,
    DEFAULT_HEIGHT,
    DEFAULT_PATTERN_HEIGHT,
    DEFAULT_PATTERN_WIDTH,
    DEFAULT_WIDTH,
)

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Image generated successfully!"


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="pixel-pattern",
        description="Generate patterned images based on a seed",
    )
    ap.add_argument("--colors", type=int, default=DEFAULT_COLORS, help="Number of colors")
    ap.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="Width of the image")
    ap.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help="Height of the image")
    ap.add_argument("--pwidth", type=int, default=DEFAULT_PATTERN_WIDTH, help="Pattern width")
    ap.add_argument("--pheight", type=int, default=DEFAULT_PATTERN_HEIGHT, help="Pattern height")
    ap.add_argument("--seed", default=None, help="Seed for the image generator")
    ap.add_argument("--filename", default=None, help="Output PNG file name")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        options = GenerateOptions(
            colors=args.colors,
            width=args.width,
            height=args.height,
            pwidth=args.pwidth,
            pheight=args.pheight,
            seed=args.seed,
            filename=args.filename,
        )
        generate_from_options(options)
    except PatternError as exc:
        logger.error("Error generating image: %s", exc)
        return 1
    except Exception as exc:
        logger.error("Error generating image: %s: %s", type(exc).__name__, exc)
        return 1

    print(SUCCESS_MESSAGE)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
