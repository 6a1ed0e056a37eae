"""Top level generation pipeline.

``seed -> SeedState -> palette -> pattern matrix -> RGBA raster -> image``

Every call builds its own state, palette and matrix, so independent calls can
run concurrently without locking. The only I/O is the optional PNG write at
the end.
"""

import logging
from typing import Optional

from pixel_pattern.options import GenerateOptions
from pixel_pattern.palette import generate_palette
from pixel_pattern.pattern import generate_pattern
from pixel_pattern.renderer.codec import PatternImage, encode_raster
from pixel_pattern.renderer.raster import to_raster
from pixel_pattern.state import SeedState
from pixel_pattern.types import (
    DEFAULT_COLORS,
    DEFAULT_HEIGHT,
    DEFAULT_PATTERN_HEIGHT,
    DEFAULT_PATTERN_WIDTH,
    DEFAULT_WIDTH,
)

logger = logging.getLogger(__name__)


def generate_from_options(options: GenerateOptions) -> PatternImage:
    """Run the full pipeline for already validated ``options``.

    Raises:
        CodecError: If ``options.filename`` is set and cannot be written.
    """
    state = SeedState.from_seed(options.seed)
    palette, state = generate_palette(state, options.colors)
    matrix, _ = generate_pattern(
        state,
        palette,
        options.height,
        options.width,
        options.pheight,
        options.pattern_width_half,
    )
    image = encode_raster(to_raster(matrix), options.width, options.height)
    logger.debug(
        "Generated %dx%d image with %d colors (seeded: %s)",
        options.width,
        options.height,
        options.colors,
        bool(options.seed),
    )

    if options.filename:
        image.save(options.filename)
    return image


def generate_image(
    colors: int = DEFAULT_COLORS,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    pwidth: int = DEFAULT_PATTERN_WIDTH,
    pheight: int = DEFAULT_PATTERN_HEIGHT,
    seed: Optional[str] = None,
    filename: Optional[str] = None,
) -> PatternImage:
    """Generate a mirrored pixel pattern image.

    Args:
        colors: Palette size (>= 1).
        width: Image width in pixels.
        height: Image height in pixels.
        pwidth: Pattern width in cells (>= 1, halved then mirrored).
        pheight: Pattern height in cells.
        seed: Seed string; identical seeds give identical images.
        filename: Optional PNG output path.

    Returns:
        PatternImage: RGBA image handle.

    Raises:
        InvalidDimensionError: On non-positive sizes.
        InvalidColorCountError: If ``colors < 1``.
        CodecError: If the file cannot be written.
    """
    options = GenerateOptions(
        colors=colors,
        width=width,
        height=height,
        pwidth=pwidth,
        pheight=pheight,
        seed=seed,
        filename=filename,
    )
    return generate_from_options(options)
