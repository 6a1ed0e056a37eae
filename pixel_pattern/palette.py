"""Hash-driven color palette generation.

Each digest yields five colors (six hex characters each, the last two
characters are unused). Colors are read in order of their slice in the
digest; once the first slice has been reused at the start of a new cycle the
stream is advanced, so the sixth color repeats the first one.
"""

import logging
from typing import List, Tuple

from pyrsistent import pvector

from pixel_pattern.errors import InvalidColorCountError
from pixel_pattern.state import SeedState
from pixel_pattern.types import COLORS_PER_DIGEST, HEX_PER_COLOR, Color, Palette

logger = logging.getLogger(__name__)


def parse_color(digest: str, offset: int) -> Color:
    """Read ``RRGGBB`` starting at ``offset`` in ``digest``."""
    return (
        int(digest[offset : offset + 2], 16),
        int(digest[offset + 2 : offset + 4], 16),
        int(digest[offset + 4 : offset + 6], 16),
    )


def generate_palette(state: SeedState, count: int) -> Tuple[Palette, SeedState]:
    """Draw ``count`` colors from the hash stream.

    Args:
        state: Hash stream position before palette generation.
        count: Number of colors, at least 1.

    Returns:
        The palette in generation order (``palette[0]`` is the background
        fill) and the advanced state.

    Raises:
        InvalidColorCountError: If ``count`` is smaller than 1.
    """
    if count < 1:
        raise InvalidColorCountError(f"Color count must be >= 1, got {count}")

    state = state.advance()
    colors: List[Color] = []
    for i in range(count):
        slice_index = i % COLORS_PER_DIGEST
        colors.append(parse_color(state.digest, slice_index * HEX_PER_COLOR))
        if slice_index == 0 and i != 0:
            state = state.advance()

    logger.debug("Generated palette of %d colors: %s", count, colors)
    return pvector(colors), state
