"""Mirrored pattern matrix generation.

The logical pattern is ``pattern_width_half`` columns by ``pattern_height``
rows. The half width is ``pwidth / 2`` and may be fractional (odd pattern
widths). Each logical cell maps to a ``cell_width x cell_height`` block of
image pixels and is painted together with its horizontal mirror, which makes
the final matrix exactly symmetric left to right.

Rows are filled in epochs of :data:`~pixel_pattern.types.EPOCH_ROWS`. Every
epoch draws a fresh digest and walks its hex characters in order; character
``i`` addresses cell ``(i % half, epoch + floor(i / half))`` and its value
picks the palette entry. The first character that lands below the last
pattern row ends the epoch. A cell whose pixel origin ``x * cell_width`` is
not a whole pixel paints nothing.

Column arithmetic is done on doubled values (``2 * half`` is the integer
``pwidth``) so fractional half widths stay exact.
"""

import logging
import math
from typing import Tuple

import numpy as np

from pixel_pattern.errors import InvalidDimensionError
from pixel_pattern.state import SeedState
from pixel_pattern.types import (
    BLACK,
    EPOCH_ROWS,
    NIBBLE_RANGE,
    RGB_CHANNELS,
    Color,
    Palette,
    PixelMatrix,
)

logger = logging.getLogger(__name__)


def _check_positive(**dimensions: float) -> None:
    for name, value in dimensions.items():
        if value <= 0:
            raise InvalidDimensionError(f"{name} must be > 0, got {value}")


def _full_width(pattern_width_half: float) -> int:
    """Return ``2 * pattern_width_half``, which must be a whole number."""
    _check_positive(pattern_width_half=pattern_width_half)
    doubled = 2 * pattern_width_half
    if doubled != int(doubled):
        raise InvalidDimensionError(
            f"pattern_width_half must be a multiple of 0.5, got {pattern_width_half}"
        )
    return int(doubled)


def cell_size(
    image_width: int,
    image_height: int,
    pattern_height: int,
    pattern_width_half: float,
) -> Tuple[int, int]:
    """Return ``(cell_width, cell_height)`` in pixels, rounded up."""
    _check_positive(pattern_height=pattern_height)
    pattern_width = _full_width(pattern_width_half)
    cell_width = math.ceil(image_width / pattern_width)
    cell_height = math.ceil(image_height / pattern_height)
    return cell_width, cell_height


def color_index(nibble: int, palette_size: int) -> int:
    """Scale a nibble in [0, 15] onto ``range(palette_size)``."""
    return nibble * palette_size // NIBBLE_RANGE


def paint_cell(
    matrix: PixelMatrix,
    x0: int,
    y0: int,
    cell_width: int,
    cell_height: int,
    color: Color,
) -> None:
    """Paint the block at pixel origin ``(x0, y0)`` and its mirror in place.

    The block is clipped to the matrix bounds. Mirrored columns are
    ``width - 1 - x_img`` for every painted ``x_img``.
    """
    height, width = matrix.shape[:2]
    if x0 >= width or y0 >= height:
        return
    x1 = min(x0 + cell_width, width)
    y1 = min(y0 + cell_height, height)

    matrix[y0:y1, x0:x1] = color
    matrix[y0:y1, width - x1 : width - x0] = color


def generate_pattern(
    state: SeedState,
    palette: Palette,
    image_height: int,
    image_width: int,
    pattern_height: int,
    pattern_width_half: float,
) -> Tuple[PixelMatrix, SeedState]:
    """Build the full resolution pixel matrix.

    Args:
        state: Hash stream position after palette generation.
        palette: Colors to paint with; ``palette[0]`` is the background.
        image_height: Output height in pixels.
        image_width: Output width in pixels.
        pattern_height: Logical pattern rows.
        pattern_width_half: Logical pattern columns before mirroring, a
            positive multiple of 0.5.

    Returns:
        ``(height, width, 3)`` ``uint8`` matrix and the advanced state.

    Raises:
        InvalidDimensionError: If any dimension is not positive.
    """
    _check_positive(
        image_height=image_height,
        image_width=image_width,
        pattern_height=pattern_height,
    )
    pattern_width = _full_width(pattern_width_half)
    state = state.advance()

    cell_width, cell_height = cell_size(
        image_width, image_height, pattern_height, pattern_width_half
    )
    colors_count = len(palette)
    logger.debug(
        "Pattern %sx%d (half width), cell %dx%d px",
        pattern_width_half,
        pattern_height,
        cell_width,
        cell_height,
    )

    matrix: PixelMatrix = np.empty(
        (image_height, image_width, RGB_CHANNELS), dtype=np.uint8
    )
    matrix[...] = palette[0] if colors_count else BLACK

    for epoch in range(0, pattern_height + 1, EPOCH_ROWS):
        state = state.advance()
        for i, nibble in enumerate(state.nibbles()):
            # doubled column: x = doubled_x / 2
            doubled_x = (2 * i) % pattern_width
            y = epoch + (2 * i) // pattern_width
            if y >= pattern_height:
                break
            doubled_x0 = doubled_x * cell_width
            if doubled_x0 % 2:
                continue
            index = color_index(nibble, colors_count)
            if index < colors_count:
                paint_cell(
                    matrix,
                    doubled_x0 // 2,
                    y * cell_height,
                    cell_width,
                    cell_height,
                    palette[index],
                )

    return matrix, state
