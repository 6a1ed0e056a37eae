"""Expand an RGB pixel matrix into an opaque RGBA raster."""

import numpy as np

from pixel_pattern.errors import InvalidDimensionError
from pixel_pattern.types import (
    OPAQUE,
    RGB_CHANNELS,
    RGBA_CHANNELS,
    PixelMatrix,
    RasterBuffer,
    RGBAArray,
)


def to_rgba_array(matrix: PixelMatrix) -> RGBAArray:
    """Return a ``(height, width, 4)`` copy of ``matrix`` with alpha 255."""
    if matrix.ndim != 3 or matrix.shape[2] != RGB_CHANNELS:
        raise InvalidDimensionError(
            f"Expected a (height, width, {RGB_CHANNELS}) matrix, got {matrix.shape}"
        )
    height, width = matrix.shape[:2]
    rgba: RGBAArray = np.empty((height, width, RGBA_CHANNELS), dtype=np.uint8)
    rgba[..., :RGB_CHANNELS] = matrix
    rgba[..., RGB_CHANNELS] = OPAQUE
    return rgba


def to_raster(matrix: PixelMatrix) -> RasterBuffer:
    """Flatten ``matrix`` row-major into ``R, G, B, A`` bytes."""
    return to_rgba_array(matrix).tobytes()
