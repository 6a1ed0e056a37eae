"""Seeded, mirrored pixel-art pattern generator.

The public surface re-exports the pipeline entry points, the stage functions
and the error taxonomy:

>>> from pixel_pattern import generate_image
>>> image = generate_image(seed="abc", width=100, height=100, colors=2)
>>> image.width, image.height, image.channels
(100, 100, 4)
"""

from .errors import (
    CodecError,
    InvalidColorCountError,
    InvalidDimensionError,
    PatternError,
)
from .generate import generate_from_options, generate_image
from .options import GenerateOptions
from .palette import generate_palette
from .pattern import generate_pattern
from .renderer.codec import PatternImage, encode_raster
from .renderer.raster import to_raster, to_rgba_array
from .state import SeedState, hex_digest

__all__ = [
    "CodecError",
    "GenerateOptions",
    "InvalidColorCountError",
    "InvalidDimensionError",
    "PatternError",
    "PatternImage",
    "SeedState",
    "encode_raster",
    "generate_from_options",
    "generate_image",
    "generate_palette",
    "generate_pattern",
    "hex_digest",
    "to_raster",
    "to_rgba_array",
]
