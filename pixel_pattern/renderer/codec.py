"""Pillow backed image codec adapter.

The generation core only produces a flat RGBA buffer. This module turns that
buffer into a :class:`PatternImage`, a small immutable handle around a
``PIL.Image.Image`` that exposes the operations callers need: metadata,
encoding to a file or to bytes, and a couple of transforms. Any failure from
Pillow or the filesystem surfaces as :class:`~pixel_pattern.errors.CodecError`.
"""

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Union

import numpy as np
from PIL import Image

from pixel_pattern.errors import CodecError, InvalidDimensionError
from pixel_pattern.types import RGBA_CHANNELS, RasterBuffer
from pixel_pattern.utils.image import is_horizontally_symmetric

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = "PNG"


@dataclass(frozen=True)
class PatternImage:
    """Encoded image handle.

    Attributes:
        image: Underlying Pillow image. Transforms never mutate it.
    """

    image: Image.Image

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    @property
    def channels(self) -> int:
        return len(self.image.getbands())

    @property
    def mode(self) -> str:
        return self.image.mode

    def metadata(self) -> Dict[str, Any]:
        """Return width, height, channel count and mode."""
        return {
            "width": self.width,
            "height": self.height,
            "channels": self.channels,
            "mode": self.mode,
        }

    def save(self, path: Union[str, Path], format: str = DEFAULT_FORMAT) -> Path:
        """Encode to ``path`` and return it.

        Raises:
            CodecError: If Pillow cannot encode or the file cannot be written.
        """
        path = Path(path)
        try:
            self.image.save(path, format=format)
        except (OSError, ValueError, KeyError) as exc:
            raise CodecError(f"Could not write image to {path}: {exc}") from exc
        logger.info("Wrote %dx%d %s image to %s", self.width, self.height, format, path)
        return path

    def to_bytes(self, format: str = DEFAULT_FORMAT) -> bytes:
        """Encode into an in-memory buffer."""
        buffer = io.BytesIO()
        try:
            self.image.save(buffer, format=format)
        except (OSError, ValueError, KeyError) as exc:
            raise CodecError(f"Could not encode image as {format}: {exc}") from exc
        return buffer.getvalue()

    def to_array(self) -> np.ndarray:
        """Return pixel data as ``(height, width, channels)`` (or ``(H, W)``)."""
        return np.array(self.image)

    def resize(
        self,
        width: int,
        height: int,
        resample: Image.Resampling = Image.Resampling.NEAREST,
    ) -> "PatternImage":
        """Return a resized copy; nearest neighbour keeps pixel edges crisp."""
        if width <= 0 or height <= 0:
            raise InvalidDimensionError(f"Invalid resize target {width}x{height}")
        return PatternImage(self.image.resize((width, height), resample=resample))

    def grayscale(self) -> "PatternImage":
        """Return a single channel luminance copy."""
        return PatternImage(self.image.convert("L"))

    def is_symmetric(self) -> bool:
        """True if the RGB content is mirror symmetric left to right."""
        return is_horizontally_symmetric(self.to_array())


def encode_raster(raster: RasterBuffer, width: int, height: int) -> PatternImage:
    """Wrap a flat RGBA buffer of ``width x height`` pixels.

    Raises:
        InvalidDimensionError: If the buffer length does not match the size.
    """
    expected = width * height * RGBA_CHANNELS
    if width <= 0 or height <= 0 or len(raster) != expected:
        raise InvalidDimensionError(
            f"Raster of {len(raster)} bytes does not match {width}x{height} RGBA"
        )
    return PatternImage(Image.frombytes("RGBA", (width, height), raster))
