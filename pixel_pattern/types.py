"""Common type aliases and constants.

``Palette`` is a persistent vector so a palette handed to the pattern stage
cannot be altered behind its back. ``PixelMatrix`` is a dense
``(height, width, 3)`` ``uint8`` array; every cell is initialized.
"""

from typing import Tuple

import numpy as np
import numpy.typing as npt
from pyrsistent.typing import PVector

Color = Tuple[int, int, int]
Palette = PVector[Color]
PixelMatrix = npt.NDArray[np.uint8]
RGBAArray = npt.NDArray[np.uint8]
RasterBuffer = bytes

DEFAULT_COLORS = 2
DEFAULT_WIDTH = 256
DEFAULT_HEIGHT = 256
DEFAULT_PATTERN_WIDTH = 16
DEFAULT_PATTERN_HEIGHT = 16

# Pattern rows covered by one digest
EPOCH_ROWS = 4

# 32 hex chars per digest, 6 per color
COLORS_PER_DIGEST = 5
HEX_PER_COLOR = 6

NIBBLE_RANGE = 16
OPAQUE = 255
RGB_CHANNELS = 3
RGBA_CHANNELS = 4

BLACK: Color = (0, 0, 0)
