"""Generation options.

:class:`GenerateOptions` is the single configuration object of the pipeline.
Defaults produce a 256x256 two color image over a 16x16 pattern. All
validation happens on construction so an invalid request fails before any
pixel buffer is allocated.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional, Type

from pixel_pattern.errors import (
    InvalidColorCountError,
    InvalidDimensionError,
    PatternError,
)
from pixel_pattern.types import (
    DEFAULT_COLORS,
    DEFAULT_HEIGHT,
    DEFAULT_PATTERN_HEIGHT,
    DEFAULT_PATTERN_WIDTH,
    DEFAULT_WIDTH,
)


def _require_int(
    name: str, value: Any, minimum: int, error: Type[PatternError]
) -> None:
    # bool is an int subclass but never a meaningful size
    if isinstance(value, bool) or not isinstance(value, int):
        raise error(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise error(f"{name} must be >= {minimum}, got {value}")


@dataclass(frozen=True)
class GenerateOptions:
    """Parameters for one generated image.

    Attributes:
        colors: Palette size.
        width: Image width in pixels.
        height: Image height in pixels.
        pwidth: Logical pattern width; halved internally and mirrored back.
        pheight: Logical pattern height.
        seed: Deterministic seed. ``None`` picks a random one.
        filename: Write a PNG here when set.
    """

    colors: int = DEFAULT_COLORS
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    pwidth: int = DEFAULT_PATTERN_WIDTH
    pheight: int = DEFAULT_PATTERN_HEIGHT
    seed: Optional[str] = None
    filename: Optional[str] = None

    def __post_init__(self) -> None:
        _require_int("colors", self.colors, 1, InvalidColorCountError)
        _require_int("width", self.width, 1, InvalidDimensionError)
        _require_int("height", self.height, 1, InvalidDimensionError)
        _require_int("pwidth", self.pwidth, 1, InvalidDimensionError)
        _require_int("pheight", self.pheight, 1, InvalidDimensionError)

    @property
    def pattern_width_half(self) -> float:
        """Logical columns generated before mirroring; half a column for odd widths."""
        return self.pwidth / 2

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> GenerateOptions:
        """Build options from a plain mapping; ``None`` values use defaults.

        Raises:
            TypeError: On keys that are not option names.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(mapping) - known)
        if unknown:
            raise TypeError(f"Unknown options: {', '.join(unknown)}")
        return cls(**{k: v for k, v in mapping.items() if v is not None})
