"""Error taxonomy.

Validation errors subclass ``ValueError`` so callers that only know about
built-in exceptions still catch them. ``CodecError`` always chains the
underlying Pillow / OS error.
"""


class PatternError(Exception):
    """Base class for every error raised by ``pixel_pattern``."""


class InvalidDimensionError(PatternError, ValueError):
    """Image or pattern dimension is not a positive integer."""


class InvalidColorCountError(PatternError, ValueError):
    """Requested palette size is not a positive integer."""


class CodecError(PatternError):
    """The image codec could not encode or write the image."""
