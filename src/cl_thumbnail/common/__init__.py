"""Common module - options schema and exceptions."""

from .errors import (
    ImageDecodeError,
    ImageEncodeError,
    InvalidSourceDimensionsError,
    ThumbnailError,
    UnsupportedFormatError,
)
from .schemas import (
    DEFAULT_HEIGHT,
    DEFAULT_QUALITY,
    DEFAULT_WIDTH,
    ThumbnailOptions,
    normalize_quality,
)

__all__ = [
    "DEFAULT_HEIGHT",
    "DEFAULT_QUALITY",
    "DEFAULT_WIDTH",
    "ImageDecodeError",
    "ImageEncodeError",
    "InvalidSourceDimensionsError",
    "ThumbnailError",
    "ThumbnailOptions",
    "UnsupportedFormatError",
    "normalize_quality",
]
