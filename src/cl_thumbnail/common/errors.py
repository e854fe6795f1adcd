"""Exceptions raised while building, decoding and encoding thumbnails."""

from pathlib import Path


class ThumbnailError(Exception):
    """Base class for thumbnail errors."""


class ImageDecodeError(ThumbnailError):
    """Image data could be read but not decoded (corrupt or truncated)."""

    def __init__(self, message: str, path: str | Path | None = None):
        self.path: str | Path | None = path
        super().__init__(message)


class UnsupportedFormatError(ImageDecodeError):
    """Data is not an image, or no installed codec can open it."""

    def __init__(self, mime_type: str, path: str | Path | None = None):
        self.mime_type: str = mime_type
        location = f" ({path})" if path is not None else ""
        super().__init__(f"Unsupported image format: {mime_type}{location}", path=path)


class InvalidSourceDimensionsError(ThumbnailError, ValueError):
    def __init__(self, width: int, height: int):
        self.width: int = width
        self.height: int = height
        super().__init__(f"Invalid source dimensions: {width}x{height}")


class ImageEncodeError(ThumbnailError):
    """Encoding or writing a thumbnail failed."""
