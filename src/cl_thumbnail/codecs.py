"""Image decoding and JPEG/PNG/GIF encoding for thumbnails."""

import os
import tempfile
from enum import StrEnum
from io import BytesIO
from pathlib import Path
from typing import BinaryIO

from loguru import logger
from PIL import Image, UnidentifiedImageError

from .common.errors import ImageDecodeError, ImageEncodeError, UnsupportedFormatError
from .common.schemas import DEFAULT_QUALITY, normalize_quality
from .utils.media_types import MediaType, determine_media_type, determine_mime

Destination = str | os.PathLike[str] | BinaryIO


class ImageFormat(StrEnum):
    JPEG = "jpeg"
    PNG = "png"
    GIF = "gif"

    @classmethod
    def parse(cls, value: str) -> "ImageFormat":
        fmt = value.lower().lstrip(".")
        if fmt == "jpg":
            fmt = "jpeg"
        try:
            return cls(fmt)
        except ValueError as exc:
            raise ValueError(f"Unsupported output format: {value}") from exc


def get_pil_format(format_str: str) -> str:
    """Convert format string to PIL format name."""
    format_map = {
        "jpg": "JPEG",
        "jpeg": "JPEG",
        "png": "PNG",
        "gif": "GIF",
    }
    return format_map.get(format_str.lower(), format_str.upper())


# ─────────────────────────────────────────────────────────────
# Decoding
# ─────────────────────────────────────────────────────────────


def decode_image(data: bytes | BytesIO, path: str | Path | None = None) -> Image.Image:
    """
    Decode an in-memory image, sniffing its type first.

    Args:
        data: Encoded image bytes
        path: Originating path, used only in error messages

    Returns:
        Fully loaded PIL image (first frame for animated formats)

    Raises:
        UnsupportedFormatError: If the data is not an image Pillow can open
        ImageDecodeError: If the image data is corrupt or truncated
    """
    bytes_io = data if isinstance(data, BytesIO) else BytesIO(data)

    mime_type = determine_mime(bytes_io)
    if determine_media_type(bytes_io, mime_type) != MediaType.IMAGE:
        logger.warning(f"Refusing to decode {path or '<buffer>'}: detected {mime_type}")
        raise UnsupportedFormatError(mime_type, path)

    _ = bytes_io.seek(0)
    try:
        image = Image.open(bytes_io)
    except UnidentifiedImageError as exc:
        logger.warning(f"No codec for {path or '<buffer>'} ({mime_type})")
        raise UnsupportedFormatError(mime_type, path) from exc
    except Image.DecompressionBombError as exc:
        logger.warning(f"Refusing to decode {path or '<buffer>'}: {exc}")
        raise ImageDecodeError(f"Image too large ({mime_type}): {exc}", path=path) from exc

    try:
        image.load()
    except (OSError, ValueError) as exc:
        logger.warning(f"Failed to decode {path or '<buffer>'}: {exc}")
        raise ImageDecodeError(f"Corrupt image data ({mime_type}): {exc}", path=path) from exc

    logger.debug(
        f"Decoded {path or '<buffer>'}: {image.format} {image.width}x{image.height} {image.mode}"
    )
    return image


def load_image(path: str | Path) -> Image.Image:
    """
    Read and decode an image file.

    Raises:
        FileNotFoundError: If the file does not exist
        UnsupportedFormatError: If the file is not a supported image
        ImageDecodeError: If the image data is corrupt
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")

    with open(path, "rb") as f:
        bytes_io = BytesIO(f.read())

    return decode_image(bytes_io, path=path)


# ─────────────────────────────────────────────────────────────
# Encoding
# ─────────────────────────────────────────────────────────────


def _prepare_for_jpeg(image: Image.Image) -> Image.Image:
    # JPEG has no alpha channel: flatten onto white
    if image.mode in ("RGBA", "LA") or (image.mode == "P" and "transparency" in image.info):
        rgba = image.convert("RGBA")
        background = Image.new("RGB", rgba.size, (255, 255, 255))
        background.paste(rgba, mask=rgba.split()[3])
        return background

    if image.mode not in ("RGB", "L"):
        return image.convert("RGB")

    return image


def _encode(
    image: Image.Image,
    fp: BinaryIO,
    fmt: ImageFormat,
    save_kwargs: dict[str, object],
) -> None:
    try:
        image.save(fp, format=get_pil_format(fmt), **save_kwargs)
    except (OSError, ValueError) as exc:
        raise ImageEncodeError(f"Failed to encode {fmt.value} image: {exc}") from exc


def _save_to_path(
    image: Image.Image,
    output_path: Path,
    fmt: ImageFormat,
    save_kwargs: dict[str, object],
) -> None:
    if not output_path.parent.exists():
        raise FileNotFoundError(f"Output directory does not exist: {output_path.parent}")

    # Written to a uniquely named sibling and renamed into place only once complete
    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            dir=output_path.parent,
            prefix=f".{output_path.name}.",
            suffix=".tmp",
            delete=False,
        ) as f:
            temp_path = Path(f.name)
            _encode(image, f, fmt, save_kwargs)
        os.replace(temp_path, output_path)
        temp_path = None
    except OSError as exc:
        raise ImageEncodeError(f"Failed to write {output_path}: {exc}") from exc
    finally:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)


def save_image(
    image: Image.Image,
    dest: Destination,
    format: ImageFormat | str = ImageFormat.JPEG,
    quality: int = DEFAULT_QUALITY,
) -> None:
    """
    Encode an image to a path or a writable binary stream.

    Args:
        image: Image to encode
        dest: Output path or binary file object
        format: jpeg (jpg), png or gif
        quality: JPEG quality 1-100; out-of-range values use the default.
                 Ignored for png and gif.

    Raises:
        ValueError: If the format is not supported
        FileNotFoundError: If the output directory does not exist
        ImageEncodeError: If the image is empty or encoding/writing fails.
                          No file is left at a destination path on failure.
    """
    fmt = ImageFormat.parse(format)

    if image.width == 0 or image.height == 0:
        raise ImageEncodeError(f"Cannot encode zero-area image ({image.width}x{image.height})")

    save_kwargs: dict[str, object] = {}
    if fmt == ImageFormat.JPEG:
        image = _prepare_for_jpeg(image)
        save_kwargs["quality"] = normalize_quality(quality)

    if isinstance(dest, (str, os.PathLike)):
        output_path = Path(dest)
        logger.debug(f"Saving {fmt.value} {image.width}x{image.height} to {output_path} {save_kwargs}")
        _save_to_path(image, output_path, fmt, save_kwargs)
    else:
        logger.debug(f"Encoding {fmt.value} {image.width}x{image.height} to stream {save_kwargs}")
        _encode(image, dest, fmt, save_kwargs)


def save_jpeg(image: Image.Image, dest: Destination, quality: int = DEFAULT_QUALITY) -> None:
    save_image(image, dest, ImageFormat.JPEG, quality)


def save_png(image: Image.Image, dest: Destination) -> None:
    save_image(image, dest, ImageFormat.PNG)


def save_gif(image: Image.Image, dest: Destination) -> None:
    save_image(image, dest, ImageFormat.GIF)
