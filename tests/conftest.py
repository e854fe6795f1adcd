"""Test configuration and fixtures for cl_thumbnail.

This module provides:
- Synthetic source images on disk (JPEG, RGBA PNG, GIF)
- numpy-generated in-memory images
- Broken inputs (truncated JPEG, non-image files)
- A loguru capture fixture
"""

from collections.abc import Iterator
from pathlib import Path

import numpy as np
import pytest
from loguru import logger
from PIL import Image, ImageDraw

# ============================================================================
# In-memory images
# ============================================================================


def make_gradient(width: int, height: int, mode: str = "RGBA") -> Image.Image:
    """Build a deterministic gradient image of the given size."""
    xs = np.linspace(0, 255, width, dtype=np.float64)
    ys = np.linspace(0, 255, height, dtype=np.float64)
    red = np.tile(xs, (height, 1))
    green = np.tile(ys[:, None], (1, width))
    blue = (red + green) / 2
    alpha = np.full((height, width), 255.0)

    pixels = np.stack([red, green, blue, alpha], axis=-1).astype(np.uint8)
    image = Image.fromarray(pixels)
    return image if mode == "RGBA" else image.convert(mode)


@pytest.fixture
def gradient_image() -> Image.Image:
    """1000x500 RGBA gradient."""
    return make_gradient(1000, 500)


@pytest.fixture
def noise_image() -> Image.Image:
    """Seeded random RGBA noise, 64x48."""
    rng = np.random.default_rng(seed=42)
    pixels = rng.integers(0, 256, size=(48, 64, 4), dtype=np.uint8)
    return Image.fromarray(pixels)


# ============================================================================
# Files on disk
# ============================================================================


@pytest.fixture
def synthetic_image(tmp_path: Path) -> Path:
    """Generate an 800x600 JPEG with a grid pattern."""
    output_path = tmp_path / "synthetic.jpg"

    img = Image.new("RGB", (800, 600), color=(73, 109, 137))
    draw = ImageDraw.Draw(img)

    for i in range(0, 800, 50):
        draw.line([(i, 0), (i, 600)], fill=(255, 255, 255), width=2)
    for i in range(0, 600, 50):
        draw.line([(0, i), (800, i)], fill=(255, 255, 255), width=2)

    img.save(output_path, "JPEG", quality=95)
    return output_path


@pytest.fixture
def rgba_png_image(tmp_path: Path) -> Path:
    """Generate a 300x600 semi-transparent PNG."""
    output_path = tmp_path / "transparent.png"
    img = Image.new("RGBA", (300, 600), color=(255, 0, 0, 128))
    img.save(output_path, "PNG")
    return output_path


@pytest.fixture
def gif_image(tmp_path: Path) -> Path:
    """Generate a 400x200 palette GIF."""
    output_path = tmp_path / "palette.gif"
    img = make_gradient(400, 200, mode="RGB").convert("P", palette=Image.Palette.ADAPTIVE)
    img.save(output_path, "GIF")
    return output_path


@pytest.fixture
def truncated_jpeg(tmp_path: Path) -> Path:
    """A JPEG cut in half: recognised as JPEG but not decodable."""
    full = tmp_path / "full.jpg"
    make_gradient(800, 600, mode="RGB").save(full, "JPEG", quality=95)

    data = full.read_bytes()
    output_path = tmp_path / "truncated.jpg"
    _ = output_path.write_bytes(data[: len(data) // 2])
    return output_path


@pytest.fixture
def text_file(tmp_path: Path) -> Path:
    output_path = tmp_path / "notes.jpg"
    _ = output_path.write_text("This is plain text, not an image.\n" * 20)
    return output_path


@pytest.fixture
def pdf_file(tmp_path: Path) -> Path:
    output_path = tmp_path / "document.png"
    _ = output_path.write_bytes(b"%PDF-1.4\n%\xe2\xe3\xcf\xd3\n1 0 obj\n<< /Type /Catalog >>\nendobj\n")
    return output_path


# ============================================================================
# Logging
# ============================================================================


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Collect loguru messages emitted during a test."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(str(m)), level="DEBUG", format="{message}")
    try:
        yield messages
    finally:
        logger.remove(handler_id)
