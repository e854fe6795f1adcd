"""Resampling strategies used to scale images to their thumbnail size."""

from enum import StrEnum
from typing import Protocol, override, runtime_checkable

from loguru import logger
from PIL import Image


class ResampleFilter(StrEnum):
    NEAREST = "nearest"
    BILINEAR = "bilinear"
    CATMULL_ROM = "catmull_rom"
    LANCZOS = "lanczos"

    @property
    def pil_filter(self) -> Image.Resampling:
        return _PIL_FILTERS[self]


# Pillow's bicubic kernel uses a = -0.5, i.e. Catmull-Rom.
_PIL_FILTERS: dict[ResampleFilter, Image.Resampling] = {
    ResampleFilter.NEAREST: Image.Resampling.NEAREST,
    ResampleFilter.BILINEAR: Image.Resampling.BILINEAR,
    ResampleFilter.CATMULL_ROM: Image.Resampling.BICUBIC,
    ResampleFilter.LANCZOS: Image.Resampling.LANCZOS,
}


@runtime_checkable
class Resampler(Protocol):
    """Protocol for scaling an image to an exact size.

    Implementations must not modify ``source`` and must return a newly
    allocated image of exactly ``size``.
    """

    def resize(self, source: Image.Image, size: tuple[int, int]) -> Image.Image:
        ...


class PillowResampler(Resampler):
    """Resample the full source onto a blank RGBA destination with Pillow.

    Resizing RGBA in Pillow works on premultiplied alpha, which matches
    compositing the source "over" an empty destination. Resampling to the
    source's own size returns an exact copy.
    """

    OUTPUT_MODE: str = "RGBA"

    def __init__(self, filter: ResampleFilter | str = ResampleFilter.CATMULL_ROM):
        self.filter: ResampleFilter = ResampleFilter(filter)

    @override
    def resize(self, source: Image.Image, size: tuple[int, int]) -> Image.Image:
        width, height = size
        if width < 0 or height < 0:
            raise ValueError(f"Invalid output size: {width}x{height}")

        if width == 0 or height == 0:
            logger.debug(f"Zero-area output {width}x{height}, skipping resample")
            return Image.new(self.OUTPUT_MODE, (width, height))

        # convert() always allocates, so the source is never touched
        if source.mode == self.OUTPUT_MODE:
            src = source
        else:
            src = source.convert(self.OUTPUT_MODE)

        logger.debug(
            f"Resampling {source.width}x{source.height} ({source.mode})"
            + f" -> {width}x{height} with {self.filter}"
        )
        return src.resize((width, height), self.filter.pil_filter)

    @override
    def __repr__(self) -> str:
        return f"PillowResampler(filter={self.filter.value!r})"


def get_resampler(name: str) -> Resampler:
    """Build a Pillow resampler from a filter name (e.g. ``"lanczos"``)."""
    try:
        resample_filter = ResampleFilter(name.lower())
    except ValueError as exc:
        choices = ", ".join(f.value for f in ResampleFilter)
        raise ValueError(f"Unknown resample filter '{name}'. Choose from: {choices}") from exc
    return PillowResampler(resample_filter)
