"""Aspect-ratio preserving fit-to-box computation."""

from loguru import logger

from ..common.errors import InvalidSourceDimensionsError


def compute_fit_dimensions(
    source_width: int,
    source_height: int,
    target_width: int,
    target_height: int,
) -> tuple[int, int]:
    """
    Compute the largest size that fits the target box with the source's ratio.

    The axis whose bound is tighter relative to the source ratio is set to
    its bound; the other is derived from the ratio and truncated toward zero.
    A very elongated source can therefore yield 0 on one axis.

    Args:
        source_width: Source width in pixels
        source_height: Source height in pixels
        target_width: Bounding box width in pixels
        target_height: Bounding box height in pixels

    Returns:
        (width, height) of the scaled image

    Raises:
        InvalidSourceDimensionsError: If a source dimension is not positive
        ValueError: If a target dimension is not positive
    """
    if source_width <= 0 or source_height <= 0:
        raise InvalidSourceDimensionsError(source_width, source_height)
    if target_width <= 0 or target_height <= 0:
        raise ValueError(f"Invalid target dimensions: {target_width}x{target_height}")

    ratio = source_width / source_height

    if target_width / target_height > ratio:
        # Height binds
        out_height = target_height
        out_width = int(out_height * ratio)
    else:
        out_width = target_width
        out_height = int(out_width / ratio)

    logger.debug(
        f"Fit {source_width}x{source_height} into {target_width}x{target_height}"
        + f" -> {out_width}x{out_height}"
    )
    return out_width, out_height
