"""Aspect-ratio preserving thumbnail generation."""

from pathlib import Path

from loguru import logger
from PIL import Image

from .algo.fit_dimensions import compute_fit_dimensions
from .algo.resampler import PillowResampler, Resampler
from .codecs import ImageFormat, load_image, save_image
from .common.schemas import ThumbnailOptions
from .utils.profiling import timed


class Thumbnailer:
    """Scale images to fit a bounding box, keeping their aspect ratio.

    The resampling step is delegated to ``resampler``, so filters can be
    swapped without touching the fit computation.
    """

    def __init__(self, resampler: Resampler | None = None):
        self.resampler: Resampler = resampler if resampler is not None else PillowResampler()

    def compute_size(
        self, image: Image.Image, options: ThumbnailOptions | None = None
    ) -> tuple[int, int]:
        options = options or ThumbnailOptions.default()
        return compute_fit_dimensions(image.width, image.height, options.width, options.height)

    def generate(self, image: Image.Image, options: ThumbnailOptions | None = None) -> Image.Image:
        """
        Create a thumbnail of an in-memory image.

        Args:
            image: Source image, left unmodified
            options: Bounding box (defaults to 150x150)

        Returns:
            Newly allocated thumbnail. One side may be 0 for extremely
            elongated sources.

        Raises:
            InvalidSourceDimensionsError: If the source has zero width or height
        """
        size = self.compute_size(image, options)
        return self.resampler.resize(image, size)

    @timed
    def generate_from_file(
        self, path: str | Path, options: ThumbnailOptions | None = None
    ) -> Image.Image:
        """
        Read an image file and create its thumbnail.

        Raises:
            FileNotFoundError: If the file does not exist
            UnsupportedFormatError: If the file is not a supported image
            ImageDecodeError: If the image data is corrupt
            InvalidSourceDimensionsError: If the source has zero width or height
        """
        with load_image(path) as image:
            return self.generate(image, options)

    @timed
    def generate_and_save(
        self,
        input_path: str | Path,
        output_path: str | Path,
        options: ThumbnailOptions | None = None,
        format: ImageFormat | str = ImageFormat.JPEG,
    ) -> Path:
        """
        Create a thumbnail of an image file and write it to ``output_path``.

        Nothing is written to ``output_path`` unless the whole operation
        succeeds.

        Args:
            input_path: Source image file
            output_path: Destination file
            options: Bounding box and JPEG quality
            format: Output format, JPEG by default

        Returns:
            Output path
        """
        options = options or ThumbnailOptions.default()
        fmt = ImageFormat.parse(format)
        output_path = Path(output_path)

        thumbnail = self.generate_from_file(input_path, options)
        save_image(thumbnail, output_path, fmt, options.quality)

        logger.debug(f"Thumbnail of {input_path} written to {output_path}")
        return output_path


_default_thumbnailer = Thumbnailer()


def generate(image: Image.Image, options: ThumbnailOptions | None = None) -> Image.Image:
    return _default_thumbnailer.generate(image, options)


def generate_from_file(path: str | Path, options: ThumbnailOptions | None = None) -> Image.Image:
    return _default_thumbnailer.generate_from_file(path, options)


def generate_and_save(
    input_path: str | Path,
    output_path: str | Path,
    options: ThumbnailOptions | None = None,
    format: ImageFormat | str = ImageFormat.JPEG,
) -> Path:
    return _default_thumbnailer.generate_and_save(input_path, output_path, options, format)
