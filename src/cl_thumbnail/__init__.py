"""cl_thumbnail - Aspect-ratio preserving image thumbnails."""

from cl_thumbnail.algo import (
    PillowResampler,
    ResampleFilter,
    Resampler,
    compute_fit_dimensions,
    get_resampler,
)
from cl_thumbnail.codecs import (
    ImageFormat,
    decode_image,
    load_image,
    save_gif,
    save_image,
    save_jpeg,
    save_png,
)
from cl_thumbnail.common import (
    ImageDecodeError,
    ImageEncodeError,
    InvalidSourceDimensionsError,
    ThumbnailError,
    ThumbnailOptions,
    UnsupportedFormatError,
)
from cl_thumbnail.thumbnailer import (
    Thumbnailer,
    generate,
    generate_and_save,
    generate_from_file,
)

__version__ = "0.1.0"

__all__ = [
    "ImageDecodeError",
    "ImageEncodeError",
    "ImageFormat",
    "InvalidSourceDimensionsError",
    "PillowResampler",
    "ResampleFilter",
    "Resampler",
    "ThumbnailError",
    "ThumbnailOptions",
    "Thumbnailer",
    "UnsupportedFormatError",
    "__version__",
    "compute_fit_dimensions",
    "decode_image",
    "generate",
    "generate_and_save",
    "generate_from_file",
    "get_resampler",
    "load_image",
    "save_gif",
    "save_image",
    "save_jpeg",
    "save_png",
]
