from .media_types import MediaType, determine_media_type, determine_mime
from .profiling import timed

__all__ = ["MediaType", "determine_media_type", "determine_mime", "timed"]
