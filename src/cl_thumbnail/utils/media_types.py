from enum import StrEnum
from io import BytesIO

import magic

DEFAULT_MIME = "application/octet-stream"


class MediaType(StrEnum):
    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    FILE = "file"

    @classmethod
    def from_mime(cls, file_type: str) -> "MediaType":
        if file_type.startswith("image"):
            return MediaType.IMAGE
        elif file_type.startswith("video"):
            return MediaType.VIDEO
        elif file_type.startswith("audio"):
            return MediaType.AUDIO
        elif file_type.startswith("text"):
            return MediaType.TEXT
        else:
            return MediaType.FILE


def determine_mime(bytes_io: BytesIO, file_type: str | None = None) -> str:
    """Sniff the MIME type of a buffer with libmagic unless one is given."""
    if file_type:
        return file_type

    _ = bytes_io.seek(0)
    mime = magic.Magic(mime=True)
    file_type = mime.from_buffer(bytes_io.getvalue())
    return file_type or DEFAULT_MIME


def determine_media_type(bytes_io: BytesIO, file_type: str | None = None) -> MediaType:
    return MediaType.from_mime(determine_mime(bytes_io, file_type))
