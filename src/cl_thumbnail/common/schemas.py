"""Pydantic schemas for thumbnail generation options."""

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_WIDTH = 150
DEFAULT_HEIGHT = 150
DEFAULT_QUALITY = 85


def normalize_quality(quality: int | None) -> int:
    """Return quality if it lies in 1..100, else the default."""
    if quality is None or quality <= 0 or quality > 100:
        return DEFAULT_QUALITY
    return quality


class ThumbnailOptions(BaseModel):
    """Options for thumbnail generation.

    Non-positive sizes and out-of-range qualities are not errors; they are
    replaced by the defaults so that every instance is valid.

    Attributes:
        width: Bounding box width in pixels (default 150)
        height: Bounding box height in pixels (default 150)
        quality: JPEG quality 1-100, used only when encoding (default 85)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    width: int = Field(default=DEFAULT_WIDTH, description="Bounding box width in pixels")
    height: int = Field(default=DEFAULT_HEIGHT, description="Bounding box height in pixels")
    quality: int = Field(default=DEFAULT_QUALITY, description="JPEG quality (1-100)")

    @field_validator("width", mode="after")
    @classmethod
    def validate_width(cls, v: int) -> int:
        return v if v > 0 else DEFAULT_WIDTH

    @field_validator("height", mode="after")
    @classmethod
    def validate_height(cls, v: int) -> int:
        return v if v > 0 else DEFAULT_HEIGHT

    @field_validator("quality", mode="after")
    @classmethod
    def validate_quality(cls, v: int) -> int:
        return normalize_quality(v)

    @classmethod
    def default(cls) -> Self:
        return cls()

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)
