"""
EmbedPlayerParams and GifDims Pydantic models.

EmbedPlayerParams is the normalized result of recognizing an embeddable
media link: which player to load, what kind of media it is, and how the
caller should present it.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from embedplayer.config.providers import (
    EMBED_TYPE_SOURCES,
    EXTERNAL_EMBED_LABELS,
    EmbedPlayerSource,
    EmbedPlayerType,
)


def _require_absolute(value: str) -> str:
    parsed = urlparse(value)
    if not parsed.scheme or not parsed.netloc:
        raise ValueError(f"expected an absolute URL, got {value!r}")
    return value


class EmbedPlayerParams(BaseModel):
    """Parsed embed descriptor for a recognized media link."""

    model_config = ConfigDict(frozen=True)

    type: EmbedPlayerType = Field(..., description="Kind of embedded media")
    source: EmbedPlayerSource = Field(..., description="Provider tag used for labels")
    player_uri: str = Field(..., description="Absolute URL of the player or asset")
    is_gif: bool | None = Field(
        None, description="Render as an image/video loop instead of a player"
    )
    meta_uri: str | None = Field(
        None, description="Canonical page for attribution (giphy only)"
    )
    hide_details: bool | None = Field(
        None, description="Suppress surrounding title/author chrome"
    )

    @field_validator("player_uri")
    @classmethod
    def validate_player_uri(cls, v: str) -> str:
        return _require_absolute(v)

    @field_validator("meta_uri")
    @classmethod
    def validate_meta_uri(cls, v: str | None) -> str | None:
        if v is None:
            return v
        return _require_absolute(v)

    @model_validator(mode="after")
    def check_source_matches_type(self) -> EmbedPlayerParams:
        """Each media type belongs to exactly one source."""
        expected = EMBED_TYPE_SOURCES[self.type]
        if self.source is not expected:
            raise ValueError(
                f"source {self.source.value!r} does not match type "
                f"{self.type.value!r} (expected {expected.value!r})"
            )
        return self

    @property
    def label(self) -> str:
        """Display label of the source (e.g. "YouTube Shorts")."""
        return EXTERNAL_EMBED_LABELS[self.source]

    def to_dict(self) -> dict[str, Any]:
        """Camel-case wire shape, omitting absent optional fields."""
        result: dict[str, Any] = {
            "type": self.type.value,
            "source": self.source.value,
            "playerUri": self.player_uri,
        }
        if self.is_gif is not None:
            result["isGif"] = self.is_gif
        if self.meta_uri is not None:
            result["metaUri"] = self.meta_uri
        if self.hide_details is not None:
            result["hideDetails"] = self.hide_details
        return result

    def __str__(self) -> str:
        return f"{self.type.value}:{self.player_uri}"


class GifDims(BaseModel):
    """Display dimensions for a GIF."""

    model_config = ConfigDict(frozen=True)

    height: float
    width: float
