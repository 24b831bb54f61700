"""
Custom exceptions for embedplayer.

All embedplayer exceptions inherit from EmbedPlayerError for easy catching.
Provider matching never raises: unrecognized or malformed links come back
as None. These exceptions cover the parsing boundary, the layout math and
table lookups.
"""

from __future__ import annotations

from typing import Any


class EmbedPlayerError(Exception):
    """Base exception for all embedplayer errors.

    Attributes:
        message: Human-readable error message
        details: Additional diagnostic information
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a structured dict for CLI error output."""
        result: dict[str, Any] = {
            "type": self.__class__.__name__,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


class InvalidURLError(EmbedPlayerError, ValueError):
    """Input text is not an absolute URL."""

    def __init__(self, message: str, *, url: str = ""):
        super().__init__(message, details={"url": url} if url else None)
        self.url = url


class InvalidDimensionsError(EmbedPlayerError, ValueError):
    """GIF dimensions that cannot be scaled (zero width or height)."""

    def __init__(
        self,
        message: str,
        *,
        original_height: float | None = None,
        original_width: float | None = None,
        view_width: float | None = None,
    ):
        details = {
            k: v
            for k, v in {
                "original_height": original_height,
                "original_width": original_width,
                "view_width": view_width,
            }.items()
            if v is not None
        }
        super().__init__(message, details=details)


class UnknownSourceError(EmbedPlayerError, KeyError):
    """Lookup of an embed source that is not supported."""

    def __init__(self, source: str):
        super().__init__(f"Unknown embed source: {source!r}", details={"source": source})
        self.source = source

    def __str__(self) -> str:
        return self.message
