"""
Data models for embedplayer.
"""

from embedplayer.models.embed_player import EmbedPlayerParams, GifDims

__all__ = [
    "EmbedPlayerParams",
    "GifDims",
]
