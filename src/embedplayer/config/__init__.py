"""
Configuration constants for embedplayer.

Contains provider tables, layout defaults, and the layered config loader.
"""

from embedplayer.config.defaults import (
    DEFAULT_PARENT_HOST,
    DEFAULT_SCREEN_HEIGHT,
    DEFAULT_YOUTUBE_IFRAME_URL,
    GIF_MAX_HEIGHT,
)
from embedplayer.config.loader import (
    ConfigSource,
    EmbedPlayerConfig,
    clear_config_cache,
    get_config,
)
from embedplayer.config.providers import (
    EMBED_PLAYER_SOURCES,
    EMBED_TYPE_SOURCES,
    EXTERNAL_EMBED_LABELS,
    EmbedPlayerSource,
    EmbedPlayerType,
    get_source_count,
    get_source_label,
    list_supported_sources,
)

__all__ = [
    "DEFAULT_PARENT_HOST",
    "DEFAULT_SCREEN_HEIGHT",
    "DEFAULT_YOUTUBE_IFRAME_URL",
    "GIF_MAX_HEIGHT",
    # Config loader
    "EmbedPlayerConfig",
    "ConfigSource",
    "get_config",
    "clear_config_cache",
    # Provider tables
    "EmbedPlayerSource",
    "EmbedPlayerType",
    "EMBED_PLAYER_SOURCES",
    "EMBED_TYPE_SOURCES",
    "EXTERNAL_EMBED_LABELS",
    "get_source_label",
    "list_supported_sources",
    "get_source_count",
]
