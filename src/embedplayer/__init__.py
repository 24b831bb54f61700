"""
embedplayer - Turn links into embeddable media players.

Recognizes YouTube, Twitch, Spotify, SoundCloud, Apple Music, Vimeo, GIPHY
and Tenor links and derives:
1. A normalized embed descriptor (player URL, media kind, display hints)
2. A player height for the available width
3. Display dimensions for GIFs under a height ceiling
"""

# Config
from embedplayer.config.loader import (
    ConfigSource,
    EmbedPlayerConfig,
    clear_config_cache,
    get_config,
)
from embedplayer.config.providers import (
    EMBED_PLAYER_SOURCES,
    EXTERNAL_EMBED_LABELS,
    EmbedPlayerSource,
    EmbedPlayerType,
    get_source_label,
    list_supported_sources,
)

# Exceptions
from embedplayer.exceptions import (
    EmbedPlayerError,
    InvalidDimensionsError,
    InvalidURLError,
    UnknownSourceError,
)

# Core functions
from embedplayer.layout import get_gif_dims, get_player_height
from embedplayer.matcher import get_giphy_meta_uri, match, parse_embed_player_from_url

# Models
from embedplayer.models.embed_player import EmbedPlayerParams, GifDims
from embedplayer.parsing.url import ParsedURL
from embedplayer.providers.base import MatchContext

__version__ = "1.0.0"

__all__ = [
    # Core functions
    "parse_embed_player_from_url",
    "match",
    "get_player_height",
    "get_gif_dims",
    "get_giphy_meta_uri",
    # Models
    "EmbedPlayerParams",
    "GifDims",
    "ParsedURL",
    "MatchContext",
    # Config
    "EmbedPlayerSource",
    "EmbedPlayerType",
    "EMBED_PLAYER_SOURCES",
    "EXTERNAL_EMBED_LABELS",
    "get_source_label",
    "list_supported_sources",
    "EmbedPlayerConfig",
    "ConfigSource",
    "get_config",
    "clear_config_cache",
    # Exceptions
    "EmbedPlayerError",
    "InvalidURLError",
    "InvalidDimensionsError",
    "UnknownSourceError",
]
