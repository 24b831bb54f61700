"""
Embed provider definitions: sources, media types and display labels.

These tables are process-wide read-only constants. Every media type belongs
to exactly one source; sources are coarser and drive display labels.
"""

from __future__ import annotations

from enum import Enum

from embedplayer.exceptions import UnknownSourceError


class EmbedPlayerSource(str, Enum):
    """Provider tag attached to every embed descriptor."""

    YOUTUBE = "youtube"
    YOUTUBE_SHORTS = "youtubeShorts"
    TWITCH = "twitch"
    SPOTIFY = "spotify"
    SOUNDCLOUD = "soundcloud"
    APPLE_MUSIC = "appleMusic"
    VIMEO = "vimeo"
    GIPHY = "giphy"
    TENOR = "tenor"


class EmbedPlayerType(str, Enum):
    """Kind of embedded media."""

    YOUTUBE_VIDEO = "youtube_video"
    YOUTUBE_SHORT = "youtube_short"
    TWITCH_VIDEO = "twitch_video"
    SPOTIFY_ALBUM = "spotify_album"
    SPOTIFY_PLAYLIST = "spotify_playlist"
    SPOTIFY_SONG = "spotify_song"
    SOUNDCLOUD_TRACK = "soundcloud_track"
    SOUNDCLOUD_SET = "soundcloud_set"
    APPLE_MUSIC_PLAYLIST = "apple_music_playlist"
    APPLE_MUSIC_ALBUM = "apple_music_album"
    APPLE_MUSIC_SONG = "apple_music_song"
    VIMEO_VIDEO = "vimeo_video"
    GIPHY_GIF = "giphy_gif"
    TENOR_GIF = "tenor_gif"


EMBED_PLAYER_SOURCES: tuple[EmbedPlayerSource, ...] = tuple(EmbedPlayerSource)

EXTERNAL_EMBED_LABELS: dict[EmbedPlayerSource, str] = {
    EmbedPlayerSource.YOUTUBE: "YouTube",
    EmbedPlayerSource.YOUTUBE_SHORTS: "YouTube Shorts",
    EmbedPlayerSource.VIMEO: "Vimeo",
    EmbedPlayerSource.TWITCH: "Twitch",
    EmbedPlayerSource.GIPHY: "GIPHY",
    EmbedPlayerSource.TENOR: "Tenor",
    EmbedPlayerSource.SPOTIFY: "Spotify",
    EmbedPlayerSource.APPLE_MUSIC: "Apple Music",
    EmbedPlayerSource.SOUNDCLOUD: "SoundCloud",
}

EMBED_TYPE_SOURCES: dict[EmbedPlayerType, EmbedPlayerSource] = {
    EmbedPlayerType.YOUTUBE_VIDEO: EmbedPlayerSource.YOUTUBE,
    EmbedPlayerType.YOUTUBE_SHORT: EmbedPlayerSource.YOUTUBE_SHORTS,
    EmbedPlayerType.TWITCH_VIDEO: EmbedPlayerSource.TWITCH,
    EmbedPlayerType.SPOTIFY_ALBUM: EmbedPlayerSource.SPOTIFY,
    EmbedPlayerType.SPOTIFY_PLAYLIST: EmbedPlayerSource.SPOTIFY,
    EmbedPlayerType.SPOTIFY_SONG: EmbedPlayerSource.SPOTIFY,
    EmbedPlayerType.SOUNDCLOUD_TRACK: EmbedPlayerSource.SOUNDCLOUD,
    EmbedPlayerType.SOUNDCLOUD_SET: EmbedPlayerSource.SOUNDCLOUD,
    EmbedPlayerType.APPLE_MUSIC_PLAYLIST: EmbedPlayerSource.APPLE_MUSIC,
    EmbedPlayerType.APPLE_MUSIC_ALBUM: EmbedPlayerSource.APPLE_MUSIC,
    EmbedPlayerType.APPLE_MUSIC_SONG: EmbedPlayerSource.APPLE_MUSIC,
    EmbedPlayerType.VIMEO_VIDEO: EmbedPlayerSource.VIMEO,
    EmbedPlayerType.GIPHY_GIF: EmbedPlayerSource.GIPHY,
    EmbedPlayerType.TENOR_GIF: EmbedPlayerSource.TENOR,
}


def get_source_label(source: EmbedPlayerSource | str) -> str:
    """Get the display label for an embed source.

    Args:
        source: EmbedPlayerSource or its string value (e.g. "appleMusic").

    Returns:
        Human-readable label (e.g. "Apple Music").

    Raises:
        UnknownSourceError: If the source is not supported.
    """
    try:
        return EXTERNAL_EMBED_LABELS[EmbedPlayerSource(source)]
    except ValueError:
        raise UnknownSourceError(str(source)) from None


def list_supported_sources() -> list[str]:
    """List all supported source tags, in declaration order."""
    return [s.value for s in EMBED_PLAYER_SOURCES]


def get_source_count() -> int:
    """Return the number of supported sources."""
    return len(EMBED_PLAYER_SOURCES)
