"""
Layout sizing for embedded players and GIFs.

Player heights are fixed per media kind for audio widgets and derived from
the available width for video. GIFs are scaled to the view width under a
hard height ceiling.
"""

from __future__ import annotations

from embedplayer.config.defaults import GIF_MAX_HEIGHT, SMALL_SCREEN_HEIGHT
from embedplayer.config.loader import get_config
from embedplayer.config.providers import EmbedPlayerType
from embedplayer.exceptions import InvalidDimensionsError
from embedplayer.models.embed_player import GifDims

VIDEO_TYPES = frozenset(
    {
        EmbedPlayerType.YOUTUBE_VIDEO,
        EmbedPlayerType.TWITCH_VIDEO,
        EmbedPlayerType.VIMEO_VIDEO,
    }
)

# Album/playlist-shaped widgets with a track list
FIXED_HEIGHTS: dict[EmbedPlayerType, float] = {
    EmbedPlayerType.SPOTIFY_ALBUM: 380,
    EmbedPlayerType.SPOTIFY_PLAYLIST: 380,
    EmbedPlayerType.APPLE_MUSIC_ALBUM: 380,
    EmbedPlayerType.APPLE_MUSIC_PLAYLIST: 380,
    EmbedPlayerType.SOUNDCLOUD_SET: 380,
    EmbedPlayerType.SOUNDCLOUD_TRACK: 165,
    EmbedPlayerType.APPLE_MUSIC_SONG: 150,
}

SPOTIFY_SONG_COMPACT_HEIGHT = 155
SPOTIFY_SONG_HEIGHT = 232
SPOTIFY_SONG_COMPACT_MAX_WIDTH = 300


def _as_type(value: EmbedPlayerType | str) -> EmbedPlayerType | None:
    try:
        return EmbedPlayerType(value)
    except ValueError:
        return None


def get_player_height(
    type: EmbedPlayerType | str,
    width: float,
    has_thumb: bool,
    screen_height: int | None = None,
) -> float:
    """Pixel height for an embedded player.

    Args:
        type: Media kind of the descriptor (enum or its string value).
        width: Available width in logical pixels.
        has_thumb: Whether a preview thumbnail is available. Without one the
            placeholder is always 16:9.
        screen_height: Logical screen height; defaults to the configured
            value. Only YouTube Shorts depend on it.

    Returns:
        Height in logical pixels. Unknown types get ``width``.
    """
    if not has_thumb:
        return width / 16 * 9

    embed_type = _as_type(type)
    if embed_type is None:
        return width

    if embed_type in VIDEO_TYPES:
        return width / 16 * 9

    if embed_type is EmbedPlayerType.YOUTUBE_SHORT:
        if screen_height is None:
            screen_height = get_config().screen_height
        if screen_height < SMALL_SCREEN_HEIGHT:
            return width / 9 * 16 / 1.75
        return width / 9 * 16 / 1.5

    if embed_type is EmbedPlayerType.SPOTIFY_SONG:
        if width <= SPOTIFY_SONG_COMPACT_MAX_WIDTH:
            return SPOTIFY_SONG_COMPACT_HEIGHT
        return SPOTIFY_SONG_HEIGHT

    return FIXED_HEIGHTS.get(embed_type, width)


def get_gif_dims(
    original_height: float,
    original_width: float,
    view_width: float,
) -> GifDims:
    """Fit a GIF to the view width under the height ceiling.

    The height is the aspect-preserving height at ``view_width``, capped at
    250. The width is re-derived from the ceiling, so a GIF taller than 250
    at full width comes out narrower than the view.

    Args:
        original_height: Intrinsic GIF height.
        original_width: Intrinsic GIF width.
        view_width: Available display width.

    Returns:
        GifDims with display height and width.

    Raises:
        InvalidDimensionsError: If the width is zero or the scaled height
            comes out zero. A zero height is rejected rather than answered
            with a zero height and an infinite width.
    """
    if original_width == 0:
        raise InvalidDimensionsError(
            "GIF width must be non-zero",
            original_height=original_height,
            original_width=original_width,
            view_width=view_width,
        )

    scaled_height = original_height / original_width * view_width
    if scaled_height == 0:
        raise InvalidDimensionsError(
            "GIF scaled height must be non-zero",
            original_height=original_height,
            original_width=original_width,
            view_width=view_width,
        )

    return GifDims(
        height=min(scaled_height, GIF_MAX_HEIGHT),
        width=GIF_MAX_HEIGHT / scaled_height * view_width,
    )
