"""
Apple Music recognizer: playlists, albums and songs on music.apple.com.
"""

from __future__ import annotations

from embedplayer.config.providers import EmbedPlayerSource, EmbedPlayerType
from embedplayer.models.embed_player import EmbedPlayerParams
from embedplayer.parsing.url import ParsedURL
from embedplayer.providers.base import MatchContext, Recognizer

EMBED_HOST_URL = "https://embed.music.apple.com"


class AppleMusicRecognizer(Recognizer):
    """``/<locale>/<playlist|album>/<name>/<id>[?i=<songId>]``

    A song is addressed as an album link with an ``i`` query parameter.
    """

    name = "apple-music"
    hosts = frozenset({"music.apple.com"})

    def extract(self, url: ParsedURL, context: MatchContext) -> EmbedPlayerParams | None:
        # locale, type, name and id, all required
        segments = url.segments
        if len(segments) != 5:
            return None

        kind = segments[2]
        if kind not in ("playlist", "album"):
            return None

        song_id = url.get_param("i")
        player_uri = f"{EMBED_HOST_URL}{url.pathname}"
        if url.search and song_id:
            player_uri += f"?i={song_id}"

        if kind == "playlist":
            embed_type = EmbedPlayerType.APPLE_MUSIC_PLAYLIST
        elif song_id:
            embed_type = EmbedPlayerType.APPLE_MUSIC_SONG
        else:
            embed_type = EmbedPlayerType.APPLE_MUSIC_ALBUM

        return EmbedPlayerParams(
            type=embed_type,
            source=EmbedPlayerSource.APPLE_MUSIC,
            player_uri=player_uri,
        )
