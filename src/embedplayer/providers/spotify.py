"""
Spotify recognizer: playlists, albums and tracks on open.spotify.com.

Links may carry a locale prefix (``/intl-de/track/<id>``), so the kind
keyword is looked up in the first or second path segment.
"""

from __future__ import annotations

from embedplayer.config.providers import EmbedPlayerSource, EmbedPlayerType
from embedplayer.models.embed_player import EmbedPlayerParams
from embedplayer.parsing.url import ParsedURL
from embedplayer.providers.base import MatchContext, Recognizer

# Checked in this order
SPOTIFY_KINDS: tuple[tuple[str, EmbedPlayerType], ...] = (
    ("playlist", EmbedPlayerType.SPOTIFY_PLAYLIST),
    ("album", EmbedPlayerType.SPOTIFY_ALBUM),
    ("track", EmbedPlayerType.SPOTIFY_SONG),
)


class SpotifyRecognizer(Recognizer):
    """``/[<locale>/]<playlist|album|track>/<id>``"""

    name = "spotify"
    hosts = frozenset({"open.spotify.com"})

    def extract(self, url: ParsedURL, context: MatchContext) -> EmbedPlayerParams | None:
        type_or_locale = url.segment(1)
        id_or_type = url.segment(2)
        if not id_or_type:
            return None

        for kind, embed_type in SPOTIFY_KINDS:
            if type_or_locale == kind:
                item_id = id_or_type
            elif id_or_type == kind:
                item_id = url.segment(3)
            else:
                continue

            if not item_id:
                return None
            return EmbedPlayerParams(
                type=embed_type,
                source=EmbedPlayerSource.SPOTIFY,
                player_uri=f"https://open.spotify.com/embed/{kind}/{item_id}",
            )
        return None
