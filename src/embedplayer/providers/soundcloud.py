"""
SoundCloud recognizer: tracks and sets.

The widget resolves the link itself, so the player URL carries the
original input URL rather than an extracted id.
"""

from __future__ import annotations

from embedplayer.config.providers import EmbedPlayerSource, EmbedPlayerType
from embedplayer.models.embed_player import EmbedPlayerParams
from embedplayer.parsing.url import ParsedURL
from embedplayer.providers.base import MatchContext, Recognizer


def soundcloud_player_uri(original_url: str) -> str:
    return (
        f"https://w.soundcloud.com/player/?url={original_url}"
        "&auto_play=true&visual=false&hide_related=true"
    )


class SoundcloudRecognizer(Recognizer):
    """``/<user>/sets/<set>`` and ``/<user>/<track>``."""

    name = "soundcloud"
    hosts = frozenset({"soundcloud.com", "www.soundcloud.com"})

    def extract(self, url: ParsedURL, context: MatchContext) -> EmbedPlayerParams | None:
        user = url.segment(1)
        track_or_sets = url.segment(2)
        if not user or not track_or_sets:
            return None

        if track_or_sets == "sets" and url.segment(3):
            embed_type = EmbedPlayerType.SOUNDCLOUD_SET
        else:
            embed_type = EmbedPlayerType.SOUNDCLOUD_TRACK

        return EmbedPlayerParams(
            type=embed_type,
            source=EmbedPlayerSource.SOUNDCLOUD,
            player_uri=soundcloud_player_uri(url.href),
        )
