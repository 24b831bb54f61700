"""
Vimeo recognizer.
"""

from __future__ import annotations

from embedplayer.config.providers import EmbedPlayerSource, EmbedPlayerType
from embedplayer.models.embed_player import EmbedPlayerParams
from embedplayer.parsing.url import ParsedURL
from embedplayer.providers.base import MatchContext, Recognizer


class VimeoRecognizer(Recognizer):
    """``/<videoId>``"""

    name = "vimeo"
    hosts = frozenset({"vimeo.com", "www.vimeo.com"})

    def extract(self, url: ParsedURL, context: MatchContext) -> EmbedPlayerParams | None:
        video_id = url.segment(1)
        if not video_id:
            return None
        return EmbedPlayerParams(
            type=EmbedPlayerType.VIMEO_VIDEO,
            source=EmbedPlayerSource.VIMEO,
            player_uri=f"https://player.vimeo.com/video/{video_id}?autoplay=1",
        )
