"""
YouTube recognizers: youtu.be short links, watch URLs and Shorts.
"""

from __future__ import annotations

from urllib.parse import quote

from embedplayer.config.providers import EmbedPlayerSource, EmbedPlayerType
from embedplayer.models.embed_player import EmbedPlayerParams
from embedplayer.parsing.url import ParsedURL
from embedplayer.providers.base import MatchContext, Recognizer

# Characters encodeURIComponent leaves alone on top of quote()'s defaults
_URI_COMPONENT_SAFE = "!*'()"


def _seek(url: ParsedURL) -> str:
    """Start offset from the ``t`` parameter, percent-encoded ("0" if absent)."""
    t = url.get_param("t")
    return quote(t if t is not None else "0", safe=_URI_COMPONENT_SAFE)


def youtube_player_uri(video_id: str, seek: str, context: MatchContext) -> str:
    return f"{context.youtube_iframe_url}?videoId={video_id}&start={seek}"


class YoutuBeRecognizer(Recognizer):
    """``https://youtu.be/<id>``"""

    name = "youtu.be"
    hosts = frozenset({"youtu.be"})

    def extract(self, url: ParsedURL, context: MatchContext) -> EmbedPlayerParams | None:
        video_id = url.segment(1)
        if not video_id:
            return None
        return EmbedPlayerParams(
            type=EmbedPlayerType.YOUTUBE_VIDEO,
            source=EmbedPlayerSource.YOUTUBE,
            player_uri=youtube_player_uri(video_id, _seek(url), context),
        )


class YoutubeRecognizer(Recognizer):
    """``/watch?v=<id>`` and ``/shorts/<id>`` on youtube.com hosts."""

    name = "youtube"
    hosts = frozenset({"www.youtube.com", "youtube.com", "m.youtube.com"})

    def extract(self, url: ParsedURL, context: MatchContext) -> EmbedPlayerParams | None:
        is_short = url.segment(1) == "shorts"
        video_id = url.segment(2) if is_short else url.get_param("v")
        if not video_id:
            return None

        player_uri = youtube_player_uri(video_id, _seek(url), context)
        if is_short:
            return EmbedPlayerParams(
                type=EmbedPlayerType.YOUTUBE_SHORT,
                source=EmbedPlayerSource.YOUTUBE_SHORTS,
                hide_details=True,
                player_uri=player_uri,
            )
        return EmbedPlayerParams(
            type=EmbedPlayerType.YOUTUBE_VIDEO,
            source=EmbedPlayerSource.YOUTUBE,
            player_uri=player_uri,
        )
