"""
Twitch recognizer: VODs, clips and live channels.

Twitch only plays inside pages it can verify, so every player URL carries
a ``parent`` host taken from the match context.
"""

from __future__ import annotations

from embedplayer.config.providers import EmbedPlayerSource, EmbedPlayerType
from embedplayer.models.embed_player import EmbedPlayerParams
from embedplayer.parsing.url import ParsedURL
from embedplayer.providers.base import MatchContext, Recognizer

PLAYER_URL = "https://player.twitch.tv/?volume=0.5&!muted&autoplay"
CLIP_URL = "https://clips.twitch.tv/embed?volume=0.5&autoplay=true"


class TwitchRecognizer(Recognizer):
    """``/videos/<id>``, ``/<channel>/clip/<id>`` and ``/<channel>``."""

    name = "twitch"
    hosts = frozenset({"twitch.tv", "www.twitch.tv", "m.twitch.tv"})

    def extract(self, url: ParsedURL, context: MatchContext) -> EmbedPlayerParams | None:
        channel_or_videos = url.segment(1)
        clip_or_id = url.segment(2)
        parent = context.parent_host

        if channel_or_videos == "videos":
            if not clip_or_id:
                return None
            player_uri = f"{PLAYER_URL}&video={clip_or_id}&parent={parent}"
        elif clip_or_id == "clip":
            clip_id = url.segment(3)
            if not clip_id:
                return None
            player_uri = f"{CLIP_URL}&clip={clip_id}&parent={parent}"
        elif channel_or_videos:
            player_uri = f"{PLAYER_URL}&channel={channel_or_videos}&parent={parent}"
        else:
            return None

        return EmbedPlayerParams(
            type=EmbedPlayerType.TWITCH_VIDEO,
            source=EmbedPlayerSource.TWITCH,
            player_uri=player_uri,
        )
