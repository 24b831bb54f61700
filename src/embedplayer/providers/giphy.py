"""
GIPHY recognizers.

GIPHY links come in three host families, each tried separately:

- giphy.com: ``/gifs/<name>-<id>`` pages
- media.giphy.com and media0-4.giphy.com: CDN links, optionally with a
  tracking segment before the id
- i.giphy.com: direct asset links, ``.gif`` or ``.webp``

Every recognized link is rewritten to the ``giphy.webp`` asset on
i.giphy.com so it can be shown as an image.
"""

from __future__ import annotations

import re

from embedplayer.config.providers import EmbedPlayerSource, EmbedPlayerType
from embedplayer.models.embed_player import EmbedPlayerParams
from embedplayer.parsing.url import ParsedURL
from embedplayer.providers.base import MatchContext, Recognizer

GIPHY_CDN_HOST_RE = re.compile(r"media[0-4]?\.giphy\.com", re.IGNORECASE)
GIF_FILENAME_RE = re.compile(r"^(\S+)\.(webp|gif|mp4)$", re.IGNORECASE)

ASSET_HOSTS = frozenset({"i.giphy.com", "www.i.giphy.com"})


def is_giphy_cdn_host(hostname: str) -> bool:
    return GIPHY_CDN_HOST_RE.fullmatch(hostname) is not None


def giphy_params(gif_id: str) -> EmbedPlayerParams:
    """Descriptor for a GIF id, pointing at its webp asset."""
    return EmbedPlayerParams(
        type=EmbedPlayerType.GIPHY_GIF,
        source=EmbedPlayerSource.GIPHY,
        is_gif=True,
        hide_details=True,
        meta_uri=f"https://giphy.com/gifs/{gif_id}",
        player_uri=f"https://i.giphy.com/media/{gif_id}/giphy.webp",
    )


def _strip_extension(filename: str) -> str:
    return filename.split(".")[0]


class GiphySiteRecognizer(Recognizer):
    """``/gifs/<name>-<id>``; the id is the last dash-separated token."""

    name = "giphy"
    hosts = frozenset({"giphy.com", "www.giphy.com"})

    def extract(self, url: ParsedURL, context: MatchContext) -> EmbedPlayerParams | None:
        name_and_id = url.segment(2)
        if url.segment(1) != "gifs" or not name_and_id:
            return None

        gif_id = name_and_id.split("-")[-1]
        if not gif_id:
            return None
        return giphy_params(gif_id)


class GiphyCdnRecognizer(Recognizer):
    """``/media/<id>/<file>`` or ``/media/<tracking>/<id>/<file>``.

    The two shapes are tried in that order; ``<file>`` must look like a
    gif, webp or mp4 filename.
    """

    name = "giphy-cdn"

    def matches_host(self, hostname: str) -> bool:
        return is_giphy_cdn_host(hostname)

    def extract(self, url: ParsedURL, context: MatchContext) -> EmbedPlayerParams | None:
        if url.segment(1) != "media":
            return None

        tracking_or_id = url.segment(2)
        id_or_filename = url.segment(3)
        filename = url.segment(4)

        if tracking_or_id and GIF_FILENAME_RE.match(id_or_filename):
            return giphy_params(tracking_or_id)
        if id_or_filename and GIF_FILENAME_RE.match(filename):
            return giphy_params(id_or_filename)
        return None


class GiphyAssetRecognizer(Recognizer):
    """``/media/<file>`` or ``/<file>`` on i.giphy.com."""

    name = "giphy-asset"
    hosts = ASSET_HOSTS

    def extract(self, url: ParsedURL, context: MatchContext) -> EmbedPlayerParams | None:
        media_or_filename = url.segment(1)
        filename = url.segment(2)

        if media_or_filename == "media" and filename:
            gif_id = _strip_extension(filename)
        elif media_or_filename:
            gif_id = _strip_extension(media_or_filename)
        else:
            return None

        if not gif_id:
            return None
        return giphy_params(gif_id)
