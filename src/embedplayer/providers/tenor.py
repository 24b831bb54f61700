"""
Tenor recognizer.

Tenor serves the GIF itself when ``.gif`` is appended to a view URL, so the
player URI is the input URL with that extension ensured.
"""

from __future__ import annotations

from embedplayer.config.providers import EmbedPlayerSource, EmbedPlayerType
from embedplayer.models.embed_player import EmbedPlayerParams
from embedplayer.parsing.url import ParsedURL
from embedplayer.providers.base import MatchContext, Recognizer


class TenorRecognizer(Recognizer):
    """``/view/<file>`` or ``/<locale>/view/<file>``."""

    name = "tenor"
    hosts = frozenset({"tenor.com", "www.tenor.com"})

    def extract(self, url: ParsedURL, context: MatchContext) -> EmbedPlayerParams | None:
        path_or_intl = url.segment(1)
        path_or_filename = url.segment(2)

        is_intl = path_or_filename == "view"
        filename = url.segment(3) if is_intl else path_or_filename
        if not (path_or_intl == "view" or is_intl) or not filename:
            return None

        includes_ext = filename.split(".")[-1] == "gif"
        return EmbedPlayerParams(
            type=EmbedPlayerType.TENOR_GIF,
            source=EmbedPlayerSource.TENOR,
            is_gif=True,
            hide_details=True,
            player_uri=url.href if includes_ext else f"{url.href}.gif",
        )
