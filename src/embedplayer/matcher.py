"""
Embed link matching.

parse_embed_player_from_url() is a total function: any input text yields an
EmbedPlayerParams or None. Malformed URLs, unsupported hosts and supported
hosts with unusable paths all come back as None.
"""

from __future__ import annotations

import logging

from embedplayer.config.loader import get_config
from embedplayer.config.providers import EmbedPlayerType
from embedplayer.models.embed_player import EmbedPlayerParams
from embedplayer.parsing.url import ParsedURL
from embedplayer.providers.base import MatchContext
from embedplayer.providers.giphy import ASSET_HOSTS, is_giphy_cdn_host
from embedplayer.providers.registry import RECOGNIZERS

logger = logging.getLogger(__name__)


def parse_embed_player_from_url(
    url: str,
    context: MatchContext | None = None,
) -> EmbedPlayerParams | None:
    """Recognize an embeddable media link.

    Recognizers are tried in registry order; the first one whose hostname
    matches and whose extraction succeeds wins. A hostname match with an
    unusable path falls through to later recognizers.

    Args:
        url: Arbitrary input text.
        context: Environment values (Twitch parent host, YouTube iframe
            page). Defaults to the resolved configuration.

    Returns:
        EmbedPlayerParams, or None if the link is not embeddable.
    """
    parsed = ParsedURL.try_parse(url)
    if parsed is None:
        logger.debug(f"Not an absolute URL: {url!r}")
        return None

    if context is None:
        context = MatchContext.from_config(get_config())

    for recognizer in RECOGNIZERS:
        params = recognizer.recognize(parsed, context)
        if params is not None:
            logger.debug(f"{recognizer.name} matched {parsed.href}: {params.type.value}")
            return params

    logger.debug(f"No embed for {parsed.href}")
    return None


match = parse_embed_player_from_url


def get_giphy_meta_uri(url: str | ParsedURL) -> str | None:
    """Canonical giphy.com page for a GIPHY CDN or asset link.

    Args:
        url: URL text or an already parsed URL.

    Returns:
        The ``https://giphy.com/gifs/<id>`` page, or None for anything that
        is not a recognizable GIPHY media link.
    """
    parsed = url if isinstance(url, ParsedURL) else ParsedURL.try_parse(url)
    if parsed is None:
        return None

    hostname = parsed.hostname
    if not (is_giphy_cdn_host(hostname) or hostname in ASSET_HOSTS):
        return None

    params = parse_embed_player_from_url(parsed.href)
    if params is not None and params.type is EmbedPlayerType.GIPHY_GIF:
        return params.meta_uri
    return None
