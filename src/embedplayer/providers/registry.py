"""
embedplayer.providers.registry - Ordered recognizer registry.

The order of RECOGNIZERS is significant: the matcher returns the first
descriptor produced, walking youtube, twitch, spotify, soundcloud, apple
music, vimeo, then the three giphy host families and finally tenor.

Functions:
    list_all: List recognizer names in evaluation order.
    get_recognizer: Get a recognizer instance by name.

Example:
    >>> from embedplayer.providers.registry import get_recognizer
    >>> get_recognizer("vimeo")
    VimeoRecognizer(name='vimeo')
"""

from __future__ import annotations

from embedplayer.providers.apple_music import AppleMusicRecognizer
from embedplayer.providers.base import Recognizer
from embedplayer.providers.giphy import (
    GiphyAssetRecognizer,
    GiphyCdnRecognizer,
    GiphySiteRecognizer,
)
from embedplayer.providers.soundcloud import SoundcloudRecognizer
from embedplayer.providers.spotify import SpotifyRecognizer
from embedplayer.providers.tenor import TenorRecognizer
from embedplayer.providers.twitch import TwitchRecognizer
from embedplayer.providers.vimeo import VimeoRecognizer
from embedplayer.providers.youtube import YoutuBeRecognizer, YoutubeRecognizer

RECOGNIZERS: tuple[Recognizer, ...] = (
    YoutuBeRecognizer(),
    YoutubeRecognizer(),
    TwitchRecognizer(),
    SpotifyRecognizer(),
    SoundcloudRecognizer(),
    AppleMusicRecognizer(),
    VimeoRecognizer(),
    GiphySiteRecognizer(),
    GiphyCdnRecognizer(),
    GiphyAssetRecognizer(),
    TenorRecognizer(),
)

_BY_NAME: dict[str, Recognizer] = {r.name: r for r in RECOGNIZERS}


def list_all() -> list[str]:
    """List recognizer names in evaluation order."""
    return [r.name for r in RECOGNIZERS]


def get_recognizer(name: str) -> Recognizer:
    """Get a recognizer by name.

    Args:
        name: Recognizer name (case-insensitive), e.g. "giphy-cdn".

    Returns:
        The shared recognizer instance.

    Raises:
        ValueError: If no recognizer has that name.
    """
    normalized = name.lower().strip()
    recognizer = _BY_NAME.get(normalized)
    if recognizer is None:
        available = ", ".join(list_all())
        raise ValueError(f"Unknown recognizer: {name!r}. Available: {available}")
    return recognizer
