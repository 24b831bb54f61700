"""
embedplayer.providers.base - Recognizer contract and matching context.

A recognizer pairs a hostname predicate with a path/query extraction step.
The matcher walks recognizers in a fixed order and returns the first
descriptor produced.

Classes:
    MatchContext: Environment-dependent values injected into recognizers.
    Recognizer: Abstract base class for all provider recognizers.

Example:
    >>> class ExampleRecognizer(Recognizer):
    ...     name = "example"
    ...     hosts = frozenset({"example.com"})
    ...     def extract(self, url, context):
    ...         return None
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from embedplayer.config.defaults import DEFAULT_PARENT_HOST, DEFAULT_YOUTUBE_IFRAME_URL

if TYPE_CHECKING:
    from embedplayer.config.loader import EmbedPlayerConfig
    from embedplayer.models.embed_player import EmbedPlayerParams
    from embedplayer.parsing.url import ParsedURL


@dataclass(frozen=True)
class MatchContext:
    """Values the recognizers need from the hosting environment.

    Attributes:
        parent_host: Hostname of the page embedding a Twitch player. In a
            browser this is the current page hostname; elsewhere a
            placeholder host.
        youtube_iframe_url: Wrapper page that loads the YouTube player.
    """

    parent_host: str = DEFAULT_PARENT_HOST
    youtube_iframe_url: str = DEFAULT_YOUTUBE_IFRAME_URL

    @classmethod
    def from_config(cls, config: EmbedPlayerConfig) -> MatchContext:
        return cls(
            parent_host=config.parent_host,
            youtube_iframe_url=config.youtube_iframe_url,
        )


class Recognizer(ABC):
    """Abstract base class for provider recognizers.

    Subclasses declare the exact hostnames they accept in ``hosts`` (or
    override ``matches_host``) and implement ``extract``. Extraction must
    return None, never raise, when the URL does not have a shape the
    provider embeds.
    """

    name: ClassVar[str]
    hosts: ClassVar[frozenset[str]] = frozenset()

    def matches_host(self, hostname: str) -> bool:
        """Check whether this recognizer handles the (lower-cased) hostname."""
        return hostname in self.hosts

    @abstractmethod
    def extract(self, url: ParsedURL, context: MatchContext) -> EmbedPlayerParams | None:
        """Build a descriptor from the URL's path and query.

        Args:
            url: Parsed input URL whose hostname already matched.
            context: Injected environment values.

        Returns:
            EmbedPlayerParams, or None if the path/query has no usable id.
        """
        ...

    def recognize(self, url: ParsedURL, context: MatchContext) -> EmbedPlayerParams | None:
        """Apply the hostname predicate, then extraction."""
        if not self.matches_host(url.hostname):
            return None
        return self.extract(url, context)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
