"""
Absolute URL parsing for provider matching.

ParsedURL is the boundary between arbitrary input text and the provider
recognizers: it either yields a structured URL (scheme, lower-cased hostname,
path, query) or signals that the text is not an absolute URL.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from urllib.parse import parse_qsl, quote, urlsplit, urlunsplit

from embedplayer.exceptions import InvalidURLError

_SCHEME_RE = re.compile(r"^([a-zA-Z][a-zA-Z0-9+.\-]*):")

# Schemes that always carry an authority and a path rooted at "/"
_HOST_REQUIRED_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp"})

_WHITESPACE_RE = re.compile(r"\s")

# Characters left as-is when percent-encoding a path
_PATH_SAFE = "/%:@!$&'()*+,;=~"


def _remove_dot_segments(path: str) -> str:
    """Resolve "." and ".." segments of a path rooted at "/"."""
    output: list[str] = []
    segments = path.split("/")[1:]
    for segment in segments:
        if segment == "..":
            if output:
                output.pop()
        elif segment != ".":
            output.append(segment)
    if segments and segments[-1] in (".", ".."):
        output.append("")
    return "/" + "/".join(output)


def _normalize_authority_slashes(text: str, scheme: str) -> str:
    """Rewrite "https:host/..." and "https:///host/..." as "https://host/..."."""
    rest = text[len(scheme) + 1:].lstrip("/\\")
    return f"{scheme}://{rest}"


@dataclass(frozen=True)
class ParsedURL:
    """Structured view of an absolute URL."""

    href: str
    scheme: str
    hostname: str
    pathname: str
    search: str
    query_pairs: tuple[tuple[str, str], ...] = field(default=(), repr=False)

    @classmethod
    def parse(cls, url: str) -> ParsedURL:
        """Parse text as an absolute URL.

        Args:
            url: Arbitrary input text.

        Returns:
            ParsedURL for the stripped input; web URLs are normalized.

        Raises:
            InvalidURLError: If the text is not an absolute URL.
        """
        text = url.strip() if isinstance(url, str) else ""
        if not text:
            raise InvalidURLError("URL cannot be empty", url=str(url or ""))
        scheme_match = _SCHEME_RE.match(text)
        if not scheme_match:
            raise InvalidURLError("URL has no scheme", url=text)
        if scheme_match.group(1).lower() in _HOST_REQUIRED_SCHEMES:
            text = _normalize_authority_slashes(text, scheme_match.group(1))

        try:
            parts = urlsplit(text)
            hostname = parts.hostname or ""
            # Accessing port validates it
            parts.port  # noqa: B018
        except ValueError as e:
            raise InvalidURLError(f"Malformed URL: {e}", url=text) from e

        scheme = parts.scheme.lower()
        if scheme in _HOST_REQUIRED_SCHEMES and not hostname:
            raise InvalidURLError(f"{scheme} URL has no host", url=text)
        if _WHITESPACE_RE.search(hostname):
            raise InvalidURLError("URL host contains whitespace", url=text)

        pathname = parts.path
        if scheme in _HOST_REQUIRED_SCHEMES:
            pathname = quote(_remove_dot_segments(pathname or "/"), safe=_PATH_SAFE)
            if pathname != (parts.path or "/"):
                text = urlunsplit(
                    (parts.scheme, parts.netloc, pathname, parts.query, parts.fragment)
                )

        return cls(
            href=text,
            scheme=scheme,
            hostname=hostname,
            pathname=pathname,
            search=f"?{parts.query}" if parts.query else "",
            query_pairs=tuple(parse_qsl(parts.query, keep_blank_values=True)),
        )

    @classmethod
    def try_parse(cls, url: str) -> ParsedURL | None:
        """Try to parse a URL, returning None on failure instead of raising."""
        try:
            return cls.parse(url)
        except InvalidURLError:
            return None

    @property
    def segments(self) -> list[str]:
        """Path split on "/", leading empty segment included."""
        return self.pathname.split("/")

    def segment(self, index: int) -> str:
        """Path segment at index, or "" when the path is shorter."""
        segments = self.segments
        if 0 <= index < len(segments):
            return segments[index]
        return ""

    def get_param(self, name: str) -> str | None:
        """First decoded value of a query parameter, or None if absent."""
        for key, value in self.query_pairs:
            if key == name:
                return value
        return None

    def __str__(self) -> str:
        return self.href
