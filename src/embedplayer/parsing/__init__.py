"""
URL parsing utilities.
"""

from embedplayer.parsing.url import ParsedURL

__all__ = [
    "ParsedURL",
]
