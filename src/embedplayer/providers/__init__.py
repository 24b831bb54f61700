"""
embedplayer.providers - Per-provider link recognizers.

Each recognizer checks a hostname and extracts an embed descriptor from the
path and query. The registry fixes the order they are tried in.
"""

from embedplayer.providers.base import MatchContext, Recognizer
from embedplayer.providers.registry import RECOGNIZERS, get_recognizer, list_all

__all__ = [
    "MatchContext",
    "Recognizer",
    "RECOGNIZERS",
    "get_recognizer",
    "list_all",
]
