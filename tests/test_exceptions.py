"""Tests for embedplayer exceptions."""

import pytest

from embedplayer.exceptions import (
    EmbedPlayerError,
    InvalidDimensionsError,
    InvalidURLError,
    UnknownSourceError,
)


class TestExceptionHierarchy:
    """All errors share the EmbedPlayerError base."""

    @pytest.mark.parametrize(
        "exc",
        [
            InvalidURLError("bad", url="x"),
            InvalidDimensionsError("bad", original_width=0),
            UnknownSourceError("myspace"),
        ],
    )
    def test_base_class(self, exc):
        assert isinstance(exc, EmbedPlayerError)

    def test_builtin_bases(self):
        assert issubclass(InvalidURLError, ValueError)
        assert issubclass(InvalidDimensionsError, ValueError)
        assert issubclass(UnknownSourceError, KeyError)


class TestToDict:
    """Tests for structured error output."""

    def test_without_details(self):
        assert EmbedPlayerError("oops").to_dict() == {
            "type": "EmbedPlayerError",
            "message": "oops",
        }

    def test_invalid_url(self):
        assert InvalidURLError("URL has no scheme", url="abc").to_dict() == {
            "type": "InvalidURLError",
            "message": "URL has no scheme",
            "details": {"url": "abc"},
        }

    def test_invalid_dimensions_skips_missing_values(self):
        exc = InvalidDimensionsError("bad", original_height=10, original_width=0)
        assert exc.details == {"original_height": 10, "original_width": 0}

    def test_unknown_source_message(self):
        exc = UnknownSourceError("myspace")
        assert str(exc) == "Unknown embed source: 'myspace'"
        assert exc.to_dict()["details"] == {"source": "myspace"}
