"""Tests for embed link matching."""

import pytest

from embedplayer import (
    EmbedPlayerSource,
    EmbedPlayerType,
    MatchContext,
    ParsedURL,
    get_giphy_meta_uri,
    match,
    parse_embed_player_from_url,
)


class TestInvalidInput:
    """Anything that is not an absolute URL yields None."""

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "   ",
            "not a url",
            "youtube.com/watch?v=dQw4w9WgXcQ",
            "https://",
            "https://[::1/shorts/abc",
            "https://example.com:99999/video",
            "http://you tube.com/watch?v=abc",
        ],
    )
    def test_invalid_strings_return_none(self, text):
        assert parse_embed_player_from_url(text) is None

    def test_non_web_scheme_returns_none(self):
        assert parse_embed_player_from_url("mailto:someone@example.com") is None

    def test_unknown_host_returns_none(self):
        assert parse_embed_player_from_url("https://example.com/video/abc123") is None


class TestDocumentedExamples:
    """Reference behaviour for each provider family."""

    def test_youtu_be(self):
        params = match("https://youtu.be/dQw4w9WgXcQ")
        assert params.type is EmbedPlayerType.YOUTUBE_VIDEO
        assert params.source is EmbedPlayerSource.YOUTUBE
        assert "videoId=dQw4w9WgXcQ&start=0" in params.player_uri
        assert params.hide_details is None

    def test_youtube_short(self):
        params = match("https://www.youtube.com/shorts/abc123")
        assert params.type is EmbedPlayerType.YOUTUBE_SHORT
        assert params.source is EmbedPlayerSource.YOUTUBE_SHORTS
        assert params.hide_details is True

    def test_spotify_track(self):
        params = match("https://open.spotify.com/track/5xyz")
        assert params.type is EmbedPlayerType.SPOTIFY_SONG
        assert params.player_uri == "https://open.spotify.com/embed/track/5xyz"

    def test_giphy_site(self):
        params = match("https://giphy.com/gifs/funny-cat-abc123")
        assert params.type is EmbedPlayerType.GIPHY_GIF
        assert params.is_gif is True
        assert params.meta_uri == "https://giphy.com/gifs/abc123"
        assert params.player_uri == "https://i.giphy.com/media/abc123/giphy.webp"

    def test_giphy_cdn(self):
        params = match("https://media2.giphy.com/media/xyz987/giphy.gif")
        assert params.type is EmbedPlayerType.GIPHY_GIF
        assert params.player_uri == "https://i.giphy.com/media/xyz987/giphy.webp"

    def test_tenor_without_extension(self):
        url = "https://www.tenor.com/view/cat-gif-123456"
        assert match(url).player_uri == url + ".gif"

    def test_tenor_with_extension(self):
        url = "https://www.tenor.com/view/cat-gif-123456.gif"
        assert match(url).player_uri == url


class TestMatching:
    """Tests for matcher-level behaviour."""

    def test_match_is_alias(self):
        assert match is parse_embed_player_from_url

    def test_repeated_calls_are_equal_but_distinct(self):
        url = "https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=30"
        first = match(url)
        second = match(url)
        assert first == second
        assert first is not second

    def test_hostname_is_case_insensitive(self):
        params = match("https://YOUTU.BE/dQw4w9WgXcQ")
        assert params.type is EmbedPlayerType.YOUTUBE_VIDEO

    def test_surrounding_whitespace_is_ignored(self):
        params = match("  https://vimeo.com/347119375\n")
        assert params.player_uri == "https://player.vimeo.com/video/347119375?autoplay=1"

    def test_matched_host_with_bad_path_returns_none(self):
        assert match("https://www.youtube.com/feed/subscriptions") is None
        assert match("https://open.spotify.com/artist/123") is None

    def test_explicit_context_is_used(self):
        context = MatchContext(
            parent_host="example.com",
            youtube_iframe_url="https://embed.example.com/yt.html",
        )
        twitch = match("https://twitch.tv/somechannel", context)
        assert twitch.player_uri.endswith("&channel=somechannel&parent=example.com")

        youtube = match("https://youtu.be/abc", context)
        assert youtube.player_uri == "https://embed.example.com/yt.html?videoId=abc&start=0"

    def test_configured_context_is_default(self, monkeypatch):
        from embedplayer.config.loader import clear_config_cache

        monkeypatch.setenv("EMBEDPLAYER_PARENT_HOST", "app.example.org")
        clear_config_cache()

        params = match("https://www.twitch.tv/videos/42")
        assert params.player_uri.endswith("&video=42&parent=app.example.org")

    def test_relative_configured_iframe_url_uses_default(self, monkeypatch):
        from embedplayer.config.loader import clear_config_cache

        monkeypatch.setenv("EMBEDPLAYER_YOUTUBE_IFRAME_URL", "iframe/youtube.html")
        clear_config_cache()

        params = match("https://youtu.be/abc")
        assert params.player_uri == "https://bsky.app/iframe/youtube.html?videoId=abc&start=0"

    def test_default_parent_host_is_localhost(self):
        params = match("https://www.twitch.tv/videos/42")
        assert params.player_uri.endswith("&parent=localhost")


class TestGiphyMetaUri:
    """Tests for get_giphy_meta_uri()."""

    def test_cdn_link(self):
        url = "https://media2.giphy.com/media/xyz987/giphy.gif"
        assert get_giphy_meta_uri(url) == "https://giphy.com/gifs/xyz987"

    def test_asset_link(self):
        url = "https://i.giphy.com/media/abc123.webp"
        assert get_giphy_meta_uri(url) == "https://giphy.com/gifs/abc123"

    def test_accepts_parsed_url(self):
        parsed = ParsedURL.parse("https://media.giphy.com/media/xyz987/giphy.mp4")
        assert get_giphy_meta_uri(parsed) == "https://giphy.com/gifs/xyz987"

    def test_site_link_is_not_a_media_host(self):
        assert get_giphy_meta_uri("https://giphy.com/gifs/funny-cat-abc123") is None

    def test_unmatched_cdn_path(self):
        assert get_giphy_meta_uri("https://media.giphy.com/about") is None

    def test_non_giphy_url(self):
        assert get_giphy_meta_uri("https://youtu.be/dQw4w9WgXcQ") is None

    def test_invalid_url(self):
        assert get_giphy_meta_uri("not a url") is None
