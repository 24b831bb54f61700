"""Tests for embed descriptor models and provider tables."""

import pytest
from pydantic import ValidationError

from embedplayer import (
    EMBED_PLAYER_SOURCES,
    EXTERNAL_EMBED_LABELS,
    EmbedPlayerParams,
    EmbedPlayerSource,
    EmbedPlayerType,
    UnknownSourceError,
    get_source_label,
    list_supported_sources,
    match,
)
from embedplayer.config.providers import EMBED_TYPE_SOURCES, get_source_count


class TestProviderTables:
    """Tests for the static source/type tables."""

    def test_sizes(self):
        assert len(EmbedPlayerType) == 14
        assert len(EmbedPlayerSource) == 9
        assert get_source_count() == 9

    def test_every_type_has_one_source(self):
        assert set(EMBED_TYPE_SOURCES) == set(EmbedPlayerType)

    def test_youtube_short_has_its_own_source(self):
        assert EMBED_TYPE_SOURCES[EmbedPlayerType.YOUTUBE_SHORT] is EmbedPlayerSource.YOUTUBE_SHORTS
        assert EMBED_TYPE_SOURCES[EmbedPlayerType.YOUTUBE_VIDEO] is EmbedPlayerSource.YOUTUBE

    def test_every_source_has_label(self):
        assert set(EXTERNAL_EMBED_LABELS) == set(EMBED_PLAYER_SOURCES)

    def test_source_order(self):
        assert list_supported_sources() == [
            "youtube",
            "youtubeShorts",
            "twitch",
            "spotify",
            "soundcloud",
            "appleMusic",
            "vimeo",
            "giphy",
            "tenor",
        ]

    def test_get_source_label(self):
        assert get_source_label("appleMusic") == "Apple Music"
        assert get_source_label(EmbedPlayerSource.GIPHY) == "GIPHY"
        assert get_source_label("youtubeShorts") == "YouTube Shorts"

    def test_get_source_label_unknown(self):
        with pytest.raises(UnknownSourceError, match="myspace"):
            get_source_label("myspace")

    def test_unknown_source_is_key_error(self):
        with pytest.raises(KeyError):
            get_source_label("myspace")


class TestEmbedPlayerParams:
    """Tests for the EmbedPlayerParams model."""

    def test_minimal(self):
        params = EmbedPlayerParams(
            type=EmbedPlayerType.VIMEO_VIDEO,
            source=EmbedPlayerSource.VIMEO,
            player_uri="https://player.vimeo.com/video/1?autoplay=1",
        )
        assert params.is_gif is None
        assert params.meta_uri is None
        assert params.hide_details is None

    def test_string_values_are_coerced(self):
        params = EmbedPlayerParams(
            type="tenor_gif",
            source="tenor",
            player_uri="https://tenor.com/view/x.gif",
        )
        assert params.type is EmbedPlayerType.TENOR_GIF
        assert params.source is EmbedPlayerSource.TENOR

    def test_mismatched_source_rejected(self):
        with pytest.raises(ValidationError, match="does not match"):
            EmbedPlayerParams(
                type=EmbedPlayerType.YOUTUBE_SHORT,
                source=EmbedPlayerSource.YOUTUBE,
                player_uri="https://example.com/player",
            )

    @pytest.mark.parametrize("uri", ["/relative/player", "player.vimeo.com/video/1", ""])
    def test_player_uri_must_be_absolute(self, uri):
        with pytest.raises(ValidationError, match="absolute URL"):
            EmbedPlayerParams(
                type=EmbedPlayerType.VIMEO_VIDEO,
                source=EmbedPlayerSource.VIMEO,
                player_uri=uri,
            )

    def test_meta_uri_must_be_absolute(self):
        with pytest.raises(ValidationError):
            EmbedPlayerParams(
                type=EmbedPlayerType.GIPHY_GIF,
                source=EmbedPlayerSource.GIPHY,
                player_uri="https://i.giphy.com/media/a/giphy.webp",
                meta_uri="gifs/a",
            )

    def test_frozen(self):
        params = match("https://vimeo.com/1")
        with pytest.raises(ValidationError):
            params.player_uri = "https://example.com"  # type: ignore[misc]

    def test_hashable_value(self):
        assert hash(match("https://vimeo.com/1")) == hash(match("https://vimeo.com/1"))

    def test_label(self):
        assert match("https://www.youtube.com/shorts/abc").label == "YouTube Shorts"

    def test_to_dict_omits_absent_fields(self):
        params = match("https://open.spotify.com/album/abc")
        assert params.to_dict() == {
            "type": "spotify_album",
            "source": "spotify",
            "playerUri": "https://open.spotify.com/embed/album/abc",
        }

    def test_to_dict_gif(self):
        params = match("https://giphy.com/gifs/funny-cat-abc123")
        assert params.to_dict() == {
            "type": "giphy_gif",
            "source": "giphy",
            "playerUri": "https://i.giphy.com/media/abc123/giphy.webp",
            "isGif": True,
            "metaUri": "https://giphy.com/gifs/abc123",
            "hideDetails": True,
        }

    def test_str(self):
        params = match("https://vimeo.com/1")
        assert str(params) == "vimeo_video:https://player.vimeo.com/video/1?autoplay=1"
