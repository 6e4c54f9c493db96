"""Tests for the catalog loader."""

import logging
from typing import Any

import pytest
from factories import make_album, make_artist, make_track
from deezcat.config import TrackInfoConfig
from deezcat.models.enums import LinkKind, LoadOutcome
from deezcat.parsing import parse_track
from deezcat.services.loader import (
    NO_TOP_TRACKS_MESSAGE,
    CatalogLoader,
    build_load_result,
    build_unresolved,
    queue_tracks,
    to_track_info,
)


@pytest.fixture
def loader() -> CatalogLoader:
    """Create a loader with default settings."""
    return CatalogLoader()


class TestToTrackInfo:
    """Tests for to_track_info function."""

    def test_maps_fields(self, track_payload: dict[str, Any]) -> None:
        """Should copy identity fields and convert duration to milliseconds."""
        info = to_track_info(parse_track(track_payload))
        assert info.source_name == "deezer"
        assert info.identifier == "3135556"
        assert info.title == "Harder, Better, Faster, Stronger"
        assert info.author == "Daft Punk"
        assert info.album == "Discovery"
        assert info.uri == "https://www.deezer.com/track/3135556"
        assert info.artwork_url == track_payload["album"]["cover_medium"]
        assert info.isrc == "GBDUW0000059"
        assert info.length == 224_000
        assert info.is_seekable is True
        assert info.is_stream is False

    def test_placeholders_for_empty_names(self) -> None:
        """Empty artist name and album title should use placeholders."""
        payload = make_track(artist=make_artist(name=""))
        payload["album"]["title"] = ""
        info = to_track_info(parse_track(payload))
        assert info.author == "Unknown Artist"
        assert info.album == "Unknown Album"

    def test_custom_config(self, track_payload: dict[str, Any]) -> None:
        """Source name should come from the config."""
        config = TrackInfoConfig(source_name="dz")
        assert to_track_info(parse_track(track_payload), config).source_name == "dz"


class TestBuildLoadResult:
    """Tests for build_load_result function."""

    def test_named_playlist(self) -> None:
        """Should attach the playlist name."""
        result = build_load_result(LoadOutcome.PLAYLIST, [], "Mix")
        assert result.to_payload() == {
            "loadType": "playlist",
            "tracks": [],
            "playlistInfo": {"name": "Mix"},
        }

    def test_exception(self) -> None:
        """Should attach the failure message with COMMON severity."""
        result = build_load_result(LoadOutcome.ERROR, exception_message="boom")
        assert result.to_payload()["exception"] == {
            "message": "boom",
            "severity": "COMMON",
        }

    def test_empty_name_and_message_dropped(self) -> None:
        """Empty strings should be treated as absent."""
        result = build_load_result(LoadOutcome.EMPTY, [], "", "")
        assert result.playlist_info.name is None
        assert result.exception is None


class TestQueueTracks:
    """Tests for turning load results into queue entries."""

    def test_unresolved_defaults(self, track_payload: dict[str, Any]) -> None:
        """A queue entry should start unencoded with empty user data."""
        info = to_track_info(parse_track(track_payload))
        entry = build_unresolved(info, requester={"id": "42"})
        assert entry.to_payload() == {
            "encoded": "",
            "info": info.model_dump(mode="json", by_alias=True),
            "pluginInfo": None,
            "userData": {},
            "requester": {"id": "42"},
        }

    def test_requester_on_every_track(self, loader: CatalogLoader) -> None:
        """Every track of a result should carry the requester, in order."""
        result = loader.load_album(make_album())
        entries = queue_tracks(result, requester="user-7")
        assert [e.info.identifier for e in entries] == ["3135556", "3135557"]
        assert all(e.requester == "user-7" for e in entries)

    def test_error_result_queues_nothing(self, loader: CatalogLoader) -> None:
        """A failed load should give no queue entries."""
        result = loader.load_track({})
        assert queue_tracks(result, requester="user-7") == []


class TestLoadTrack:
    """Tests for CatalogLoader.load_track."""

    def test_success(
        self, loader: CatalogLoader, track_payload: dict[str, Any]
    ) -> None:
        """A valid track should give a TRACK result with one item."""
        result = loader.load_track(track_payload)
        assert result.load_type is LoadOutcome.TRACK
        assert len(result.tracks) == 1
        assert result.tracks[0].identifier == "3135556"
        assert result.exception is None

    def test_schema_failure(
        self, loader: CatalogLoader, caplog: pytest.LogCaptureFixture
    ) -> None:
        """A malformed track should give an ERROR result with the message."""
        payload = make_track()
        del payload["isrc"]
        with caplog.at_level(logging.WARNING):
            result = loader.load_track(payload)
        assert result.is_error
        assert result.tracks == []
        assert result.exception is not None
        assert result.exception.message == "Missing required field: isrc"
        assert "Load failed" in caplog.text


class TestLoadAlbum:
    """Tests for CatalogLoader.load_album."""

    def test_success(
        self, loader: CatalogLoader, album_payload: dict[str, Any]
    ) -> None:
        """Album tracks should be queued as a playlist named after the album."""
        result = loader.load_album(album_payload)
        assert result.load_type is LoadOutcome.PLAYLIST
        assert result.playlist_info.name == "Discovery"
        assert [t.title for t in result.tracks] == [
            "Harder, Better, Faster, Stronger",
            "Digital Love",
        ]

    def test_album_without_track_list(self, loader: CatalogLoader) -> None:
        """An album whose tracks slot is null should give ERROR."""
        result = loader.load_album(make_album(tracks=None))
        assert result.is_error

    def test_one_bad_track_fails_all(self, loader: CatalogLoader) -> None:
        """A single malformed track should fail the whole album."""
        album = make_album()
        album["tracks"]["data"][1]["id"] = 42
        result = loader.load_album(album)
        assert result.is_error
        assert result.tracks == []


class TestLoadArtist:
    """Tests for CatalogLoader.load_artist."""

    def test_top_songs(self, loader: CatalogLoader) -> None:
        """Top tracks should become a playlist named after the artist."""
        result = loader.load_artist(make_artist(data=[make_track()]))
        assert result.load_type is LoadOutcome.PLAYLIST
        assert result.playlist_info.name == "Daft Punk's top songs"
        assert len(result.tracks) == 1

    def test_no_top_songs(self, loader: CatalogLoader) -> None:
        """An artist without top tracks should give ERROR."""
        result = loader.load_artist(make_artist(data=[]))
        assert result.is_error
        assert result.exception is not None
        assert result.exception.message == NO_TOP_TRACKS_MESSAGE

    def test_data_not_a_list(self, loader: CatalogLoader) -> None:
        """A passthrough without a track list should give ERROR."""
        assert loader.load_artist(make_artist(data=None)).is_error


class TestLoadPlaylist:
    """Tests for CatalogLoader.load_playlist and load_tracklist."""

    def test_playlist(self, loader: CatalogLoader) -> None:
        """Should read title and tracks.data from a playlist response."""
        raw = {"id": 1, "title": "Chill", "tracks": {"data": [make_track()]}}
        result = loader.load_playlist(raw)
        assert result.load_type is LoadOutcome.PLAYLIST
        assert result.playlist_info.name == "Chill"
        assert len(result.tracks) == 1

    @pytest.mark.parametrize(
        "raw",
        [[], {"title": "Chill"}, {"tracks": {"data": []}}, {"title": 1, "tracks": {}}],
        ids=["not_object", "no_tracks", "no_title", "numeric_title"],
    )
    def test_malformed_playlist(self, loader: CatalogLoader, raw: Any) -> None:
        """Malformed playlist responses should give ERROR."""
        assert loader.load_playlist(raw).is_error

    def test_tracklist(self, loader: CatalogLoader) -> None:
        """Should name an arbitrary track list."""
        result = loader.load_tracklist([make_track(), make_track()], "Queue")
        assert result.playlist_info.name == "Queue"
        assert len(result.tracks) == 2


class TestLoadSearch:
    """Tests for CatalogLoader.load_search."""

    def test_results(self, loader: CatalogLoader) -> None:
        """Parsed results should give a SEARCH result."""
        result = loader.load_search([make_track(), make_track(id="2")])
        assert result.load_type is LoadOutcome.SEARCH
        assert [t.identifier for t in result.tracks] == ["3135556", "2"]
        assert result.playlist_info.name is None

    def test_no_results(self, loader: CatalogLoader) -> None:
        """No results should give EMPTY without an exception."""
        result = loader.load_search([])
        assert result.load_type is LoadOutcome.EMPTY
        assert result.exception is None

    @pytest.mark.parametrize(
        "items",
        [None, {"data": []}, [{"id": "1"}]],
        ids=["null", "object", "bad_item"],
    )
    def test_malformed_results(self, loader: CatalogLoader, items: Any) -> None:
        """Malformed results should give EMPTY carrying the message."""
        result = loader.load_search(items)
        assert result.load_type is LoadOutcome.EMPTY
        assert result.exception is not None


class TestLoadDispatch:
    """Tests for CatalogLoader.load."""

    @pytest.mark.parametrize(
        ("kind", "factory", "expected"),
        [
            (LinkKind.TRACK, make_track, LoadOutcome.TRACK),
            ("album", make_album, LoadOutcome.PLAYLIST),
            ("artist", lambda: make_artist(data=[make_track()]), LoadOutcome.PLAYLIST),
        ],
        ids=["track", "album", "artist"],
    )
    def test_dispatch(
        self,
        loader: CatalogLoader,
        kind: LinkKind | str,
        factory: Any,
        expected: LoadOutcome,
    ) -> None:
        """Should route the payload by link kind."""
        assert loader.load(kind, factory()).load_type is expected

    def test_unknown_kind(self, loader: CatalogLoader) -> None:
        """Unknown kinds should be rejected."""
        with pytest.raises(ValueError):
            loader.load("episode", {})
