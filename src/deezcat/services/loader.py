"""Load result building from Deezer payloads.

The loader never fetches anything: callers hand it decoded JSON from the
Deezer API (track, album, artist, playlist or search responses) and get
back a LoadResult that a player can queue or report.
"""

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from deezcat.config import ParseConfig, TrackInfoConfig
from deezcat.exceptions import SchemaError
from deezcat.models.deezer import Track
from deezcat.models.enums import LinkKind, LoadOutcome
from deezcat.models.load import (
    LoadException,
    LoadResult,
    PlaylistInfo,
    TrackInfo,
    UnresolvedTrack,
)
from deezcat.parsing import parse_album, parse_artist, parse_track

logger = logging.getLogger(__name__)

NO_TOP_TRACKS_MESSAGE = "This artist does not have any top songs"


def to_track_info(track: Track, config: TrackInfoConfig | None = None) -> TrackInfo:
    """Build the unresolved track info a player queues for a Deezer track."""
    config = config or TrackInfoConfig()
    return TrackInfo(
        source_name=config.source_name,
        identifier=track.id,
        title=track.title,
        author=track.artist.name or config.unknown_artist,
        album=track.album.title or config.unknown_album,
        uri=track.link,
        artwork_url=track.album.cover_medium,
        isrc=track.isrc,
        length=track.duration * 1000,
        is_seekable=True,
        is_stream=False,
    )


def build_load_result(
    load_type: LoadOutcome,
    tracks: Sequence[TrackInfo] = (),
    playlist_name: str | None = None,
    exception_message: str | None = None,
    severity: str = "COMMON",
) -> LoadResult:
    """Assemble a load result.

    Args:
        load_type: Outcome classification.
        tracks: Unresolved tracks to queue.
        playlist_name: Name shown for playlist-like results. Empty names
            are dropped.
        exception_message: Failure message. Omitted from the result when empty.
        severity: Severity reported with the failure message.

    Returns:
        The assembled LoadResult.
    """
    return LoadResult(
        load_type=load_type,
        tracks=list(tracks),
        playlist_info=PlaylistInfo(name=playlist_name or None),
        exception=(
            LoadException(message=exception_message, severity=severity)
            if exception_message
            else None
        ),
    )


def build_unresolved(info: TrackInfo, requester: Any = None) -> UnresolvedTrack:
    """Wrap track info in a queue entry attributed to ``requester``."""
    return UnresolvedTrack(info=info, requester=requester)


def queue_tracks(result: LoadResult, requester: Any = None) -> list[UnresolvedTrack]:
    """Turn the tracks of a load result into queue entries.

    Args:
        result: Load result to queue from. Error and empty results yield
            no entries.
        requester: Whoever asked for the load; attached to every entry.

    Returns:
        One UnresolvedTrack per result track, in result order.
    """
    return [build_unresolved(info, requester) for info in result.tracks]


def _track_list(value: Any, what: str) -> list[Any]:
    """Return the raw track list held by a passthrough ``data`` field."""
    if not isinstance(value, list):
        raise SchemaError(f"{what} does not hold a track list", "data")
    return value


class CatalogLoader:
    """Builds load results from Deezer API payloads.

    Every public method returns a LoadResult and never raises on malformed
    payloads: schema failures become ERROR results (EMPTY for searches)
    carrying the failure message.
    """

    def __init__(
        self,
        config: TrackInfoConfig | None = None,
        parse_config: ParseConfig | None = None,
    ) -> None:
        """Initialize the loader.

        Args:
            config: Track info settings. Uses defaults if not provided.
            parse_config: Parse settings applied to every payload.
        """
        self._config = config or TrackInfoConfig()
        self._parse_config = parse_config or ParseConfig()

    def load(self, kind: LinkKind | str, raw: Any) -> LoadResult:
        """Dispatch a payload to the loader for its link kind.

        Args:
            kind: Link kind ("track", "album", "artist" or "playlist").
            raw: Decoded JSON response for that kind.

        Raises:
            ValueError: If the kind is unknown.
        """
        handlers: dict[LinkKind, Callable[[Any], LoadResult]] = {
            LinkKind.TRACK: self.load_track,
            LinkKind.ALBUM: self.load_album,
            LinkKind.ARTIST: self.load_artist,
            LinkKind.PLAYLIST: self.load_playlist,
        }
        return handlers[LinkKind(kind)](raw)

    def load_track(self, raw: Any) -> LoadResult:
        """Build a TRACK result from a /track response."""
        try:
            track = parse_track(raw, self._parse_config)
        except SchemaError as e:
            return self._error(e.message)
        return build_load_result(LoadOutcome.TRACK, [self._info(track)])

    def load_album(self, raw: Any) -> LoadResult:
        """Build a PLAYLIST result from an /album response.

        The album's ``tracks.data`` must hold the track payloads.
        """
        try:
            album = parse_album(raw, self._parse_config)
            envelope = album.tracks.data if album.tracks else None
            items = _track_list(envelope, "Album tracks")
            tracks = self._parse_tracks(items)
        except SchemaError as e:
            return self._error(e.message)
        return build_load_result(LoadOutcome.PLAYLIST, tracks, album.title)

    def load_artist(self, raw: Any) -> LoadResult:
        """Build a PLAYLIST of top songs from an artist response.

        The artist's ``data`` must hold the top track payloads.
        """
        try:
            artist = parse_artist(raw, self._parse_config)
            items = _track_list(artist.data, "Artist")
            if not items:
                return self._error(NO_TOP_TRACKS_MESSAGE)
            tracks = self._parse_tracks(items)
        except SchemaError as e:
            return self._error(e.message)
        return build_load_result(
            LoadOutcome.PLAYLIST, tracks, f"{artist.name}'s top songs"
        )

    def load_playlist(self, raw: Any) -> LoadResult:
        """Build a PLAYLIST result from a /playlist response.

        Only ``title`` and ``tracks.data`` are read from the playlist itself.
        """
        if not isinstance(raw, Mapping):
            return self._error("Playlist payload is not an object")
        title = raw.get("title")
        tracks = raw.get("tracks")
        if not isinstance(title, str) or not isinstance(tracks, Mapping):
            return self._error("Playlist payload is missing title or tracks")
        return self.load_tracklist(tracks.get("data"), title)

    def load_tracklist(self, items: Any, name: str) -> LoadResult:
        """Build a named PLAYLIST result from a list of track payloads."""
        try:
            tracks = self._parse_tracks(_track_list(items, "Playlist"))
        except SchemaError as e:
            return self._error(e.message)
        return build_load_result(LoadOutcome.PLAYLIST, tracks, name)

    def load_search(self, items: Any) -> LoadResult:
        """Build a SEARCH result from the ``data`` list of a /search response.

        No results and malformed results both yield EMPTY.
        """
        try:
            tracks = self._parse_tracks(_track_list(items, "Search response"))
        except SchemaError as e:
            logger.warning("Search results could not be parsed: %s", e.message)
            return build_load_result(
                LoadOutcome.EMPTY,
                exception_message=e.message,
                severity=self._config.severity,
            )
        if not tracks:
            return build_load_result(LoadOutcome.EMPTY)
        return build_load_result(LoadOutcome.SEARCH, tracks)

    def _parse_tracks(self, items: list[Any]) -> list[TrackInfo]:
        return [self._info(parse_track(item, self._parse_config)) for item in items]

    def _info(self, track: Track) -> TrackInfo:
        return to_track_info(track, self._config)

    def _error(self, message: str) -> LoadResult:
        logger.warning("Load failed: %s", message)
        return build_load_result(
            LoadOutcome.ERROR,
            exception_message=message,
            severity=self._config.severity,
        )
