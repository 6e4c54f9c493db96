"""Load result models handed to players and search UIs."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from deezcat.models.enums import LoadOutcome


class LoadModel(BaseModel):
    """Base model for load results (camelCase on the wire)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class TrackInfo(LoadModel):
    """Unresolved track, ready to be resolved by a playback node.

    Attributes:
        source_name: Source tag ("deezer" unless configured otherwise).
        identifier: Deezer track ID.
        title: Track title.
        author: Artist name, or a placeholder when unknown.
        album: Album title, or a placeholder when unknown.
        uri: Deezer track link.
        artwork_url: Medium-size album cover.
        isrc: International Standard Recording Code.
        length: Duration in milliseconds.
        is_seekable: Whether the track supports seeking.
        is_stream: Whether the track is a live stream.
    """

    source_name: str = Field(alias="sourceName")
    identifier: str
    title: str
    author: str
    album: str
    uri: str
    artwork_url: str = Field(alias="artworkUrl")
    isrc: str
    length: int
    is_seekable: bool = Field(default=True, alias="isSeekable")
    is_stream: bool = Field(default=False, alias="isStream")


class UnresolvedTrack(LoadModel):
    """Queue entry for a track that has not been resolved to audio yet.

    Attributes:
        encoded: Encoded track blob, empty until a playback node resolves it.
        info: Track info.
        plugin_info: Plugin-specific data, if any.
        user_data: Free-form data attached by the caller.
        requester: Whoever asked for the track (user object, ID, ...).
    """

    encoded: str = ""
    info: TrackInfo
    plugin_info: Any = Field(default=None, alias="pluginInfo")
    user_data: dict[str, Any] = Field(default_factory=dict, alias="userData")
    requester: Any = None

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the camelCase wire shape."""
        return self.model_dump(mode="json", by_alias=True)


class PlaylistInfo(LoadModel):
    """Playlist metadata attached to a load result."""

    name: str | None = None


class LoadException(LoadModel):
    """Failure details attached to a load result."""

    message: str
    severity: str = "COMMON"


class LoadResult(LoadModel):
    """Outcome of a content-load attempt.

    Example:
        >>> result = LoadResult(load_type=LoadOutcome.EMPTY)
        >>> result.to_payload()
        {'loadType': 'empty', 'tracks': [], 'playlistInfo': {}}
    """

    load_type: LoadOutcome = Field(alias="loadType")
    tracks: list[TrackInfo] = Field(default_factory=list)
    playlist_info: PlaylistInfo = Field(
        default_factory=PlaylistInfo, alias="playlistInfo"
    )
    exception: LoadException | None = None

    @property
    def is_error(self) -> bool:
        """Whether the load attempt failed."""
        return self.load_type is LoadOutcome.ERROR

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the camelCase wire shape, omitting empty parts."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
