"""deezcat - Typed data contract for the Deezer catalog API.

This library parses raw Deezer API payloads (tracks, albums, artists and
contributors) into immutable, strictly validated records, and turns them
into load results a music player can queue. It performs no network I/O:
fetching the payloads is left to the caller.

Examples:
    Parse a track response:
    ```python
    from deezcat import parse_track

    track = parse_track(payload)
    print(f"{track.artist.name} - {track.title}")
    ```

    Build a load result for an album:
    ```python
    from deezcat import CatalogLoader

    result = CatalogLoader().load_album(payload)
    print(result.load_type, len(result.tracks))
    ```
"""

from deezcat.config import ParseConfig, TrackInfoConfig
from deezcat.exceptions import (
    DeezcatError,
    DeezerUrlParseError,
    FieldIssue,
    InvalidValue,
    MissingField,
    SchemaError,
    TypeMismatch,
    UnexpectedField,
)
from deezcat.models import (
    Album,
    Artist,
    Contributor,
    ContributorRole,
    LinkKind,
    LoadException,
    LoadOutcome,
    LoadResult,
    PlaylistInfo,
    ResourceType,
    Track,
    TrackInfo,
    UnresolvedTrack,
)
from deezcat.parsing import (
    parse,
    parse_album,
    parse_artist,
    parse_contributor,
    parse_json,
    parse_load_outcome,
    parse_track,
    serialize,
)
from deezcat.services import (
    CatalogLoader,
    build_load_result,
    build_unresolved,
    queue_tracks,
    to_track_info,
)
from deezcat.utils.url import (
    DeezerLink,
    is_deezer_url,
    is_share_link,
    match_deezer_url,
    parse_deezer_url,
)

__all__ = [
    "Album",
    "Artist",
    "CatalogLoader",
    "Contributor",
    "ContributorRole",
    "DeezcatError",
    "DeezerLink",
    "DeezerUrlParseError",
    "FieldIssue",
    "InvalidValue",
    "LinkKind",
    "LoadException",
    "LoadOutcome",
    "LoadResult",
    "MissingField",
    "ParseConfig",
    "PlaylistInfo",
    "ResourceType",
    "SchemaError",
    "Track",
    "TrackInfo",
    "TrackInfoConfig",
    "TypeMismatch",
    "UnexpectedField",
    "UnresolvedTrack",
    "build_load_result",
    "build_unresolved",
    "is_deezer_url",
    "is_share_link",
    "match_deezer_url",
    "parse",
    "parse_album",
    "parse_artist",
    "parse_contributor",
    "parse_deezer_url",
    "parse_json",
    "parse_load_outcome",
    "parse_track",
    "queue_tracks",
    "serialize",
    "to_track_info",
]
