"""Configuration for deezcat."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParseConfig:
    """Payload parsing configuration.

    Attributes:
        forbid_extra: Reject keys the schema does not declare. Keys nested
            inside ``data`` passthrough fields are never checked.
    """

    forbid_extra: bool = False


@dataclass(frozen=True)
class TrackInfoConfig:
    """Settings for building player-facing track info and load results.

    Attributes:
        source_name: Source tag stamped on every track info.
        unknown_artist: Author used when the track artist has no name.
        unknown_album: Album used when the track album has no title.
        severity: Severity attached to load result exceptions.
    """

    source_name: str = "deezer"
    unknown_artist: str = "Unknown Artist"
    unknown_album: str = "Unknown Album"
    severity: str = "COMMON"
