"""Enumerations for deezcat domain models."""

from enum import StrEnum


class LoadOutcome(StrEnum):
    """Classification of a content-load attempt."""

    TRACK = "track"
    PLAYLIST = "playlist"
    SEARCH = "search"
    EMPTY = "empty"
    ERROR = "error"


class ResourceType(StrEnum):
    """Deezer resource type tags.

    The upstream ``type`` field is an open string. Values not listed here
    resolve to UNKNOWN instead of failing.
    """

    TRACK = "track"
    ALBUM = "album"
    ARTIST = "artist"
    PLAYLIST = "playlist"
    UNKNOWN = "unknown"

    @classmethod
    def from_tag(cls, tag: str) -> "ResourceType":
        """Map a raw type tag to a known resource type."""
        try:
            return cls(tag)
        except ValueError:
            return cls.UNKNOWN


class ContributorRole(StrEnum):
    """Credit role of a track contributor."""

    MAIN = "Main"
    FEATURED = "Featured"
    UNKNOWN = "Unknown"

    @classmethod
    def from_tag(cls, tag: str) -> "ContributorRole":
        """Map a raw role string to a known role (case-insensitive)."""
        for role in cls:
            if role.value.lower() == tag.lower():
                return role
        return cls.UNKNOWN


class LinkKind(StrEnum):
    """Kind of resource a Deezer link points to."""

    TRACK = "track"
    ALBUM = "album"
    PLAYLIST = "playlist"
    ARTIST = "artist"
