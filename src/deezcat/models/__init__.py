"""Data models for deezcat.

Public API:
    Track, Album, Artist, Contributor - Deezer catalog records
    LoadOutcome - Content-load classification
    LinkKind - Kind of resource a Deezer link points to
    ResourceType, ContributorRole - Known values of open string tags
    LoadResult, TrackInfo - Load results handed to players
    UnresolvedTrack - Queue entry carrying track info and its requester
"""

from deezcat.models.deezer import Album, Artist, Contributor, DeezerModel, Track
from deezcat.models.enums import (
    ContributorRole,
    LinkKind,
    LoadOutcome,
    ResourceType,
)
from deezcat.models.load import (
    LoadException,
    LoadResult,
    PlaylistInfo,
    TrackInfo,
    UnresolvedTrack,
)

__all__ = [
    "Album",
    "Artist",
    "Contributor",
    "ContributorRole",
    "DeezerModel",
    "LinkKind",
    "LoadException",
    "LoadOutcome",
    "LoadResult",
    "PlaylistInfo",
    "ResourceType",
    "Track",
    "TrackInfo",
    "UnresolvedTrack",
]
