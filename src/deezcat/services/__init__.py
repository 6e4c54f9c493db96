"""Business logic services for deezcat.

Public API:
    CatalogLoader - Build load results from Deezer API payloads
    build_load_result - Assemble a LoadResult
    build_unresolved, queue_tracks - Queue entries carrying a requester
    to_track_info - Convert a parsed Track into player track info
"""

from deezcat.services.loader import (
    CatalogLoader,
    build_load_result,
    build_unresolved,
    queue_tracks,
    to_track_info,
)

__all__ = [
    "CatalogLoader",
    "build_load_result",
    "build_unresolved",
    "queue_tracks",
    "to_track_info",
]
