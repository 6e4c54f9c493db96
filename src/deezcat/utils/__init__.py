"""Utility functions for deezcat.

Available via `from deezcat.utils import ...` for power users.
"""

from deezcat.utils.url import (
    DeezerLink,
    is_deezer_url,
    is_share_link,
    match_deezer_url,
    parse_deezer_url,
)

__all__ = [
    "DeezerLink",
    "is_deezer_url",
    "is_share_link",
    "match_deezer_url",
    "parse_deezer_url",
]
