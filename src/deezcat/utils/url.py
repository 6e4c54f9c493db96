"""URL parsing utilities."""

import re
from dataclasses import dataclass

from deezcat.exceptions import DeezerUrlParseError
from deezcat.models.enums import LinkKind

DEEZER_URL_PATTERN = re.compile(
    r"^(?:https?://|)?(?:www\.)?deezer\.com/(?:\w{2}/)?"
    r"(track|album|playlist|artist)/(\d+)"
)

# Short links that redirect to a deezer.com URL
DEEZER_SHARE_LINK_PREFIX = "https://deezer.page.link/"

# Maximum URL length to prevent potential abuse (standard browser limit)
MAX_URL_LENGTH = 2048


@dataclass(frozen=True)
class DeezerLink:
    """A resource addressed by a deezer.com URL.

    Attributes:
        kind: Resource kind (track, album, playlist or artist).
        id: Numeric resource ID, as it appears in the URL.
    """

    kind: LinkKind
    id: str

    @property
    def api_path(self) -> str:
        """Path of the resource on the public API (e.g. /track/3135556)."""
        return f"/{self.kind.value}/{self.id}"


def _usable(url: str | None) -> bool:
    return bool(url) and len(url) <= MAX_URL_LENGTH


def match_deezer_url(url: str) -> DeezerLink | None:
    """Extract the resource kind and ID from a deezer.com URL.

    Accepts URLs with or without scheme, ``www.`` and a two-letter
    locale segment (``/fr/``).

    Args:
        url: Deezer URL.

    Returns:
        The parsed link, or None if the URL is not a supported Deezer URL
        or is too long.
    """
    if not _usable(url):
        return None
    if match := DEEZER_URL_PATTERN.match(url.strip()):
        return DeezerLink(kind=LinkKind(match.group(1)), id=match.group(2))
    return None


def parse_deezer_url(url: str) -> DeezerLink:
    """Extract the resource kind and ID from a deezer.com URL.

    Raises:
        DeezerUrlParseError: If the URL is not a supported Deezer URL.
    """
    if link := match_deezer_url(url):
        return link
    raise DeezerUrlParseError(f"Could not extract Deezer resource from: {url}")


def is_deezer_url(url: str) -> bool:
    """Check if URL points to a Deezer track, album, playlist or artist."""
    return match_deezer_url(url) is not None


def is_share_link(url: str | None) -> bool:
    """Check if URL is a deezer.page.link share link.

    Share links must be resolved (by following their redirect) before
    they can be parsed with parse_deezer_url().
    """
    if not _usable(url):
        return False
    return url.startswith(DEEZER_SHARE_LINK_PREFIX)
