"""Models for parsing Deezer catalog API responses.

Every declared field is required and strictly typed: values are never
coerced and missing fields are never defaulted. Keys the models do not
declare are ignored unless the caller asks for strict key checking
(see deezcat.parsing).
"""

import math
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    JsonValue,
    StrictBool,
    StrictInt,
    StrictStr,
)
from pydantic_core import PydanticCustomError

from deezcat.models.enums import ContributorRole, ResourceType

__all__ = [
    "Album",
    "Artist",
    "Contributor",
    "DeezerModel",
    "JsonNumber",
    "Track",
]


def _json_number(value: Any) -> Any:
    """Accept finite JSON numbers only, widening integers to float."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise PydanticCustomError("float_type", "Input should be a valid number")
    try:
        number = float(value)
    except OverflowError:
        number = math.inf
    if not math.isfinite(number):
        raise PydanticCustomError("float_parsing", "Input should be a finite number")
    return number


JsonNumber = Annotated[float, BeforeValidator(_json_number)]


class DeezerModel(BaseModel):
    """Base model for Deezer API responses."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    type: StrictStr

    @property
    def resource_type(self) -> ResourceType:
        """Type tag as a known resource type (UNKNOWN if unrecognized)."""
        return ResourceType.from_tag(self.type)


class Contributor(DeezerModel):
    """Person or entity credited on a track."""

    id: StrictInt
    name: StrictStr
    link: StrictStr
    share: StrictStr
    picture: StrictStr
    picture_small: StrictStr
    picture_medium: StrictStr
    picture_big: StrictStr
    picture_xl: StrictStr
    radio: StrictBool
    tracklist: StrictStr
    role: StrictStr

    @property
    def contributor_role(self) -> ContributorRole:
        """Role as a known contributor role (UNKNOWN if unrecognized)."""
        return ContributorRole.from_tag(self.role)


class Artist(DeezerModel):
    """Artist, as returned by /artist or embedded in a track."""

    data: JsonValue  # Unmodeled upstream payload (e.g. top tracks)
    id: StrictInt
    name: StrictStr
    link: StrictStr
    share: StrictStr
    picture: StrictStr
    picture_small: StrictStr
    picture_medium: StrictStr
    picture_big: StrictStr
    picture_xl: StrictStr
    radio: StrictBool
    tracklist: StrictStr


class Album(DeezerModel):
    """Album, as returned by /album or embedded in a track.

    ``tracks`` is a single Track envelope whose ``data`` holds the raw
    track list. The key is required, but albums embedded in a track send
    null there, since a Track always embeds an Album.
    """

    tracks: "Track | None"
    id: StrictInt
    title: StrictStr
    link: StrictStr
    cover: StrictStr
    cover_small: StrictStr
    cover_medium: StrictStr
    cover_big: StrictStr
    cover_xl: StrictStr
    md5_image: StrictStr
    release_date: StrictStr
    tracklist: StrictStr


class Track(DeezerModel):
    """Track response from /track."""

    data: JsonValue
    id: StrictStr
    readable: StrictBool
    title: StrictStr
    title_short: StrictStr
    title_version: StrictStr
    isrc: StrictStr
    link: StrictStr
    share: StrictStr
    duration: StrictInt  # seconds
    track_position: StrictInt
    disk_number: StrictInt
    rank: StrictInt
    release_date: StrictStr
    explicit_lyrics: StrictBool
    explicit_content_lyrics: StrictInt
    explicit_content_cover: StrictInt
    preview: StrictStr
    bpm: JsonNumber
    gain: JsonNumber
    available_countries: list[StrictStr]
    contributors: list[Contributor]
    md5_image: StrictStr
    artist: Artist
    album: Album

    @property
    def has_availability_data(self) -> bool:
        """Whether the API reported any availability countries.

        An empty list means no restriction data, not "unavailable".
        """
        return bool(self.available_countries)

    @property
    def main_contributors(self) -> list[Contributor]:
        """Contributors credited with the Main role, in order."""
        return [
            c for c in self.contributors if c.contributor_role is ContributorRole.MAIN
        ]


Album.model_rebuild()
