"""Test fixtures and configuration."""

from typing import Any

import pytest
from factories import make_album, make_artist, make_contributor, make_track


@pytest.fixture
def contributor_payload() -> dict[str, Any]:
    """Create a sample contributor payload."""
    return make_contributor()


@pytest.fixture
def artist_payload() -> dict[str, Any]:
    """Create a sample artist payload."""
    return make_artist()


@pytest.fixture
def track_payload() -> dict[str, Any]:
    """Create a sample track payload."""
    return make_track()


@pytest.fixture
def album_payload() -> dict[str, Any]:
    """Create a sample album payload with two tracks."""
    return make_album()
