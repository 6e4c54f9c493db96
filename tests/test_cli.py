"""Tests for the command-line interface."""

import json
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner
from factories import make_album, make_track
from deezcat.cli import main


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner."""
    return CliRunner()


def write_json(path: Path, data: Any) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestParseCommand:
    """Tests for the parse command."""

    def test_json_output_round_trips(self, runner: CliRunner, tmp_path: Path) -> None:
        """--json should print the canonical payload."""
        payload = make_track()
        file = write_json(tmp_path / "track.json", payload)
        result = runner.invoke(main, ["parse", "track", str(file), "--json"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == payload

    def test_card_output(self, runner: CliRunner, tmp_path: Path) -> None:
        """Default output should show a card with field values."""
        file = write_json(tmp_path / "album.json", make_album())
        result = runner.invoke(main, ["parse", "album", str(file)])
        assert result.exit_code == 0, result.output
        assert "Discovery" in result.output

    def test_schema_error_exits_nonzero(
        self, runner: CliRunner, tmp_path: Path
    ) -> None:
        """Invalid payloads should exit with status 1."""
        payload = make_track()
        del payload["isrc"]
        file = write_json(tmp_path / "track.json", payload)
        result = runner.invoke(main, ["parse", "track", str(file)])
        assert result.exit_code == 1
        assert "isrc" in result.output

    def test_strict_rejects_extra(self, runner: CliRunner, tmp_path: Path) -> None:
        """--strict should reject undeclared keys."""
        file = write_json(tmp_path / "track.json", make_track(extra=1))
        assert runner.invoke(main, ["parse", "track", str(file)]).exit_code == 0
        result = runner.invoke(main, ["parse", "track", str(file), "--strict"])
        assert result.exit_code == 1

    def test_invalid_json_file(self, runner: CliRunner, tmp_path: Path) -> None:
        """A file that is not JSON should exit with status 1."""
        file = tmp_path / "broken.json"
        file.write_text("{", encoding="utf-8")
        result = runner.invoke(main, ["parse", "track", str(file)])
        assert result.exit_code == 1
        assert "invalid JSON" in result.output

    def test_non_utf8_file(self, runner: CliRunner, tmp_path: Path) -> None:
        """A file that is not UTF-8 should exit with status 1, not a traceback."""
        file = tmp_path / "latin1.json"
        file.write_bytes(b"\xff\xfe{")
        result = runner.invoke(main, ["parse", "track", str(file)])
        assert result.exit_code == 1
        assert "not UTF-8 text" in result.output


class TestLoadCommand:
    """Tests for the load command."""

    def test_album(self, runner: CliRunner, tmp_path: Path) -> None:
        """Should print the load result payload."""
        file = write_json(tmp_path / "album.json", make_album())
        result = runner.invoke(main, ["load", "album", str(file)])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["loadType"] == "playlist"
        assert data["playlistInfo"] == {"name": "Discovery"}
        assert len(data["tracks"]) == 2

    def test_search_response(self, runner: CliRunner, tmp_path: Path) -> None:
        """Search should accept the full response with its data list."""
        file = write_json(tmp_path / "search.json", {"data": [make_track()]})
        result = runner.invoke(main, ["load", "search", str(file)])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["loadType"] == "search"


class TestUrlCommand:
    """Tests for the url command."""

    def test_track_url(self, runner: CliRunner) -> None:
        """Should print the kind and ID."""
        result = runner.invoke(main, ["url", "https://www.deezer.com/fr/track/42"])
        assert result.exit_code == 0
        assert "track" in result.output
        assert "42" in result.output

    def test_share_link(self, runner: CliRunner) -> None:
        """Share links should be reported without failing."""
        result = runner.invoke(main, ["url", "https://deezer.page.link/abc"])
        assert result.exit_code == 0
        assert "Share link" in result.output

    def test_invalid_url(self, runner: CliRunner) -> None:
        """Unsupported URLs should exit with status 1."""
        result = runner.invoke(main, ["url", "https://example.com"])
        assert result.exit_code == 1
