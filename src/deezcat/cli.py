#!/usr/bin/env python3
"""Command-line interface for deezcat.

This CLI is primarily for debugging and development: it validates saved
Deezer API responses and shows what a player would receive.
For production use, import deezcat as a library.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from deezcat.config import ParseConfig
from deezcat.exceptions import DeezcatError, SchemaError
from deezcat.models.deezer import Album, Artist, Contributor, DeezerModel, Track
from deezcat.parsing import parse, serialize
from deezcat.services.loader import CatalogLoader
from deezcat.utils.url import is_share_link, parse_deezer_url

logger = logging.getLogger("deezcat")

ENTITY_MODELS: dict[str, type[DeezerModel]] = {
    "track": Track,
    "album": Album,
    "artist": Artist,
    "contributor": Contributor,
}

LOAD_KINDS = ("track", "album", "artist", "playlist", "search")


def setup_logging(verbose: bool = False, console: Console | None = None) -> None:
    """Configure logging with Rich handler.

    Clears existing handlers first, so it can be called more than once.

    Args:
        verbose: If True, set log level to DEBUG. Otherwise WARNING.
        console: Optional Console instance to use for RichHandler.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    handler = RichHandler(
        rich_tracebacks=True,
        show_path=False,
        console=console,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    root_logger.setLevel(level)
    root_logger.addHandler(handler)


def read_json_file(path: Path) -> Any:
    """Read and decode a JSON file.

    Raises:
        click.ClickException: If the file is not UTF-8 encoded JSON.
    """
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        raise click.ClickException(f"{path}: not UTF-8 text ({e})") from e
    except json.JSONDecodeError as e:
        raise click.ClickException(f"{path}: invalid JSON ({e})") from e


def print_schema_error(console: Console, error: SchemaError) -> None:
    """Print a schema error with every issue found.

    Args:
        console: Rich console for output.
        error: The schema error to display.
    """
    console.print(f"[red]{error.message}[/red]")
    for issue in error.issues[1:]:
        console.print(f"  [dim]- {issue.message}[/dim]")


def print_record_card(console: Console, record: DeezerModel) -> None:
    """Print the scalar fields of a record as a vertical card.

    Nested records and lists are summarized rather than expanded.

    Args:
        console: Rich console for output.
        record: Parsed record to display.
    """
    table = Table(
        show_header=False,
        padding=(0, 1),
        title=f"[bold yellow]{type(record).__name__}[/bold yellow]",
        title_justify="left",
    )
    table.add_column("Field", style="bold cyan", width=24)
    table.add_column("Value", overflow="fold")

    for name in type(record).model_fields:
        value = getattr(record, name)
        if isinstance(value, DeezerModel):
            shown = f"{type(value).__name__} ({value.type})"
        elif isinstance(value, list):
            shown = f"{len(value)} item(s)"
        elif name == "data":
            shown = "[dim]passthrough[/dim]"
        else:
            shown = str(value)
        table.add_row(name, shown)

    table.add_row("resource type", record.resource_type.value)

    console.print()
    console.print(table)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Validate Deezer catalog payloads and build load results."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    setup_logging(verbose=verbose)


@main.command(name="parse")
@click.argument("kind", type=click.Choice(sorted(ENTITY_MODELS)), metavar="KIND")
@click.argument(
    "file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option("--strict", is_flag=True, help="Reject undeclared fields.")
def parse_cmd(kind: str, file: Path, as_json: bool, strict: bool) -> None:
    """Validate a saved API response as a track, album, artist or contributor.

    \b
    Examples:
      deezcat parse track track.json
      deezcat parse album album.json --strict
    """
    console = Console()
    raw = read_json_file(file)

    try:
        record = parse(ENTITY_MODELS[kind], raw, ParseConfig(forbid_extra=strict))
    except SchemaError as e:
        print_schema_error(console, e)
        raise click.ClickException(f"{file} is not a valid {kind}") from e

    if as_json:
        json.dump(serialize(record), sys.stdout, indent=2, ensure_ascii=False)
        sys.stdout.write("\n")
    else:
        print_record_card(console, record)


@main.command(name="load")
@click.argument("kind", type=click.Choice(LOAD_KINDS), metavar="KIND")
@click.argument(
    "file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
def load_cmd(kind: str, file: Path) -> None:
    """Print the load result a player would receive for a saved API response.

    KIND is track, album, artist, playlist or search. For search, FILE may
    hold either the full /search response or just its data list.
    """
    raw = read_json_file(file)
    loader = CatalogLoader()

    if kind == "search":
        items = raw.get("data") if isinstance(raw, dict) else raw
        result = loader.load_search(items)
    else:
        result = loader.load(kind, raw)

    json.dump(result.to_payload(), sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")


@main.command(name="url")
@click.argument("url", metavar="URL")
def url_cmd(url: str) -> None:
    """Show which Deezer resource a URL points to."""
    console = Console()

    if is_share_link(url):
        console.print(
            "[yellow]Share link: follow its redirect to get a deezer.com URL[/yellow]"
        )
        return

    try:
        link = parse_deezer_url(url)
    except DeezcatError as e:
        logger.debug(str(e))
        raise click.ClickException(str(e)) from e

    console.print(f"[bold cyan]{link.kind.value}[/bold cyan] {link.id}")
    console.print(f"[dim]API path: {link.api_path}[/dim]")


if __name__ == "__main__":
    main()
