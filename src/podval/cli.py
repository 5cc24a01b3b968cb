"""podval command line.

A thin wrapper around ``podval.service``: it loads a snapshot, prints the
JSON report and turns the outcome into an exit code.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from podval import __version__
from podval.loader import DocumentLoader, DocumentLoadError
from podval.service import validate_file
from podval.settings import Settings

logger = logging.getLogger("podval.cli")

EXIT_OK = 0
EXIT_DIAGNOSTICS = 1
EXIT_LOAD_ERROR = 2


@click.group()
@click.version_option(version=__version__, prog_name="podval")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Validate podcast-namespace tags in decoded RSS feeds."""
    ctx.ensure_object(dict)
    ctx.obj.setdefault("settings", Settings())


@cli.command()
@click.argument("path", type=click.Path(path_type=Path))
@click.option(
    "--indent",
    type=click.IntRange(min=0),
    default=None,
    help="JSON indentation (default: the JSON_INDENT setting).",
)
@click.pass_context
def validate(ctx: click.Context, path: Path, indent: int | None) -> None:
    """Validate the document snapshot at PATH and print the JSON report.

    Exits with 0 when the feed is clean, 1 when it has diagnostics and 2 when
    the snapshot cannot be loaded.
    """
    settings: Settings = ctx.obj["settings"]
    loader = DocumentLoader(max_document_size=settings.max_document_size)
    try:
        report = validate_file(path, loader=loader)
    except DocumentLoadError as exc:
        logger.warning("Snapshot %s rejected: %s", path, exc)
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(EXIT_LOAD_ERROR) from exc

    click.echo(report.to_json(indent=settings.json_indent if indent is None else indent))
    if not report.passed:
        raise SystemExit(EXIT_DIAGNOSTICS)


def main() -> None:
    """Console script entry point; configures logging from settings."""
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())
    cli(obj={"settings": settings})


if __name__ == "__main__":
    main()
