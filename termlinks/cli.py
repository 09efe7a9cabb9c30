"""Command line front end: list the links in captured terminal output."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, Optional

import click
from rich.console import Console
from rich.table import Table

from termlinks import __version__
from termlinks.core.link_detector import LinkDetector
from termlinks.core.links import DetectedLink
from termlinks.logging_config import setup_logging
from termlinks.services.link_opener import open_link
from termlinks.services.screen_rows import screen_from_text, screen_rows
from termlinks.settings_models import default_settings_path
from termlinks.settings_store import load_link_settings

logger = logging.getLogger(__name__)


def links_table(links: tuple[DetectedLink, ...]) -> Table:
    table = Table(title="Links", show_lines=False)
    table.add_column("#", justify="right")
    table.add_column("Kind")
    table.add_column("Row", justify="right")
    table.add_column("Cols", justify="right")
    table.add_column("Text", overflow="fold")
    for idx, link in enumerate(links):
        table.add_row(
            str(idx),
            link.kind.value,
            str(link.start[0]),
            f"{link.start[1]}-{link.end[1]}",
            link.text,
        )
    return table


@click.command(name="termlinks")
@click.argument("source", type=click.File("rb"), default="-")
@click.option("--columns", type=click.IntRange(min=1), default=200, show_default=True,
              help="Screen width used to replay the output.")
@click.option("--open", "open_index", type=click.IntRange(min=0), default=None,
              help="Open the link with this index.")
@click.option("--settings", "settings_path", default=None,
              type=click.Path(dir_okay=False, path_type=Path),
              help="JSON settings file [default: ~/.config/termlinks/settings.json].")
@click.option("--debug", is_flag=True, help="Verbose logging.")
@click.option("--color/--no-color", default=True, show_default=True)
@click.version_option(__version__, prog_name="termlinks")
def main(
    source: BinaryIO,
    columns: int,
    open_index: Optional[int],
    settings_path: Optional[Path],
    debug: bool,
    color: bool,
) -> None:
    """Scan terminal output from SOURCE (default: stdin) for URLs and file paths."""
    setup_logging(level=logging.WARNING, debug_mode=debug, color=color)
    settings = load_link_settings(settings_path or default_settings_path())

    data = source.read()
    screen = screen_from_text(data, columns=columns)
    logger.debug("Replayed %d bytes into a %dx%d screen", len(data), screen.columns, screen.lines)
    detector = LinkDetector()
    if settings["enabled"]:
        detector.scan(screen_rows(screen))
    links = detector.links

    console = Console(color_system="auto" if color else None)
    if not links:
        console.print("No links found.")
    else:
        console.print(links_table(links))

    if open_index is None:
        return
    if open_index >= len(links):
        raise click.BadParameter(
            f"no link with index {open_index} ({len(links)} found)",
            param_hint="'--open'",
        )
    open_link(links[open_index], settings=settings)
