"""Feed export command."""

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ..catalog import FeedService, save_feed
from .browse import load_catalog, load_settings

console = Console()


def feed_command(
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the feed to this file instead of stdout",
    ),
) -> None:
    """Export all projects with GitHub data as a JSON feed."""
    config = load_settings()
    catalog = load_catalog(config)
    service = FeedService(catalog, freshness_seconds=config.config.feed.freshness_seconds)
    feed = asyncio.run(service.get_feed())

    if output is None:
        typer.echo(feed.to_json())
        return

    save_feed(feed, output)
    console.print(f"[green]✅ Wrote {len(feed.projects)} projects to {output}[/green]")
