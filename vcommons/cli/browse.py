"""Catalog browsing commands."""

import asyncio
from datetime import date
from typing import Optional

import pendulum
import typer
from rich.console import Console
from rich.markup import escape

from ..catalog import ProjectCatalog, projects_by_category, today_utc
from ..config import Config
from ..models import Category
from .render import print_diagnostics, project_panel, project_table

console = Console()


def load_settings() -> Config:
    """Load configuration, exiting on an invalid config file."""
    config = Config()
    try:
        config.config
    except ValueError as e:
        console.print(f"[red]Configuration error: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    return config


def load_catalog(config: Optional[Config] = None) -> ProjectCatalog:
    """Build the catalog from configuration."""
    if config is None:
        config = load_settings()
    return ProjectCatalog.from_config(config)


def parse_day(value: Optional[str]) -> date:
    """Parse a YYYY-MM-DD option, defaulting to today in UTC."""
    if value is None:
        return today_utc()
    try:
        return pendulum.from_format(value, "YYYY-MM-DD").date()
    except ValueError:
        raise typer.BadParameter(f"Expected YYYY-MM-DD, got {value!r}", param_hint="--date")


def list_command(
    category: Optional[Category] = typer.Option(
        None,
        "--category",
        "-c",
        help="Only show projects in this category",
    ),
) -> None:
    """List all projects with their GitHub statistics."""
    catalog = load_catalog()
    projects = catalog.get_all_projects_sync()
    shown = projects_by_category(projects, category)

    if not shown:
        console.print("[yellow]No projects found.[/yellow]")
    else:
        console.print(project_table(shown, f"Projects ({len(shown)})"))

    print_diagnostics(console, catalog.diagnostics)


def show_command(
    slug: str = typer.Argument(..., help="Project slug"),
) -> None:
    """Show details for one project."""
    catalog = load_catalog()
    project = catalog.get_project_by_slug_sync(slug)

    if project is None:
        console.print(f"[red]Project '{escape(slug)}' not found.[/red]")
        raise typer.Exit(1)

    console.print(project_panel(project))


def featured_command(
    run_date: Optional[str] = typer.Option(
        None,
        "--date",
        help="UTC date to select for (YYYY-MM-DD). Default: today",
    ),
) -> None:
    """Show the featured projects for a day."""
    day = parse_day(run_date)
    catalog = load_catalog()
    featured = asyncio.run(catalog.get_featured_projects(day=day))

    if not featured:
        console.print(f"[yellow]No featured projects for {day.isoformat()}.[/yellow]")
        return

    console.print(project_table(featured, f"Featured on {day.isoformat()}"))


def libraries_command(
    installable_first: bool = typer.Option(
        False,
        "--installable-first",
        help="List projects with an install command first",
    ),
) -> None:
    """List library and tool projects, most starred first."""
    catalog = load_catalog()
    libraries = asyncio.run(catalog.get_library_projects(prefer_installable=installable_first))

    if not libraries:
        console.print("[yellow]No libraries found.[/yellow]")
        return

    console.print(project_table(libraries, "Developer Resources"))


def maintainer_command(
    name: str = typer.Argument(..., help="Maintainer name (case-insensitive)"),
) -> None:
    """List projects by a maintainer."""
    catalog = load_catalog()
    projects = asyncio.run(catalog.get_projects_by_maintainer(name))

    if not projects:
        console.print(f"[yellow]No projects found for maintainer '{escape(name)}'.[/yellow]")
        return

    console.print(project_table(projects, f"Projects by {escape(name)}"))
