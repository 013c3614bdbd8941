"""Rich rendering helpers shared by the CLI commands."""

from typing import Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..ingestion import LoadDiagnostic
from ..models import Project


def project_table(projects: Sequence[Project], title: str) -> Table:
    """Build a table with one row per project."""
    table = Table(title=title)
    table.add_column("Slug", style="cyan")
    table.add_column("Name", style="bold")
    table.add_column("Category", style="magenta")
    table.add_column("Maintainer", style="green")
    table.add_column("Stars", style="yellow", justify="right")
    table.add_column("License", style="blue")
    table.add_column("Language", style="dim")

    for project in projects:
        github = project.github
        table.add_row(
            project.slug,
            escape(project.name),
            project.category.value,
            escape(project.maintainer),
            str(github.stars) if github else "-",
            (github.license or "-") if github else "-",
            project.display_language or "-",
        )
    return table


def project_panel(project: Project) -> Panel:
    """Build a detail panel for one project."""
    lines = [
        f"[bold]{escape(project.name)}[/bold] ({project.category.value})",
        escape(project.description),
        "",
        f"Maintainer: {escape(project.maintainer)}",
        f"Repository: {project.repo}",
        f"Features: {', '.join(f.value for f in project.verus_features)}",
    ]
    if project.live_url:
        lines.append(f"Live: {project.live_url}")
    if project.docs_url:
        lines.append(f"Docs: {project.docs_url}")
    if project.install_command:
        lines.append(f"Install: [bold]{escape(project.install_command)}[/bold]")

    github = project.github
    if github:
        lines.extend(
            [
                "",
                f"Stars: {github.stars}  Forks: {github.forks}",
                f"Last push: {github.last_commit or 'unknown'}",
                f"License: {github.license or 'none'}",
                f"Languages: {', '.join(github.languages) or 'unknown'}",
            ]
        )
    else:
        lines.extend(["", "[dim]GitHub data unavailable[/dim]"])

    lines.extend(["", escape(project.long_description)])
    return Panel("\n".join(lines), title=project.slug, expand=False)


def print_diagnostics(console: Console, diagnostics: Sequence[LoadDiagnostic]) -> None:
    """Report record files that were skipped while loading."""
    if not diagnostics:
        return

    console.print(f"\n[bold red]Skipped {len(diagnostics)} record file(s):[/bold red]")
    for diagnostic in diagnostics:
        console.print(f"  - {diagnostic.filename}: {escape(diagnostic.message)}")
