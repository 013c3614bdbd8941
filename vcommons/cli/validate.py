"""Record validation command."""

import typer
from rich.console import Console
from rich.markup import escape

from ..ingestion import RecordStore
from ..validation import DuplicateSlugError, ProjectValidationError, StoreReadError
from .browse import load_settings
from .render import print_diagnostics

console = Console()


def validate_command(
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Stop at the first invalid record",
    ),
) -> None:
    """Validate every project record in the data directory."""
    config = load_settings()
    store = RecordStore(config.data_dir)

    try:
        result = store.load(validate=True, strict=strict)
    except (StoreReadError, ProjectValidationError, DuplicateSlugError) as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        raise typer.Exit(1)

    console.print(f"Checked {len(result.records) + len(result.diagnostics)} record file(s) in {store.projects_dir}")

    if not result.ok:
        print_diagnostics(console, result.diagnostics)
        raise typer.Exit(1)

    console.print(f"[green]✅ All {len(result.records)} records are valid[/green]")
