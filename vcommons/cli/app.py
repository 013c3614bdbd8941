"""Main CLI application."""

import logging

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

# Load .env file if it exists (GITHUB_TOKEN, VCOMMONS_CONFIG)
load_dotenv()

from .browse import (
    featured_command,
    libraries_command,
    list_command,
    maintainer_command,
    show_command,
)
from .feed import feed_command
from .init import init_command
from .validate import validate_command

app = typer.Typer(
    name="vcommons",
    help="Verus Commons - community directory of Verus projects",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug diagnostics"),
) -> None:
    """Configure logging for all commands."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


# Register commands
app.command("init")(init_command)
app.command("list")(list_command)
app.command("show")(show_command)
app.command("featured")(featured_command)
app.command("libraries")(libraries_command)
app.command("maintainer")(maintainer_command)
app.command("feed")(feed_command)
app.command("validate")(validate_command)


if __name__ == "__main__":
    app()
