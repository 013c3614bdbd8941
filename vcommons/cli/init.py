"""Init command implementation."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel

from ..config import ConfigModel, default_config_path, save_config
from ..ingestion.record_store import TEMPLATE_PREFIX

console = Console()

TEMPLATE_RECORD = """\
# Copy this file to <slug>.yaml and fill it in.
# Files starting with "{prefix}" are ignored by the directory.
name: My Project
slug: my-project
description: One sentence about what the project does.
longDescription: |
  A longer description shown on the project page.
category: app  # wallet, app, dashboard, tool, library, other
repo: https://github.com/owner/my-project
verusFeatures:
  - VerusID
# Optional fields
# maintainer: Owner Name
# liveUrl: https://example.com
# docsUrl: https://example.com/docs
# logo: my-project.png
# screenshots:
#   - screenshot-1.png
# installCommand: npm install my-project
# primaryLanguage: TypeScript
"""


def init_command(
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file to write (default: ~/.config/vcommons/config.yaml)",
    ),
    data_dir: Path = typer.Option(
        Path("data") / "projects",
        "--data-dir",
        "-d",
        help="Directory of project YAML records",
    ),
    screenshots_dir: Path = typer.Option(
        Path("public") / "screenshots",
        "--screenshots-dir",
        help="Directory of per-project screenshots",
    ),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing config"),
) -> None:
    """Initialize configuration and the project records directory."""
    console.print(Panel.fit("Verus Commons - Initialization", style="bold blue"))

    if config_path is None:
        config_path = default_config_path()

    if config_path.exists() and not force:
        console.print(f"[yellow]Config already exists: {config_path} (use --force to overwrite)[/yellow]")
    else:
        config = ConfigModel(data_dir=str(data_dir), screenshots_dir=str(screenshots_dir))
        save_config(config, config_path)
        console.print(f"✅ Created config: {config_path}")

    data_dir.mkdir(parents=True, exist_ok=True)
    template_path = data_dir / f"{TEMPLATE_PREFIX}template.yaml"
    if not template_path.exists():
        template_path.write_text(TEMPLATE_RECORD.format(prefix=TEMPLATE_PREFIX), encoding="utf-8")
        console.print(f"✅ Created record template: {template_path}")

    screenshots_dir.mkdir(parents=True, exist_ok=True)

    console.print(
        Panel(
            f"[green]✅ Verus Commons initialized![/green]\n\n"
            f"Configuration: {config_path}\n"
            f"Records: {data_dir}\n"
            f"Screenshots: {screenshots_dir}\n\n"
            f"Next steps:\n"
            f"1. Set a GitHub token: [bold]export GITHUB_TOKEN=your_token[/bold]\n"
            f"2. Add records next to {template_path.name}\n"
            f"3. Run: [bold]vcommons list[/bold]",
            style="green",
        )
    )
