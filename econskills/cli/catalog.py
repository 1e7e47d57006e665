"""List command: browse the skill catalog."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.table import Table

from econskills.catalog import categories, filter_catalog
from econskills.cli.common import console, get_catalog, get_config


def list_skills(
    category: Annotated[
        Optional[str],
        typer.Option("--category", "-c", help="Only show skills in this category ('all' for every skill)."),
    ] = None,
    content_dir: Annotated[
        Optional[Path],
        typer.Option("--content-dir", help="Build the catalog from a local _skills/ directory."),
    ] = None,
) -> None:
    """List the skills available for download.

    Examples:
      econskills list
      econskills list --category writing
    """
    config = get_config()
    catalog = get_catalog(config, content_dir)
    entries = filter_catalog(catalog, category)

    if not entries:
        console.print(f"[yellow]No skills in category '{category}'.[/yellow]")
        console.print(f"[dim]Categories: {', '.join(categories(catalog))}[/dim]")
        return

    table = Table(title="Econ AI skills")
    table.add_column("Category", style="cyan", no_wrap=True)
    table.add_column("Skill", style="green", no_wrap=True)
    table.add_column("Path", style="dim", overflow="fold")
    for entry in entries:
        table.add_row(entry.category, entry.display_name, entry.relative_path)
    console.print(table)
