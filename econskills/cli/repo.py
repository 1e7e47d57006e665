"""Repository setup commands: init and install-hooks."""

from pathlib import Path
from typing import Annotated

import typer

from econskills.cli.common import console, exit_with_error
from econskills.config import CONFIG_FILENAME, SiteConfig
from econskills.exceptions import HooksNotFoundError, NotAGitRepositoryError
from econskills.hooks import find_repo_root, install_hooks


def init(
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing econskills.toml."),
    ] = False,
) -> None:
    """Create an econskills.toml with the default settings."""
    config_path = Path.cwd() / CONFIG_FILENAME
    if config_path.exists() and not force:
        exit_with_error(f"{CONFIG_FILENAME} already exists. Use --force to replace it.")

    SiteConfig().save(config_path)
    console.print(f"[green]Created {config_path}[/green]")


def install_hooks_command() -> None:
    """Install the repository's git hooks from .github/hooks."""
    repo_root = find_repo_root()
    if repo_root is None:
        exit_with_error("Not a git repository. Run this from inside the repo.")

    console.print("Setting up git hooks for awesome-econ-ai-stuff...")
    try:
        result = install_hooks(repo_root)
    except (NotAGitRepositoryError, HooksNotFoundError) as e:
        exit_with_error(str(e))
    except OSError as e:
        exit_with_error(f"Failed to install hooks: {e}")

    for name in result.backed_up:
        console.print(f"[yellow]Hook '{name}' already existed, backed up to {name}.bak[/yellow]")
    for name in result.installed:
        console.print(f"[green]Installed {name}[/green]")

    if not result.installed:
        console.print("[yellow]No hooks found to install.[/yellow]")
        return

    console.print("[green]Git hooks installed successfully![/green]")
    console.print("[dim]To bypass hooks (if needed): git commit --no-verify[/dim]")
