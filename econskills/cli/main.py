"""CLI entry point for econskills."""

from typing import Annotated, Optional

import typer

from econskills import __version__
from econskills.cli.catalog import list_skills
from econskills.cli.common import setup_logging
from econskills.cli.download import download, download_all
from econskills.cli.new import new_skill
from econskills.cli.repo import init, install_hooks_command

app = typer.Typer(
    name="econskills",
    help="Download, browse and propose skills from the Awesome Econ AI Stuff catalog.",
    no_args_is_help=True,
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"econskills {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging."),
    ] = False,
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = None,
) -> None:
    """Download, browse and propose skills from the Awesome Econ AI Stuff catalog."""
    setup_logging(verbose)


app.command("download-all")(download_all)
app.command("download")(download)
app.command("list")(list_skills)
app.command("new")(new_skill)
app.command("init")(init)
app.command("install-hooks")(install_hooks_command)


if __name__ == "__main__":
    app()
