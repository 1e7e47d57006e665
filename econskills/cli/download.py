"""Download commands: the whole catalog as a zip, or a single SKILL.md."""

import asyncio
from pathlib import Path
from typing import Annotated, Optional

import typer

from econskills.catalog import CatalogEntry, filter_catalog
from econskills.cli.common import (
    cli_alert,
    console,
    download_spinner,
    exit_with_error,
    get_catalog,
    get_config,
    get_output_dir,
)
from econskills.config import SiteConfig
from econskills.control import download_all_control, download_skill_control
from econskills.fetcher import (
    ArchiveResult,
    ContentResolver,
    download_all_skills,
    download_skill_file,
    open_client,
)
from econskills.page import PageContext, detect_base_prefix


def _page_context(config: SiteConfig, page: str) -> PageContext:
    return PageContext.from_url(
        page, origin=config.origin, injected_base_path=config.base_path
    )


async def _run_download_all(
    config: SiteConfig,
    catalog: list[CatalogEntry],
    page: PageContext,
    output_dir: Path,
) -> ArchiveResult | None:
    control = download_all_control()
    base_prefix = detect_base_prefix(page, config.deployment_subpath)
    async with open_client(config.timeout) as client:
        resolver = ContentResolver(
            client, base_prefix, page.origin, config.source, config.timeout
        )
        with download_spinner(control):
            return await download_all_skills(
                catalog, resolver, output_dir, control=control, alert=cli_alert
            )


async def _run_download_skill(
    config: SiteConfig, page: PageContext, output_dir: Path
) -> Path | None:
    control = download_skill_control()
    base_prefix = detect_base_prefix(page, config.deployment_subpath)
    async with open_client(config.timeout) as client:
        resolver = ContentResolver(
            client, base_prefix, page.origin, config.source, config.timeout
        )
        with download_spinner(control):
            return await download_skill_file(
                page,
                resolver,
                output_dir,
                control=control,
                alert=cli_alert,
                deployment_subpath=config.deployment_subpath,
            )


def download_all(
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Directory to save the zip archive in."),
    ] = None,
    category: Annotated[
        Optional[str],
        typer.Option("--category", "-c", help="Only download skills in this category."),
    ] = None,
    page: Annotated[
        Optional[str],
        typer.Option("--page", help="Site page URL or path the download starts from."),
    ] = None,
    content_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--content-dir",
            help="Build the catalog from a local _skills/ directory.",
        ),
    ] = None,
) -> None:
    """Download all skills as a single zip archive.

    Examples:
      econskills download-all
      econskills download-all -o ~/Downloads --category analysis
    """
    config = get_config()
    catalog = filter_catalog(get_catalog(config, content_dir), category)
    if not catalog:
        where = f" in category '{category}'" if category else ""
        exit_with_error(f"No skills found{where}")

    page_ctx = _page_context(config, page or f"{config.deployment_subpath}/")
    result = asyncio.run(
        _run_download_all(config, catalog, page_ctx, get_output_dir(config, output))
    )
    if result is None:
        raise typer.Exit(1)

    console.print(
        f"[green]Saved {result.total_included} skill(s) to {result.path}[/green]"
    )
    if result.is_partial:
        console.print(
            f"[yellow]{len(result.missing)} skill(s) could not be downloaded "
            "and are missing from the archive:[/yellow]"
        )
        for path in result.missing:
            console.print(f"  [dim]{path}[/dim]")


def download(
    page: Annotated[
        str,
        typer.Argument(
            help="Skill page URL or path (e.g., /awesome-econ-ai-stuff/skills/analysis/r-econometrics/).",
        ),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Directory to save the SKILL.md in."),
    ] = None,
) -> None:
    """Download the SKILL.md of a single skill page.

    Examples:
      econskills download /awesome-econ-ai-stuff/skills/analysis/r-econometrics/
      econskills download https://meleantonio.github.io/awesome-econ-ai-stuff/skills/writing/latex-tables/
    """
    config = get_config()
    page_ctx = _page_context(config, page)
    path = asyncio.run(
        _run_download_skill(config, page_ctx, get_output_dir(config, output))
    )
    if path is None:
        raise typer.Exit(1)

    console.print(f"[green]Saved {path}[/green]")
