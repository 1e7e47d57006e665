"""New command: draft a SKILL.md and the GitHub issue that proposes it."""

from pathlib import Path
from typing import Annotated, List, Optional

import typer

from econskills.cli.common import console, exit_with_error, get_config
from econskills.submission import build_issue_url, build_submission, generate_skill_markdown


def new_skill(
    name: Annotated[
        str,
        typer.Option("--name", "-n", help="Skill name in kebab-case (e.g., stata-event-study)."),
    ],
    description: Annotated[str, typer.Option(help="One-line description.")] = "",
    workflow_stage: Annotated[
        str, typer.Option("--workflow-stage", help="Workflow stage, e.g. analysis or writing.")
    ] = "",
    primary_tool: Annotated[str, typer.Option("--primary-tool", help="Main tool, e.g. Stata.")] = "",
    compatibility: Annotated[
        Optional[List[str]],
        typer.Option("--compatibility", help="Compatible assistant (repeatable)."),
    ] = None,
    purpose: Annotated[str, typer.Option(help="What the skill is for.")] = "",
    instructions: Annotated[str, typer.Option(help="Instructions for the agent.")] = "",
    example: Annotated[str, typer.Option(help="Example output.")] = "",
    tags: Annotated[str, typer.Option(help="Comma-separated tags.")] = "",
    author_name: Annotated[str, typer.Option("--author-name", help="Your name.")] = "",
    author_email: Annotated[str, typer.Option("--author-email", help="Your email.")] = "",
    github: Annotated[str, typer.Option("--github", help="Your GitHub username.")] = "",
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write the SKILL.md to this file."),
    ] = None,
    open_issue: Annotated[
        bool,
        typer.Option("--open", help="Open the pre-filled GitHub issue in a browser."),
    ] = False,
) -> None:
    """Draft a new skill and print the GitHub issue URL that proposes it.

    Examples:
      econskills new --name stata-event-study --purpose "Event studies" -o SKILL.md
      econskills new --name did-helper --tags "did, panel" --open
    """
    config = get_config()
    if not name.strip():
        exit_with_error("Skill name cannot be empty")

    submission = build_submission(
        {
            "name": name.strip(),
            "description": description,
            "workflow_stage": workflow_stage,
            "primary_tool": primary_tool,
            "compatibility": compatibility or [],
            "purpose": purpose,
            "instructions": instructions,
            "example": example,
            "tags": tags,
            "author_name": author_name,
            "author_email": author_email,
            "github_username": github,
        }
    )
    markdown = generate_skill_markdown(submission)

    if output is not None:
        try:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(markdown, encoding="utf-8")
        except OSError as e:
            exit_with_error(f"Failed to write {output}: {e}")
        console.print(f"[green]Wrote {output}[/green]")
    else:
        typer.echo(markdown)

    issue_url = build_issue_url(submission, config.repo)
    console.print("[cyan]Propose this skill on GitHub:[/cyan]")
    typer.echo(issue_url)
    if open_issue:
        typer.launch(issue_url)
