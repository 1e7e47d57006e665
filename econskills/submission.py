"""Skill proposals: turn submission form fields into a SKILL.md.

New skills are proposed through a GitHub issue. The form fields are
serialized into a SKILL.md with YAML frontmatter, and that markdown becomes
the body of a pre-filled ``issues/new`` URL.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Mapping
from urllib.parse import quote

from econskills.constants import GITHUB_REPO

ISSUE_LABEL = "skill-proposal"
ISSUE_TITLE_PREFIX = "[Skill Proposal]"
DEFAULT_TAG = "general"
SKILL_VERSION = "1.0.0"

# Characters encodeURIComponent leaves alone
_URI_COMPONENT_SAFE = "-_.!~*'()"


@dataclass
class SkillAuthor:
    name: str = ""
    email: str = ""
    github: str = ""


@dataclass
class SkillSubmission:
    """Structured contents of the skill submission form."""

    name: str
    description: str = ""
    workflow_stage: str = ""
    primary_tool: str = ""
    compatibility: list[str] = field(default_factory=list)
    purpose: str = ""
    instructions: str = ""
    example: str = ""
    tags: list[str] = field(default_factory=list)
    author: SkillAuthor = field(default_factory=SkillAuthor)


def _get(form: Mapping[str, Any], key: str) -> str:
    value = form.get(key)
    return "" if value is None else str(value)


def parse_tags(raw: str | None) -> list[str]:
    """Split a comma-separated tag string, dropping empty entries."""
    if not raw:
        return []
    return [tag.strip() for tag in raw.split(",") if tag.strip()]


def build_submission(form: Mapping[str, Any]) -> SkillSubmission:
    """Build a SkillSubmission from raw form values.

    ``compatibility`` may be a list (multi-select) or a single string;
    ``tags`` is a comma-separated string.
    """
    compatibility = form.get("compatibility") or []
    if isinstance(compatibility, str):
        compatibility = [compatibility]

    return SkillSubmission(
        name=_get(form, "name"),
        description=_get(form, "description"),
        workflow_stage=_get(form, "workflow_stage"),
        primary_tool=_get(form, "primary_tool"),
        compatibility=list(compatibility),
        purpose=_get(form, "purpose"),
        instructions=_get(form, "instructions"),
        example=_get(form, "example"),
        tags=parse_tags(form.get("tags")),
        author=SkillAuthor(
            name=_get(form, "author_name"),
            email=_get(form, "author_email"),
            github=_get(form, "github_username"),
        ),
    )


def to_title_case(text: str) -> str:
    """Capitalize each word, lowercasing the rest.

    Examples:
        >>> to_title_case("r econometrics")
        'R Econometrics'
    """
    return re.sub(
        r"[A-Za-z0-9_]\S*",
        lambda m: m.group(0)[0].upper() + m.group(0)[1:].lower(),
        text,
    )


def generate_skill_markdown(submission: SkillSubmission) -> str:
    """Render a submission as SKILL.md content with YAML frontmatter."""
    compatibility_yaml = "\n".join(f"  - {c}" for c in submission.compatibility)
    tags = submission.tags or [DEFAULT_TAG]
    tags_yaml = "\n".join(f"  - {t}" for t in tags)
    author = submission.author

    example_section = ""
    if submission.example:
        example_section = f"## Example Output\n\n```\n{submission.example}\n```"

    github_line = ""
    if author.github:
        github_line = f"- **GitHub:** [@{author.github}](https://github.com/{author.github})"

    return (
        "---\n"
        f"name: {submission.name}\n"
        f"description: {submission.description}\n"
        f"workflow_stage: {submission.workflow_stage}\n"
        "compatibility:\n"
        f"{compatibility_yaml}\n"
        f"author: {author.name} <{author.email}>\n"
        f"version: {SKILL_VERSION}\n"
        "tags:\n"
        f"{tags_yaml}\n"
        "---\n"
        "\n"
        f"# {to_title_case(submission.name.replace('-', ' '))}\n"
        "\n"
        "## Purpose\n"
        "\n"
        f"{submission.purpose}\n"
        "\n"
        "## Instructions\n"
        "\n"
        f"{submission.instructions}\n"
        "\n"
        f"{example_section}\n"
        "\n"
        "## Author\n"
        "\n"
        f"- **Name:** {author.name}\n"
        f"- **Email:** {author.email}\n"
        f"{github_line}\n"
    )


def build_issue_url(submission: SkillSubmission, repo: str = GITHUB_REPO) -> str:
    """Build the GitHub issues/new URL that proposes this skill."""
    title = quote(f"{ISSUE_TITLE_PREFIX} {submission.name}", safe=_URI_COMPONENT_SAFE)
    body = quote(generate_skill_markdown(submission), safe=_URI_COMPONENT_SAFE)
    return (
        f"https://github.com/{repo}/issues/new"
        f"?title={title}&body={body}&labels={ISSUE_LABEL}"
    )


def read_front_matter_value(content: str, key: str) -> str | None:
    """Read a simple ``key: value`` from YAML frontmatter.

    Surrounding quotes are removed. Returns None when the content has no
    frontmatter or the key is absent.
    """
    if not content.startswith("---"):
        return None
    parts = content.split("---", 2)
    if len(parts) < 3:
        return None

    prefix = f"{key}:"
    for line in parts[1].split("\n"):
        line = line.strip()
        if not line.startswith(prefix):
            continue
        value = line[len(prefix):].strip()
        if len(value) >= 2 and value[0] in ('"', "'") and value[-1] == value[0]:
            value = value[1:-1]
        return value
    return None
