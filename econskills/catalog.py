"""Skill catalog: the list of skills offered for download.

The catalog used to be a hand-maintained list that had to be kept in sync
with the ``_skills/`` directory. ``DEFAULT_CATALOG`` keeps that list for
when no checkout is available, and ``discover_catalog`` derives the same
structure from the content directory itself.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from econskills.constants import SKILL_FILENAME, SKILLS_SOURCE_DIR
from econskills.exceptions import CatalogError
from econskills.submission import read_front_matter_value


@dataclass(frozen=True)
class CatalogEntry:
    """One downloadable skill file.

    Attributes:
        relative_path: Repo-relative path, e.g. "_skills/analysis/r-econometrics/SKILL.md"
        display_name: Human readable name shown in listings
        category: Second path segment, e.g. "analysis"
        name: Third path segment, e.g. "r-econometrics"
    """

    relative_path: str
    display_name: str
    category: str
    name: str

    @classmethod
    def from_path(cls, relative_path: str, display_name: str | None = None) -> "CatalogEntry":
        """Build an entry, deriving category and name from the path segments.

        Examples:
            >>> CatalogEntry.from_path("_skills/writing/latex-tables/SKILL.md").category
            'writing'
        """
        segments = relative_path.strip("/").split("/")
        if len(segments) < 4 or not all(segments):
            raise CatalogError(
                f"Invalid catalog path '{relative_path}'.\n"
                f"Expected: {SKILLS_SOURCE_DIR}/<category>/<name>/{SKILL_FILENAME}"
            )
        return cls(
            relative_path=relative_path.strip("/"),
            display_name=display_name or segments[2],
            category=segments[1],
            name=segments[2],
        )

    @property
    def filename(self) -> str:
        return self.relative_path.rsplit("/", 1)[-1]


def build_catalog(entries: Iterable[CatalogEntry]) -> tuple[CatalogEntry, ...]:
    """Freeze a catalog, rejecting duplicate relative paths."""
    seen: set[str] = set()
    result = []
    for entry in entries:
        if entry.relative_path in seen:
            raise CatalogError(f"Duplicate catalog path '{entry.relative_path}'")
        seen.add(entry.relative_path)
        result.append(entry)
    return tuple(result)


DEFAULT_CATALOG = build_catalog(
    CatalogEntry.from_path(f"{SKILLS_SOURCE_DIR}/{path}/{SKILL_FILENAME}")
    for path in (
        "analysis/r-econometrics",
        "analysis/stata-regression",
        "analysis/python-panel-data",
        "data/stata-data-cleaning",
        "data/api-data-fetcher",
        "theory/latex-econ-model",
        "writing/academic-paper-writer",
        "writing/latex-tables",
        "communication/beamer-presentation",
        "communication/econ-visualization",
        "ideation/research-ideation",
        "literature/lit-review-assistant",
    )
)


def discover_catalog(
    content_dir: Path, root_name: str = SKILLS_SOURCE_DIR
) -> tuple[CatalogEntry, ...]:
    """Scan <content_dir>/<category>/<name>/SKILL.md and build a catalog.

    Args:
        content_dir: The skills content directory (usually ``_skills``)
        root_name: First segment used for the repo-relative paths

    Returns:
        Catalog entries sorted by relative path

    Raises:
        CatalogError: If content_dir is not a directory
    """
    if not content_dir.is_dir():
        raise CatalogError(f"Skills directory not found: {content_dir}")

    entries = []
    for skill_md in sorted(content_dir.glob(f"*/*/{SKILL_FILENAME}")):
        category = skill_md.parent.parent.name
        name = skill_md.parent.name
        # Hidden and underscore directories are site internals, not skills
        if category.startswith((".", "_")) or name.startswith((".", "_")):
            continue
        try:
            text = skill_md.read_text(encoding="utf-8")
        except (UnicodeDecodeError, OSError) as e:
            raise CatalogError(f"Cannot read {skill_md}: {e}") from e
        display_name = read_front_matter_value(text, "name")
        entries.append(
            CatalogEntry.from_path(
                f"{root_name}/{category}/{name}/{SKILL_FILENAME}",
                display_name=display_name or None,
            )
        )
    return build_catalog(entries)


def filter_catalog(
    entries: Iterable[CatalogEntry], category: str | None = None
) -> list[CatalogEntry]:
    """Return entries in a category; "all" or None keeps everything."""
    if category is None or category == "all":
        return list(entries)
    return [entry for entry in entries if entry.category == category]


def categories(entries: Iterable[CatalogEntry]) -> list[str]:
    return sorted({entry.category for entry in entries})
