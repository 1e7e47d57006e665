"""Type definitions for the fetcher module."""

from dataclasses import dataclass, field
from pathlib import Path

from econskills.catalog import CatalogEntry


@dataclass
class ResolvedContent:
    """Outcome of resolving one catalog entry.

    ``text`` is set if and only if the fetch succeeded.
    """

    entry: CatalogEntry
    text: str | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.text is not None


@dataclass
class ArchiveResult:
    """Result of a bulk download."""

    path: Path
    included: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)

    @property
    def total_included(self) -> int:
        return len(self.included)

    @property
    def is_partial(self) -> bool:
        return bool(self.missing)
