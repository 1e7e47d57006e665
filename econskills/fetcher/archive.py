"""Bulk download: resolve the whole catalog and pack it into one zip."""

import asyncio
import io
import logging
import zipfile
from pathlib import Path
from typing import Iterable

from econskills.catalog import CatalogEntry
from econskills.constants import ARCHIVE_FILENAME, ARCHIVE_ROOT
from econskills.control import Alert, DownloadControl, download_all_control
from econskills.exceptions import ArchiveError
from econskills.fetcher.download import save_download
from econskills.fetcher.resolver import ContentResolver
from econskills.fetcher.types import ArchiveResult, ResolvedContent

logger = logging.getLogger(__name__)

ARCHIVE_FAILED_MESSAGE = "Failed to download skills. Please try again."


class ArchiveLayout:
    """Skill files grouped by (category, name), ready to be zipped."""

    def __init__(self, root: str = ARCHIVE_ROOT):
        self.root = root
        self._files: dict[tuple[str, str], dict[str, str]] = {}

    def add(self, entry: CatalogEntry, text: str) -> None:
        self._files.setdefault((entry.category, entry.name), {})[entry.filename] = text

    def __len__(self) -> int:
        return sum(len(files) for files in self._files.values())

    def items(self) -> list[tuple[str, str]]:
        """(archive path, text) pairs in a stable order."""
        result = []
        for (category, name), files in sorted(self._files.items()):
            for filename, text in sorted(files.items()):
                result.append((f"{self.root}/{category}/{name}/{filename}", text))
        return result

    def archive_paths(self) -> list[str]:
        return [path for path, _text in self.items()]

    def to_zip_bytes(self) -> bytes:
        """Serialize the layout as a deflated zip archive.

        Raises:
            ArchiveError: If the archive cannot be built
        """
        buffer = io.BytesIO()
        try:
            with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as zf:
                for path, text in self.items():
                    zf.writestr(path, text)
        except (RuntimeError, ValueError, zipfile.BadZipFile) as e:
            # RuntimeError: compression module (zlib) not available
            raise ArchiveError(f"Failed to build archive: {e}") from e
        return buffer.getvalue()


async def resolve_catalog(
    catalog: Iterable[CatalogEntry], resolver: ContentResolver
) -> list[ResolvedContent]:
    """Resolve every entry concurrently and wait for all of them to settle."""
    entries = list(catalog)
    outcomes = await asyncio.gather(
        *(resolver.resolve_entry(entry) for entry in entries),
        return_exceptions=True,
    )

    results = []
    for entry, outcome in zip(entries, outcomes):
        if isinstance(outcome, ResolvedContent):
            results.append(outcome)
        elif isinstance(outcome, Exception):
            logger.error("Error fetching %s: %s", entry.relative_path, outcome)
            results.append(ResolvedContent(entry=entry, error=outcome))
        else:
            raise outcome
    return results


def assemble_archive(results: Iterable[ResolvedContent]) -> ArchiveLayout:
    layout = ArchiveLayout()
    for result in results:
        if result.ok:
            layout.add(result.entry, result.text)
    return layout


async def download_all_skills(
    catalog: Iterable[CatalogEntry],
    resolver: ContentResolver,
    output_dir: Path,
    control: DownloadControl | None = None,
    alert: Alert | None = None,
    filename: str = ARCHIVE_FILENAME,
) -> ArchiveResult | None:
    """
    Download every catalog entry into a single zip archive.

    Entries that cannot be fetched are left out of the archive; that alone
    is not a failure. Only failing to build or write the archive is.

    Args:
        catalog: Entries to download
        resolver: Content resolver bound to an open HTTP client
        output_dir: Directory the archive is written to
        control: Trigger control shown busy while downloading
        alert: Called with a user-facing message on failure
        filename: Archive filename

    Returns:
        ArchiveResult listing included and missing paths, or None on failure
    """
    control = control or download_all_control()

    with control.busy():
        results = await resolve_catalog(catalog, resolver)
        try:
            layout = assemble_archive(results)
            path = save_download(output_dir, filename, layout.to_zip_bytes())
        except (ArchiveError, OSError) as e:
            logger.error("Error creating zip file: %s", e)
            if alert is not None:
                alert(ARCHIVE_FAILED_MESSAGE)
            return None

    return ArchiveResult(
        path=path,
        included=[r.entry.relative_path for r in results if r.ok],
        missing=[r.entry.relative_path for r in results if not r.ok],
    )
