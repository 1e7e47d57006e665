"""Skill file fetching: single files and the bulk archive."""

from econskills.fetcher.archive import (
    ARCHIVE_FAILED_MESSAGE,
    ArchiveLayout,
    assemble_archive,
    download_all_skills,
    resolve_catalog,
)
from econskills.fetcher.download import open_client, save_download
from econskills.fetcher.resolver import ContentResolver, is_rendered_page
from econskills.fetcher.single import SKILL_FAILED_MESSAGE, download_skill_file
from econskills.fetcher.source import RawContentSource
from econskills.fetcher.types import ArchiveResult, ResolvedContent

__all__ = [
    # Types
    "ArchiveResult",
    "ResolvedContent",
    "RawContentSource",
    # Download operations
    "open_client",
    "save_download",
    # Resolution
    "ContentResolver",
    "is_rendered_page",
    # Bulk archive
    "ARCHIVE_FAILED_MESSAGE",
    "ArchiveLayout",
    "assemble_archive",
    "download_all_skills",
    "resolve_catalog",
    # Single file
    "SKILL_FAILED_MESSAGE",
    "download_skill_file",
]
