"""Resolve skill file contents from the site, falling back to GitHub."""

import logging

import httpx

from econskills.catalog import CatalogEntry
from econskills.constants import DEFAULT_TIMEOUT, SITE_ORIGIN
from econskills.exceptions import EconSkillsError, FetchError
from econskills.fetcher.source import RawContentSource
from econskills.fetcher.types import ResolvedContent

logger = logging.getLogger(__name__)

_RENDERED_PAGE_MARKERS = ("<!doctype", "<html")


def is_rendered_page(text: str) -> bool:
    """Return True if text is an HTML page rather than raw markdown.

    The site generator may answer a request for a source file with a
    rendered page, which must not be mistaken for the file itself.
    """
    return text.lstrip().lower().startswith(_RENDERED_PAGE_MARKERS)


class ContentResolver:
    """Fetch raw skill files, trying the site first and GitHub second.

    Args:
        client: HTTP client used for every request
        base_prefix: Deployment sub-path of the site, e.g. "/awesome-econ-ai-stuff"
        origin: Scheme and host of the site
        source: Raw content source used as fallback
        timeout: Per-request timeout in seconds
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        base_prefix: str = "",
        origin: str = SITE_ORIGIN,
        source: RawContentSource | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.client = client
        self.base_prefix = base_prefix
        self.origin = origin.rstrip("/")
        self.source = source or RawContentSource()
        self.timeout = timeout

    def primary_url(self, path: str) -> str:
        return f"{self.origin}{self.base_prefix}/{path}"

    async def _fetch_primary(self, path: str) -> str | None:
        """Fetch from the site itself; None means fall back."""
        try:
            response = await self.client.get(self.primary_url(path), timeout=self.timeout)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("Failed to fetch %s directly, trying GitHub raw URL: %s", path, e)
            return None

        if not response.is_success:
            logger.debug("Direct fetch of %s returned HTTP %s", path, response.status_code)
            return None

        text = response.text
        if is_rendered_page(text):
            logger.warning("Got HTML instead of markdown for %s, trying GitHub raw URL", path)
            return None
        return text

    async def _fetch_secondary(self, path: str) -> str:
        url = self.source.url_for(path)
        try:
            response = await self.client.get(url, timeout=self.timeout)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchError(path, reason=str(e), url=url) from e

        if not response.is_success:
            raise FetchError(path, response.status_code, response.reason_phrase, url=url)
        return response.text

    async def resolve(self, path: str) -> str:
        """
        Resolve the text of a repo-relative file.

        Args:
            path: Repo-relative path, e.g. "_skills/analysis/r-econometrics/SKILL.md"

        Returns:
            The raw file text

        Raises:
            FetchError: If neither the site nor GitHub returned the file
        """
        text = await self._fetch_primary(path)
        if text is not None:
            return text
        return await self._fetch_secondary(path)

    async def resolve_entry(self, entry: CatalogEntry) -> ResolvedContent:
        """Resolve a catalog entry, reporting failure instead of raising."""
        try:
            text = await self.resolve(entry.relative_path)
        except EconSkillsError as e:
            logger.warning("Error fetching %s: %s", entry.relative_path, e)
            return ResolvedContent(entry=entry, error=e)
        return ResolvedContent(entry=entry, text=text)
