"""Test configuration and fixtures."""

import asyncio
from pathlib import Path

import httpx
import pytest

from econskills.constants import DEPLOYMENT_SUBPATH, SITE_ORIGIN
from econskills.fetcher import ContentResolver, RawContentSource, open_client


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "network: tests that make real network requests")


class FakeSite:
    """In-memory stand-in for the deployed site and raw.githubusercontent.com.

    Unknown URLs answer 404. Every requested URL is recorded in ``requests``.
    """

    def __init__(self, base_prefix: str = DEPLOYMENT_SUBPATH):
        self.base_prefix = base_prefix
        self.source = RawContentSource()
        self.routes: dict[str, object] = {}
        self.requests: list[str] = []
        self.transport = httpx.MockTransport(self.handle)

    def primary_url(self, path: str) -> str:
        return f"{SITE_ORIGIN}{self.base_prefix}/{path}"

    def serve_primary(self, path: str, text: str, status: int = 200) -> None:
        self.routes[self.primary_url(path)] = (status, text)

    def serve_raw(self, path: str, text: str, status: int = 200) -> None:
        self.routes[self.source.url_for(path)] = (status, text)

    def fail_primary(self, path: str, error: Exception) -> None:
        self.routes[self.primary_url(path)] = error

    def fail_raw(self, path: str, error: Exception) -> None:
        self.routes[self.source.url_for(path)] = error

    def handle(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requests.append(url)
        route = self.routes.get(url)
        if route is None:
            return httpx.Response(404, text="404: Not Found")
        if isinstance(route, Exception):
            raise route
        status, text = route
        return httpx.Response(status, text=text)


@pytest.fixture
def fake_site() -> FakeSite:
    return FakeSite()


@pytest.fixture
def run_with_resolver(fake_site: FakeSite):
    """Run ``func(resolver)`` against the fake site and return its result."""

    def _run(func, base_prefix: str | None = None):
        async def _main():
            async with open_client(transport=fake_site.transport) as client:
                prefix = fake_site.base_prefix if base_prefix is None else base_prefix
                resolver = ContentResolver(client, prefix)
                return await func(resolver)

        return asyncio.run(_main())

    return _run


@pytest.fixture
def git_project(tmp_path: Path, monkeypatch):
    """Set up a temporary git project directory."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".git").mkdir()
    return tmp_path


def write_skill(content_dir: Path, category: str, name: str, text: str | None = None) -> Path:
    """Create <content_dir>/<category>/<name>/SKILL.md."""
    skill_dir = content_dir / category / name
    skill_dir.mkdir(parents=True, exist_ok=True)
    skill_md = skill_dir / "SKILL.md"
    skill_md.write_text(text if text is not None else f"---\nname: {name}\n---\n\n# {name}\n")
    return skill_md


@pytest.fixture
def make_skill():
    return write_skill
