"""Tests for resolving skill content from the site with a GitHub fallback."""

import httpx
import pytest

from econskills.catalog import CatalogEntry
from econskills.exceptions import FetchError
from econskills.fetcher import ContentResolver, RawContentSource, is_rendered_page, open_client

PATH = "_skills/data/x/SKILL.md"


class TestIsRenderedPage:
    @pytest.mark.parametrize(
        "text",
        [
            "<!DOCTYPE html><html></html>",
            "   \n<!doctype html>",
            "<html lang='en'>",
            "\t<HTML>",
        ],
    )
    def test_html_detected(self, text):
        assert is_rendered_page(text) is True

    @pytest.mark.parametrize("text", ["---\nname: x\n---", "# Title", "", "text <html>"])
    def test_markdown_accepted(self, text):
        assert is_rendered_page(text) is False


class TestResolve:
    def test_primary_success_skips_fallback(self, fake_site, run_with_resolver):
        fake_site.serve_primary(PATH, "A")
        fake_site.serve_raw(PATH, "from github")

        assert run_with_resolver(lambda r: r.resolve(PATH)) == "A"
        assert fake_site.requests == [fake_site.primary_url(PATH)]

    def test_rendered_page_falls_back_to_github(self, fake_site, run_with_resolver):
        fake_site.serve_primary(PATH, "<!DOCTYPE html><html>rendered</html>")
        fake_site.serve_raw(PATH, "raw markdown")

        assert run_with_resolver(lambda r: r.resolve(PATH)) == "raw markdown"
        assert fake_site.requests == [
            fake_site.primary_url(PATH),
            fake_site.source.url_for(PATH),
        ]

    def test_primary_404_falls_back(self, fake_site, run_with_resolver):
        fake_site.serve_raw(PATH, "B")

        assert run_with_resolver(lambda r: r.resolve(PATH)) == "B"

    def test_primary_network_error_falls_back(self, fake_site, run_with_resolver):
        fake_site.fail_primary(PATH, httpx.ConnectError("connection refused"))
        fake_site.serve_raw(PATH, "B")

        assert run_with_resolver(lambda r: r.resolve(PATH)) == "B"

    def test_primary_timeout_falls_back(self, fake_site, run_with_resolver):
        fake_site.fail_primary(PATH, httpx.ReadTimeout("timed out"))
        fake_site.serve_raw(PATH, "B")

        assert run_with_resolver(lambda r: r.resolve(PATH)) == "B"

    def test_both_fail_raises_fetch_error_with_status(self, fake_site, run_with_resolver):
        with pytest.raises(FetchError) as exc_info:
            run_with_resolver(lambda r: r.resolve(PATH))

        assert exc_info.value.path == PATH
        assert exc_info.value.status_code == 404
        assert PATH in str(exc_info.value)

    def test_secondary_network_error_raises_fetch_error(self, fake_site, run_with_resolver):
        fake_site.fail_raw(PATH, httpx.ConnectError("dns failure"))

        with pytest.raises(FetchError) as exc_info:
            run_with_resolver(lambda r: r.resolve(PATH))

        assert exc_info.value.status_code is None
        assert "dns failure" in str(exc_info.value)

    def test_fetch_error_names_secondary_url(self, fake_site, run_with_resolver):
        with pytest.raises(FetchError) as exc_info:
            run_with_resolver(lambda r: r.resolve(PATH))

        assert exc_info.value.url == fake_site.source.url_for(PATH)
        assert fake_site.source.url_for(PATH) in str(exc_info.value)

    def test_invalid_url_raises_fetch_error(self, run_with_resolver):
        bad_path = "_skills/data/x\x01y/SKILL.md"

        with pytest.raises(FetchError) as exc_info:
            run_with_resolver(lambda r: r.resolve(bad_path))

        assert exc_info.value.path == bad_path
        assert exc_info.value.status_code is None

    def test_secondary_content_is_not_revalidated(self, fake_site, run_with_resolver):
        fake_site.serve_raw(PATH, "<html>odd but raw</html>")

        assert run_with_resolver(lambda r: r.resolve(PATH)) == "<html>odd but raw</html>"

    def test_no_caching_between_calls(self, fake_site, run_with_resolver):
        fake_site.serve_primary(PATH, "A")

        async def twice(resolver):
            return [await resolver.resolve(PATH), await resolver.resolve(PATH)]

        assert run_with_resolver(twice) == ["A", "A"]
        assert len(fake_site.requests) == 2

    def test_empty_base_prefix(self, fake_site, run_with_resolver):
        fake_site.base_prefix = ""
        fake_site.serve_primary(PATH, "root")

        assert run_with_resolver(lambda r: r.resolve(PATH), base_prefix="") == "root"
        assert fake_site.requests == [f"https://meleantonio.github.io/{PATH}"]


class TestResolveEntry:
    def test_failure_reported_not_raised(self, run_with_resolver):
        entry = CatalogEntry.from_path(PATH)

        result = run_with_resolver(lambda r: r.resolve_entry(entry))

        assert result.ok is False
        assert result.text is None
        assert isinstance(result.error, FetchError)

    def test_success(self, fake_site, run_with_resolver):
        entry = CatalogEntry.from_path(PATH)
        fake_site.serve_primary(PATH, "A")

        result = run_with_resolver(lambda r: r.resolve_entry(entry))

        assert result.ok is True
        assert result.text == "A"
        assert result.error is None


@pytest.mark.asyncio
async def test_custom_source_and_origin():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        if request.url.host == "raw.githubusercontent.com":
            return httpx.Response(200, text="fork content")
        return httpx.Response(500)

    async with open_client(transport=httpx.MockTransport(handler)) as client:
        resolver = ContentResolver(
            client,
            base_prefix="/site",
            origin="https://mirror.test/",
            source=RawContentSource(repo="someone/fork", branch="dev"),
        )
        text = await resolver.resolve(PATH)

    assert text == "fork content"
    assert seen == [
        f"https://mirror.test/site/{PATH}",
        f"https://raw.githubusercontent.com/someone/fork/dev/{PATH}",
    ]
