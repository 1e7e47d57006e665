"""Tests for the fetcher package layout.

Verifies that the fetcher package re-exports what its submodules define.
"""


class TestFetcherModuleExports:
    def test_types_module_exports(self):
        from econskills.catalog import CatalogEntry
        from econskills.fetcher.types import ArchiveResult, ResolvedContent

        entry = CatalogEntry.from_path("_skills/data/x/SKILL.md")
        assert ResolvedContent(entry).ok is False
        assert ResolvedContent(entry, text="").ok is True

        result = ArchiveResult(path=None)
        assert result.total_included == 0
        assert result.is_partial is False

    def test_download_module_exports(self):
        from econskills.fetcher.download import open_client, save_download

        assert callable(open_client)
        assert callable(save_download)

    def test_all_public_symbols_importable_from_package(self):
        import econskills.fetcher as fetcher

        for name in fetcher.__all__:
            assert hasattr(fetcher, name), name


def test_save_download_text_and_bytes(tmp_path):
    from econskills.fetcher import save_download

    text_path = save_download(tmp_path / "out", "a.md", "héllo")
    bytes_path = save_download(tmp_path / "out", "b.zip", b"\x00\x01")

    assert text_path.read_text(encoding="utf-8") == "héllo"
    assert bytes_path.read_bytes() == b"\x00\x01"
