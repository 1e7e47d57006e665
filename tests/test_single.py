"""Tests for downloading a single SKILL.md from its skill page."""

from pathlib import Path

from econskills.constants import DOWNLOAD_SKILL_LABEL
from econskills.control import download_skill_control
from econskills.fetcher import SKILL_FAILED_MESSAGE, download_skill_file
from econskills.page import PageContext

PAGE_PATH = "/awesome-econ-ai-stuff/skills/analysis/r-econometrics/"
SKILL_PATH = "_skills/analysis/r-econometrics/SKILL.md"


class TestDownloadSkillFile:
    def test_downloads_from_site(self, tmp_path: Path, fake_site, run_with_resolver):
        fake_site.serve_primary(SKILL_PATH, "# R Econometrics\n")

        path = run_with_resolver(
            lambda r: download_skill_file(PageContext(path=PAGE_PATH), r, tmp_path)
        )

        assert path == tmp_path / "r-econometrics-SKILL.md"
        assert path.read_text() == "# R Econometrics\n"

    def test_falls_back_to_github(self, tmp_path: Path, fake_site, run_with_resolver):
        fake_site.serve_primary(SKILL_PATH, "<!DOCTYPE html><html></html>")
        fake_site.serve_raw(SKILL_PATH, "raw")

        path = run_with_resolver(
            lambda r: download_skill_file(PageContext(path=PAGE_PATH), r, tmp_path)
        )

        assert path.read_text() == "raw"

    def test_total_failure_alerts_without_file(self, tmp_path: Path, run_with_resolver):
        control = download_skill_control()
        alerts: list[str] = []

        path = run_with_resolver(
            lambda r: download_skill_file(
                PageContext(path=PAGE_PATH), r, tmp_path, control=control, alert=alerts.append
            )
        )

        assert path is None
        assert alerts == [SKILL_FAILED_MESSAGE]
        assert list(tmp_path.iterdir()) == []
        assert control.is_idle
        assert control.label == DOWNLOAD_SKILL_LABEL

    def test_control_restored_after_success(self, tmp_path: Path, fake_site, run_with_resolver):
        fake_site.serve_primary(SKILL_PATH, "A")
        control = download_skill_control()
        labels = []
        control.listeners.append(lambda c: labels.append(c.label))

        run_with_resolver(
            lambda r: download_skill_file(PageContext(path=PAGE_PATH), r, tmp_path, control=control)
        )

        assert labels == ["Downloading...", DOWNLOAD_SKILL_LABEL]
        assert control.is_idle

    def test_injected_base_path_used_for_derivation(
        self, tmp_path: Path, fake_site, run_with_resolver
    ):
        fake_site.base_prefix = "/mirror"
        fake_site.serve_primary("_skills/data/x/SKILL.md", "X")
        page = PageContext(path="/mirror/skills/data/x/", injected_base_path="/mirror")

        path = run_with_resolver(
            lambda r: download_skill_file(page, r, tmp_path), base_prefix="/mirror"
        )

        assert path.name == "x-SKILL.md"
        assert path.read_text() == "X"

    def test_unbuildable_url_alerts_and_restores_control(
        self, tmp_path: Path, fake_site, run_with_resolver
    ):
        control = download_skill_control()
        alerts: list[str] = []

        path = run_with_resolver(
            lambda r: download_skill_file(
                PageContext(path="/skills/data/x\x01y/"),
                r,
                tmp_path,
                control=control,
                alert=alerts.append,
            )
        )

        assert path is None
        assert alerts == [SKILL_FAILED_MESSAGE]
        assert fake_site.requests == []
        assert control.is_idle
        assert control.label == DOWNLOAD_SKILL_LABEL
