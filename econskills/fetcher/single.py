"""Single skill download from the page it is shown on."""

import logging
from pathlib import Path

from econskills.constants import DEPLOYMENT_SUBPATH
from econskills.control import Alert, DownloadControl, download_skill_control
from econskills.exceptions import EconSkillsError
from econskills.fetcher.download import save_download
from econskills.fetcher.resolver import ContentResolver
from econskills.page import (
    PageContext,
    derive_skill_path,
    detect_base_prefix,
    skill_download_name,
)

logger = logging.getLogger(__name__)

SKILL_FAILED_MESSAGE = "Failed to download SKILL.md file. Please try again."


async def download_skill_file(
    page: PageContext,
    resolver: ContentResolver,
    output_dir: Path,
    control: DownloadControl | None = None,
    alert: Alert | None = None,
    deployment_subpath: str = DEPLOYMENT_SUBPATH,
) -> Path | None:
    """
    Download the SKILL.md behind a skill page.

    Args:
        page: The skill page, e.g. path "/awesome-econ-ai-stuff/skills/analysis/r-econometrics/"
        resolver: Content resolver bound to an open HTTP client
        output_dir: Directory the file is written to
        control: Trigger control shown busy while downloading
        alert: Called with a user-facing message on failure
        deployment_subpath: Known sub-path used for base prefix detection

    Returns:
        Path to the written "<skill>-SKILL.md", or None on failure
    """
    control = control or download_skill_control()

    with control.busy():
        base_prefix = detect_base_prefix(page, deployment_subpath)
        skill_path = derive_skill_path(page.path, base_prefix)
        try:
            content = await resolver.resolve(skill_path)
            return save_download(output_dir, skill_download_name(skill_path), content)
        except (EconSkillsError, OSError) as e:
            logger.error("Error downloading skill file %s: %s", skill_path, e)
            if alert is not None:
                alert(SKILL_FAILED_MESSAGE)
            return None
