"""Page location handling: base prefix detection and skill path derivation.

The site is served from a sub-path (``/awesome-econ-ai-stuff``) rather than
a domain root, so every same-origin fetch needs the base prefix. The page a
download starts from is described by ``PageContext``; nothing here reads
global state.
"""

from dataclasses import dataclass
from urllib.parse import urljoin, urlsplit

from econskills.constants import (
    DEPLOYMENT_SUBPATH,
    INTERNAL_SKILLS_SEGMENT,
    PUBLIC_SKILLS_SEGMENT,
    SITE_ORIGIN,
    SKILL_FILENAME,
)


@dataclass(frozen=True)
class PageContext:
    """Where a download was started from.

    Attributes:
        path: Page path, e.g. "/awesome-econ-ai-stuff/skills/analysis/r-econometrics/"
        origin: Scheme and host, e.g. "https://meleantonio.github.io"
        injected_base_path: Base path configured by the host site, if any
        base_href: href of an HTML base tag, if any
    """

    path: str = "/"
    origin: str = SITE_ORIGIN
    injected_base_path: str | None = None
    base_href: str | None = None

    @classmethod
    def from_url(
        cls,
        url: str,
        origin: str = SITE_ORIGIN,
        injected_base_path: str | None = None,
        base_href: str | None = None,
    ) -> "PageContext":
        """Build a context from a full URL or a bare site path.

        Examples:
            >>> PageContext.from_url("https://example.org/site/skills/x/").origin
            'https://example.org'
            >>> PageContext.from_url("/site/skills/x/").path
            '/site/skills/x/'
        """
        parts = urlsplit(url)
        if parts.scheme and parts.netloc:
            origin = f"{parts.scheme}://{parts.netloc}"
        path = parts.path or "/"
        if not path.startswith("/"):
            path = f"/{path}"
        return cls(
            path=path,
            origin=origin,
            injected_base_path=injected_base_path,
            base_href=base_href,
        )


def detect_base_prefix(page: PageContext, deployment_subpath: str = DEPLOYMENT_SUBPATH) -> str:
    """Detect the deployment base prefix for a page.

    Checked in order: the injected base path, the base tag href, a
    substring match of the page path against the known deployment sub-path,
    and finally the empty string.
    """
    if page.injected_base_path is not None:
        return page.injected_base_path

    if page.base_href:
        href = urljoin(f"{page.origin}/", page.base_href)
        path = urlsplit(href).path
        return path[:-1] if path.endswith("/") else path

    if deployment_subpath and deployment_subpath in page.path:
        return deployment_subpath

    return ""


def derive_skill_path(page_path: str, base_prefix: str) -> str:
    """Map a skill page path to the repo path of its SKILL.md.

    Examples:
        >>> derive_skill_path("/awesome-econ-ai-stuff/skills/analysis/r-econometrics/", "/awesome-econ-ai-stuff")
        '_skills/analysis/r-econometrics/SKILL.md'
    """
    skill_path = page_path
    if base_prefix and skill_path.startswith(base_prefix):
        skill_path = skill_path[len(base_prefix):]

    if skill_path.endswith("/"):
        skill_path = skill_path[:-1]
    skill_path = f"{skill_path}/{SKILL_FILENAME}"

    # The site serves /skills/... while the repo stores _skills/...
    if skill_path.startswith(PUBLIC_SKILLS_SEGMENT):
        skill_path = INTERNAL_SKILLS_SEGMENT + skill_path[len(PUBLIC_SKILLS_SEGMENT):]
    return skill_path


def skill_download_name(skill_path: str) -> str:
    """Filename for a single skill download: <skill>-SKILL.md."""
    segments = skill_path.split("/")
    skill_name = segments[-2] if len(segments) >= 2 and segments[-2] else "skill"
    return f"{skill_name}-{SKILL_FILENAME}"
