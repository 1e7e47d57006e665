"""Remote raw-content source used as the fallback for every fetch."""

from dataclasses import dataclass

from econskills.constants import GITHUB_BRANCH, GITHUB_REPO, RAW_CONTENT_HOST


@dataclass(frozen=True)
class RawContentSource:
    """A GitHub repository branch served as raw files."""

    repo: str = GITHUB_REPO
    branch: str = GITHUB_BRANCH
    host: str = RAW_CONTENT_HOST

    def url_for(self, path: str) -> str:
        """Raw content URL for a repo-relative path.

        Examples:
            >>> RawContentSource("user/repo", "main").url_for("_skills/a/b/SKILL.md")
            'https://raw.githubusercontent.com/user/repo/main/_skills/a/b/SKILL.md'
        """
        return f"https://{self.host}/{self.repo}/{self.branch}/{path.lstrip('/')}"
