"""Shared exception classes for econskills."""


class EconSkillsError(Exception):
    """Base exception for econskills errors."""


class CatalogError(EconSkillsError):
    """Raised when a catalog entry or the catalog itself is invalid."""


class FetchError(EconSkillsError):
    """Raised when a skill file cannot be fetched from any source."""

    def __init__(
        self,
        path: str,
        status_code: int | None = None,
        reason: str = "",
        url: str | None = None,
    ):
        self.path = path
        self.status_code = status_code
        self.reason = reason
        self.url = url
        detail = f"HTTP {status_code}" if status_code is not None else "network error"
        if reason:
            detail = f"{detail}: {reason}"
        super().__init__(f"Failed to fetch {path} from {url or 'raw content source'} ({detail})")


class ArchiveError(EconSkillsError):
    """Raised when the skills archive cannot be built or written."""


class ConfigNotFoundError(EconSkillsError):
    """Raised when econskills.toml is not found."""


class ConfigParseError(EconSkillsError):
    """Raised when econskills.toml cannot be parsed."""


class ConfigValidationError(EconSkillsError):
    """Raised when econskills.toml contains invalid configuration."""


class NotAGitRepositoryError(EconSkillsError):
    """Raised when hooks are installed outside a git repository."""


class HooksNotFoundError(EconSkillsError):
    """Raised when the hooks source directory doesn't exist."""
