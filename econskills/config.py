"""Configuration management for econskills.toml."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomlkit
from tomlkit.exceptions import TOMLKitError

from econskills.constants import (
    DEFAULT_TIMEOUT,
    DEPLOYMENT_SUBPATH,
    GITHUB_BRANCH,
    GITHUB_REPO,
    SITE_ORIGIN,
)
from econskills.exceptions import ConfigNotFoundError, ConfigParseError, ConfigValidationError
from econskills.fetcher.source import RawContentSource

CONFIG_FILENAME = "econskills.toml"


def _table(data: dict[str, Any], name: str) -> dict[str, Any]:
    value = data.get(name, {})
    if not isinstance(value, dict):
        raise ConfigValidationError(
            f"[{name}] must be a table, got {type(value).__name__}"
        )
    return value


def _string(table: dict[str, Any], section: str, key: str, default: str | None) -> str | None:
    value = table.get(key, default)
    if value is not None and not isinstance(value, str):
        raise ConfigValidationError(f"{section}.{key} must be a string")
    return None if value is None else str(value)


@dataclass
class SiteConfig:
    """Configuration from econskills.toml.

    Example:
        [site]
        origin = "https://meleantonio.github.io"
        base_path = "/awesome-econ-ai-stuff"

        [source]
        repo = "meleantonio/awesome-econ-ai-stuff"
        branch = "main"

        [download]
        timeout = 30.0
        output_dir = "downloads"

        [catalog]
        content_dir = "_skills"
    """

    path: Path | None = None
    origin: str = SITE_ORIGIN
    deployment_subpath: str = DEPLOYMENT_SUBPATH
    base_path: str | None = None  # None means detect from the page
    repo: str = GITHUB_REPO
    branch: str = GITHUB_BRANCH
    timeout: float = DEFAULT_TIMEOUT
    output_dir: str = "."
    content_dir: str | None = None

    @property
    def source(self) -> RawContentSource:
        return RawContentSource(repo=self.repo, branch=self.branch)

    def resolve_path(self, value: str) -> Path:
        """Resolve a configured path relative to the config file."""
        path = Path(value)
        if path.is_absolute() or self.path is None:
            return path
        return self.path.parent / path

    @classmethod
    def load(cls, path: Path) -> "SiteConfig":
        """Load configuration from econskills.toml.

        Args:
            path: Path to the econskills.toml file

        Returns:
            Parsed SiteConfig

        Raises:
            ConfigNotFoundError: If the file doesn't exist
            ConfigParseError: If the file cannot be parsed
            ConfigValidationError: If the configuration is invalid
        """
        if not path.exists():
            raise ConfigNotFoundError(f"Config file not found: {path}")

        try:
            data = tomlkit.parse(path.read_text(encoding="utf-8")).unwrap()
        except TOMLKitError as e:
            raise ConfigParseError(f"Failed to parse {path}: {e}")

        return cls._from_dict(path, data)

    @classmethod
    def _from_dict(cls, path: Path | None, data: dict[str, Any]) -> "SiteConfig":
        site = _table(data, "site")
        source = _table(data, "source")
        download = _table(data, "download")
        catalog = _table(data, "catalog")

        timeout = download.get("timeout", DEFAULT_TIMEOUT)
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            raise ConfigValidationError("download.timeout must be a positive number")

        repo = _string(source, "source", "repo", GITHUB_REPO)
        if repo.count("/") != 1 or repo.startswith("/") or repo.endswith("/"):
            raise ConfigValidationError(
                f"source.repo must look like 'owner/name', got '{repo}'"
            )

        return cls(
            path=path,
            origin=_string(site, "site", "origin", SITE_ORIGIN),
            deployment_subpath=_string(site, "site", "deployment_subpath", DEPLOYMENT_SUBPATH),
            base_path=_string(site, "site", "base_path", None),
            repo=repo,
            branch=_string(source, "source", "branch", GITHUB_BRANCH),
            timeout=float(timeout),
            output_dir=_string(download, "download", "output_dir", "."),
            content_dir=_string(catalog, "catalog", "content_dir", None),
        )

    def to_toml(self) -> str:
        """Render the configuration as a commented TOML document."""
        doc = tomlkit.document()
        doc.add(tomlkit.comment("econskills configuration"))

        site = tomlkit.table()
        site.add("origin", self.origin)
        site.add("deployment_subpath", self.deployment_subpath)
        if self.base_path is not None:
            site.add("base_path", self.base_path)
        doc.add("site", site)

        source = tomlkit.table()
        source.add("repo", self.repo)
        source.add("branch", self.branch)
        doc.add("source", source)

        download = tomlkit.table()
        download.add("timeout", self.timeout)
        download.add("output_dir", self.output_dir)
        doc.add("download", download)

        if self.content_dir is not None:
            catalog = tomlkit.table()
            catalog.add("content_dir", self.content_dir)
            doc.add("catalog", catalog)

        return tomlkit.dumps(doc)

    def save(self, path: Path | None = None) -> Path:
        """Save configuration to econskills.toml."""
        target = path or self.path or Path.cwd() / CONFIG_FILENAME
        target.write_text(self.to_toml(), encoding="utf-8")
        self.path = target
        return target


def find_config(start_path: Path | None = None) -> Path | None:
    """Return the nearest econskills.toml at or above start_path (cwd by default)."""
    current = (start_path or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_config(start_path: Path | None = None) -> SiteConfig:
    """Load econskills.toml if one is found, else return defaults."""
    existing = find_config(start_path)
    if existing is None:
        return SiteConfig()
    return SiteConfig.load(existing)
