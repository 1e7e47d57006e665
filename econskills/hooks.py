"""Install the repository's git hooks from .github/hooks into .git/hooks."""

import logging
import shutil
import stat
from dataclasses import dataclass, field
from pathlib import Path

from econskills.exceptions import HooksNotFoundError, NotAGitRepositoryError

logger = logging.getLogger(__name__)

HOOKS_SOURCE_DIR = Path(".github") / "hooks"
HOOKS_DEST_DIR = Path(".git") / "hooks"
BACKUP_SUFFIX = ".bak"


@dataclass
class HookInstallResult:
    """Result of hook installation."""

    installed: list[str] = field(default_factory=list)
    backed_up: list[str] = field(default_factory=list)


def find_repo_root(start_path: Path | None = None) -> Path | None:
    """Find the git repository root by walking up from start_path."""
    current = (start_path or Path.cwd()).resolve()
    while True:
        if (current / ".git").is_dir():
            return current
        if current.parent == current:
            return None
        current = current.parent


def _make_executable(path: Path) -> None:
    mode = path.stat().st_mode
    path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)


def install_hooks(repo_root: Path) -> HookInstallResult:
    """
    Copy every hook in .github/hooks into .git/hooks and make it executable.

    An existing hook with the same name is copied to <hook>.bak first.

    Args:
        repo_root: Repository root directory

    Returns:
        HookInstallResult with installed and backed up hook names

    Raises:
        NotAGitRepositoryError: If repo_root has no .git directory
        HooksNotFoundError: If .github/hooks doesn't exist
    """
    if not (repo_root / ".git").is_dir():
        raise NotAGitRepositoryError(
            f"Not a git repository: {repo_root}. Run this from the repo root."
        )

    source_dir = repo_root / HOOKS_SOURCE_DIR
    if not source_dir.is_dir():
        raise HooksNotFoundError(f"Hooks source directory not found at {source_dir}")

    dest_dir = repo_root / HOOKS_DEST_DIR
    dest_dir.mkdir(parents=True, exist_ok=True)

    result = HookInstallResult()
    for hook in sorted(source_dir.iterdir()):
        if not hook.is_file():
            continue

        dest = dest_dir / hook.name
        if dest.is_file():
            shutil.copy2(dest, dest.with_name(dest.name + BACKUP_SUFFIX))
            result.backed_up.append(hook.name)
            logger.info("Hook '%s' already exists, backed up to %s%s", hook.name, hook.name, BACKUP_SUFFIX)

        shutil.copy2(hook, dest)
        _make_executable(dest)
        result.installed.append(hook.name)

    return result
