"""Dependency installation for scaffolded projects."""

import logging
from pathlib import Path

from create_stylish.errors import ProjectDirectoryError
from create_stylish.package_managers import PACKAGE_MANAGERS, PackageManager
from create_stylish.shell import run_command

logger = logging.getLogger(__name__)


def foreign_lockfiles(manager: PackageManager) -> list[str]:
    """Return lockfile names owned by managers other than manager."""
    return [
        lockfile
        for other in PACKAGE_MANAGERS
        if other != manager
        for lockfile in other.lockfiles
    ]


def remove_foreign_lockfiles(project_root: Path, manager: PackageManager) -> list[str]:
    """Delete lockfiles of other package managers from project_root.

    Returns the names of the lockfiles that were removed.
    """
    removed: list[str] = []
    for lockfile in foreign_lockfiles(manager):
        path = project_root / lockfile
        if path.is_file():
            try:
                path.unlink()
            except OSError as e:
                raise ProjectDirectoryError(f"Could not remove {path}: {e}") from e
            removed.append(lockfile)
            logger.debug("Removed stale lockfile %s", path)
    return removed


def install_dependencies(project_root: Path, manager: PackageManager) -> None:
    """Run the manager's install command in project_root.

    Output is streamed to the terminal.

    Raises:
        CommandError: If the install command fails.
    """
    run_command(manager.install_command(), cwd=project_root)
