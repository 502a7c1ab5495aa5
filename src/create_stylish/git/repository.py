"""Fresh git repository initialization for scaffolded projects."""

import logging
import shutil
import subprocess
from pathlib import Path

from create_stylish.errors import ProjectDirectoryError
from create_stylish.shell import run_command

logger = logging.getLogger(__name__)

INITIAL_COMMIT_MESSAGE = "initial commit"
DEFAULT_BRANCH = "main"


def remove_git_metadata(project_root: Path) -> bool:
    """Remove a .git directory or file inherited from the template.

    Returns True if something was removed.
    """
    git_path = project_root / ".git"
    try:
        if git_path.is_dir() and not git_path.is_symlink():
            shutil.rmtree(git_path)
        elif git_path.exists() or git_path.is_symlink():
            git_path.unlink()
        else:
            return False
    except OSError as e:
        raise ProjectDirectoryError(f"Could not remove {git_path}: {e}") from e
    logger.debug("Removed inherited git metadata at %s", git_path)
    return True


def initialize_repository(project_root: Path) -> None:
    """Create a single-commit repository on the default branch.

    Each step runs only if the previous one succeeded; nothing is rolled
    back on failure.

    Raises:
        CommandError: Naming the git command that failed.
    """
    remove_git_metadata(project_root)

    for args in (
        ["git", "init"],
        ["git", "add", "."],
        ["git", "commit", "-m", INITIAL_COMMIT_MESSAGE],
        ["git", "branch", "-m", DEFAULT_BRANCH],
    ):
        run_command(args, cwd=project_root, silent=True)


def current_branch(project_root: Path) -> str | None:
    """Return the checked-out branch name, or None if it cannot be resolved."""
    result = subprocess.run(
        ["git", "rev-parse", "--abbrev-ref", "HEAD"],
        cwd=project_root,
        capture_output=True,
        text=True,
    )
    if result.returncode != 0:
        return None
    return result.stdout.strip()


def commit_count(project_root: Path) -> int:
    """Return the number of commits reachable from HEAD, or 0 on error."""
    result = subprocess.run(
        ["git", "rev-list", "--count", "HEAD"],
        cwd=project_root,
        capture_output=True,
        text=True,
    )
    if result.returncode != 0:
        return 0

    try:
        return int(result.stdout.strip())
    except ValueError:
        return 0
