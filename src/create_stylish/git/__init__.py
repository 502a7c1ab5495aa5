"""Git repository initialization."""

from create_stylish.git.repository import (
    DEFAULT_BRANCH,
    INITIAL_COMMIT_MESSAGE,
    commit_count,
    current_branch,
    initialize_repository,
    remove_git_metadata,
)

__all__ = [
    "DEFAULT_BRANCH",
    "INITIAL_COMMIT_MESSAGE",
    "commit_count",
    "current_branch",
    "initialize_repository",
    "remove_git_metadata",
]
