"""Project directory provisioning."""

import logging
from pathlib import Path

from create_stylish.errors import ProjectDirectoryError, ProjectExistsError

logger = logging.getLogger(__name__)


def create_project_directory(parent: Path, app_name: str) -> Path:
    """Create parent/app_name and return its absolute path.

    The directory must not exist yet; an existing directory is never
    merged into or modified.

    Raises:
        ProjectExistsError: If the path already exists.
        ProjectDirectoryError: For any other filesystem failure.
    """
    project_root = (parent / app_name).absolute()
    try:
        project_root.mkdir()
    except FileExistsError:
        raise ProjectExistsError(app_name, project_root) from None
    except OSError as e:
        raise ProjectDirectoryError(str(e)) from e

    logger.debug("Created project directory %s", project_root)
    return project_root
