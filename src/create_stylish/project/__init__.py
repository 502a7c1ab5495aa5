"""Project directory and manifest handling."""

from create_stylish.project.directory import create_project_directory
from create_stylish.project.manifest import (
    INITIAL_VERSION,
    MANIFEST_FILENAME,
    build_manifest,
    rewrite_manifest,
)

__all__ = [
    "INITIAL_VERSION",
    "MANIFEST_FILENAME",
    "build_manifest",
    "create_project_directory",
    "rewrite_manifest",
]
