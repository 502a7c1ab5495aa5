"""Exceptions raised while scaffolding a project."""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base exception for every scaffolding failure."""


class ConfigError(ScaffoldError):
    """Raised when the configuration file or environment is invalid."""


class InvalidTemplateError(ScaffoldError):
    """Raised when a template identifier is not in the supported set."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Template {name} is not valid")
        self.name = name


class ProjectExistsError(ScaffoldError):
    """Raised when the target project directory already exists."""

    def __init__(self, app_name: str, path: Path) -> None:
        super().__init__(f"{path} already exists")
        self.app_name = app_name
        self.path = path


class ProjectDirectoryError(ScaffoldError):
    """Raised when the project directory cannot be created or cleaned up."""


class TemplateFetchError(ScaffoldError):
    """Raised when the template archive cannot be downloaded or extracted."""


class ManifestError(ScaffoldError):
    """Raised when package.json cannot be read, parsed or written."""


class CommandError(ScaffoldError):
    """Raised when a shelled-out command fails."""

    def __init__(self, command: str, returncode: int | None, detail: str = "") -> None:
        message = f"Command failed: {command}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.command = command
        self.returncode = returncode
