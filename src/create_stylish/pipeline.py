"""The provisioning pipeline that turns a template into a new project."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import httpx
from rich.markup import escape

from create_stylish.config import DEFAULT_CONFIG, StylishConfig
from create_stylish.console import console
from create_stylish.git import commit_count, current_branch, initialize_repository
from create_stylish.package_managers import PackageManager
from create_stylish.package_managers.installer import (
    install_dependencies,
    remove_foreign_lockfiles,
)
from create_stylish.project import (
    MANIFEST_FILENAME,
    create_project_directory,
    rewrite_manifest,
)
from create_stylish.reporter import log_info, log_warning, progress, show_completion
from create_stylish.templates import Template, fetch_template

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScaffoldOptions:
    """Everything a single scaffolding run needs, resolved up front.

    The template must already be validated; the package manager is
    detected once by the caller and reused by every step.
    """

    app_name: str
    template: Template
    package_manager: PackageManager
    parent: Path
    config: StylishConfig = DEFAULT_CONFIG


def scaffold(options: ScaffoldOptions, client: httpx.Client | None = None) -> Path:
    """Run every provisioning step in order and return the project root.

    Any step's failure raises a ScaffoldError subclass and skips the
    remaining steps. A partially provisioned directory is left in place.
    """
    template = options.template
    manager = options.package_manager

    project_root = options.parent / options.app_name
    log_info(
        f"Creating a new [cyan]{template.label}[/cyan] in "
        f"[green]{escape(str(project_root.absolute()))}[/green]"
    )
    project_root = create_project_directory(options.parent, options.app_name)

    with progress("Downloading template...", "Template downloaded successfully!"):
        fetch_template(template, project_root, options.config, client=client)
    rewrite_manifest(project_root / MANIFEST_FILENAME, options.app_name)

    for lockfile in remove_foreign_lockfiles(project_root, manager):
        log_warning(f"Removed {lockfile}, it is not used by {manager.name}")

    with progress(
        f"Installing dependencies with [cyan italic]{manager.name}[/cyan italic]...",
        "Dependencies installed",
        spinner=False,
    ):
        install_dependencies(project_root, manager)

    console.print()
    with progress("Initializing git repository...", "Git repository initialized"):
        initialize_repository(project_root)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Repository has %d commit(s) on %s",
            commit_count(project_root),
            current_branch(project_root),
        )

    show_completion(options.app_name, template, manager)
    return project_root

