"""Console output: status badges, step progress and completion message."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from rich.markup import escape
from rich.table import Table

from create_stylish.console import console
from create_stylish.package_managers import PackageManager
from create_stylish.templates import TEMPLATES, Template


def _badge(label: str, style: str, message: str) -> None:
    console.print(f"[{style}]{label}[/] {message}")


def log_info(message: str) -> None:
    _badge("  INFO   ", "bold white on blue", message)


def log_process(message: str) -> None:
    _badge(" PROCESS ", "bold black on yellow", message)


def log_success(message: str) -> None:
    _badge(" SUCCESS ", "bold white on green", message)


def log_warning(message: str) -> None:
    _badge(" WARNING ", "bold black on yellow", message)


def log_error(message: str) -> None:
    _badge("  ERROR  ", "bold white on red", message)


@contextmanager
def progress(message: str, done: str, spinner: bool = True) -> Iterator[None]:
    """Show message while the block runs, then a success or failure line.

    Pass spinner=False when the block streams subprocess output to the
    terminal, which would otherwise fight with the spinner for the line.
    """
    log_process(message)
    try:
        if spinner:
            with console.status(f"[yellow]{message}[/yellow]", spinner="dots"):
                yield
        else:
            yield
    except BaseException:
        console.print(f"[red]✗[/red] {message.rstrip('.')} failed")
        raise
    console.print(f"[green]✓[/green] {done}")


def next_step_command(template: Template, manager: PackageManager) -> str:
    """Return the command a user runs first in their new project."""
    return manager.run_command(template.next_script)


def show_completion(app_name: str, template: Template, manager: PackageManager) -> None:
    """Print the final instructions for a successfully scaffolded project."""
    log_success("All Done!")
    console.print("\nRun the following commands to get started:")
    console.print(f"  [cyan]cd[/cyan] {escape(app_name)}")
    console.print(f"  [cyan]{next_step_command(template, manager)}[/cyan]")
    console.print()


def show_templates(manager: PackageManager) -> None:
    """Print a table of the supported templates."""
    table = Table(title="Available templates")
    table.add_column("Template", style="cyan")
    table.add_column("Project")
    table.add_column("Next step", style="dim")
    for template in TEMPLATES:
        table.add_row(template.name, template.label, next_step_command(template, manager))
    console.print(table)
