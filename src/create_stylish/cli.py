"""Command-line interface for create-stylish."""

import logging
import os
from pathlib import Path

import click
from rich.logging import RichHandler
from rich.markup import escape

from create_stylish import __version__
from create_stylish.config import load_config
from create_stylish.console import console
from create_stylish.errors import (
    CommandError,
    ConfigError,
    InvalidTemplateError,
    ProjectExistsError,
    ScaffoldError,
)
from create_stylish.package_managers import USER_AGENT_ENV, detect_package_manager
from create_stylish.pipeline import ScaffoldOptions, scaffold
from create_stylish.reporter import log_error, show_templates
from create_stylish.templates import DEFAULT_TEMPLATE, get_template_names, validate_template

logger = logging.getLogger(__name__)

PROG_NAME = "create-stylish"


def _configure_logging(verbose: bool) -> None:
    """Route package logs through Rich; debug output only with --verbose."""
    package_logger = logging.getLogger("create_stylish")
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not package_logger.handlers:
        package_logger.addHandler(RichHandler(console=console, show_path=False))


def _print_help_hint() -> None:
    console.print(f"Run [cyan]{PROG_NAME} --help[/cyan] to see all options.")


def _print_missing_app_name() -> None:
    log_error("Please specify the project directory:")
    console.print(f"  [cyan]{PROG_NAME}[/cyan] [green]<app-name>[/green]")
    console.print()
    console.print("For example:")
    console.print(f"  [cyan]{PROG_NAME}[/cyan] [green]stylish-app[/green]")
    console.print()
    _print_help_hint()


def _resolve_app_name(args: tuple[str, ...]) -> str | None:
    """Pick the app name from positional arguments, prompting if absent.

    Unknown options are passed through as arguments, so anything that
    looks like a flag is skipped.
    """
    for arg in args:
        if not arg.startswith("-"):
            return arg
    name = click.prompt("What is your project named?", default="", show_default=False)
    return name.strip() or None


def version_callback(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    """Print version and exit."""
    if not value or ctx.resilient_parsing:
        return
    console.print(f"{PROG_NAME} [bold cyan]{__version__}[/bold cyan]")
    ctx.exit()


@click.command(
    name=PROG_NAME,
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED, metavar="[APP_NAME]")
@click.option(
    "--template",
    "-t",
    help=f"Template name: {', '.join(get_template_names())} (default: {DEFAULT_TEMPLATE}).",
)
@click.option(
    "--list-templates",
    is_flag=True,
    default=False,
    help="List available templates and exit.",
)
@click.option(
    "--verbose",
    is_flag=True,
    default=False,
    help="Show debug logging.",
)
@click.option(
    "--version",
    "-v",
    is_flag=True,
    callback=version_callback,
    expose_value=False,
    is_eager=True,
    help="Show version and exit.",
)
def main(
    args: tuple[str, ...],
    template: str | None,
    list_templates: bool,
    verbose: bool,
) -> None:
    """Create Stylish JavaScript web app."""
    _configure_logging(verbose)

    try:
        config = load_config()
    except ConfigError as e:
        log_error(escape(str(e)))
        raise SystemExit(1) from None
    logger.debug("Configuration: %s", config.to_dict())

    manager = detect_package_manager(os.environ.get(USER_AGENT_ENV))
    logger.debug("Detected package manager: %s", manager.name)

    if list_templates:
        show_templates(manager)
        return

    if template is not None:
        template_name = template
    else:
        template_name = config.default_template or DEFAULT_TEMPLATE
    try:
        resolved_template = validate_template(template_name)
    except InvalidTemplateError:
        log_error(f"Template [bold]{escape(template_name)}[/bold] is not valid")
        console.print()
        _print_help_hint()
        raise SystemExit(1) from None

    app_name = _resolve_app_name(args)
    if app_name is None:
        _print_missing_app_name()
        raise SystemExit(1)

    options = ScaffoldOptions(
        app_name=app_name,
        template=resolved_template,
        package_manager=manager,
        parent=Path.cwd(),
        config=config,
    )

    try:
        scaffold(options)
    except ProjectExistsError:
        log_error(
            f"The app name [bold]{escape(app_name)}[/bold] already exists in the "
            "current directory, please change app name."
        )
        raise SystemExit(1) from None
    except CommandError as e:
        log_error(escape(str(e)))
        raise SystemExit(1) from None
    except ScaffoldError as e:
        log_error(f"Run command failed: {escape(str(e))}")
        raise SystemExit(1) from None
