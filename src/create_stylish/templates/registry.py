"""Supported templates and identifier validation."""

from create_stylish.errors import InvalidTemplateError
from create_stylish.templates.base import Template

DEFAULT_TEMPLATE = "next"

TEMPLATES: tuple[Template, ...] = (
    Template(name="next", label="stylish-next-app", directory="next-app"),
    Template(name="react", label="stylish-react-app", directory="react-app"),
    Template(name="vanilla", label="stylish-vanilla-app", directory="vanilla-app"),
    Template(
        name="ethereum", label="stylish-ethereum-dapp", directory="ethereum-dapp"
    ),
    Template(name="web", label="stylish-web-app", directory="web-app"),
    Template(
        name="pure-react", label="stylish-pure-react-app", directory="pure-react-app"
    ),
    Template(
        name="extension",
        label="stylish-extension",
        directory="extension",
        next_script="build",
    ),
)


def get_template_names() -> list[str]:
    """Return supported template identifiers in declaration order."""
    return [template.name for template in TEMPLATES]


def get_template_by_name(name: str) -> Template | None:
    """Find a template by its identifier (exact match)."""
    for template in TEMPLATES:
        if template.name == name:
            return template
    return None


def validate_template(name: str) -> Template:
    """Return the template for name, or raise InvalidTemplateError.

    This is a purely local lookup; nothing touches the filesystem or the
    network before it succeeds.
    """
    template = get_template_by_name(name)
    if template is None:
        raise InvalidTemplateError(name)
    return template
