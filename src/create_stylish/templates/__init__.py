"""Template definitions, validation and fetching."""

from create_stylish.templates.base import Template
from create_stylish.templates.fetcher import (
    download_archive,
    extract_template,
    fetch_template,
)
from create_stylish.templates.registry import (
    DEFAULT_TEMPLATE,
    TEMPLATES,
    get_template_by_name,
    get_template_names,
    validate_template,
)

__all__ = [
    "DEFAULT_TEMPLATE",
    "TEMPLATES",
    "Template",
    "download_archive",
    "extract_template",
    "fetch_template",
    "get_template_by_name",
    "get_template_names",
    "validate_template",
]
