"""package.json rewriting for freshly scaffolded projects."""

import json
import logging
from pathlib import Path
from typing import Any

from create_stylish.errors import ManifestError

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "package.json"
INITIAL_VERSION = "0.1.0"

# Template-specific fields that do not carry over to the new project
DROPPED_FIELDS: tuple[str, ...] = ("description", "author")


def build_manifest(data: dict[str, Any], app_name: str) -> dict[str, Any]:
    """Return a copy of data with the project's name and initial version.

    Key order is preserved; name and version keep their original position
    when present.
    """
    manifest = {key: value for key, value in data.items() if key not in DROPPED_FIELDS}
    manifest["name"] = app_name
    manifest["version"] = INITIAL_VERSION
    return manifest


def rewrite_manifest(path: Path, app_name: str) -> dict[str, Any]:
    """Rewrite the manifest at path in place and return the new contents.

    Raises:
        ManifestError: If the file cannot be read, parsed or written.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise ManifestError(f"{path.name} not found in template") from None
    except (OSError, ValueError) as e:
        raise ManifestError(f"Failed to read {path.name}: {e}") from e

    if not isinstance(data, dict):
        raise ManifestError(f"{path.name} must contain a JSON object")

    manifest = build_manifest(data, app_name)
    try:
        path.write_text(
            json.dumps(manifest, indent=2, ensure_ascii=False) + "\n",
            encoding="utf-8",
        )
    except OSError as e:
        raise ManifestError(f"Failed to write {path.name}: {e}") from e

    logger.debug("Rewrote %s for %s", path, app_name)
    return manifest
