"""Base template definition."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Template:
    """Definition of a starter template in the template kit.

    Templates live under ``templates/<directory>/`` in the kit archive.
    """

    name: str  # identifier passed to --template, e.g. "next"
    label: str  # e.g. "stylish-next-app"
    directory: str  # kit subdirectory, e.g. "next-app"
    next_script: str = "dev"  # package script suggested after install

    @property
    def archive_path(self) -> str:
        """Path of this template's directory below the kit root."""
        return f"templates/{self.directory}"
