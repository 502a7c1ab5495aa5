"""Configuration schema for create-stylish."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import Any

from create_stylish.errors import ConfigError

DEFAULT_KIT_REPOSITORY = "StyleList94/stylish-template-kit"
DEFAULT_KIT_REF = "v1.0.0"
DEFAULT_TIMEOUT = 30.0

TARBALL_URL = "https://codeload.github.com/{repository}/tar.gz/refs/tags/{ref}"


@dataclass(frozen=True)
class StylishConfig:
    """create-stylish configuration schema.

    None values indicate "not set" and are filled in from lower-precedence
    layers by merge().
    """

    kit_repository: str | None = None
    kit_ref: str | None = None
    default_template: str | None = None
    timeout: float | None = None

    @property
    def tarball_url(self) -> str:
        """Download URL of the pinned template kit archive."""
        return TARBALL_URL.format(
            repository=self.kit_repository or DEFAULT_KIT_REPOSITORY,
            ref=self.kit_ref or DEFAULT_KIT_REF,
        )

    def merge(self, other: StylishConfig) -> StylishConfig:
        """Return a new config with non-None fields from `other` overlaid."""
        values = {}
        for f in fields(self):
            override = getattr(other, f.name)
            values[f.name] = override if override is not None else getattr(self, f.name)
        return StylishConfig(**values)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, omitting unset values."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> StylishConfig:
        """Create from a dictionary. Unknown keys are ignored."""
        timeout_raw = data.get("timeout")
        timeout: float | None = None
        if timeout_raw is not None:
            try:
                timeout = float(timeout_raw)
            except (TypeError, ValueError):
                raise ConfigError(f"Invalid timeout: {timeout_raw!r}") from None
            if not math.isfinite(timeout) or timeout <= 0:
                raise ConfigError(f"Timeout must be a positive number: {timeout_raw!r}")

        def _str(key: str) -> str | None:
            value = data.get(key)
            return str(value) if value is not None else None

        return cls(
            kit_repository=_str("kit_repository"),
            kit_ref=_str("kit_ref"),
            default_template=_str("default_template"),
            timeout=timeout,
        )


DEFAULT_CONFIG = StylishConfig(
    kit_repository=DEFAULT_KIT_REPOSITORY,
    kit_ref=DEFAULT_KIT_REF,
    default_template="next",
    timeout=DEFAULT_TIMEOUT,
)
