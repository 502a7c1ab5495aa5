"""Package manager definitions and detection."""

from create_stylish.package_managers.base import PackageManager
from create_stylish.package_managers.bun import BUN
from create_stylish.package_managers.npm import NPM
from create_stylish.package_managers.pnpm import PNPM
from create_stylish.package_managers.yarn import YARN

__all__ = [
    "BUN",
    "DEFAULT_PACKAGE_MANAGER",
    "NPM",
    "PACKAGE_MANAGERS",
    "PNPM",
    "PackageManager",
    "USER_AGENT_ENV",
    "YARN",
    "detect_package_manager",
]

# Set by npm, yarn, pnpm and bun for the processes they spawn
USER_AGENT_ENV = "npm_config_user_agent"

DEFAULT_PACKAGE_MANAGER = NPM

# Checked in order; the first matching prefix wins
PACKAGE_MANAGERS: tuple[PackageManager, ...] = (
    YARN,
    PNPM,
    BUN,
    NPM,
)


def detect_package_manager(user_agent: str | None) -> PackageManager:
    """Resolve the package manager that invoked this tool.

    Falls back to npm when the user agent is missing or unrecognized.
    """
    if not user_agent:
        return DEFAULT_PACKAGE_MANAGER
    for manager in PACKAGE_MANAGERS:
        if manager.matches(user_agent):
            return manager
    return DEFAULT_PACKAGE_MANAGER

