"""Base package manager definition."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PackageManager:
    """Definition of a JavaScript package manager."""

    name: str  # also the CLI command and the user agent prefix
    lockfiles: tuple[str, ...]
    install_args: tuple[str, ...] = ("install",)

    def install_command(self) -> list[str]:
        """Return the argv that installs a project's dependencies."""
        return [self.name, *self.install_args]

    def run_command(self, script: str) -> str:
        """Return the shell command that runs a package.json script."""
        return f"{self.name} run {script}"

    def matches(self, user_agent: str) -> bool:
        """Check if a user agent string was produced by this manager."""
        return user_agent.startswith(self.name)
