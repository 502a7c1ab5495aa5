"""pnpm package manager definition."""

from create_stylish.package_managers.base import PackageManager

PNPM = PackageManager(
    name="pnpm",
    lockfiles=("pnpm-lock.yaml",),
)
