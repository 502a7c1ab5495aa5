"""Bun package manager definition."""

from create_stylish.package_managers.base import PackageManager

BUN = PackageManager(
    name="bun",
    lockfiles=("bun.lockb", "bun.lock"),
)
