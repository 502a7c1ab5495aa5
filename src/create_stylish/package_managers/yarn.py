"""Yarn package manager definition."""

from create_stylish.package_managers.base import PackageManager

YARN = PackageManager(
    name="yarn",
    lockfiles=("yarn.lock",),
)
