"""npm package manager definition."""

from create_stylish.package_managers.base import PackageManager

NPM = PackageManager(
    name="npm",
    lockfiles=("package-lock.json",),
)
