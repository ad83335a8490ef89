"""Dependency list construction for native packages."""

from .errors import UnsupportedPackageTypeError
from .manifest import PACKAGE_SECTIONS, add_base_dependency
from .types import Manifest

# Substitution variables filled in by dpkg-shlibdeps / debhelper at build time
DEB_SHLIBS_DEPENDS = "${shlibs:Depends}"
DEB_MISC_DEPENDS = "${misc:Depends}"

EXTRA_DEPENDENCIES: dict[str, list[str]] = {
    "rpm": [],
    "deb": [DEB_SHLIBS_DEPENDS, DEB_MISC_DEPENDS],
}


def resolve_dependencies(manifest: Manifest, package_type: str) -> list[str]:
    """Compute the final dependency list for a package.

    The list is the manifest's requires (which already hold the crowbar
    base dependency), then the package type's required_pkgs, then any
    placeholders the native toolchain expands. Order is kept and only
    repeats of the base dependency are removed.

    Args:
        manifest: Loaded barclamp manifest
        package_type: 'rpm' or 'deb'

    Returns:
        New list; the manifest is left unchanged

    Raises:
        UnsupportedPackageTypeError: If package_type is unknown
    """
    if package_type not in PACKAGE_SECTIONS:
        raise UnsupportedPackageTypeError(f"Unsupported package type: '{package_type}'")

    dependencies = list(manifest.requires)
    dependencies.extend(manifest.package_requires.get(package_type, []))
    add_base_dependency(dependencies)
    dependencies.extend(EXTRA_DEPENDENCIES[package_type])
    return dependencies
