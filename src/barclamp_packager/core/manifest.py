"""Loading of barclamp manifests.

A barclamp describes itself in ``crowbar.yml``::

    barclamp:
      name: foo
      display: Foo
      requires:
        - bar
    rpms:
      required_pkgs:
        - openssl
    debs:
      required_pkgs:
        - libssl-dev
"""

from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import yaml

from .errors import ManifestFormatError, ManifestNotFoundError, NameMismatchError
from .types import BASE_DEPENDENCY, Manifest

MANIFEST_FILENAME = "crowbar.yml"

# Manifest section holding the required_pkgs list for each package type
PACKAGE_SECTIONS = {"rpm": "rpms", "deb": "debs"}

VERSION_FORMAT = "%Y%m%d.%H%M%S"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def make_version(now: datetime) -> str:
    """Format a timestamp as a package version (YYYYMMDD.HHMMSS, UTC)."""
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return now.strftime(VERSION_FORMAT)


def add_base_dependency(requires: list[str]) -> list[str]:
    """Make the crowbar framework dependency appear exactly once.

    It is appended when absent. When declared more than once, the first
    entry is kept and later copies are dropped.

    Args:
        requires: Dependency list to update in place

    Returns:
        The same list, for chaining
    """
    if BASE_DEPENDENCY not in requires:
        requires.append(BASE_DEPENDENCY)
        return requires

    first = requires.index(BASE_DEPENDENCY)
    requires[first + 1:] = [dep for dep in requires[first + 1:] if dep != BASE_DEPENDENCY]
    return requires


def _string_list(value: Any, where: str, source: Path) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ManifestFormatError(f"{source}: '{where}' must be a list of strings")
    return list(value)


def _section(document: dict[str, Any], key: str, source: Path) -> dict[str, Any]:
    section = document.get(key)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ManifestFormatError(f"{source}: '{key}' must be a mapping")
    return section


def read_manifest_document(path: Path) -> dict[str, Any]:
    """Parse a manifest file into a dictionary.

    Raises:
        ManifestNotFoundError: If the file doesn't exist
        ManifestFormatError: If the file is not a YAML mapping
    """
    if not path.is_file():
        raise ManifestNotFoundError(path)

    try:
        with path.open("r", encoding="utf-8") as f:
            document = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ManifestFormatError(f"Invalid YAML in {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ManifestFormatError(f"{path} is not valid UTF-8: {e}") from e

    if not isinstance(document, dict):
        raise ManifestFormatError(f"{path}: manifest must be a mapping")
    return document


def load_manifest(
    path: Path,
    expected_name: str,
    now: Callable[[], datetime] = utcnow,
) -> Manifest:
    """Load and check a barclamp manifest.

    Args:
        path: Barclamp directory, or the manifest file itself
        expected_name: Name the manifest must declare
        now: Clock used to compute the package version

    Returns:
        Manifest with the implicit base dependency appended

    Raises:
        ManifestNotFoundError: If the manifest file is absent
        ManifestFormatError: If the manifest is malformed
        NameMismatchError: If the declared name differs from expected_name
    """
    manifest_path = path / MANIFEST_FILENAME if path.is_dir() else path
    document = read_manifest_document(manifest_path)

    barclamp = document.get("barclamp")
    if not isinstance(barclamp, dict):
        raise ManifestFormatError(f"{manifest_path}: missing 'barclamp' section")

    name = barclamp.get("name")
    if not isinstance(name, str) or not name:
        raise ManifestFormatError(f"{manifest_path}: missing 'barclamp.name'")

    if name != expected_name:
        raise NameMismatchError(name, expected_name)

    requires = _string_list(barclamp.get("requires"), "barclamp.requires", manifest_path)
    add_base_dependency(requires)

    package_requires = {}
    for package_type, key in PACKAGE_SECTIONS.items():
        section = _section(document, key, manifest_path)
        package_requires[package_type] = _string_list(
            section.get("required_pkgs"), f"{key}.required_pkgs", manifest_path
        )

    return Manifest(
        name=name,
        display=str(barclamp.get("display") or name),
        requires=requires,
        package_requires=package_requires,
        version=make_version(now()),
        path=manifest_path,
        raw=document,
    )
