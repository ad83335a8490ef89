"""Type definitions for barclamp packaging.

This module defines the manifest loaded from ``crowbar.yml``, the
issues reported by schema validation, and the fixed set of names
exposed to packaging templates.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

# Every barclamp package name is this prefix plus the barclamp name
PACKAGE_PREFIX = "crowbar-barclamp-"

# The crowbar framework barclamp that every other barclamp depends on
BASE_DEPENDENCY = f"{PACKAGE_PREFIX}crowbar"


def package_name(barclamp_name: str) -> str:
    """Return the native package name for a barclamp."""
    return f"{PACKAGE_PREFIX}{barclamp_name}"


@dataclass
class Manifest:
    """A barclamp manifest (``crowbar.yml``).

    Attributes:
        name: Unique barclamp identifier
        display: Human-readable name
        requires: Declared dependencies plus the implicit base dependency
        package_requires: Package type ('rpm', 'deb') -> required_pkgs
        version: UTC timestamp captured at load time (YYYYMMDD.HHMMSS)
        path: Manifest file the data was read from
        raw: Complete parsed manifest document
    """

    name: str
    display: str
    requires: list[str] = field(default_factory=list)
    package_requires: dict[str, list[str]] = field(default_factory=dict)
    version: str = ""
    path: Path | None = None
    raw: dict[str, Any] = field(default_factory=dict)

    @property
    def package_name(self) -> str:
        return package_name(self.name)


@dataclass(frozen=True)
class ValidationIssue:
    """A single schema or data bag validation error."""

    file: Path
    line: int  # 1-based, 0 when unknown
    column: int  # 1-based, 0 when unknown
    path: str  # Slash-joined location within the document, "/" for the root
    message: str

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.column}: [{self.path}] {self.message}"


@dataclass(frozen=True)
class RenderContext:
    """Names available to packaging templates.

    Templates may reference only these fields; anything else is a
    rendering error.
    """

    name: str
    display: str
    pkg: str
    version: str
    requires: list[str]
    package_type: str
    barclamp: dict[str, Any]
    crowbar_dir: str

    def as_template_vars(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "display": self.display,
            "pkg": self.pkg,
            "version": self.version,
            "requires": list(self.requires),
            "package_type": self.package_type,
            "barclamp": self.barclamp,
            "crowbar_dir": self.crowbar_dir,
        }
