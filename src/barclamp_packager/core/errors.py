"""Error types raised while packaging a barclamp.

Every error carries the process exit code the CLI uses when it
reports the failure. Library code only raises these; deciding to
terminate the process is left to the command-line entry point.
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import ValidationIssue


class PackagingError(Exception):
    """Base type for all packaging failures."""

    exit_code = 1


class ConfigurationError(PackagingError):
    """Raised when the environment or destination is misconfigured."""

    exit_code = 3


class ManifestError(PackagingError):
    """Base type for manifest loading failures."""

    exit_code = 4


class ManifestNotFoundError(ManifestError):
    """Raised when the component has no manifest file."""

    def __init__(self, path: object) -> None:
        super().__init__(f"Manifest not found: {path}")
        self.path = path


class ManifestFormatError(ManifestError):
    """Raised when the manifest cannot be parsed or lacks required keys."""


class NameMismatchError(ManifestError):
    """Raised when the manifest declares a different barclamp name."""

    def __init__(self, declared: str, expected: str) -> None:
        super().__init__(
            f"Barclamp name mismatch: manifest declares '{declared}', expected '{expected}'"
        )
        self.declared = declared
        self.expected = expected


class UnsupportedPackageTypeError(PackagingError, ValueError):
    """Raised for a package type with no registered packager."""

    exit_code = 2


class _IssueError(PackagingError):
    """Error that aggregates every issue found in a validation pass."""

    summary = "Validation failed"

    def __init__(self, issues: Sequence["ValidationIssue"]) -> None:
        self.issues = list(issues)
        files = sorted({str(issue.file) for issue in self.issues})
        super().__init__(
            f"{self.summary}: {len(self.issues)} error(s) in {', '.join(files) or 'no files'}"
        )


class SchemaError(_IssueError):
    """Raised when a schema file fails validation against the meta-schema."""

    exit_code = 5
    summary = "Invalid schema"


class DataValidationError(_IssueError):
    """Raised when a data bag fails validation against its schema."""

    exit_code = 6
    summary = "Invalid data bag"


class TemplateError(PackagingError):
    """Base type for template rendering failures."""

    exit_code = 7


class MissingTemplateError(TemplateError):
    """Raised when a template file does not exist."""

    def __init__(self, path: object) -> None:
        super().__init__(f"Template not found: {path}")
        self.path = path


class TemplateRenderError(TemplateError):
    """Raised when a template references an unknown name or is malformed."""


class BuildError(PackagingError):
    """Raised when the native packaging tool cannot be run."""

    exit_code = 127


__all__ = [
    "BuildError",
    "ConfigurationError",
    "DataValidationError",
    "ManifestError",
    "ManifestFormatError",
    "ManifestNotFoundError",
    "MissingTemplateError",
    "NameMismatchError",
    "PackagingError",
    "SchemaError",
    "TemplateError",
    "TemplateRenderError",
    "UnsupportedPackageTypeError",
]
