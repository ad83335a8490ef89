"""Core utilities for barclamp packaging.

This package contains manifest loading, schema validation, dependency
resolution and the type and error definitions used across all
package types.
"""

from .dependencies import resolve_dependencies
from .errors import (
    BuildError,
    ConfigurationError,
    DataValidationError,
    ManifestError,
    ManifestFormatError,
    ManifestNotFoundError,
    MissingTemplateError,
    NameMismatchError,
    PackagingError,
    SchemaError,
    TemplateError,
    TemplateRenderError,
    UnsupportedPackageTypeError,
)
from .manifest import load_manifest
from .types import Manifest, RenderContext, ValidationIssue
from .validator import make_schemas, validate_bags, validate_component

__all__ = [
    "BuildError",
    "ConfigurationError",
    "DataValidationError",
    "Manifest",
    "ManifestError",
    "ManifestFormatError",
    "ManifestNotFoundError",
    "MissingTemplateError",
    "NameMismatchError",
    "PackagingError",
    "RenderContext",
    "SchemaError",
    "TemplateError",
    "TemplateRenderError",
    "UnsupportedPackageTypeError",
    "ValidationIssue",
    "load_manifest",
    "make_schemas",
    "resolve_dependencies",
    "validate_bags",
    "validate_component",
]
