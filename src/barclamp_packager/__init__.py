"""Barclamp Packager.

This package generates native packaging metadata (an RPM spec file,
or Debian control and rules files) for a crowbar barclamp from its
crowbar.yml manifest, validates the barclamp's data bags against
their schemas, and runs the native build tool.
"""

# Core library interface
from .config import PackagingConfig
from .pipeline import PackagingPipeline
from .registry import PackagerRegistry
from .renderer import TemplateRenderer
from .packagers import Packager, ProcessRunner, SubprocessRunner

# Core utilities
from .core import Manifest, RenderContext, ValidationIssue
from .core import load_manifest, make_schemas, resolve_dependencies, validate_bags
from .core import validate_component

# CLI interface
from .cli import main

__version__ = "0.1.0"

# Auto-discover and register all package types
PackagerRegistry.discover_platforms()

__all__ = [
    # Primary library interface
    "PackagingPipeline",
    "PackagerRegistry",
    "PackagingConfig",
    "Packager",
    "ProcessRunner",
    "SubprocessRunner",
    "TemplateRenderer",
    # Core utilities
    "Manifest",
    "RenderContext",
    "ValidationIssue",
    "load_manifest",
    "make_schemas",
    "resolve_dependencies",
    "validate_bags",
    "validate_component",
    # CLI
    "main",
]
