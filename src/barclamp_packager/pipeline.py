"""Packaging pipeline for barclamps.

This module provides the main interface for turning a barclamp
source tree into a native package: load the manifest, validate data
bags, resolve dependencies, render packaging metadata and run the
native build tool.
"""

import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from .config import PackagingConfig
from .core.dependencies import resolve_dependencies
from .core.errors import ConfigurationError
from .core.manifest import load_manifest, utcnow
from .core.types import Manifest, RenderContext
from .core.validator import validate_component
from .packagers.base import Packager
from .packagers.process import ProcessRunner, SubprocessRunner


@dataclass
class RenderResult:
    """Outcome of the metadata generation steps."""

    manifest: Manifest
    context: RenderContext
    artifacts: list[Path] = field(default_factory=list)


def make_render_context(
    manifest: Manifest,
    dependencies: list[str],
    package_type: str,
    config: PackagingConfig,
) -> RenderContext:
    """Collect the names exposed to packaging templates."""
    barclamp = manifest.raw.get("barclamp", {})
    return RenderContext(
        name=manifest.name,
        display=manifest.display,
        pkg=manifest.package_name,
        version=manifest.version,
        requires=dependencies,
        package_type=package_type,
        barclamp=dict(barclamp),
        crowbar_dir=str(config.crowbar_dir),
    )


class PackagingPipeline:
    """Main interface for barclamp packaging.

    Every step runs to completion or raises before the next one
    starts. Errors propagate to the caller, which decides how the
    process ends.

    Example:
        >>> config = PackagingConfig.from_env()
        >>> packager = PackagerRegistry.create_packager('rpm', config=config)
        >>> pipeline = PackagingPipeline(config, packager)
        >>> status = pipeline.run(Path('barclamps/nova'), Path('/tmp/out'))
    """

    def __init__(
        self,
        config: PackagingConfig,
        packager: Packager,
        runner: ProcessRunner | None = None,
        now: Callable[[], datetime] = utcnow,
        verbose: bool = False,
    ):
        """Initialize the pipeline.

        Args:
            config: Shared packaging configuration
            packager: Packager for the requested package type
            runner: Runs the native build tool (defaults to SubprocessRunner)
            now: Clock used for the package version
            verbose: Print progress messages to stderr
        """
        self.config = config
        self.packager = packager
        self.runner = runner or SubprocessRunner()
        self.now = now
        self.verbose = verbose

    def _log(self, message: str) -> None:
        if self.verbose:
            print(message, file=sys.stderr)

    def generate_metadata(self, component_dir: Path, destination: Path) -> RenderResult:
        """Load, validate, resolve and render; stop short of building.

        The barclamp's name is taken from the component directory's
        base name and must match the manifest.

        Raises:
            ConfigurationError: If destination is not a directory
            ManifestError: If the manifest is missing or names another barclamp
            SchemaError: If a schema is invalid
            DataValidationError: If a data bag doesn't match its schema
            TemplateError: If a template is missing or fails to render
        """
        if not destination.is_dir():
            raise ConfigurationError(f"Destination is not a directory: {destination}")

        component_dir = component_dir.resolve()
        package_type = self.packager.package_type

        self._log(f"Loading manifest from {component_dir}")
        manifest = load_manifest(component_dir, component_dir.name, now=self.now)

        self._log("Validating data bags against schemas...")
        validate_component(component_dir)

        dependencies = resolve_dependencies(manifest, package_type)
        context = make_render_context(manifest, dependencies, package_type, self.config)

        self._log(f"Rendering {package_type} metadata for {context.pkg} {context.version}")
        artifacts = self.packager.render(component_dir, context)
        for artifact in artifacts:
            self._log(f"Wrote {artifact}")

        return RenderResult(manifest=manifest, context=context, artifacts=artifacts)

    def run(self, component_dir: Path, destination: Path) -> int:
        """Generate metadata and build the package.

        Returns:
            Exit status of the native build tool

        Raises:
            PackagingError: If any step before the build fails
            BuildError: If the build tool cannot be started
        """
        result = self.generate_metadata(component_dir, destination)
        component_dir = component_dir.resolve()

        command = self.packager.build_command(component_dir, destination, result.context)
        self._log(f"Running: {' '.join(command)}")
        status = self.runner.run(command, component_dir)

        if status == 0:
            for built in self.packager.collect(component_dir, destination, result.context):
                self._log(f"Built {built}")

        return status
