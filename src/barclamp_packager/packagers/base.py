"""Base abstractions for native packagers.

This module defines the interface every package type ('rpm', 'deb')
implements to integrate with the packaging pipeline.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from ..config import PackagingConfig
from ..core.types import RenderContext
from ..renderer import TemplateRenderer


class Packager(ABC):
    """Abstract base class for all package types.

    A packager knows which templates make up its packaging metadata,
    where the rendered files go, and which native command builds the
    package from them.
    """

    package_type: str = ""

    def __init__(self, config: PackagingConfig, renderer: TemplateRenderer | None = None):
        """Initialize the packager.

        Args:
            config: Shared packaging configuration
            renderer: Template renderer (defaults to a new TemplateRenderer)
        """
        self.config = config
        self.renderer = renderer or TemplateRenderer()

    @abstractmethod
    def render(self, component_dir: Path, context: RenderContext) -> list[Path]:
        """Render the packaging metadata into the component directory.

        Args:
            component_dir: Barclamp source tree
            context: Names available to the templates

        Returns:
            Paths of the files written

        Raises:
            TemplateError: If a template is missing or fails to render
        """
        pass

    @abstractmethod
    def build_command(
        self, component_dir: Path, destination: Path, context: RenderContext
    ) -> list[str]:
        """Return the native build command, run from component_dir."""
        pass

    def collect(self, component_dir: Path, destination: Path, context: RenderContext) -> list[Path]:
        """Move build results into destination after a successful build.

        The default does nothing, for tools that write to destination
        directly.
        """
        return []
