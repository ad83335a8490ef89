"""Debian platform for the packaging pipeline."""

from ...config import PackagingConfig
from ...registry import PackagerRegistry
from ...renderer import TemplateRenderer
from .packager import DEBIAN_FILES, DebPackager


def _create_deb_packager(
    config: PackagingConfig, renderer: TemplateRenderer | None = None, **kwargs
) -> DebPackager:
    """Factory function for creating Debian packagers."""
    return DebPackager(config, renderer)


# Auto-register at module import
PackagerRegistry.register_factory('deb', _create_deb_packager)

__all__ = ["DEBIAN_FILES", "DebPackager"]
