"""RPM platform for the packaging pipeline."""

from ...config import PackagingConfig
from ...registry import PackagerRegistry
from ...renderer import TemplateRenderer
from .packager import RpmPackager, spec_filename


def _create_rpm_packager(
    config: PackagingConfig, renderer: TemplateRenderer | None = None, **kwargs
) -> RpmPackager:
    """Factory function for creating RPM packagers."""
    return RpmPackager(config, renderer)


# Auto-register at module import
PackagerRegistry.register_factory('rpm', _create_rpm_packager)

__all__ = ["RpmPackager", "spec_filename"]
