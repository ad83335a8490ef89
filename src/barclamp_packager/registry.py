"""Packager registry for factory-based packager creation.

This module provides a central registry for packager factories,
enabling package-type-agnostic pipeline creation and automatic
platform discovery.
"""

import importlib
from pathlib import Path
from typing import TYPE_CHECKING, Callable

from .core.errors import UnsupportedPackageTypeError

if TYPE_CHECKING:
    from .packagers.base import Packager


class PackagerRegistry:
    """Central registry for packager factories.

    Platforms register themselves when imported, and the registry
    can automatically discover all available platforms.
    """

    _factories: dict[str, Callable[..., "Packager"]] = {}

    @classmethod
    def register_factory(cls, name: str, factory: Callable[..., "Packager"]) -> None:
        """Register a factory function for creating packagers.

        Args:
            name: Package type (e.g., 'rpm', 'deb')
            factory: Callable that creates a Packager instance

        Example:
            >>> def create_rpm_packager(config, **kwargs) -> RpmPackager:
            ...     return RpmPackager(config, **kwargs)
            >>> PackagerRegistry.register_factory('rpm', create_rpm_packager)
        """
        cls._factories[name] = factory

    @classmethod
    def create_packager(cls, package_type: str, **kwargs) -> "Packager":
        """Create a packager for a registered package type.

        Args:
            package_type: Name of the registered package type
            **kwargs: Arguments passed to the packager factory

        Returns:
            Packager for the requested package type

        Raises:
            UnsupportedPackageTypeError: If package_type is not registered
        """
        if package_type not in cls._factories:
            available = ', '.join(sorted(cls._factories)) or 'none'
            raise UnsupportedPackageTypeError(
                f"Unknown package type: '{package_type}'. Available package types: {available}"
            )

        return cls._factories[package_type](**kwargs)

    @classmethod
    def list_package_types(cls) -> list[str]:
        """List all registered package types.

        Example:
            >>> PackagerRegistry.list_package_types()
            ['deb', 'rpm']
        """
        return sorted(cls._factories)

    @classmethod
    def discover_platforms(cls) -> None:
        """Import every platform package under platforms/.

        Platforms register themselves via their __init__.py files.
        """
        platforms_dir = Path(__file__).parent / 'platforms'

        for platform_path in sorted(platforms_dir.iterdir()):
            if not (platform_path / '__init__.py').exists():
                continue

            importlib.import_module(
                f'.platforms.{platform_path.name}',
                package='barclamp_packager'
            )
