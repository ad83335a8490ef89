"""Runtime configuration for barclamp packaging."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .core.errors import ConfigurationError

# Names the directory holding shared packaging templates and install helpers
CROWBAR_DIR_VAR = "CROWBAR_DIR"

# Location of the RPM spec template below CROWBAR_DIR
RPM_SPEC_TEMPLATE = Path("packaging") / "barclamp.spec.j2"


@dataclass(frozen=True)
class PackagingConfig:
    """Settings shared by the pipeline and the packagers.

    Attributes:
        crowbar_dir: Root of the shared packaging templates and helpers
    """

    crowbar_dir: Path

    @property
    def rpm_spec_template(self) -> Path:
        return self.crowbar_dir / RPM_SPEC_TEMPLATE

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "PackagingConfig":
        """Build the configuration from environment variables.

        Raises:
            ConfigurationError: If CROWBAR_DIR is unset or not a directory
        """
        if environ is None:
            environ = os.environ

        value = environ.get(CROWBAR_DIR_VAR, "")
        if not value:
            raise ConfigurationError(f"{CROWBAR_DIR_VAR} is not set")

        crowbar_dir = Path(value)
        if not crowbar_dir.is_dir():
            raise ConfigurationError(f"{CROWBAR_DIR_VAR} is not a directory: {crowbar_dir}")

        return cls(crowbar_dir=crowbar_dir.resolve())
