"""Packager interfaces for the packaging pipeline.

This package contains the base class for packagers and the external
process adapter. Package-type implementations live in the platforms/
directory.
"""

from .base import Packager
from .process import ProcessRunner, SubprocessRunner

__all__ = ["Packager", "ProcessRunner", "SubprocessRunner"]
