"""Debian packager.

Renders ``debian/control`` and ``debian/rules`` from templates in the
barclamp's own ``debian/`` directory and builds with dpkg-buildpackage.
"""

import shutil
import stat
from pathlib import Path

from ...core.types import RenderContext
from ...packagers.base import Packager

DEBIAN_DIR = "debian"
TEMPLATE_SUFFIX = ".j2"

# All are rendered before any is written; rules must be executable
DEBIAN_FILES = ("control", "rules")

EXECUTABLE = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


class DebPackager(Packager):
    """Packager for Debian-based distributions."""

    package_type = "deb"

    def render(self, component_dir: Path, context: RenderContext) -> list[Path]:
        debian_dir = component_dir / DEBIAN_DIR
        rendered = {
            filename: self.renderer.render(debian_dir / f"{filename}{TEMPLATE_SUFFIX}", context)
            for filename in DEBIAN_FILES
        }
        written = [
            self.renderer.write(debian_dir / filename, text) for filename, text in rendered.items()
        ]

        rules = debian_dir / "rules"
        rules.chmod(rules.stat().st_mode | EXECUTABLE)
        return written

    def build_command(
        self, component_dir: Path, destination: Path, context: RenderContext
    ) -> list[str]:
        return ["dpkg-buildpackage", "-b", "-uc", "-us"]

    def collect(self, component_dir: Path, destination: Path, context: RenderContext) -> list[Path]:
        """Move built .deb files from the parent directory into destination.

        dpkg-buildpackage always writes its results next to the source
        tree.
        """
        moved = []
        for built in sorted(component_dir.resolve().parent.glob(f"{context.pkg}_*.deb")):
            target = destination / built.name
            shutil.move(str(built), str(target))
            moved.append(target)
        return moved
