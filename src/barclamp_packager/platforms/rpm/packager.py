"""RPM packager.

Renders a single spec file from the shared template under CROWBAR_DIR
and builds it with rpmbuild.
"""

from pathlib import Path

from ...core.types import RenderContext
from ...packagers.base import Packager


def spec_filename(context: RenderContext) -> str:
    return f"{context.pkg}.spec"


class RpmPackager(Packager):
    """Packager for RPM-based distributions."""

    package_type = "rpm"

    def render(self, component_dir: Path, context: RenderContext) -> list[Path]:
        output_path = component_dir / spec_filename(context)
        return [
            self.renderer.render_to_file(self.config.rpm_spec_template, output_path, context)
        ]

    def build_command(
        self, component_dir: Path, destination: Path, context: RenderContext
    ) -> list[str]:
        return [
            "rpmbuild",
            "-bb",
            "--define", f"_rpmdir {destination.resolve()}",
            "--define", f"_sourcedir {component_dir.resolve()}",
            "--define", f"crowbar_dir {self.config.crowbar_dir}",
            spec_filename(context),
        ]
