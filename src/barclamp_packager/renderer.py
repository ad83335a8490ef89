"""Template rendering for packaging metadata.

Templates are Jinja2 files rendered against a RenderContext. Undefined
names are errors, so a template can only use the names the context
defines.
"""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape
from jinja2 import TemplateError as JinjaTemplateError

from .core.errors import MissingTemplateError, TemplateRenderError
from .core.types import RenderContext


class TemplateRenderer:
    """Renders packaging templates to text and files."""

    def _environment(self, template_dir: Path) -> Environment:
        return Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=select_autoescape(enabled_extensions=()),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, template_path: Path, context: RenderContext) -> str:
        """Render a template.

        Args:
            template_path: Template file to render
            context: Names available to the template

        Returns:
            Rendered text

        Raises:
            MissingTemplateError: If the template file doesn't exist
            TemplateRenderError: If the template is malformed or uses an
                undefined name
        """
        if not template_path.is_file():
            raise MissingTemplateError(template_path)

        env = self._environment(template_path.parent)
        try:
            template = env.get_template(template_path.name)
            return template.render(**context.as_template_vars())
        except JinjaTemplateError as e:
            raise TemplateRenderError(f"Failed to render {template_path}: {e}") from e

    def render_to_file(self, template_path: Path, output_path: Path, context: RenderContext) -> Path:
        """Render a template and write the result plus a trailing newline.

        Nothing is written if rendering fails. An existing output file is
        overwritten.

        Returns:
            output_path
        """
        return self.write(output_path, self.render(template_path, context))

    def write(self, output_path: Path, text: str) -> Path:
        """Write rendered text plus a trailing newline, creating parent directories."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text + "\n", encoding="utf-8")
        return output_path
