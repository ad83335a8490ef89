"""Tests for template rendering."""

import pytest

from barclamp_packager.core.errors import MissingTemplateError, TemplateRenderError
from barclamp_packager.core.types import RenderContext
from barclamp_packager.renderer import TemplateRenderer


@pytest.fixture
def context() -> RenderContext:
    return RenderContext(
        name="foo",
        display="Foo",
        pkg="crowbar-barclamp-foo",
        version="20240102.030405",
        requires=["bar", "crowbar-barclamp-crowbar"],
        package_type="rpm",
        barclamp={"name": "foo", "display": "Foo", "user_managed": True},
        crowbar_dir="/opt/crowbar",
    )


class TestRender:
    """Test rendering templates to text."""

    def test_renders_context_names(self, tmp_path, context) -> None:
        template = tmp_path / "t.j2"
        template.write_text("{{ name }} {{ pkg }} {{ version }}", encoding="utf-8")

        assert TemplateRenderer().render(template, context) == (
            "foo crowbar-barclamp-foo 20240102.030405"
        )

    def test_renders_dependency_list(self, tmp_path, context) -> None:
        template = tmp_path / "t.j2"
        template.write_text("Requires: {{ requires | join(', ') }}", encoding="utf-8")

        assert TemplateRenderer().render(template, context) == (
            "Requires: bar, crowbar-barclamp-crowbar"
        )

    def test_exposes_barclamp_section(self, tmp_path, context) -> None:
        template = tmp_path / "t.j2"
        template.write_text("{{ barclamp.user_managed }}", encoding="utf-8")

        assert TemplateRenderer().render(template, context) == "True"

    def test_does_not_escape(self, tmp_path, context) -> None:
        template = tmp_path / "t.j2"
        template.write_text("{{ '${misc:Depends} <&>' }}", encoding="utf-8")

        assert TemplateRenderer().render(template, context) == "${misc:Depends} <&>"

    def test_unknown_name_fails(self, tmp_path, context) -> None:
        """Test that names outside the context are rendering errors."""
        template = tmp_path / "t.j2"
        template.write_text("{{ license }}", encoding="utf-8")

        with pytest.raises(TemplateRenderError, match="license"):
            TemplateRenderer().render(template, context)

    def test_unknown_attribute_fails(self, tmp_path, context) -> None:
        template = tmp_path / "t.j2"
        template.write_text("{{ barclamp.missing_key }}", encoding="utf-8")

        with pytest.raises(TemplateRenderError):
            TemplateRenderer().render(template, context)

    def test_syntax_error(self, tmp_path, context) -> None:
        template = tmp_path / "t.j2"
        template.write_text("{% for dep in requires %}", encoding="utf-8")

        with pytest.raises(TemplateRenderError):
            TemplateRenderer().render(template, context)

    def test_missing_template(self, tmp_path, context) -> None:
        with pytest.raises(MissingTemplateError, match="Template not found"):
            TemplateRenderer().render(tmp_path / "absent.j2", context)

    def test_template_error_exit_code(self, tmp_path, context) -> None:
        with pytest.raises(MissingTemplateError) as exc_info:
            TemplateRenderer().render(tmp_path / "absent.j2", context)

        assert exc_info.value.exit_code == 7


class TestRenderToFile:
    """Test writing rendered output."""

    def test_appends_trailing_newline(self, tmp_path, context) -> None:
        template = tmp_path / "t.j2"
        template.write_text("Name: {{ name }}", encoding="utf-8")
        output = tmp_path / "out.spec"

        written = TemplateRenderer().render_to_file(template, output, context)

        assert written == output
        assert output.read_text(encoding="utf-8") == "Name: foo\n"

    def test_overwrites_existing_file(self, tmp_path, context) -> None:
        template = tmp_path / "t.j2"
        template.write_text("{{ display }}", encoding="utf-8")
        output = tmp_path / "out"
        output.write_text("stale contents\n" * 10, encoding="utf-8")

        TemplateRenderer().render_to_file(template, output, context)

        assert output.read_text(encoding="utf-8") == "Foo\n"

    def test_nothing_written_on_failure(self, tmp_path, context) -> None:
        """Test that a failed render leaves no output file."""
        template = tmp_path / "t.j2"
        template.write_text("{{ undefined_name }}", encoding="utf-8")
        output = tmp_path / "out"

        with pytest.raises(TemplateRenderError):
            TemplateRenderer().render_to_file(template, output, context)

        assert not output.exists()

    def test_missing_template_writes_nothing(self, tmp_path, context) -> None:
        output = tmp_path / "out"

        with pytest.raises(MissingTemplateError):
            TemplateRenderer().render_to_file(tmp_path / "absent.j2", output, context)

        assert not output.exists()

    def test_write_creates_parent_directories(self, tmp_path) -> None:
        output = tmp_path / "debian" / "control"

        assert TemplateRenderer().write(output, "Source: foo") == output
        assert output.read_text(encoding="utf-8") == "Source: foo\n"
