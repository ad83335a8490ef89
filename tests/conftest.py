"""Shared fixtures for barclamp packager tests."""

import json
from datetime import datetime, timezone
from pathlib import Path

import pytest
import yaml

from barclamp_packager.config import RPM_SPEC_TEMPLATE, PackagingConfig

FIXED_NOW = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

SPEC_TEMPLATE = """\
Name: {{ pkg }}
Version: {{ version }}
Summary: {{ display }}
{% for dep in requires %}
Requires: {{ dep }}
{% endfor %}
"""

CONTROL_TEMPLATE = """\
Source: {{ pkg }}
Package: {{ pkg }}
Depends: {{ requires | join(', ') }}
Description: {{ display }}
"""

RULES_TEMPLATE = """\
#!/usr/bin/make -f
export CROWBAR_DIR={{ crowbar_dir }}
%:
\tdh $@
"""


@pytest.fixture
def fixed_now():
    """Clock returning a fixed UTC timestamp."""
    return lambda: FIXED_NOW


@pytest.fixture
def crowbar_dir(tmp_path: Path) -> Path:
    """Shared packaging directory holding the RPM spec template."""
    root = tmp_path / "crowbar"
    template = root / RPM_SPEC_TEMPLATE
    template.parent.mkdir(parents=True)
    template.write_text(SPEC_TEMPLATE, encoding="utf-8")
    return root


@pytest.fixture
def config(crowbar_dir: Path) -> PackagingConfig:
    return PackagingConfig(crowbar_dir=crowbar_dir.resolve())


@pytest.fixture
def destination(tmp_path: Path) -> Path:
    dest = tmp_path / "out"
    dest.mkdir()
    return dest


@pytest.fixture
def make_barclamp(tmp_path: Path):
    """Factory creating a barclamp source tree with a crowbar.yml."""

    def _make(
        name: str = "foo",
        manifest_name: str | None = None,
        display: str | None = "Foo",
        requires: list[str] | None = None,
        rpms: list[str] | None = None,
        debs: list[str] | None = None,
        debian_templates: bool = False,
    ) -> Path:
        component = tmp_path / "barclamps" / name
        component.mkdir(parents=True)

        barclamp = {"name": manifest_name or name}
        if display is not None:
            barclamp["display"] = display
        if requires is not None:
            barclamp["requires"] = requires

        document = {"barclamp": barclamp}
        if rpms is not None:
            document["rpms"] = {"required_pkgs": rpms}
        if debs is not None:
            document["debs"] = {"required_pkgs": debs}

        (component / "crowbar.yml").write_text(yaml.safe_dump(document), encoding="utf-8")

        if debian_templates:
            debian = component / "debian"
            debian.mkdir()
            (debian / "control.j2").write_text(CONTROL_TEMPLATE, encoding="utf-8")
            (debian / "rules.j2").write_text(RULES_TEMPLATE, encoding="utf-8")

        return component

    return _make


def write_json(path: Path, data) -> Path:
    """Write data as indented JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def json_writer():
    return write_json
