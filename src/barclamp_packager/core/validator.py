"""JSON Schema validation for barclamp data bags.

Schemas (``*.schema``) are checked against the Draft 7 meta-schema
before use, then every data bag (``*.json``) sharing a schema's base
name is validated against it. Files are parsed with PyYAML's node
composer so each reported error points at a line and column.
"""

import json
import re
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft7Validator
from jsonschema.exceptions import ValidationError

from .errors import DataValidationError, SchemaError
from .types import ValidationIssue

SCHEMA_SUFFIX = ".schema"
DOCUMENT_SUFFIX = ".json"

# Data bags live one directory below this path in a barclamp
DATA_BAG_DIR = Path("chef") / "data_bags"
DATA_BAG_SCHEMA_GLOB = f"*/*{SCHEMA_SUFFIX}"
DATA_BAG_DOCUMENT_GLOB = f"*/*{DOCUMENT_SUFFIX}"

# Proposal templates live at the barclamp root
TEMPLATE_SCHEMA_GLOB = f"bc-template-*{SCHEMA_SUFFIX}"
TEMPLATE_DOCUMENT_GLOB = f"bc-template-*{DOCUMENT_SUFFIX}"

META_SCHEMA = Draft7Validator.META_SCHEMA

SchemaRegistry = dict[str, Draft7Validator]

# Read errors reported as unparseable files
READ_ERRORS = (yaml.YAMLError, OSError, UnicodeDecodeError)


class PositionLoader(yaml.SafeLoader):
    """SafeLoader that also reads JSON exponent numbers (1e5, 2.5E-3) as floats.

    YAML 1.1 requires a dot and a signed exponent, so plain SafeLoader
    turns these into strings.
    """


PositionLoader.add_implicit_resolver(
    "tag:yaml.org,2002:float",
    re.compile(r"^[-+]?[0-9][0-9_]*(?:\.[0-9_]*)?[eE][-+]?[0-9]+$"),
    list("-+0123456789"),
)


def base_name(path: Path) -> str:
    """Return the registry key for a schema or document path."""
    return str(path.with_suffix(""))


def _parse_error_issue(path: Path, error: Exception) -> ValidationIssue:
    mark = getattr(error, "problem_mark", None)
    line = mark.line + 1 if mark is not None else 0
    column = mark.column + 1 if mark is not None else 0
    problem = getattr(error, "problem", None) or str(error)
    return ValidationIssue(path, line, column, "/", f"Unable to parse: {problem}")


def parse_with_positions(path: Path) -> tuple[Any, yaml.Node | None]:
    """Parse a YAML or JSON file, keeping the node tree for error locations.

    Returns:
        Tuple of (data, root_node). root_node is None when positions are
        unavailable.

    Raises:
        yaml.YAMLError: If the file cannot be parsed
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not UTF-8
    """
    text = path.read_text(encoding="utf-8")
    loader = PositionLoader(text)
    try:
        node = loader.get_single_node()
        data = loader.construct_document(node) if node is not None else None
        return data, node
    except yaml.YAMLError as e:
        # JSON that YAML rejects, e.g. tab indentation
        if path.suffix != DOCUMENT_SUFFIX:
            raise
        try:
            return json.loads(text), None
        except json.JSONDecodeError:
            raise e from None
    finally:
        loader.dispose()


def locate(node: yaml.Node | None, path: Iterable[Any]) -> tuple[int, int]:
    """Find the 1-based line and column of a path within a node tree.

    Walks as far down the path as the tree allows and returns the
    position of the deepest node reached.
    """
    if node is None:
        return 0, 0

    for part in path:
        child = None
        if isinstance(node, yaml.MappingNode):
            for key_node, value_node in node.value:
                if str(key_node.value) == str(part):
                    child = value_node
                    break
        elif isinstance(node, yaml.SequenceNode) and isinstance(part, int):
            if 0 <= part < len(node.value):
                child = node.value[part]
        if child is None:
            break
        node = child

    return node.start_mark.line + 1, node.start_mark.column + 1


def format_path(path: Iterable[Any]) -> str:
    return "/" + "/".join(str(part) for part in path)


def _issues(
    file: Path, node: yaml.Node | None, errors: Iterable[ValidationError]
) -> list[ValidationIssue]:
    issues = []
    for error in errors:
        line, column = locate(node, error.absolute_path)
        issues.append(
            ValidationIssue(file, line, column, format_path(error.absolute_path), error.message)
        )
    return sorted(issues, key=lambda issue: (issue.line, issue.column, issue.path))


def make_schemas(schema_paths: Iterable[Path]) -> tuple[SchemaRegistry, list[ValidationIssue]]:
    """Load schema files and check each one against the meta-schema.

    Args:
        schema_paths: Schema files to load

    Returns:
        Tuple of (registry, issues). The registry maps each valid schema's
        base name to a compiled validator; issues lists every problem
        found across all schema files.
    """
    meta_validator = Draft7Validator(META_SCHEMA)
    registry: SchemaRegistry = {}
    issues: list[ValidationIssue] = []

    for schema_path in schema_paths:
        try:
            schema, node = parse_with_positions(schema_path)
        except READ_ERRORS as e:
            issues.append(_parse_error_issue(schema_path, e))
            continue

        schema_issues = _issues(schema_path, node, meta_validator.iter_errors(schema))
        if schema_issues:
            issues.extend(schema_issues)
            continue

        registry[base_name(schema_path)] = Draft7Validator(schema)

    return registry, issues


def validate_bags(registry: SchemaRegistry, document_paths: Iterable[Path]) -> list[ValidationIssue]:
    """Validate data bags against the schemas sharing their base name.

    Documents without a matching schema are skipped.

    Args:
        registry: Compiled schemas keyed by base name
        document_paths: Data bag files to validate

    Returns:
        Every issue found across all documents; empty when all are valid
    """
    issues: list[ValidationIssue] = []

    for document_path in document_paths:
        validator = registry.get(base_name(document_path))
        if validator is None:
            continue

        try:
            document, node = parse_with_positions(document_path)
        except READ_ERRORS as e:
            issues.append(_parse_error_issue(document_path, e))
            continue

        issues.extend(_issues(document_path, node, validator.iter_errors(document)))

    return issues


def make_schemas_or_raise(schema_paths: Iterable[Path]) -> SchemaRegistry:
    """Like make_schemas, but raise SchemaError if any schema is invalid."""
    registry, issues = make_schemas(schema_paths)
    if issues:
        raise SchemaError(issues)
    return registry


def validate_bags_or_raise(registry: SchemaRegistry, document_paths: Iterable[Path]) -> bool:
    """Like validate_bags, but raise DataValidationError on any issue."""
    issues = validate_bags(registry, document_paths)
    if issues:
        raise DataValidationError(issues)
    return True


def validate_files(schema_paths: Iterable[Path], document_paths: Iterable[Path]) -> bool:
    """Build a registry from schema_paths and validate document_paths with it."""
    registry = make_schemas_or_raise(schema_paths)
    return validate_bags_or_raise(registry, document_paths)


def validate_component(component_dir: Path) -> None:
    """Validate every data bag and proposal template of a barclamp.

    Raises:
        SchemaError: If any schema fails the meta-schema
        DataValidationError: If any data bag fails its schema
    """
    data_bag_dir = component_dir / DATA_BAG_DIR
    if data_bag_dir.is_dir():
        validate_files(
            sorted(data_bag_dir.glob(DATA_BAG_SCHEMA_GLOB)),
            sorted(data_bag_dir.glob(DATA_BAG_DOCUMENT_GLOB)),
        )

    validate_files(
        sorted(component_dir.glob(TEMPLATE_SCHEMA_GLOB)),
        sorted(component_dir.glob(TEMPLATE_DOCUMENT_GLOB)),
    )
