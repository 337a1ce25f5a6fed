"""Tests for the YAML schema manifest."""

import pytest

from envschema.config import (
    InvalidVariableTypeError,
    ManifestError,
    VariableType,
    default_manifest_path,
    load_manifest,
    register_manifest,
)
from envschema.tasks.install import TEMPLATES_DIR

MANIFEST = """
variables:
  DATABASE_URL:
    required: true
    strict: true
    description: PostgreSQL connection URL
  PORT:
    type: Integer
    default: 3000
  ENABLE_FEATURE_X:
    type: boolean
    default: false
  API_KEY:
"""


@pytest.fixture
def manifest_path(tmp_path):
    path = tmp_path / "env_schema.yaml"
    path.write_text(MANIFEST)
    return path


def test_load_manifest_preserves_order_and_options(manifest_path):
    specs = load_manifest(manifest_path)

    assert [spec.key for spec in specs] == ["DATABASE_URL", "PORT", "ENABLE_FEATURE_X", "API_KEY"]

    database_url, port, feature_x, api_key = specs
    assert database_url.required and database_url.strict
    assert database_url.description == "PostgreSQL connection URL"
    assert port.type is VariableType.INTEGER
    assert port.default == 3000
    assert feature_x.default is False
    assert api_key.type is None and not api_key.required


def test_register_manifest_applies_defaults(validator, environ, manifest_path):
    register_manifest(validator, manifest_path)

    assert len(validator.registry) == 4
    assert environ["PORT"] == "3000"
    assert environ["ENABLE_FEATURE_X"] == "false"
    assert "DATABASE_URL" not in environ


def test_missing_manifest(tmp_path):
    with pytest.raises(ManifestError) as exc_info:
        load_manifest(tmp_path / "absent.yaml")

    assert "not found" in str(exc_info.value)
    assert "envschema install" in exc_info.value.guidance


@pytest.mark.parametrize("content, fragment", [
    ("settings: {}\n", "missing 'variables' key"),
    ("- PORT\n", "missing 'variables' key"),
    ("variables:\n  - PORT\n", "must be a mapping"),
    ("variables:\n  PORT: 3000\n", "Options for 'PORT' must be a mapping"),
    ("variables:\n  PORT:\n    kind: integer\n", "Unknown options for 'PORT': kind"),
    ("variables:\n  PORT:\n    default: [1, 2]\n", "Invalid options for 'PORT'"),
    ("variables:\n  PORT:\n    required: maybe\n", "Invalid options for 'PORT'"),
    ("variables: [unclosed\n", "Invalid YAML"),
])
def test_malformed_manifests(tmp_path, content, fragment):
    path = tmp_path / "env_schema.yaml"
    path.write_text(content)

    with pytest.raises(ManifestError) as exc_info:
        load_manifest(path)

    assert fragment in str(exc_info.value)


def test_invalid_type_in_manifest(tmp_path):
    path = tmp_path / "env_schema.yaml"
    path.write_text("variables:\n  PORT:\n    type: number\n")

    with pytest.raises(ManifestError) as exc_info:
        load_manifest(path)

    assert isinstance(exc_info.value.__cause__, InvalidVariableTypeError)
    assert "Invalid type: number" in str(exc_info.value)


def test_quoted_boolean_options_are_parsed(tmp_path):
    path = tmp_path / "env_schema.yaml"
    path.write_text('variables:\n  API_KEY:\n    required: "false"\n    strict: "no"\n  SECRET:\n    required: "yes"\n')

    api_key, secret = load_manifest(path)

    assert api_key.required is False
    assert api_key.strict is False
    assert secret.required is True


@pytest.mark.parametrize("type_line", ["type: \"\"", "type: false"])
def test_blank_or_false_type_is_rejected(tmp_path, type_line):
    path = tmp_path / "env_schema.yaml"
    path.write_text(f"variables:\n  PORT:\n    {type_line}\n")

    with pytest.raises(ManifestError) as exc_info:
        load_manifest(path)

    assert isinstance(exc_info.value.__cause__, InvalidVariableTypeError)


def test_empty_variables_mapping(tmp_path):
    path = tmp_path / "env_schema.yaml"
    path.write_text("variables:\n")

    assert load_manifest(path) == []


def test_starter_template_loads_without_variables():
    assert load_manifest(TEMPLATES_DIR / "env_schema.yaml") == []


def test_default_manifest_path(tmp_path, app_dir):
    assert default_manifest_path(tmp_path) == tmp_path / "config" / "env_schema.yaml"
    assert default_manifest_path() == app_dir / "config" / "env_schema.yaml"
