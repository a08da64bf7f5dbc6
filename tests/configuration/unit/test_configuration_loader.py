"""Configuration loader tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from wp_schema_system.configuration.loader import (
    ConfigurationError,
    default_configuration,
    load_configuration,
)


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_loads_yaml_configuration_relative_to_config_file(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "wp-schema.yaml",
        """
schemas:
  post_types_dir: content/post-types
  taxonomies_dir: content/taxonomies
typescript:
  output_dir: frontend/types
registration:
  manifest_path: build/manifest.json
logging:
  level: info
""",
    )

    configuration = load_configuration(config_path)

    assert configuration.path == config_path
    assert configuration.schemas.post_types_dir == (tmp_path / "content/post-types").resolve()
    assert configuration.schemas.taxonomies_dir == (tmp_path / "content/taxonomies").resolve()
    assert configuration.typescript.output_dir == (tmp_path / "frontend/types").resolve()
    assert configuration.registration.manifest_path == (tmp_path / "build/manifest.json").resolve()
    assert configuration.logging.level == "INFO"


def test_loads_json_configuration_with_defaults(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "config.json",
        json.dumps({"typescript": {"output_dir": str(tmp_path / "absolute")}}),
    )

    configuration = load_configuration(config_path)

    assert configuration.typescript.output_dir == tmp_path / "absolute"
    assert configuration.schemas.post_types_dir == (tmp_path / "schemas/post-types").resolve()
    assert configuration.logging.level == "WARNING"


def test_empty_configuration_file_uses_defaults(tmp_path: Path) -> None:
    configuration = load_configuration(_write_file(tmp_path / "wp-schema.yaml", ""))

    assert configuration.registration.manifest_path == (
        tmp_path / "registration-manifest.json"
    ).resolve()


def test_default_configuration_resolves_against_base_dir(tmp_path: Path) -> None:
    configuration = default_configuration(tmp_path)

    assert configuration.path is None
    assert configuration.schemas.taxonomies_dir == (tmp_path / "schemas/taxonomies").resolve()
    assert configuration.typescript.output_dir == (tmp_path / "typescript").resolve()


def test_missing_configuration_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Configuration file not found"):
        load_configuration(tmp_path / "absent.yaml")


@pytest.mark.parametrize(
    "contents, message",
    [
        ("- a\n- b\n", "Configuration root must be a mapping"),
        ("schemas: [a]\n", "Configuration section 'schemas' must be a mapping"),
        ("schemas:\n  post_types_dir: ''\n", "schemas.post_types_dir must not be empty"),
        ("typescript:\n  output_dir: 3\n", "typescript.output_dir must be a string"),
        ("logging:\n  level: LOUD\n", "logging.level must be one of"),
        ("schemas: [unclosed\n", "Failed to parse configuration file"),
    ],
)
def test_invalid_configuration_raises(tmp_path: Path, contents: str, message: str) -> None:
    config_path = _write_file(tmp_path / "wp-schema.yaml", contents)

    with pytest.raises(ConfigurationError, match=message):
        load_configuration(config_path)
