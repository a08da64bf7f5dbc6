"""Configuration scaffold builder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from wp_schema_system.configuration.config_scaffold_builder import (
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from wp_schema_system.configuration.loader import load_configuration


def test_build_placeholder_configuration_contains_all_supported_sections() -> None:
    scaffold = build_placeholder_configuration()

    assert "schemas:" in scaffold
    assert "post_types_dir:" in scaffold
    assert "taxonomies_dir:" in scaffold
    assert "typescript:" in scaffold
    assert "registration:" in scaffold
    assert "logging:" in scaffold


def test_write_placeholder_configuration_writes_loadable_file(tmp_path: Path) -> None:
    output_path = tmp_path / "wp-schema.yaml"

    written_path = write_placeholder_configuration(output_path)

    assert written_path == output_path.resolve()
    configuration = load_configuration(written_path)
    assert configuration.schemas.post_types_dir == (tmp_path / "schemas/post-types").resolve()


def test_write_placeholder_configuration_fails_when_file_exists(tmp_path: Path) -> None:
    output_path = tmp_path / "wp-schema.yaml"
    output_path.write_text("existing", encoding="utf-8")

    with pytest.raises(FileExistsError):
        write_placeholder_configuration(output_path)
