"""CLI orchestration integration tests."""

from __future__ import annotations

import json
import shutil
from pathlib import Path

import yaml
from click.testing import CliRunner
from wp_schema_system.cli import CliError, cli

_SAMPLES = Path(__file__).resolve().parents[3] / "samples"


def _project(tmp_path: Path) -> Path:
    project = tmp_path / "project"
    shutil.copytree(_SAMPLES, project)
    return project / "wp-schema.yaml"


def _invoke(config_path: Path, *args: str):
    return CliRunner().invoke(cli, ["--config", str(config_path), *args])


def test_list_shows_post_types_and_taxonomies(tmp_path: Path) -> None:
    result = _invoke(_project(tmp_path), "list")

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0].split() == ["Slug", "Type", "Label", "Fields", "REST"]
    assert any(line.startswith("product ") and "post-type" in line for line in lines)
    assert any(line.startswith("product_category ") and "taxonomy" in line for line in lines)


def test_list_can_filter_by_kind(tmp_path: Path) -> None:
    result = _invoke(_project(tmp_path), "list", "--type", "taxonomy")

    assert result.exit_code == 0
    assert "product_tag" in result.output
    assert "contact" not in result.output


def test_info_renders_table_json_and_yaml(tmp_path: Path) -> None:
    config_path = _project(tmp_path)

    table = _invoke(config_path, "info", "product")
    as_json = _invoke(config_path, "info", "product", "--format", "json")
    as_yaml = _invoke(
        config_path, "info", "product_category", "--type", "taxonomy", "--format", "yaml"
    )

    assert table.exit_code == 0
    assert "Singular label" in table.output
    assert "sku" in table.output
    assert json.loads(as_json.output)["post_type"] == "product"
    assert yaml.safe_load(as_yaml.output)["taxonomy"] == "product_category"


def test_validate_reports_valid_schema(tmp_path: Path) -> None:
    result = _invoke(_project(tmp_path), "validate", "contact")

    assert result.exit_code == 0
    assert "Schema 'contact' is valid." in result.output


def test_validate_fails_for_invalid_schema(tmp_path: Path) -> None:
    config_path = _project(tmp_path)
    (config_path.parent / "schemas" / "post-types" / "broken.yaml").write_text(
        "post_type: Broken-Type\nfields:\n  Price:\n    type: money\n", encoding="utf-8"
    )

    result = _invoke(config_path, "validate", "Broken-Type")

    assert result.exit_code == 1
    assert isinstance(result.exception, CliError)
    assert "Missing required field: label" in result.output
    assert "Field 'Price' has invalid type: money" in result.output


def test_validate_all_passes_for_samples(tmp_path: Path) -> None:
    result = _invoke(_project(tmp_path), "validate-all")

    assert result.exit_code == 0
    assert "All 4 schema(s) are valid." in result.output


def test_create_writes_scaffold_and_refuses_to_overwrite(tmp_path: Path) -> None:
    config_path = _project(tmp_path)

    first = _invoke(config_path, "create", "event", "--prompt", "Conference sessions")
    second = _invoke(config_path, "create", "event", "--prompt", "Again")

    created = config_path.parent / "schemas" / "post-types" / "event.yaml"
    assert first.exit_code == 0
    assert yaml.safe_load(created.read_text(encoding="utf-8"))["description"] == (
        "Conference sessions"
    )
    assert second.exit_code == 1
    assert "Use --overwrite" in str(second.exception)


def test_create_adds_named_fields_with_guessed_types(tmp_path: Path) -> None:
    config_path = _project(tmp_path)

    result = _invoke(
        config_path,
        "create",
        "event",
        "--prompt",
        "Talks",
        "--field",
        "Start Time",
        "--field",
        "Venue",
    )

    assert result.exit_code == 0
    created = config_path.parent / "schemas" / "post-types" / "event.yaml"
    fields = yaml.safe_load(created.read_text(encoding="utf-8"))["fields"]
    assert fields["start_time"]["type"] == "time_picker"
    assert fields["venue"]["type"] == "text"


def test_export_writes_single_unit_to_configured_directory(tmp_path: Path) -> None:
    config_path = _project(tmp_path)

    result = _invoke(config_path, "export", "contact")

    output = config_path.parent / "typescript" / "contact.ts"
    assert result.exit_code == 0
    text = output.read_text(encoding="utf-8")
    assert "export interface ContactACF {" in text
    assert "import type" not in text
    assert "  company?: WPPost;" in text
    assert not (output.parent / "index.ts").exists()


def test_export_all_writes_units_and_index(tmp_path: Path) -> None:
    config_path = _project(tmp_path)
    output_dir = tmp_path / "types"

    result = _invoke(config_path, "export-all", "--type", "all", "--output", str(output_dir))

    assert result.exit_code == 0
    assert sorted(path.name for path in output_dir.iterdir()) == [
        "contact.ts",
        "index.ts",
        "product.ts",
        "product_category.ts",
        "product_tag.ts",
    ]
    index = (output_dir / "index.ts").read_text(encoding="utf-8")
    assert "export * from './product_category';" in index
    product = (output_dir / "product.ts").read_text(encoding="utf-8")
    assert "  specifications?: {spec_name?: string; spec_value?: string}[];" in product
    assert "  product_category?: WPTerm[];" in product


def test_register_and_flush_update_manifest(tmp_path: Path) -> None:
    config_path = _project(tmp_path)
    manifest_path = config_path.parent / "registration-manifest.json"

    registered = _invoke(config_path, "register")
    flushed = _invoke(config_path, "flush")

    assert registered.exit_code == 0
    assert flushed.exit_code == 0
    manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
    assert sorted(manifest["post_types"]) == ["contact", "product"]
    assert manifest["taxonomies"]["product_tag"]["object_type"] == ["product"]
    assert manifest["taxonomies"]["product_category"]["object_type"] == ["product"]
    assert manifest["flush_rewrite_rules"] is True


def test_register_single_post_type(tmp_path: Path) -> None:
    config_path = _project(tmp_path)
    manifest_path = tmp_path / "single.json"

    result = _invoke(config_path, "register", "--slug", "contact", "--output", str(manifest_path))

    assert result.exit_code == 0
    manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
    assert list(manifest["post_types"]) == ["contact"]
    assert manifest["taxonomies"] == {}
    assert [group["key"] for group in manifest["field_groups"]] == ["group_contact"]


def test_register_accepts_date_default_values(tmp_path: Path) -> None:
    config_path = _project(tmp_path)
    (config_path.parent / "schemas" / "post-types" / "event.yaml").write_text(
        "post_type: event\nlabel: Events\n"
        "fields:\n  starts_on:\n    type: date_picker\n    default_value: 2024-01-01\n",
        encoding="utf-8",
    )

    result = _invoke(config_path, "register", "--slug", "event")

    assert result.exit_code == 0, result.output
    manifest_path = config_path.parent / "registration-manifest.json"
    manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
    assert manifest["field_groups"][0]["fields"][0]["default_value"] == "2024-01-01"


def test_document_prints_markdown(tmp_path: Path) -> None:
    result = _invoke(_project(tmp_path), "document", "product_category", "--type", "taxonomy")

    assert result.exit_code == 0
    assert result.output.startswith("# Product Categories")
    assert "**Taxonomy:** `product_category`" in result.output


def test_generate_config_command_writes_placeholder_file_with_default_name(tmp_path: Path) -> None:
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=str(tmp_path)):
        result = runner.invoke(cli, ["generate-config"])
        generated = Path("wp-schema.yaml")

        assert result.exit_code == 0
        assert generated.exists()
        assert "post_types_dir" in generated.read_text(encoding="utf-8")


def test_generate_config_command_fails_when_output_exists(tmp_path: Path) -> None:
    output_path = tmp_path / "wp-schema.yaml"
    output_path.write_text("existing", encoding="utf-8")

    result = CliRunner().invoke(cli, ["generate-config", "--output", str(output_path)])

    assert result.exit_code != 0
    assert "already exists" in str(result.exception)
    assert output_path.read_text(encoding="utf-8") == "existing"


def test_implicit_configuration_is_read_from_working_directory(tmp_path: Path) -> None:
    config_path = _project(tmp_path)
    runner = CliRunner()

    with runner.isolated_filesystem(temp_dir=str(tmp_path)) as workdir:
        shutil.copy(config_path, Path(workdir) / "wp-schema.yaml")
        shutil.copytree(config_path.parent / "schemas", Path(workdir) / "schemas")
        result = runner.invoke(cli, ["list", "--type", "post-type"])

    assert result.exit_code == 0
    assert "contact" in result.output
