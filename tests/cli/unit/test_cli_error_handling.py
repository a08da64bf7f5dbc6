"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from wp_schema_system.cli import main


def test_missing_required_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["create", "product"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing option" in captured.err
    assert "--prompt" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["export", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "--bogus" in captured.err
    assert "Traceback" not in captured.err


def test_invalid_type_choice_is_a_usage_error(capsys) -> None:
    exit_code = main(["list", "--type", "page"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Invalid value for '--type'" in captured.err


def test_domain_error_exits_with_one_and_message(tmp_path: Path, capsys) -> None:
    config_path = tmp_path / "wp-schema.yaml"
    config_path.write_text("schemas:\n  post_types_dir: missing\n", encoding="utf-8")

    exit_code = main(["--config", str(config_path), "info", "product"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Post type schema not found: product" in captured.err
    assert "Traceback" not in captured.err


def test_invalid_configuration_exits_with_one(tmp_path: Path, capsys) -> None:
    config_path = tmp_path / "wp-schema.yaml"
    config_path.write_text("logging:\n  level: LOUD\n", encoding="utf-8")

    exit_code = main(["--config", str(config_path), "list"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "logging.level must be one of" in captured.err
