"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    Configuration,
    LoggingSettings,
    RegistrationSettings,
    SchemaSettings,
    TypeScriptSettings,
)

DEFAULT_POST_TYPES_DIR = "schemas/post-types"
DEFAULT_TAXONOMIES_DIR = "schemas/taxonomies"
DEFAULT_TYPESCRIPT_DIR = "typescript"
DEFAULT_MANIFEST_PATH = "registration-manifest.json"
DEFAULT_LOG_LEVEL = "WARNING"

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def default_configuration(base_dir: Path | str | None = None) -> Configuration:
    """Configuration used when no file is given; paths resolve against `base_dir`."""
    return _build_configuration({}, base_path=Path(base_dir or Path.cwd()), path=None)


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return _build_configuration(parsed, base_path=path.resolve().parent, path=path)


def _build_configuration(
    parsed: Mapping[str, Any], *, base_path: Path, path: Path | None
) -> Configuration:
    schemas = _optional_mapping(parsed.get("schemas"), "schemas")
    typescript = _optional_mapping(parsed.get("typescript"), "typescript")
    registration = _optional_mapping(parsed.get("registration"), "registration")
    logging_section = _optional_mapping(parsed.get("logging"), "logging")

    return Configuration(
        path=path,
        schemas=SchemaSettings(
            post_types_dir=_path_setting(
                schemas, "post_types_dir", DEFAULT_POST_TYPES_DIR, base_path, "schemas"
            ),
            taxonomies_dir=_path_setting(
                schemas, "taxonomies_dir", DEFAULT_TAXONOMIES_DIR, base_path, "schemas"
            ),
        ),
        typescript=TypeScriptSettings(
            output_dir=_path_setting(
                typescript, "output_dir", DEFAULT_TYPESCRIPT_DIR, base_path, "typescript"
            ),
        ),
        registration=RegistrationSettings(
            manifest_path=_path_setting(
                registration, "manifest_path", DEFAULT_MANIFEST_PATH, base_path, "registration"
            ),
        ),
        logging=LoggingSettings(level=_parse_log_level(logging_section.get("level"))),
    )


def _path_setting(
    section: Mapping[str, Any], key: str, default: str, base_path: Path, section_name: str
) -> Path:
    value = section.get(key, default)
    raw_path = _require_non_empty_string(value, f"{section_name}.{key}")
    return _resolve_path(base_path, raw_path)


def _parse_log_level(value: Any) -> str:
    if value is None:
        return DEFAULT_LOG_LEVEL
    level = _require_non_empty_string(value, "logging.level").upper()
    if level not in LOG_LEVELS:
        raise ConfigurationError(f"logging.level must be one of: {', '.join(LOG_LEVELS)}.")
    return level


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped
