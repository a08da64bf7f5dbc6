"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SchemaSettings:
    """Where post type and taxonomy schema files live."""

    post_types_dir: Path
    taxonomies_dir: Path


@dataclass(frozen=True)
class TypeScriptSettings:
    """TypeScript output location."""

    output_dir: Path


@dataclass(frozen=True)
class RegistrationSettings:
    """Registration manifest location."""

    manifest_path: Path


@dataclass(frozen=True)
class LoggingSettings:
    """Log verbosity."""

    level: str


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None
    schemas: SchemaSettings
    typescript: TypeScriptSettings
    registration: RegistrationSettings
    logging: LoggingSettings
