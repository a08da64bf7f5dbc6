"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "wp-schema.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Project configuration for wp-schema-system.
# Every setting is optional; relative paths resolve against this file's directory.

schemas:
  # One YAML/JSON file per post type.
  post_types_dir: "schemas/post-types"
  # One YAML/JSON file per taxonomy. A missing directory means no taxonomies.
  taxonomies_dir: "schemas/taxonomies"

typescript:
  # export and export-all write <slug>.ts units and index.ts here.
  output_dir: "typescript"

registration:
  # register and flush record what the WordPress host should apply here.
  manifest_path: "registration-manifest.json"

logging:
  # DEBUG, INFO, WARNING, ERROR or CRITICAL.
  level: "WARNING"
"""


def build_placeholder_configuration() -> str:
    """Build the configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
