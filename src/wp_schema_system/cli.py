"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any, TypeVar

import click
import yaml

from wp_schema_system.configuration import (
    DEFAULT_CONFIG_FILENAME,
    Configuration,
    ConfigurationError,
    default_configuration,
    load_configuration,
    write_placeholder_configuration,
)
from wp_schema_system.content_registration import (
    ManifestRegistrar,
    RegistrationError,
    run_registration_pass,
)
from wp_schema_system.schema_documentation import render_schema_markdown
from wp_schema_system.schema_management import (
    SchemaDocument,
    SchemaError,
    SchemaKind,
    validate_schema,
)
from wp_schema_system.schema_repository import SchemaRepository
from wp_schema_system.schema_scaffolding import ScaffoldError, write_schema_scaffold
from wp_schema_system.typescript_generation import emit_collection, emit_typescript

logger = logging.getLogger(__name__)

_KIND_OPTIONS = {"post-type": SchemaKind.POST_TYPE, "taxonomy": SchemaKind.TAXONOMY}
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_Command = TypeVar("_Command", bound=Callable[..., Any])


class CliError(Exception):
    """Custom CLI error."""


class _ClickEchoHandler(logging.Handler):
    """Routes package log records to stderr through click."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:  # pragma: no cover
            self.handleError(record)


class _CliState:
    """Configuration and schema repository, loaded on first use by a command."""

    def __init__(self, config_path: str | None, log_level: str | None) -> None:
        self._config_path = config_path
        self._log_level = log_level
        self._configuration: Configuration | None = None
        self._repository: SchemaRepository | None = None
        if log_level is not None:
            _configure_logging(log_level)

    @property
    def configuration(self) -> Configuration:
        if self._configuration is None:
            self._configuration = self._load_configuration()
            if self._log_level is None:
                _configure_logging(self._configuration.logging.level)
        return self._configuration

    @property
    def repository(self) -> SchemaRepository:
        if self._repository is None:
            schemas = self.configuration.schemas
            self._repository = SchemaRepository(schemas.post_types_dir, schemas.taxonomies_dir)
        return self._repository

    def _load_configuration(self) -> Configuration:
        try:
            if self._config_path is not None:
                return load_configuration(self._config_path)
            implicit = Path.cwd() / DEFAULT_CONFIG_FILENAME
            if implicit.is_file():
                return load_configuration(implicit)
        except ConfigurationError as exc:
            raise CliError(str(exc)) from exc
        return default_configuration(Path.cwd())


def _configure_logging(level: str) -> None:
    package_logger = logging.getLogger("wp_schema_system")
    package_logger.setLevel(level.upper())
    if not any(isinstance(handler, _ClickEchoHandler) for handler in package_logger.handlers):
        handler = _ClickEchoHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        package_logger.addHandler(handler)


def _kinds(type_option: str) -> tuple[SchemaKind, ...]:
    if type_option == "all":
        return (SchemaKind.POST_TYPE, SchemaKind.TAXONOMY)
    return (_KIND_OPTIONS[type_option],)


def _type_option(*, allow_all: bool, default: str) -> Callable[[_Command], _Command]:
    choices = [*_KIND_OPTIONS, "all"] if allow_all else list(_KIND_OPTIONS)
    return click.option(
        "--type",
        "type_option",
        type=click.Choice(choices),
        default=default,
        show_default=True,
        help="Schema kind to operate on",
    )


pass_state = click.make_pass_decorator(_CliState)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="wp-schema-system")
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help=f"Project configuration file (default: ./{DEFAULT_CONFIG_FILENAME} if present)",
)
@click.option(
    "--log-level",
    "log_level",
    required=False,
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    help="Override the configured log level",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, log_level: str | None) -> None:
    """Schema-driven WordPress content types, field groups and TypeScript definitions."""
    ctx.obj = _CliState(config_path, log_level)


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="list")
@_type_option(allow_all=True, default="all")
@pass_state
def list_schemas(state: _CliState, type_option: str) -> None:
    """List loaded schemas with their label, field count and REST exposure."""
    rows: list[tuple[str, str, str, str, str]] = []
    for kind in _kinds(type_option):
        for slug, schema in _collection(state, kind).items():
            rows.append(
                (
                    slug,
                    _kind_name(kind),
                    schema.label or "",
                    str(len(schema.fields)),
                    _yes_no(schema.rest_enabled),
                )
            )
    if not rows:
        click.echo("No schemas found.")
        return
    for line in _table(("Slug", "Type", "Label", "Fields", "REST"), rows):
        click.echo(line)


@cli.command(name="info")
@click.argument("slug")
@_type_option(allow_all=False, default="post-type")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json", "yaml"]),
    default="table",
    show_default=True,
    help="Output format",
)
@pass_state
def info(state: _CliState, slug: str, type_option: str, output_format: str) -> None:
    """Show one schema."""
    schema = _load_schema(state, slug, _KIND_OPTIONS[type_option])
    if output_format == "json":
        click.echo(json.dumps(dict(schema.source), indent=2, default=str))
        return
    if output_format == "yaml":
        click.echo(yaml.safe_dump(dict(schema.source), sort_keys=False, allow_unicode=True))
        return

    details = [
        ("Slug", schema.slug),
        ("Type", _kind_name(schema.kind)),
        ("Label", schema.label or ""),
        ("Singular label", schema.display_singular_label),
        ("Description", schema.description or ""),
        ("REST", _yes_no(schema.rest_enabled)),
        ("Source", str(schema.source_path or "")),
    ]
    for line in _table(("Property", "Value"), details):
        click.echo(line)
    if schema.fields:
        click.echo("")
        field_rows = [
            (field.key, field.field_type or "", field.label or "", _yes_no(field.required))
            for field in schema.fields
        ]
        for line in _table(("Field", "Type", "Label", "Required"), field_rows):
            click.echo(line)


@cli.command(name="validate")
@click.argument("slug")
@_type_option(allow_all=False, default="post-type")
@pass_state
def validate(state: _CliState, slug: str, type_option: str) -> None:
    """Validate one schema; exits non-zero when it has errors."""
    schema = _load_schema(state, slug, _KIND_OPTIONS[type_option])
    errors = validate_schema(schema)
    if errors:
        for error in errors:
            click.echo(f"  - {error}")
        raise CliError(f"Schema '{slug}' has {len(errors)} validation error(s).")
    click.echo(f"Schema '{slug}' is valid.")


@cli.command(name="validate-all")
@_type_option(allow_all=True, default="all")
@pass_state
def validate_all(state: _CliState, type_option: str) -> None:
    """Validate every loaded schema; exits non-zero when any has errors."""
    invalid: list[str] = []
    checked = 0
    for kind in _kinds(type_option):
        for slug, schema in _collection(state, kind).items():
            checked += 1
            errors = validate_schema(schema)
            if not errors:
                click.echo(f"OK      {_kind_name(kind)} {slug}")
                continue
            invalid.append(slug)
            click.echo(f"FAILED  {_kind_name(kind)} {slug}")
            for error in errors:
                click.echo(f"  - {error}")
    if invalid:
        raise CliError(f"{len(invalid)} of {checked} schema(s) failed validation.")
    click.echo(f"All {checked} schema(s) are valid.")


@cli.command(name="create")
@click.argument("slug")
@click.option(
    "--prompt",
    "prompt",
    required=True,
    help="Description stored verbatim in the new schema",
)
@_type_option(allow_all=False, default="post-type")
@click.option(
    "--field",
    "field_names",
    multiple=True,
    help="Extra field name; repeatable, the type is guessed from the name",
)
@click.option(
    "--overwrite",
    is_flag=True,
    default=False,
    help="Replace an existing schema file",
)
@pass_state
def create(
    state: _CliState,
    slug: str,
    prompt: str,
    type_option: str,
    field_names: tuple[str, ...],
    overwrite: bool,
) -> None:
    """Write a starter schema file for SLUG."""
    kind = _KIND_OPTIONS[type_option]
    try:
        written = write_schema_scaffold(
            state.repository.directory(kind),
            slug,
            prompt,
            kind=kind,
            field_names=field_names,
            overwrite=overwrite,
        )
    except ScaffoldError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(written))


@cli.command(name="export")
@click.argument("slug")
@_type_option(allow_all=False, default="post-type")
@click.option(
    "--output",
    "output_dir",
    required=False,
    type=click.Path(path_type=str),
    help="Directory for the generated unit (default: typescript.output_dir)",
)
@pass_state
def export(state: _CliState, slug: str, type_option: str, output_dir: str | None) -> None:
    """Generate TypeScript definitions for one schema."""
    schema = _load_schema(state, slug, _KIND_OPTIONS[type_option])
    destination = _output_dir(state, output_dir)
    output_path = destination / f"{schema.slug or slug}.ts"
    try:
        destination.mkdir(parents=True, exist_ok=True)
        output_path.write_text(emit_typescript(schema), encoding="utf-8")
    except OSError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(output_path.resolve()))


@cli.command(name="export-all")
@_type_option(allow_all=True, default="post-type")
@click.option(
    "--output",
    "output_dir",
    required=False,
    type=click.Path(path_type=str),
    help="Directory for the generated units (default: typescript.output_dir)",
)
@pass_state
def export_all(state: _CliState, type_option: str, output_dir: str | None) -> None:
    """Generate TypeScript definitions for every loaded schema plus an index."""
    schemas: dict[str, SchemaDocument] = {}
    for kind in _kinds(type_option):
        for slug, schema in _collection(state, kind).items():
            if slug in schemas:
                logger.warning("Skipping %s %s: unit name already used", _kind_name(kind), slug)
                continue
            schemas[slug] = schema
    try:
        generated = emit_collection(schemas, _output_dir(state, output_dir))
    except OSError as exc:
        raise CliError(str(exc)) from exc
    for path in generated:
        click.echo(str(path.resolve()))
    click.echo(f"Generated {len(generated)} TypeScript unit(s).")


@cli.command(name="register")
@click.option(
    "--slug",
    "slug",
    required=False,
    help="Register only this post type",
)
@click.option(
    "--output",
    "manifest_path",
    required=False,
    type=click.Path(path_type=str),
    help="Registration manifest to write (default: registration.manifest_path)",
)
@pass_state
def register_content(state: _CliState, slug: str | None, manifest_path: str | None) -> None:
    """Run a registration pass into the registration manifest."""
    destination = _manifest_path(state, manifest_path)
    try:
        registrar = ManifestRegistrar.load(destination) if slug else ManifestRegistrar()
        summary = run_registration_pass(state.repository, registrar, post_type=slug)
        written = registrar.write(destination)
    except (SchemaError, RegistrationError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(
        f"Registered {len(summary.post_types)} post type(s), "
        f"{len(summary.taxonomies)} taxonomy(ies), {len(summary.field_groups)} field group(s)."
    )
    click.echo(str(written))


@cli.command(name="flush")
@click.option(
    "--output",
    "manifest_path",
    required=False,
    type=click.Path(path_type=str),
    help="Registration manifest to update (default: registration.manifest_path)",
)
@pass_state
def flush(state: _CliState, manifest_path: str | None) -> None:
    """Request a rewrite rule flush in the registration manifest."""
    destination = _manifest_path(state, manifest_path)
    try:
        registrar = ManifestRegistrar.load(destination)
        registrar.flush_rewrite_rules()
        written = registrar.write(destination)
    except RegistrationError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(written))


@cli.command(name="document")
@click.argument("slug")
@_type_option(allow_all=False, default="post-type")
@pass_state
def document(state: _CliState, slug: str, type_option: str) -> None:
    """Print Markdown documentation for one schema."""
    click.echo(render_schema_markdown(_load_schema(state, slug, _KIND_OPTIONS[type_option])))


def _load_schema(state: _CliState, slug: str, kind: SchemaKind) -> SchemaDocument:
    try:
        return state.repository.load_schema(slug, kind)
    except SchemaError as exc:
        raise CliError(str(exc)) from exc


def _collection(state: _CliState, kind: SchemaKind) -> dict[str, SchemaDocument]:
    try:
        return dict(state.repository.collection(kind))
    except SchemaError as exc:
        raise CliError(str(exc)) from exc


def _output_dir(state: _CliState, output_dir: str | None) -> Path:
    if output_dir is not None:
        return Path(output_dir)
    return state.configuration.typescript.output_dir


def _manifest_path(state: _CliState, manifest_path: str | None) -> Path:
    if manifest_path is not None:
        return Path(manifest_path)
    return state.configuration.registration.manifest_path


def _yes_no(flag: bool) -> str:
    return "yes" if flag else "no"


def _kind_name(kind: SchemaKind) -> str:
    return "post-type" if kind is SchemaKind.POST_TYPE else "taxonomy"


def _table(headers: tuple[str, ...], rows: Iterable[tuple[str, ...]]) -> list[str]:
    materialized = [headers, *rows]
    widths = [max(len(row[index]) for row in materialized) for index in range(len(headers))]
    lines = []
    for position, row in enumerate(materialized):
        lines.append("  ".join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip())
        if position == 0:
            lines.append("  ".join("-" * width for width in widths))
    return lines


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
