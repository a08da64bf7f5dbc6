"""Schema management entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any


class SchemaKind(str, Enum):
    """Discriminator between post type and taxonomy schema documents."""

    POST_TYPE = "post_type"
    TAXONOMY = "taxonomy"


class FieldType(str, Enum):
    """Closed set of supported field types."""

    TEXT = "text"
    TEXTAREA = "textarea"
    NUMBER = "number"
    EMAIL = "email"
    URL = "url"
    PASSWORD = "password"
    SELECT = "select"
    CHECKBOX = "checkbox"
    RADIO = "radio"
    TRUE_FALSE = "true_false"
    WYSIWYG = "wysiwyg"
    OEMBED = "oembed"
    IMAGE = "image"
    FILE = "file"
    GALLERY = "gallery"
    POST_OBJECT = "post_object"
    RELATIONSHIP = "relationship"
    TAXONOMY = "taxonomy"
    USER = "user"
    REPEATER = "repeater"
    GROUP = "group"
    FLEXIBLE_CONTENT = "flexible_content"
    DATE_PICKER = "date_picker"
    TIME_PICKER = "time_picker"
    DATE_TIME_PICKER = "date_time_picker"
    COLOR_PICKER = "color_picker"
    GOOGLE_MAP = "google_map"
    LINK = "link"

    @classmethod
    def lookup(cls, value: str) -> FieldType | None:
        """Return the member for a raw type string, or None when it is not supported."""
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True)
class ConditionRule:
    """One `{field, operator, value}` comparison against a sibling field."""

    field: str
    operator: str = "=="
    value: Any = ""


ConditionalLogic = tuple[tuple[ConditionRule, ...], ...]


@dataclass(frozen=True)
class FieldSpec:  # pylint: disable=too-many-instance-attributes
    """One field definition; composite types nest further FieldSpecs."""

    key: str
    field_type: str
    label: str | None = None
    instructions: str | None = None
    required: bool = False
    default_value: Any = None
    placeholder: str | None = None
    choices: tuple[tuple[str, str], ...] = ()
    multiple: bool = False
    return_format: str | None = None
    related_post_types: tuple[str, ...] = ()
    sub_fields: tuple[FieldSpec, ...] = ()
    layouts: tuple[FlexibleLayout, ...] = ()
    conditional_logic: ConditionalLogic = ()
    source: Mapping[str, Any] = field(default_factory=dict)

    @property
    def known_type(self) -> FieldType | None:
        """Return the typed field kind, or None for types outside the closed set."""
        return FieldType.lookup(self.field_type)

    def option(self, name: str, default: Any = None) -> Any:
        """Return a raw option value from the schema, falling back to `default`."""
        value = self.source.get(name)
        return default if value is None else value


@dataclass(frozen=True)
class FlexibleLayout:
    """One named layout of a flexible content field."""

    key: str
    label: str | None
    display: str
    sub_fields: tuple[FieldSpec, ...] = ()
    source: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class RewriteConfig:
    """Permalink rewrite settings."""

    slug: str | None = None
    with_front: bool | None = None

    def as_args(self) -> dict[str, Any]:
        """Render only the keys that were configured."""
        args: dict[str, Any] = {}
        if self.slug is not None:
            args["slug"] = self.slug
        if self.with_front is not None:
            args["with_front"] = self.with_front
        return args


@dataclass(frozen=True)
class RestApiConfig:
    """REST API overrides."""

    enabled: bool | None = None
    base: str | None = None
    controller: str | None = None


@dataclass(frozen=True)
class PostTypeSchema:  # pylint: disable=too-many-instance-attributes
    """Parsed post type schema document."""

    slug: str
    label: str | None
    singular_label: str | None = None
    description: str | None = None
    public: bool | None = None
    show_in_rest: bool | None = None
    hierarchical: bool | None = None
    has_archive: bool | None = None
    supports: tuple[str, ...] | None = None
    rewrite: RewriteConfig | None = None
    rest_api: RestApiConfig = field(default_factory=RestApiConfig)
    menu_icon: str | None = None
    fields: tuple[FieldSpec, ...] = ()
    taxonomies: tuple[str, ...] = ()
    source: Mapping[str, Any] = field(default_factory=dict)
    source_path: Path | None = None

    kind = SchemaKind.POST_TYPE

    @property
    def display_singular_label(self) -> str:
        """Singular label, derived from the plural label when not declared."""
        return self.singular_label or self.label or self.slug

    @property
    def rest_enabled(self) -> bool:
        """True when the schema exposes itself through the REST API."""
        return bool(self.show_in_rest) or bool(self.rest_api.enabled)


@dataclass(frozen=True)
class TaxonomySchema:  # pylint: disable=too-many-instance-attributes
    """Parsed taxonomy schema document."""

    slug: str
    label: str | None
    singular_label: str | None = None
    description: str | None = None
    public: bool | None = None
    show_in_rest: bool | None = None
    hierarchical: bool | None = None
    show_ui: bool | None = None
    show_in_menu: bool | None = None
    show_in_nav_menus: bool | None = None
    show_tagcloud: bool | None = None
    show_admin_column: bool | None = None
    query_var: bool | str | None = None
    rewrite: RewriteConfig | None = None
    rest_api: RestApiConfig = field(default_factory=RestApiConfig)
    capabilities: Mapping[str, str] | None = None
    post_types: tuple[str, ...] = ()
    fields: tuple[FieldSpec, ...] = ()
    source: Mapping[str, Any] = field(default_factory=dict)
    source_path: Path | None = None

    kind = SchemaKind.TAXONOMY

    @property
    def display_singular_label(self) -> str:
        """Singular label, derived from the plural label when not declared."""
        return self.singular_label or self.label or self.slug

    @property
    def rest_enabled(self) -> bool:
        """True when the schema exposes itself through the REST API."""
        return bool(self.show_in_rest) or bool(self.rest_api.enabled)


SchemaDocument = PostTypeSchema | TaxonomySchema


@dataclass(frozen=True)
class ValidationError:
    """One reported schema defect; validation collects these instead of raising."""

    message: str
    field_path: str | None = None

    def __str__(self) -> str:
        return self.message
