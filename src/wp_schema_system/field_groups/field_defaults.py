"""Per-field-type option defaults for compiled field groups.

Every option listed here is always present on a compiled field; the schema
value replaces the default only when the schema sets it.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from wp_schema_system.schema_management.schema_models import FieldType

_IMAGE_CONSTRAINTS: dict[str, Any] = {
    "min_width": "",
    "min_height": "",
    "max_width": "",
    "max_height": "",
    "min_size": "",
    "max_size": "",
    "mime_types": "",
}

_TABLE: dict[FieldType, dict[str, Any]] = {
    FieldType.TEXT: {"maxlength": "", "readonly": 0, "disabled": 0},
    FieldType.TEXTAREA: {
        "rows": 4,
        "maxlength": "",
        "new_lines": "",
        "readonly": 0,
        "disabled": 0,
    },
    FieldType.NUMBER: {"min": "", "max": "", "step": "", "prepend": "", "append": ""},
    FieldType.EMAIL: {"prepend": "", "append": ""},
    FieldType.URL: {"prepend": "", "append": ""},
    FieldType.PASSWORD: {"prepend": "", "append": ""},
    FieldType.SELECT: {
        "choices": {},
        "allow_null": 0,
        "multiple": 0,
        "ui": 0,
        "ajax": 0,
        "return_format": "value",
    },
    FieldType.CHECKBOX: {
        "choices": {},
        "layout": "vertical",
        "toggle": 0,
        "return_format": "value",
        "allow_custom": 0,
    },
    FieldType.RADIO: {
        "choices": {},
        "layout": "vertical",
        "return_format": "value",
        "allow_null": 0,
        "other_choice": 0,
    },
    FieldType.TRUE_FALSE: {"message": "", "ui": 0, "ui_on_text": "", "ui_off_text": ""},
    FieldType.WYSIWYG: {"tabs": "all", "toolbar": "full", "media_upload": 1, "delay": 0},
    FieldType.OEMBED: {"width": "", "height": ""},
    FieldType.IMAGE: {
        "return_format": "array",
        "preview_size": "medium",
        "library": "all",
        **_IMAGE_CONSTRAINTS,
    },
    FieldType.FILE: {
        "return_format": "array",
        "library": "all",
        "min_size": "",
        "max_size": "",
        "mime_types": "",
    },
    FieldType.GALLERY: {
        "return_format": "array",
        "preview_size": "medium",
        "insert": "append",
        "library": "all",
        "min": "",
        "max": "",
        **_IMAGE_CONSTRAINTS,
    },
    FieldType.POST_OBJECT: {
        "post_type": [],
        "taxonomy": [],
        "allow_null": 0,
        "multiple": 0,
        "return_format": "object",
        "ui": 1,
    },
    FieldType.RELATIONSHIP: {
        "post_type": [],
        "taxonomy": [],
        "filters": ["search", "post_type", "taxonomy"],
        "elements": [],
        "min": "",
        "max": "",
        "return_format": "object",
    },
    FieldType.TAXONOMY: {
        "taxonomy": "category",
        "field_type": "checkbox",
        "add_term": 1,
        "save_terms": 1,
        "load_terms": 1,
        "return_format": "id",
        "multiple": 0,
        "allow_null": 0,
    },
    FieldType.USER: {"role": [], "allow_null": 0, "multiple": 0, "return_format": "array"},
    FieldType.REPEATER: {
        "min": 0,
        "max": 0,
        "layout": "table",
        "button_label": "Add Row",
        "collapsed": "",
    },
    FieldType.GROUP: {"layout": "block"},
    FieldType.FLEXIBLE_CONTENT: {"button_label": "Add Row", "min": "", "max": ""},
    FieldType.DATE_PICKER: {"display_format": "m/d/Y", "return_format": "Y-m-d", "first_day": 1},
    FieldType.TIME_PICKER: {"display_format": "g:i a", "return_format": "H:i:s"},
    FieldType.DATE_TIME_PICKER: {
        "display_format": "m/d/Y g:i a",
        "return_format": "Y-m-d H:i:s",
        "first_day": 1,
    },
    FieldType.COLOR_PICKER: {"enable_opacity": 0, "return_format": "string"},
    FieldType.GOOGLE_MAP: {"center_lat": "", "center_lng": "", "zoom": "", "height": ""},
    FieldType.LINK: {"return_format": "array"},
}

FIELD_OPTION_DEFAULTS: Mapping[FieldType, Mapping[str, Any]] = MappingProxyType(
    {field_type: MappingProxyType(options) for field_type, options in _TABLE.items()}
)

LAYOUT_DEFAULTS: Mapping[str, Any] = MappingProxyType({"display": "block", "min": "", "max": ""})

FIELD_GROUP_DISPLAY_DEFAULTS: Mapping[str, Any] = MappingProxyType(
    {
        "menu_order": 0,
        "position": "normal",
        "style": "default",
        "label_placement": "top",
        "instruction_placement": "label",
        "hide_on_screen": "",
        "active": True,
    }
)


def option_defaults(field_type: FieldType) -> Mapping[str, Any]:
    """Return the default options for one field type."""
    return FIELD_OPTION_DEFAULTS[field_type]
