"""Field group compilation exports."""

from .field_defaults import FIELD_OPTION_DEFAULTS, option_defaults
from .field_group_builder import (
    CompiledField,
    FieldGroupDescription,
    FieldGroupRegistrar,
    convert_conditional_logic,
    generate_field,
    generate_field_group,
    register,
)

__all__ = [
    "FIELD_OPTION_DEFAULTS",
    "CompiledField",
    "FieldGroupDescription",
    "FieldGroupRegistrar",
    "convert_conditional_logic",
    "generate_field",
    "generate_field_group",
    "option_defaults",
    "register",
]
