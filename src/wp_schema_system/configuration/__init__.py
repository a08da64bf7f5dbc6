"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, default_configuration, load_configuration
from .runtime_settings import (
    Configuration,
    LoggingSettings,
    RegistrationSettings,
    SchemaSettings,
    TypeScriptSettings,
)

__all__ = [
    "Configuration",
    "LoggingSettings",
    "RegistrationSettings",
    "SchemaSettings",
    "TypeScriptSettings",
    "ConfigurationError",
    "default_configuration",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
