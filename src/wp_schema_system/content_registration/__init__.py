"""Content registration exports."""

from .registration_args import to_post_type_args, to_taxonomy_args
from .registration_pass import (
    ContentRegistrar,
    ManifestRegistrar,
    RegistrationError,
    RegistrationSummary,
    run_registration_pass,
)

__all__ = [
    "ContentRegistrar",
    "ManifestRegistrar",
    "RegistrationError",
    "RegistrationSummary",
    "run_registration_pass",
    "to_post_type_args",
    "to_taxonomy_args",
]
