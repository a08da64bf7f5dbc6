"""Slug and key normalization helpers."""

from __future__ import annotations

import re

POST_TYPE_SLUG_MAX_LENGTH = 20
TAXONOMY_SLUG_MAX_LENGTH = 32

POST_TYPE_SLUG_PATTERN = re.compile(r"^[a-z0-9_]+$")
TAXONOMY_SLUG_PATTERN = re.compile(r"^[a-z0-9_-]+$")
FIELD_KEY_PATTERN = re.compile(r"^[a-z0-9_]+$")


def sanitize_post_type_slug(slug: str) -> str:
    """Lowercase, replace invalid characters with underscores and cap at 20 characters."""
    normalized = re.sub(r"[^a-z0-9_]", "_", slug.lower())
    normalized = re.sub(r"_+", "_", normalized).strip("_")
    return normalized[:POST_TYPE_SLUG_MAX_LENGTH]


def sanitize_taxonomy_slug(slug: str) -> str:
    """Like `sanitize_post_type_slug`, but hyphens survive and the cap is 32."""
    normalized = re.sub(r"[^a-z0-9_-]", "_", slug.lower())
    normalized = re.sub(r"_+", "_", normalized).strip("_-")
    return normalized[:TAXONOMY_SLUG_MAX_LENGTH]


def sanitize_field_key(key: str) -> str:
    """Turn free text into a field key: spaces become underscores, other symbols are dropped."""
    normalized = key.lower().replace(" ", "_")
    normalized = re.sub(r"[^a-z0-9_]", "", normalized)
    return re.sub(r"_+", "_", normalized).strip("_")


def humanize_key(key: str) -> str:
    """`product_category` -> `Product Category`."""
    words = key.replace("_", " ").replace("-", " ").split(" ")
    return " ".join(word[:1].upper() + word[1:] for word in words)
