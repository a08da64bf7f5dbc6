"""Starter schema scaffold tests."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from wp_schema_system.schema_management.schema_models import SchemaKind
from wp_schema_system.schema_management.schema_parsing import parse_schema_file
from wp_schema_system.schema_management.schema_validation import validate_schema
from wp_schema_system.schema_scaffolding.scaffold_builder import (
    ScaffoldError,
    build_post_type_scaffold,
    infer_field_type,
    write_schema_scaffold,
)


def test_post_type_scaffold_stores_prompt_verbatim() -> None:
    prompt = "A product catalog with prices, SKUs and  extra   spacing"

    scaffold = build_post_type_scaffold("product", prompt)

    assert scaffold["description"] == prompt
    assert scaffold["label"] == "Product"
    assert scaffold["singular_label"] == "Product"
    assert list(scaffold["fields"]) == ["name", "description"]


def test_singular_label_strips_one_trailing_s() -> None:
    assert build_post_type_scaffold("case_studies", "x")["singular_label"] == "Case Studie"
    assert build_post_type_scaffold("events", "x")["singular_label"] == "Event"


def test_written_post_type_scaffold_is_a_valid_schema(tmp_path: Path) -> None:
    written = write_schema_scaffold(tmp_path, "Team Member", "Our staff")

    assert written == (tmp_path / "team_member.yaml").resolve()
    document = parse_schema_file(written, kind=SchemaKind.POST_TYPE)
    assert document.slug == "team_member"
    assert document.description == "Our staff"
    assert validate_schema(document) == []


def test_written_taxonomy_scaffold_is_a_valid_schema(tmp_path: Path) -> None:
    written = write_schema_scaffold(tmp_path, "product-tag", "Tags", kind=SchemaKind.TAXONOMY)

    data = yaml.safe_load(written.read_text(encoding="utf-8"))
    assert data["taxonomy"] == "product-tag"
    assert data["post_types"] == []
    document = parse_schema_file(written, kind=SchemaKind.TAXONOMY)
    assert validate_schema(document) == []


def test_existing_schema_is_not_overwritten_by_default(tmp_path: Path) -> None:
    existing = tmp_path / "product.yaml"
    existing.write_text("post_type: product\n", encoding="utf-8")

    with pytest.raises(ScaffoldError, match="Use --overwrite"):
        write_schema_scaffold(tmp_path, "product", "New")

    write_schema_scaffold(tmp_path, "product", "New", overwrite=True)
    assert "New" in existing.read_text(encoding="utf-8")


def test_unusable_slug_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(ScaffoldError, match="Cannot derive a valid slug"):
        write_schema_scaffold(tmp_path, "!!!", "Nothing")


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        ("contact_email", "email"),
        ("website", "url"),
        ("product_images", "gallery"),
        ("featured_image", "image"),
        ("is_featured", "true_false"),
        ("unit_price", "number"),
        ("event_date", "date_picker"),
        ("start_time", "time_picker"),
        ("speaker_bio", "textarea"),
        ("ticket_status", "select"),
        ("venue", "text"),
    ],
)
def test_field_type_is_guessed_from_key_words(key: str, expected: str) -> None:
    assert infer_field_type(key) == expected


def test_extra_field_names_become_sanitized_keys(tmp_path: Path) -> None:
    written = write_schema_scaffold(
        tmp_path, "event", "Conference sessions", field_names=["Event Date!", "Speaker Bio", "name"]
    )

    fields = yaml.safe_load(written.read_text(encoding="utf-8"))["fields"]
    assert list(fields) == ["name", "description", "event_date", "speaker_bio"]
    assert fields["event_date"] == {"type": "date_picker", "label": "Event Date"}
    assert fields["name"]["required"] is True
    assert validate_schema(parse_schema_file(written, kind=SchemaKind.POST_TYPE)) == []


def test_field_name_without_usable_characters_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(ScaffoldError, match="Cannot derive a field key"):
        write_schema_scaffold(tmp_path, "event", "x", field_names=["!!!"])

    assert not (tmp_path / "event.yaml").exists()
