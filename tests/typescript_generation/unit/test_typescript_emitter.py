"""TypeScript emitter tests."""

from __future__ import annotations

from pathlib import Path

from wp_schema_system.schema_management.schema_models import SchemaKind
from wp_schema_system.schema_management.schema_parsing import build_schema_document
from wp_schema_system.typescript_generation.helper_types import HELPER_TYPES
from wp_schema_system.typescript_generation.typescript_emitter import (
    INDEX_FILENAME,
    emit_collection,
    emit_directory,
    emit_typescript,
    write_index,
)


def _contact_schema():
    return build_schema_document(
        {
            "post_type": "contact",
            "label": "Contacts",
            "fields": {
                "contact_name": {"type": "text", "required": True},
                "contact_email": {"type": "email"},
            },
        }
    )


def test_contact_schema_emits_acf_and_post_interfaces() -> None:
    text = emit_typescript(_contact_schema())

    assert (
        "export interface ContactACF {\n  contact_name: string;\n  contact_email?: string;\n}"
        in text
    )
    assert "export interface Contact {" in text
    assert "  type: 'contact';" in text
    assert "  acf: ContactACF;" in text


def test_sections_are_emitted_in_fixed_order() -> None:
    text = emit_typescript(_contact_schema())

    markers = [
        "Generated TypeScript types for Contacts",
        "// ACF Fields Interface",
        "// WordPress Post Interface",
        "// API Response Types",
        "export type ContactResponse = Contact;",
        "export type ContactListResponse = Contact[];",
        "export interface ContactCreateRequest {",
        "export type ContactUpdateRequest = Partial<ContactCreateRequest>;",
        "// WordPress Helper Types",
    ]
    positions = [text.index(marker) for marker in markers]
    assert positions == sorted(positions)
    assert text.endswith(HELPER_TYPES)


def test_header_names_source_file() -> None:
    text = emit_typescript(_contact_schema())

    assert text.startswith(
        "/**\n * Generated TypeScript types for Contacts\n"
        " * @generated from schema: contact.yaml\n */\n"
    )


def test_emission_is_deterministic() -> None:
    assert emit_typescript(_contact_schema()) == emit_typescript(_contact_schema())


def test_field_doc_comments_use_label_and_instructions() -> None:
    document = build_schema_document(
        {
            "post_type": "product",
            "label": "Products",
            "fields": {
                "sku": {
                    "type": "text",
                    "label": "SKU",
                    "instructions": "Stock Keeping Unit */ must be unique",
                }
            },
        }
    )

    text = emit_typescript(document)

    assert "  /** SKU\n   * Stock Keeping Unit *\\/ must be unique\n   */\n  sku?: string;" in text


def test_supports_gate_content_excerpt_and_featured_media() -> None:
    bare = emit_typescript(
        build_schema_document({"post_type": "note", "label": "Notes", "supports": ["title"]})
    )
    full = emit_typescript(
        build_schema_document(
            {
                "post_type": "article",
                "label": "Articles",
                "supports": ["title", "editor", "excerpt", "thumbnail"],
            }
        )
    )

    assert "content: {" not in bare
    assert "excerpt: {" not in bare
    assert "featured_media" not in bare
    assert "content?: string;" not in bare
    assert "  content: {\n    rendered: string;\n    protected: boolean;\n  };" in full
    assert "  excerpt: {" in full
    assert "  featured_media: number;" in full
    assert "  content?: string;" in full
    assert "  excerpt?: string;" in full


def test_referenced_post_types_are_imported() -> None:
    document = build_schema_document(
        {
            "post_type": "product",
            "label": "Products",
            "fields": {
                "maker": {"type": "post_object", "post_type": "company"},
                "related": {"type": "relationship", "post_type": ["product"]},
            },
        }
    )

    text = emit_typescript(document, linked_post_types=["company", "product"])

    assert "import type { Company } from './company';" in text
    assert "import type { Product }" not in text
    assert "  maker?: Company;" in text
    assert "  related?: Product[];" in text


def test_related_post_types_outside_the_batch_are_generic_posts() -> None:
    document = build_schema_document(
        {
            "post_type": "product",
            "label": "Products",
            "fields": {
                "maker": {"type": "post_object", "post_type": "company"},
                "landing": {"type": "post_object", "post_type": "page"},
                "related": {"type": "relationship", "post_type": ["product"]},
            },
        }
    )

    text = emit_typescript(document)

    assert "import type" not in text
    assert "  maker?: WPPost;" in text
    assert "  landing?: WPPost;" in text
    assert "  related?: Product[];" in text


def test_taxonomy_emits_term_interface() -> None:
    document = build_schema_document(
        {
            "taxonomy": "product_category",
            "label": "Product Categories",
            "hierarchical": True,
            "fields": {"icon": {"type": "image", "return_format": "url"}},
        }
    )

    text = emit_typescript(document)

    assert "export interface ProductCategoryACF {\n  icon?: string;\n}" in text
    assert "// WordPress Term Interface" in text
    assert "  taxonomy: 'product_category';" in text
    assert "  parent: number;" in text
    assert "  parent?: number;" in text
    assert "export type ProductCategoryUpdateRequest = Partial<ProductCategoryCreateRequest>;" in (
        text
    )


def test_flat_taxonomy_has_no_parent() -> None:
    text = emit_typescript(build_schema_document({"taxonomy": "tag", "label": "Tags"}))

    assert "parent" not in text.split("// WordPress Helper Types")[0]


def test_emit_directory_writes_units_and_index(tmp_path: Path) -> None:
    schema_dir = tmp_path / "schemas"
    schema_dir.mkdir()
    (schema_dir / "b_product.yaml").write_text("post_type: product\nlabel: Products\n")
    (schema_dir / "a_contact.yaml").write_text("post_type: contact\nlabel: Contacts\n")
    output_dir = tmp_path / "typescript"

    generated = emit_directory(schema_dir, output_dir, kind=SchemaKind.POST_TYPE)

    assert generated == [output_dir / "contact.ts", output_dir / "product.ts"]
    assert (output_dir / "contact.ts").read_text(encoding="utf-8").startswith("/**")
    index = (output_dir / INDEX_FILENAME).read_text(encoding="utf-8")
    assert index.endswith("export * from './contact';\nexport * from './product';\n")


def test_write_index_keeps_given_order(tmp_path: Path) -> None:
    index_path = write_index(["zeta", "alpha"], tmp_path)

    lines = index_path.read_text(encoding="utf-8").splitlines()
    assert lines[-2:] == ["export * from './zeta';", "export * from './alpha';"]


def test_collection_units_import_only_post_types_in_the_collection(tmp_path: Path) -> None:
    schemas = {
        "book": build_schema_document(
            {
                "post_type": "book",
                "label": "Books",
                "fields": {
                    "author": {"type": "post_object", "post_type": "person"},
                    "publisher": {"type": "post_object", "post_type": "publisher"},
                },
            }
        ),
        "person": build_schema_document({"post_type": "person", "label": "People"}),
    }

    emit_collection(schemas, tmp_path)

    book = (tmp_path / "book.ts").read_text(encoding="utf-8")
    assert "import type { Person } from './person';" in book
    assert "  author?: Person;" in book
    assert "  publisher?: WPPost;" in book
    assert "import type { Publisher }" not in book
