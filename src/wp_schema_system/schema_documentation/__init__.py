"""Schema documentation exports."""

from .markdown_writer import render_schema_markdown

__all__ = ["render_schema_markdown"]
