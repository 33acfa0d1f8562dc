"""Output rendering for linked documentation."""

from .markdown import (
    JSON_FORMAT,
    OUTPUT_FORMATS,
    TABLES_FORMAT,
    MarkdownRenderer,
    normalize_format,
    render_markdown,
    render_shape,
)
from .table import render_table

__all__ = [
    "JSON_FORMAT",
    "MarkdownRenderer",
    "OUTPUT_FORMATS",
    "TABLES_FORMAT",
    "normalize_format",
    "render_markdown",
    "render_shape",
    "render_table",
]
