"""Extraction of declarations, type shapes and doc comments from source statements."""

from .comments import DocComment, extract_doc_comment
from .declarations import DeclarationExtractor, extract_declarations
from .shapes import decompose

__all__ = [
    "DeclarationExtractor",
    "DocComment",
    "decompose",
    "extract_declarations",
    "extract_doc_comment",
]
