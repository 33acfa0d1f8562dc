"""Front ends turning source text into the immutable source model."""

from .jsdoc import is_jsdoc, parse_jsdoc
from .tree_sitter import (
    TREE_SITTER_AVAILABLE,
    ParserUnavailableError,
    TypeScriptSourceParser,
    parse_typescript,
)

__all__ = [
    "ParserUnavailableError",
    "TREE_SITTER_AVAILABLE",
    "TypeScriptSourceParser",
    "is_jsdoc",
    "parse_jsdoc",
    "parse_typescript",
]
