"""Generate cross-linked markdown documentation from TypeScript declarations."""

from .pipeline import (
    DocumentationJob,
    DocumentationPipeline,
    document_statements,
    generate_documentation,
)

__all__ = [
    "DocumentationJob",
    "DocumentationPipeline",
    "document_statements",
    "generate_documentation",
]
