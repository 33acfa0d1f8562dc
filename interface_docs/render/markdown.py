"""Markdown rendering of linked declarations."""

from __future__ import annotations

from typing import List

from ..logging import get_logger
from ..models import (
    LinkedDocumentation,
    LinkedInterface,
    LinkedTypeAlias,
    LinkedTypeShape,
    LinkSegment,
)
from .table import render_table

TABLES_FORMAT = "tables"
JSON_FORMAT = "json"
OUTPUT_FORMATS = (TABLES_FORMAT, JSON_FORMAT)
_FORMAT_ALIASES = {"table": TABLES_FORMAT}

TABLE_HEADERS = ("Property", "Type", "Optional", "Default", "Description", "Example")


def normalize_format(value: str) -> str:
    """Return the canonical output format name, raising ``ValueError`` when unknown."""
    lowered = value.strip().lower()
    lowered = _FORMAT_ALIASES.get(lowered, lowered)
    if lowered not in OUTPUT_FORMATS:
        raise ValueError(f"Invalid format: {value}")
    return lowered


def render_shape(shape: LinkedTypeShape, *, html: bool = False) -> str:
    """Render a linked type; links become markdown links or, with ``html``, anchors."""
    rendered: List[str] = []
    for segment in shape.segments:
        if isinstance(segment, LinkSegment):
            target = segment.target
            rendered.append(
                f'<a href="#{target}">{target}</a>' if html else f"[{target}](#{target})"
            )
        else:
            rendered.append(segment.text)
    return "".join(rendered)


class MarkdownRenderer:
    """Renders one ``##`` section per declaration, in mapping order."""

    def __init__(self, output_format: str = TABLES_FORMAT) -> None:
        self.output_format = normalize_format(output_format)
        self.logger = get_logger("render")

    def render(self, docs: LinkedDocumentation) -> str:
        out: List[str] = []
        for name, doc in docs.items():
            out.append(f"\n## {name}\n")
            if doc.description:
                out.append(f"{doc.description}  \n")

            if isinstance(doc, LinkedTypeAlias):
                out.append(f"Type: {render_shape(doc.shape)}\n")
            elif self.output_format == TABLES_FORMAT:
                self.logger.debug("Generating table for %s", name)
                out.append(self.render_table(doc))
            else:
                self.logger.debug("Generating JSON for %s", name)
                out.append(self.render_json(doc))

            if doc.example:
                out.append(f"\nExample: \n{doc.example}")
        return "".join(out)

    @staticmethod
    def render_table(doc: LinkedInterface) -> str:
        rows = [
            (
                prop.name,
                render_shape(prop.shape),
                "Yes" if prop.optional else "No",
                prop.default if prop.default is not None else "-",
                prop.description or "",
                prop.example or "",
            )
            for prop in doc.properties
        ]
        return render_table(TABLE_HEADERS, rows)

    @staticmethod
    def render_json(doc: LinkedInterface) -> str:
        lines: List[str] = ["<pre>", "{"]
        for prop in doc.properties:
            if prop.description:
                lines.extend(f"  // {line}" for line in prop.description.split("\n"))
            if prop.default:
                lines.append(f"  // Defaults to: {prop.default}")
            if prop.example:
                lines.append(f"  // Example: {prop.example}")
            marker = "?" if prop.optional else ""
            lines.append(
                f"  <strong>{prop.name}</strong>{marker}: {render_shape(prop.shape, html=True)},"
            )
        lines.extend(["}", "</pre>"])
        return "".join(f"{line}\n" for line in lines)


def render_markdown(docs: LinkedDocumentation, output_format: str = TABLES_FORMAT) -> str:
    """Render linked documentation in the ``tables`` or ``json`` format."""
    return MarkdownRenderer(output_format).render(docs)


__all__ = [
    "JSON_FORMAT",
    "MarkdownRenderer",
    "OUTPUT_FORMATS",
    "TABLES_FORMAT",
    "TABLE_HEADERS",
    "normalize_format",
    "render_markdown",
    "render_shape",
]
