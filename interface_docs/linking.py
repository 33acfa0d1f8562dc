"""Cross-reference resolution from type shapes to linked type shapes."""

from __future__ import annotations

from typing import AbstractSet, Iterable, List, Optional, Sequence

from .diagnostics import DiagnosticSink, null_sink
from .logging import get_logger
from .models import (
    PLACEHOLDER,
    Declaration,
    DeclarationSet,
    InterfaceDeclaration,
    LinkedDeclaration,
    LinkedDocumentation,
    LinkedInterface,
    LinkedProperty,
    LinkedTypeAlias,
    LinkedTypeShape,
    LinkSegment,
    Segment,
    TextSegment,
    TypeAliasDeclaration,
    TypeShape,
)

DEFAULT_INLINE_TYPES = ("string", "number", "boolean", "any")
_QUOTES = ("'", '"', "`")


def is_quoted_literal(leaf: str) -> bool:
    return len(leaf) >= 2 and leaf[0] in _QUOTES and leaf[-1] == leaf[0]


def build_declaration_set(
    declarations: Iterable[Declaration], diagnostics: DiagnosticSink | None = None
) -> DeclarationSet:
    """Index declarations by name; a repeated name keeps its first position but the last value."""
    emit = diagnostics if diagnostics is not None else null_sink
    declaration_set: DeclarationSet = {}
    for declaration in declarations:
        if declaration.name in declaration_set:
            emit(f"Duplicate declaration {declaration.name}, keeping the last one")
        declaration_set[declaration.name] = declaration
    return declaration_set


class LinkResolver:
    """Resolves every leaf of every type shape to inline text or a link.

    Inline type names and quoted literals become text. Other leaves link to the
    declaration they name, except aliases that boil down to a single inline
    leaf (``type Id = string``), which are inlined. Leaves naming nothing stay
    as text and are reported to the diagnostic sink.
    """

    def __init__(
        self,
        diagnostics: DiagnosticSink | None = None,
        *,
        inline_types: Sequence[str] = DEFAULT_INLINE_TYPES,
    ) -> None:
        self.diagnostics = diagnostics if diagnostics is not None else null_sink
        self.inline_types = frozenset(inline_types)
        self.logger = get_logger("linking")
        self._declarations: DeclarationSet = {}

    def resolve(self, declarations: Iterable[Declaration]) -> LinkedDocumentation:
        self._declarations = build_declaration_set(declarations, self.diagnostics)
        self.logger.debug("Resolving links across %d declarations", len(self._declarations))
        linked: LinkedDocumentation = {}
        for name, declaration in self._declarations.items():
            linked[name] = self._link_declaration(declaration)
        return linked

    def _link_declaration(self, declaration: Declaration) -> LinkedDeclaration:
        if isinstance(declaration, TypeAliasDeclaration):
            return LinkedTypeAlias(
                name=declaration.name,
                shape=self.link_shape(declaration.shape, declaration.name),
                description=declaration.description,
                example=declaration.example,
            )
        if isinstance(declaration, InterfaceDeclaration):
            properties = tuple(
                LinkedProperty(
                    name=prop.name,
                    shape=self.link_shape(prop.shape, f"{declaration.name}.{prop.name}"),
                    optional=prop.optional,
                    description=prop.description,
                    default=prop.default,
                    example=prop.example,
                )
                for prop in declaration.properties
            )
            return LinkedInterface(
                name=declaration.name,
                properties=properties,
                description=declaration.description,
                example=declaration.example,
            )
        raise TypeError(f"Unsupported declaration: {declaration!r}")

    def link_shape(self, shape: TypeShape, owner: str) -> LinkedTypeShape:
        """Return the linked form of ``shape``; ``owner`` names it in diagnostics."""
        parts = shape.template_parts()
        segments: List[Segment] = []
        for index, leaf in enumerate(shape.leaf_types):
            _append(segments, TextSegment(parts[index]))
            _append(segments, self._resolve_leaf(leaf, owner))
        _append(segments, TextSegment(parts[-1]))
        return LinkedTypeShape(tuple(segments))

    def _resolve_leaf(self, leaf: str, owner: str) -> Segment:
        if self._is_inline(leaf):
            return TextSegment(leaf)
        inlined = self._alias_inline_text(leaf, frozenset())
        if inlined is not None:
            return TextSegment(inlined)
        if leaf in self._declarations:
            return LinkSegment(leaf)
        self.diagnostics(f"Could not resolve type link for {owner}: {leaf}")
        return TextSegment(leaf)

    def _is_inline(self, leaf: str) -> bool:
        return leaf in self.inline_types or is_quoted_literal(leaf)

    def _alias_inline_text(self, name: str, seen: AbstractSet[str]) -> Optional[str]:
        declaration = self._declarations.get(name)
        if not isinstance(declaration, TypeAliasDeclaration):
            return None
        shape = declaration.shape
        if len(shape.leaf_types) != 1 or shape.format != PLACEHOLDER:
            return None
        target = shape.leaf_types[0]
        if self._is_inline(target):
            return target
        if target in seen:
            return None
        return self._alias_inline_text(target, seen | {name})


def _append(segments: List[Segment], segment: Segment) -> None:
    if isinstance(segment, TextSegment):
        if not segment.text:
            return
        if segments and isinstance(segments[-1], TextSegment):
            segments[-1] = TextSegment(segments[-1].text + segment.text)
            return
    segments.append(segment)


def resolve_links(
    declarations: Iterable[Declaration],
    diagnostics: DiagnosticSink | None = None,
    *,
    inline_types: Sequence[str] = DEFAULT_INLINE_TYPES,
) -> LinkedDocumentation:
    """Link every declaration's type shapes, keeping declaration order."""
    return LinkResolver(diagnostics, inline_types=inline_types).resolve(declarations)


__all__ = [
    "DEFAULT_INLINE_TYPES",
    "LinkResolver",
    "build_declaration_set",
    "is_quoted_literal",
    "resolve_links",
]
