"""Tree-sitter powered TypeScript front end producing the immutable source model."""

from __future__ import annotations

from typing import List, Optional, Tuple

from ..logging import get_logger
from ..models import InterfaceDocsError
from ..syntax import (
    ArrayOf,
    CommentMetadata,
    ImportStatement,
    InterfaceMember,
    InterfaceStatement,
    IntersectionOf,
    NamedReference,
    OpaqueType,
    OtherMember,
    OtherStatement,
    PropertyMember,
    SourceStatement,
    TypeAliasStatement,
    TypeExpression,
    UnionOf,
)
from .jsdoc import is_jsdoc, parse_jsdoc

try:  # pragma: no cover - optional dependency
    import tree_sitter_typescript
    from tree_sitter import Language, Parser

    TREE_SITTER_AVAILABLE = True
except ModuleNotFoundError:  # pragma: no cover - optional dependency
    tree_sitter_typescript = None  # type: ignore[assignment]
    Language = None  # type: ignore[assignment]
    Parser = None  # type: ignore[assignment]
    TREE_SITTER_AVAILABLE = False


_NAMED_TYPES = {"type_identifier", "predefined_type", "nested_type_identifier"}
_DECLARATIONS = {"interface_declaration", "type_alias_declaration"}


class ParserUnavailableError(InterfaceDocsError):
    """Raised when the tree-sitter TypeScript grammar is not installed."""


class TypeScriptSourceParser:
    """Maps a TypeScript syntax tree onto statements, members and type expressions."""

    def __init__(self) -> None:
        self._parser: Optional[Parser] = None
        self.logger = get_logger("parsing")

    def parse(self, source: str) -> Tuple[SourceStatement, ...]:
        parser = self._get_parser()
        source_bytes = source.encode("utf-8")
        tree = parser.parse(source_bytes)
        statements: List[SourceStatement] = []
        comment: Optional[CommentMetadata] = None
        for node in tree.root_node.children:
            if node.type == "comment":
                text = self._node_text(node, source_bytes)
                if is_jsdoc(text):
                    comment = parse_jsdoc(text)
                continue
            if not node.is_named:
                continue
            statements.append(self._statement(node, source_bytes, comment))
            comment = None
        self.logger.debug("Parsed %d top-level statements", len(statements))
        return tuple(statements)

    def _get_parser(self) -> Parser:
        if self._parser is not None:
            return self._parser
        if not TREE_SITTER_AVAILABLE:
            raise ParserUnavailableError(
                "TypeScript parsing requires the tree-sitter and tree-sitter-typescript packages"
            )
        language = Language(tree_sitter_typescript.language_typescript())
        self._parser = Parser(language)
        return self._parser

    @staticmethod
    def _node_text(node, source_bytes) -> str:  # type: ignore[no-untyped-def]
        return source_bytes[node.start_byte : node.end_byte].decode("utf-8", errors="ignore")

    def _summary(self, node, source_bytes) -> str:  # type: ignore[no-untyped-def]
        text = self._node_text(node, source_bytes).strip()
        return text.splitlines()[0] if text else node.type

    def _field_text(self, node, field: str, source_bytes) -> Optional[str]:  # type: ignore[no-untyped-def]
        child = node.child_by_field_name(field)
        return self._node_text(child, source_bytes) if child is not None else None

    def _statement(self, node, source_bytes, comment) -> SourceStatement:  # type: ignore[no-untyped-def]
        exported = False
        declaration = self._unwrap_ambient(node)
        if node.type == "export_statement":
            inner = node.child_by_field_name("declaration")
            if inner is not None:
                inner = self._unwrap_ambient(inner)
            if inner is not None and inner.type in _DECLARATIONS:
                exported = True
                declaration = inner

        if declaration.type == "interface_declaration":
            return InterfaceStatement(
                name=self._field_text(declaration, "name", source_bytes) or "",
                exported=exported,
                members=self._members(declaration, source_bytes),
                comment=comment,
            )
        if declaration.type == "type_alias_declaration":
            value = declaration.child_by_field_name("value")
            return TypeAliasStatement(
                name=self._field_text(declaration, "name", source_bytes) or "",
                exported=exported,
                target=self._type(value, source_bytes) if value is not None else None,
                comment=comment,
            )
        if node.type == "import_statement":
            return ImportStatement(text=self._summary(node, source_bytes))

        name_node = node.child_by_field_name("declaration")
        if name_node is None:
            name_node = node
        return OtherStatement(
            kind=node.type,
            text=self._summary(node, source_bytes),
            name=self._field_text(name_node, "name", source_bytes),
        )

    @staticmethod
    def _unwrap_ambient(node):  # type: ignore[no-untyped-def]
        """Return the interface or type alias inside ``declare ...``, else ``node``."""
        if node.type != "ambient_declaration":
            return node
        for child in node.named_children:
            if child.type in _DECLARATIONS:
                return child
        return node

    def _members(self, node, source_bytes) -> Tuple[InterfaceMember, ...]:  # type: ignore[no-untyped-def]
        body = node.child_by_field_name("body")
        if body is None:
            body = next(
                (child for child in node.children if child.type in {"interface_body", "object_type"}),
                None,
            )
        if body is None:
            return ()

        members: List[InterfaceMember] = []
        comment: Optional[CommentMetadata] = None
        for child in body.children:
            if child.type == "comment":
                text = self._node_text(child, source_bytes)
                if is_jsdoc(text):
                    comment = parse_jsdoc(text)
                continue
            if not child.is_named:
                continue
            if child.type == "property_signature":
                members.append(self._property(child, source_bytes, comment))
            else:
                members.append(
                    OtherMember(
                        kind=child.type,
                        text=self._summary(child, source_bytes),
                        name=self._field_text(child, "name", source_bytes),
                    )
                )
            comment = None
        return tuple(members)

    def _property(self, node, source_bytes, comment) -> PropertyMember:  # type: ignore[no-untyped-def]
        annotation = node.child_by_field_name("type")
        type_node = None
        if annotation is not None:
            named = [child for child in annotation.named_children if child.type != "comment"]
            type_node = named[0] if named else None
        return PropertyMember(
            name=self._field_text(node, "name", source_bytes) or "",
            type=self._type(type_node, source_bytes) if type_node is not None else None,
            optional=any(child.type == "?" for child in node.children),
            comment=comment,
        )

    def _type(self, node, source_bytes) -> TypeExpression:  # type: ignore[no-untyped-def]
        if node.type in _NAMED_TYPES:
            return NamedReference(self._node_text(node, source_bytes))
        if node.type == "array_type":
            element = self._type_children(node)
            if element:
                return ArrayOf(self._type(element[0], source_bytes))
        if node.type == "union_type":
            return UnionOf(self._flatten(node, "union_type", source_bytes))
        if node.type == "intersection_type":
            return IntersectionOf(self._flatten(node, "intersection_type", source_bytes))
        return OpaqueType(self._node_text(node, source_bytes))

    def _flatten(self, node, kind: str, source_bytes) -> Tuple[TypeExpression, ...]:  # type: ignore[no-untyped-def]
        members: List[TypeExpression] = []
        for child in self._type_children(node):
            if child.type == kind:
                members.extend(self._flatten(child, kind, source_bytes))
            else:
                members.append(self._type(child, source_bytes))
        return tuple(members)

    @staticmethod
    def _type_children(node) -> list:  # type: ignore[no-untyped-def]
        return [child for child in node.named_children if child.type != "comment"]


def parse_typescript(source: str) -> Tuple[SourceStatement, ...]:
    """Parse TypeScript source text into the source statement model."""
    return TypeScriptSourceParser().parse(source)


__all__ = [
    "ParserUnavailableError",
    "TREE_SITTER_AVAILABLE",
    "TypeScriptSourceParser",
    "parse_typescript",
]
