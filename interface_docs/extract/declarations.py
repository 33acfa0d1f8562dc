"""Turns source statements into documentable declarations."""

from __future__ import annotations

from typing import Iterable, List, Optional

from ..diagnostics import DiagnosticSink, null_sink
from ..logging import get_logger
from ..models import (
    Declaration,
    InterfaceDeclaration,
    PropertyDeclaration,
    TypeAliasDeclaration,
    TypeShape,
)
from ..syntax import (
    ImportStatement,
    InterfaceStatement,
    OtherMember,
    PropertyMember,
    SourceStatement,
    TypeAliasStatement,
)
from .comments import extract_doc_comment
from .shapes import UNKNOWN_TYPE, decompose


class DeclarationExtractor:
    """Keeps exported interfaces and type aliases, in source order."""

    def __init__(self, diagnostics: DiagnosticSink | None = None) -> None:
        self.diagnostics = diagnostics if diagnostics is not None else null_sink
        self.logger = get_logger("extract")

    def extract(self, statements: Iterable[SourceStatement]) -> List[Declaration]:
        declarations: List[Declaration] = []
        for statement in statements:
            if isinstance(statement, InterfaceStatement):
                if not statement.exported:
                    self.diagnostics(f"Skipping non-exported interface {statement.name}")
                    continue
                declarations.append(self._extract_interface(statement))
            elif isinstance(statement, TypeAliasStatement):
                if not statement.exported:
                    self.diagnostics(f"Skipping non-exported type {statement.name}")
                    continue
                declarations.append(self._extract_type_alias(statement))
            elif isinstance(statement, ImportStatement):
                self.diagnostics(f"Importing is not supported yet, ignoring {statement.text}")
            else:
                label = statement.name or statement.text
                self.diagnostics(f"Skipping unsupported statement {label} ({statement.kind})")
        return declarations

    def _extract_interface(self, statement: InterfaceStatement) -> InterfaceDeclaration:
        self.logger.debug("Extracting documentation for interface %s", statement.name)
        properties: List[PropertyDeclaration] = []
        for member in statement.members:
            if isinstance(member, OtherMember):
                label = member.name or member.text
                self.diagnostics(
                    f"Skipping non-property member {label} of {statement.name}"
                )
                continue
            properties.append(self._extract_property(statement.name, member))

        doc = extract_doc_comment(statement.comment)
        return InterfaceDeclaration(
            name=statement.name,
            properties=tuple(properties),
            description=doc.description,
            example=doc.example,
        )

    def _extract_property(self, owner: str, member: PropertyMember) -> PropertyDeclaration:
        shape = decompose(member.type)
        self._check_unknown(shape, owner, member.name)
        doc = extract_doc_comment(member.comment)
        return PropertyDeclaration(
            name=member.name,
            shape=shape,
            optional=member.optional,
            description=doc.description,
            default=doc.default,
            example=doc.example,
        )

    def _extract_type_alias(self, statement: TypeAliasStatement) -> TypeAliasDeclaration:
        self.logger.debug("Extracting documentation for type %s", statement.name)
        shape = decompose(statement.target)
        self._check_unknown(shape, statement.name)
        doc = extract_doc_comment(statement.comment)
        return TypeAliasDeclaration(
            name=statement.name,
            shape=shape,
            description=doc.description,
            example=doc.example,
        )

    def _check_unknown(self, shape: TypeShape, owner: str, prop: Optional[str] = None) -> None:
        if UNKNOWN_TYPE in shape.leaf_types:
            label = f"{owner}.{prop}" if prop is not None else owner
            self.diagnostics(f"Type of {label} falls back to '{UNKNOWN_TYPE}'")


def extract_declarations(
    statements: Iterable[SourceStatement], diagnostics: DiagnosticSink | None = None
) -> List[Declaration]:
    """Return the exported interface and type-alias declarations of ``statements``."""
    return DeclarationExtractor(diagnostics).extract(statements)


__all__ = ["DeclarationExtractor", "extract_declarations"]
