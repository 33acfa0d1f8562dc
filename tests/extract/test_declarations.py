"""Tests for the declaration extractor."""

from __future__ import annotations

from interface_docs.diagnostics import DiagnosticCollector
from interface_docs.extract import extract_declarations
from interface_docs.models import InterfaceDeclaration, TypeAliasDeclaration, TypeShape
from interface_docs.syntax import ArrayOf, ImportStatement, OtherMember, OtherStatement
from tests._fixtures.builders import alias, comment, interface, prop, ref


def test_exported_declarations_are_kept_in_source_order(diagnostics: DiagnosticCollector) -> None:
    statements = [
        alias("Id", "string"),
        interface("User", prop("id", "Id")),
    ]
    declarations = extract_declarations(statements, diagnostics)

    assert [decl.name for decl in declarations] == ["Id", "User"]
    assert isinstance(declarations[0], TypeAliasDeclaration)
    assert isinstance(declarations[1], InterfaceDeclaration)
    assert list(diagnostics) == []


def test_non_exported_declarations_are_dropped(diagnostics: DiagnosticCollector) -> None:
    statements = [
        interface("Hidden", prop("x", "string"), exported=False),
        alias("Secret", "string", exported=False),
        interface("Shown", prop("x", "string")),
    ]
    declarations = extract_declarations(statements, diagnostics)

    assert [decl.name for decl in declarations] == ["Shown"]
    assert list(diagnostics) == [
        "Skipping non-exported interface Hidden",
        "Skipping non-exported type Secret",
    ]


def test_non_property_members_are_skipped(diagnostics: DiagnosticCollector) -> None:
    statement = interface(
        "Service",
        prop("name", "string"),
        OtherMember(kind="method_signature", text="start(): void;", name="start"),
        OtherMember(kind="index_signature", text="[key: string]: unknown"),
    )
    (declaration,) = extract_declarations([statement], diagnostics)

    assert isinstance(declaration, InterfaceDeclaration)
    assert [p.name for p in declaration.properties] == ["name"]
    assert list(diagnostics) == [
        "Skipping non-property member start of Service",
        "Skipping non-property member [key: string]: unknown of Service",
    ]


def test_imports_and_other_statements_contribute_nothing(
    diagnostics: DiagnosticCollector,
) -> None:
    statements = [
        ImportStatement(text="import { A } from './a';"),
        OtherStatement(kind="function_declaration", text="function f() {", name="f"),
    ]
    assert extract_declarations(statements, diagnostics) == []
    assert list(diagnostics) == [
        "Importing is not supported yet, ignoring import { A } from './a';",
        "Skipping unsupported statement f (function_declaration)",
    ]


def test_missing_annotation_falls_back_to_any(diagnostics: DiagnosticCollector) -> None:
    (declaration,) = extract_declarations([interface("Loose", prop("value"))], diagnostics)

    assert isinstance(declaration, InterfaceDeclaration)
    assert declaration.properties[0].shape == TypeShape(("any",), "{}")
    assert list(diagnostics) == ["Type of Loose.value falls back to 'any'"]


def test_property_docs_and_flags_are_extracted() -> None:
    statement = interface(
        "Options",
        prop(
            "tags",
            ArrayOf(ref("Tag")),
            optional=True,
            doc=comment("Labels to apply", default="[]", example="['a']"),
        ),
        doc=comment("Runtime options", example="{ tags: [] }"),
    )
    (declaration,) = extract_declarations([statement])

    assert isinstance(declaration, InterfaceDeclaration)
    assert declaration.description == "Runtime options"
    assert declaration.example == "{ tags: [] }"
    tags = declaration.properties[0]
    assert tags.optional is True
    assert tags.shape == TypeShape(("Tag",), "{}[]")
    assert tags.description == "Labels to apply"
    assert tags.default == "[]"
    assert tags.example == "['a']"


def test_type_alias_shape_and_docs() -> None:
    statement = alias("Ids", ArrayOf(ref("Id")), doc=comment("All ids", example="['a']"))
    (declaration,) = extract_declarations([statement])

    assert declaration == TypeAliasDeclaration(
        name="Ids",
        shape=TypeShape(("Id",), "{}[]"),
        description="All ids",
        example="['a']",
    )
