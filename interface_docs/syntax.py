"""Immutable source model handed to the extractors by a parser adapter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class DocFragment:
    """A piece of documentation comment text, optionally filed under a tag."""

    text: str
    tag: Optional[str] = None


@dataclass(frozen=True)
class CommentMetadata:
    """Documentation comment attached to a statement or member."""

    fragments: Tuple[DocFragment, ...] = ()


@dataclass(frozen=True)
class NamedReference:
    name: str


@dataclass(frozen=True)
class ArrayOf:
    element: "TypeExpression"


@dataclass(frozen=True)
class UnionOf:
    members: Tuple["TypeExpression", ...]


@dataclass(frozen=True)
class IntersectionOf:
    members: Tuple["TypeExpression", ...]


@dataclass(frozen=True)
class OpaqueType:
    """Literal values, tuples, generics and every other unsupported form."""

    text: str


TypeExpression = Union[NamedReference, ArrayOf, UnionOf, IntersectionOf, OpaqueType]


@dataclass(frozen=True)
class PropertyMember:
    name: str
    type: Optional[TypeExpression]
    optional: bool = False
    comment: Optional[CommentMetadata] = None


@dataclass(frozen=True)
class OtherMember:
    """Methods, index signatures, call signatures and similar members."""

    kind: str
    text: str
    name: Optional[str] = None


InterfaceMember = Union[PropertyMember, OtherMember]


@dataclass(frozen=True)
class InterfaceStatement:
    name: str
    exported: bool
    members: Tuple[InterfaceMember, ...] = ()
    comment: Optional[CommentMetadata] = None


@dataclass(frozen=True)
class TypeAliasStatement:
    name: str
    exported: bool
    target: Optional[TypeExpression]
    comment: Optional[CommentMetadata] = None


@dataclass(frozen=True)
class ImportStatement:
    text: str


@dataclass(frozen=True)
class OtherStatement:
    kind: str
    text: str
    name: Optional[str] = None


SourceStatement = Union[InterfaceStatement, TypeAliasStatement, ImportStatement, OtherStatement]


__all__ = [
    "ArrayOf",
    "CommentMetadata",
    "DocFragment",
    "ImportStatement",
    "InterfaceMember",
    "InterfaceStatement",
    "IntersectionOf",
    "NamedReference",
    "OpaqueType",
    "OtherMember",
    "OtherStatement",
    "PropertyMember",
    "SourceStatement",
    "TypeAliasStatement",
    "TypeExpression",
    "UnionOf",
]
