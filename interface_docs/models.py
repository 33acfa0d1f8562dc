"""Core data models shared across interface-docs components."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Union

PLACEHOLDER = "{}"


class InterfaceDocsError(RuntimeError):
    """Base class for errors raised by interface-docs."""


class ShapeInvariantError(InterfaceDocsError):
    """Raised when a type shape's leaves and placeholders disagree."""


@dataclass(frozen=True)
class TypeShape:
    """Ordered leaf type names plus a template with one placeholder per leaf."""

    leaf_types: Tuple[str, ...]
    format: str = PLACEHOLDER

    def __post_init__(self) -> None:
        object.__setattr__(self, "leaf_types", tuple(self.leaf_types))
        placeholders = self.format.count(PLACEHOLDER)
        if placeholders != len(self.leaf_types):
            raise ShapeInvariantError(
                f"Type shape {self.format!r} has {placeholders} placeholders "
                f"for {len(self.leaf_types)} leaves {list(self.leaf_types)!r}"
            )

    def template_parts(self) -> Tuple[str, ...]:
        """Fixed template text around the placeholders; one more than the leaves."""
        return tuple(self.format.split(PLACEHOLDER))


@dataclass(frozen=True)
class TextSegment:
    text: str


@dataclass(frozen=True)
class LinkSegment:
    target: str


Segment = Union[TextSegment, LinkSegment]


@dataclass(frozen=True)
class LinkedTypeShape:
    """A type shape whose leaves are resolved to inline text or links."""

    segments: Tuple[Segment, ...]

    @property
    def links(self) -> Tuple[str, ...]:
        return tuple(seg.target for seg in self.segments if isinstance(seg, LinkSegment))

    @property
    def is_inline(self) -> bool:
        return not self.links

    def plain_text(self) -> str:
        """Render without any link markup."""
        return "".join(
            seg.text if isinstance(seg, TextSegment) else seg.target for seg in self.segments
        )


@dataclass(frozen=True)
class PropertyDeclaration:
    name: str
    shape: TypeShape
    optional: bool = False
    description: Optional[str] = None
    default: Optional[str] = None
    example: Optional[str] = None


@dataclass(frozen=True)
class InterfaceDeclaration:
    name: str
    properties: Tuple[PropertyDeclaration, ...] = ()
    description: Optional[str] = None
    example: Optional[str] = None


@dataclass(frozen=True)
class TypeAliasDeclaration:
    name: str
    shape: TypeShape
    description: Optional[str] = None
    example: Optional[str] = None


Declaration = Union[InterfaceDeclaration, TypeAliasDeclaration]
DeclarationSet = Dict[str, Declaration]


@dataclass(frozen=True)
class LinkedProperty:
    name: str
    shape: LinkedTypeShape
    optional: bool = False
    description: Optional[str] = None
    default: Optional[str] = None
    example: Optional[str] = None


@dataclass(frozen=True)
class LinkedInterface:
    name: str
    properties: Tuple[LinkedProperty, ...] = ()
    description: Optional[str] = None
    example: Optional[str] = None


@dataclass(frozen=True)
class LinkedTypeAlias:
    name: str
    shape: LinkedTypeShape
    description: Optional[str] = None
    example: Optional[str] = None


LinkedDeclaration = Union[LinkedInterface, LinkedTypeAlias]
LinkedDocumentation = Dict[str, LinkedDeclaration]


__all__ = [
    "Declaration",
    "DeclarationSet",
    "InterfaceDeclaration",
    "InterfaceDocsError",
    "LinkSegment",
    "LinkedDeclaration",
    "LinkedDocumentation",
    "LinkedInterface",
    "LinkedProperty",
    "LinkedTypeAlias",
    "LinkedTypeShape",
    "PLACEHOLDER",
    "PropertyDeclaration",
    "Segment",
    "ShapeInvariantError",
    "TextSegment",
    "TypeAliasDeclaration",
    "TypeShape",
]
