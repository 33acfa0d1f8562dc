"""Structural decomposition of type expressions into type shapes."""

from __future__ import annotations

from typing import List, Optional

from ..models import PLACEHOLDER, TypeShape
from ..syntax import (
    ArrayOf,
    IntersectionOf,
    NamedReference,
    OpaqueType,
    TypeExpression,
    UnionOf,
)

UNKNOWN_TYPE = "any"
MEMBER_SEPARATOR = " | "


def decompose(expression: Optional[TypeExpression]) -> TypeShape:
    """Return the leaf types and placeholder template of ``expression``.

    Unions and intersections render identically; the separator groups the
    members visually and does not carry their meaning. Whether a leaf names a
    known declaration is not checked here.
    """
    if expression is None:
        return TypeShape((UNKNOWN_TYPE,), PLACEHOLDER)
    if isinstance(expression, NamedReference):
        return TypeShape((expression.name,), PLACEHOLDER)
    if isinstance(expression, ArrayOf):
        inner = decompose(expression.element)
        return TypeShape(inner.leaf_types, inner.format + "[]")
    if isinstance(expression, (UnionOf, IntersectionOf)):
        leaves: List[str] = []
        formats: List[str] = []
        for member in expression.members:
            shape = decompose(member)
            leaves.extend(shape.leaf_types)
            formats.append(shape.format)
        return TypeShape(tuple(leaves), MEMBER_SEPARATOR.join(formats))
    if isinstance(expression, OpaqueType):
        return TypeShape((expression.text,), PLACEHOLDER)
    raise TypeError(f"Unsupported type expression: {expression!r}")


__all__ = ["MEMBER_SEPARATOR", "UNKNOWN_TYPE", "decompose"]
