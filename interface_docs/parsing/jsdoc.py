"""Parses ``/** ... */`` blocks into comment metadata."""

from __future__ import annotations

import re
from typing import List, Optional

from ..syntax import CommentMetadata, DocFragment

_TAG_PATTERN = re.compile(r"^@(\w+)\s*(.*)$")


def is_jsdoc(text: str) -> bool:
    stripped = text.strip()
    return stripped.startswith("/**") and stripped.endswith("*/") and stripped != "/**/"


def parse_jsdoc(text: str) -> Optional[CommentMetadata]:
    """Split a JSDoc block into a free-text description and tagged fragments.

    Returns ``None`` for anything that is not a JSDoc block. A tag's text runs
    until the next line starting with ``@``.
    """
    if not is_jsdoc(text):
        return None
    body = text.strip()[3:-2]

    fragments: List[DocFragment] = []
    tag: Optional[str] = None
    lines: List[str] = []

    def _flush() -> None:
        content = _join(lines)
        if tag is not None or content:
            fragments.append(DocFragment(text=content, tag=tag))

    for raw in body.split("\n"):
        line = _strip_decoration(raw)
        match = _TAG_PATTERN.match(line)
        if match:
            _flush()
            tag = match.group(1)
            lines = [match.group(2)] if match.group(2) else []
            continue
        lines.append(line)
    _flush()

    return CommentMetadata(tuple(fragments))


def _strip_decoration(raw: str) -> str:
    line = raw.strip()
    if line.startswith("*"):
        line = raw.lstrip()[1:]
        if line.startswith(" "):
            line = line[1:]
    return line.rstrip()


def _join(lines: List[str]) -> str:
    start, end = 0, len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return "\n".join(lines[start:end])


__all__ = ["is_jsdoc", "parse_jsdoc"]
