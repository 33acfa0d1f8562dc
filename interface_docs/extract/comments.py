"""Documentation comment extraction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from ..syntax import CommentMetadata

EXAMPLE_TAG = "example"
DEFAULT_TAG = "default"


@dataclass(frozen=True)
class DocComment:
    description: Optional[str] = None
    example: Optional[str] = None
    default: Optional[str] = None


def extract_doc_comment(comment: Optional[CommentMetadata]) -> DocComment:
    """Collect the description and the first ``@example``/``@default`` texts."""
    if comment is None:
        return DocComment()

    untagged: List[str] = []
    tagged: Dict[str, str] = {}
    for fragment in comment.fragments:
        if fragment.tag is None:
            if fragment.text:
                untagged.append(fragment.text)
            continue
        # Repeated tags are not merged: the first occurrence wins.
        tagged.setdefault(fragment.tag, fragment.text)

    return DocComment(
        description="\n".join(untagged) or None,
        example=tagged.get(EXAMPLE_TAG) or None,
        default=tagged.get(DEFAULT_TAG) or None,
    )


__all__ = ["DEFAULT_TAG", "DocComment", "EXAMPLE_TAG", "extract_doc_comment"]
