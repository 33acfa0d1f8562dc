"""Tests for doc comment extraction."""

from __future__ import annotations

from interface_docs.extract.comments import DocComment, extract_doc_comment
from interface_docs.syntax import CommentMetadata, DocFragment


def test_missing_comment_yields_empty_doc() -> None:
    assert extract_doc_comment(None) == DocComment()


def test_untagged_fragments_are_joined_with_newlines() -> None:
    comment = CommentMetadata((DocFragment("First"), DocFragment("Second")))
    assert extract_doc_comment(comment).description == "First\nSecond"


def test_tagged_fragments_fill_example_and_default() -> None:
    comment = CommentMetadata(
        (
            DocFragment("The port"),
            DocFragment("8080", tag="default"),
            DocFragment("3000", tag="example"),
            DocFragment("ignored", tag="deprecated"),
        )
    )
    doc = extract_doc_comment(comment)
    assert doc == DocComment(description="The port", example="3000", default="8080")


def test_first_tag_occurrence_wins() -> None:
    comment = CommentMetadata(
        (DocFragment("one", tag="example"), DocFragment("two", tag="example"))
    )
    assert extract_doc_comment(comment).example == "one"


def test_empty_description_is_absent() -> None:
    comment = CommentMetadata((DocFragment(""), DocFragment("x", tag="example")))
    doc = extract_doc_comment(comment)
    assert doc.description is None
    assert doc.example == "x"
