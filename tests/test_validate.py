"""Tests for structural checks."""

from __future__ import annotations

from bookindex.index import (
    BookIndex,
    Chapter,
    render_markdown,
    validate_index,
    validate_markdown,
)


def _codes(issues: list) -> list[str]:
    return [issue.code for issue in issues]


def test_validate_index_accepts_sample(sample_index: BookIndex) -> None:
    """A well formed index has no issues."""

    assert validate_index(sample_index) == []


def test_validate_index_reports_numbering_gap() -> None:
    """Numbers must increase by one starting at one."""

    index = BookIndex(
        title="Book",
        chapters=[
            Chapter(number=1, title="A", link="/a.md"),
            Chapter(number=3, title="B", link="/b.md"),
        ],
    )
    issues = validate_index(index)
    assert _codes(issues) == ["numbering"]
    assert issues[0].number == 3
    assert str(issues[0]) == (
        "[numbering] chapter 3: expected chapter 2, found 3"
    )


def test_validate_index_reports_numbering_not_starting_at_one() -> None:
    """An index starting at chapter 2 is reported."""

    index = BookIndex(
        title="Book",
        chapters=[Chapter(number=2, title="A", link="/a.md")],
    )
    assert _codes(validate_index(index)) == ["numbering"]


def test_validate_index_reports_duplicate_titles() -> None:
    """Titles differing only in case or spacing are duplicates."""

    index = BookIndex(
        title="Book",
        chapters=[
            Chapter(number=1, title="Value Objects", link="/a.md"),
            Chapter(number=2, title="value  objects", link="/b.md"),
        ],
    )
    issues = validate_index(index)
    assert _codes(issues) == ["duplicate-title"]
    assert issues[0].number == 2


def test_validate_markdown_reports_toc_mismatch(
    sample_index: BookIndex,
) -> None:
    """Dropping a TOC line makes entries and sections disagree."""

    text = render_markdown(sample_index)
    lines = [
        line
        for line in text.splitlines()
        if not line.startswith("2. [Chapter 2.")
    ]
    issues = validate_markdown("\n".join(lines))
    assert _codes(issues) == ["toc-mismatch"]


def test_validate_markdown_reports_broken_anchor(
    sample_index: BookIndex,
) -> None:
    """A TOC entry pointing at a missing heading is reported."""

    text = render_markdown(sample_index).replace(
        "(#chapter-3-value-objects)", "(#chapter-3-values)"
    )
    issues = validate_markdown(text)
    assert _codes(issues) == ["broken-anchor"]
    assert issues[0].number == 3


def test_validate_markdown_reports_missing_link() -> None:
    """A section without links is reported instead of raising."""

    text = (
        "# Book\n\n## Table of Contents\n\n"
        "1. [Chapter 1. A](#chapter-1-a)\n\n"
        "## Chapter 1. A\n\nNo link here.\n"
    )
    issues = validate_markdown(text)
    assert _codes(issues) == ["missing-link"]


def test_validate_markdown_reports_missing_title() -> None:
    """Documents need a top level heading."""

    assert "missing-title" in _codes(validate_markdown("no heading\n"))


def test_validate_markdown_checks_sections() -> None:
    """Numbering and duplicates are checked over the sections."""

    text = (
        "# Book\n\n## Table of Contents\n\n"
        "1. [Chapter 1. A](#chapter-1-a)\n"
        "2. [Chapter 3. A](#chapter-3-a)\n\n"
        "## Chapter 1. A\n\n[x](/a.md)\n\n"
        "## Chapter 3. A\n\n[x](/b.md)\n"
    )
    assert _codes(validate_markdown(text)) == [
        "numbering",
        "duplicate-title",
    ]
