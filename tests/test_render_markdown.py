"""Tests for rendering an index to Markdown."""

from __future__ import annotations

from bookindex.index import (
    BookIndex,
    Chapter,
    parse_markdown,
    render_markdown,
    validate_markdown,
)


def test_render_markdown_layout(sample_index: BookIndex) -> None:
    """Title, description, TOC and sections appear in order."""

    text = render_markdown(sample_index)
    lines = text.splitlines()

    assert lines[0] == "# Domain-Driven Design in PHP"
    assert lines[2] == "Chapter summaries."
    assert lines[4] == "## Table of Contents"
    assert lines[6] == (
        "1. [Chapter 1. Getting Started](#chapter-1-getting-started)"
    )
    assert (
        "3. [Chapter 3. Value Objects](#chapter-3-value-objects)" in lines
    )
    assert "## Chapter 3. Value Objects" in lines
    assert (
        "[Read chapter](/chapters/03%20Value%20Objects.md) | "
        f"[GitHub]({sample_index.remote_base}/chapters/"
        "03%20Value%20Objects.md)"
    ) in lines
    assert text.endswith("\n") and not text.endswith("\n\n")


def test_render_markdown_without_remote(sample_index: BookIndex) -> None:
    """Remote links can be left out."""

    text = render_markdown(sample_index, remote=False)
    assert "[GitHub]" not in text
    assert "[Read chapter](/chapters/01%20Getting%20Started.md)" in text


def test_render_markdown_disambiguates_anchors() -> None:
    """Chapters whose headings slugify alike get distinct anchors."""

    index = BookIndex(
        title="Book",
        chapters=[
            Chapter(number=1, title="A.B", link="/a.md"),
            Chapter(number=1, title="AB", link="/b.md"),
        ],
    )
    text = render_markdown(index)
    assert "(#chapter-1-ab)" in text
    assert "(#chapter-1-ab-1)" in text


def test_render_markdown_wraps_targets_with_spaces() -> None:
    """Link targets with spaces are wrapped in angle brackets."""

    index = BookIndex(
        title="Book",
        chapters=[Chapter(number=1, title="Intro", link="/c/01 Intro.md")],
    )
    assert "[Read chapter](</c/01 Intro.md>)" in render_markdown(index)


def test_rendered_markdown_passes_validation(sample_index: BookIndex) -> None:
    """A rendered index reads back unchanged and without issues."""

    text = render_markdown(sample_index)
    assert validate_markdown(text) == []
    assert parse_markdown(text) == sample_index
