"""Tests for reading Markdown indexes."""

from __future__ import annotations

import pytest

from bookindex.index import (
    BookIndex,
    Chapter,
    parse_markdown,
    render_markdown,
    scan_markdown,
)

REMOTE = "https://github.com/mikel00per/book-ddd-in-php/blob/dev/chapters"
LINKS = (
    "[Read chapter](/chapters/01%20Getting%20Started.md) · "
    f"[GitHub]({REMOTE}/01%20Getting%20Started.md)"
)

README = f"""\
# Domain-Driven Design in PHP

Summaries of every chapter.
Links point at the full text.

## Contents

- [Chapter 1. Getting Started](#chapter-1-getting-started)
- [Chapter 2. Value Objects](</chapters/02 Value Objects.md>)

## Chapter 1. Getting Started

What DDD is about.

### Notes

Ubiquitous language matters.

{LINKS}

## Chapter 2. Value Objects

Immutable objects, see [Fowler](https://martinfowler.com) for more.

```
## Chapter 9. Not a heading
```

## License

MIT
"""


def test_scan_markdown_extracts_structure() -> None:
    """Title, description, TOC entries and sections are found."""

    scan = scan_markdown(README)

    assert scan.title == "Domain-Driven Design in PHP"
    assert scan.description == (
        "Summaries of every chapter. Links point at the full text."
    )
    assert [entry.number for entry in scan.toc] == [1, 2]
    assert scan.toc[1].target == "/chapters/02 Value Objects.md"
    assert [s.number for s in scan.sections] == [1, 2]
    assert "chapter-1-getting-started" in scan.anchors
    assert "notes" in scan.anchors


def test_scan_markdown_keeps_subheadings_in_section() -> None:
    """Deeper headings and their text belong to the chapter section."""

    section = scan_markdown(README).sections[0]
    assert section.summary == (
        "What DDD is about.\n\nUbiquitous language matters."
    )
    assert [label for label, _ in section.links] == ["Read chapter", "GitHub"]


def test_parse_markdown_builds_index() -> None:
    """Section links and file TOC targets become chapter links."""

    index = parse_markdown(README)

    first = index.chapter(1)
    assert first.link == "/chapters/01%20Getting%20Started.md"
    assert first.remote == f"{REMOTE}/01%20Getting%20Started.md"
    assert index.remote_base == (
        "https://github.com/mikel00per/book-ddd-in-php/blob/dev"
    )

    # Inline links inside the summary are not chapter links.
    second = index.chapter(2)
    assert second.link == "/chapters/02 Value Objects.md"
    assert second.remote is None
    assert "Fowler" in second.summary
    assert len(index.chapters) == 2


def test_parse_markdown_requires_title() -> None:
    """A document without ``#`` heading is rejected."""

    with pytest.raises(ValueError, match="top level heading"):
        parse_markdown("## Chapter 1. A\n\n[x](/a.md)\n")


def test_parse_markdown_requires_links() -> None:
    """A chapter section without any link is rejected."""

    with pytest.raises(ValueError, match="chapter 1 has no link"):
        parse_markdown("# Book\n\n## Chapter 1. A\n\nJust text.\n")


def test_parse_markdown_remote_only_chapter() -> None:
    """A chapter with only a URL uses it as its link."""

    index = parse_markdown(
        "# Book\n\n## Chapter 1. A\n\n[GitHub](https://x.test/a.md)\n"
    )
    assert index.chapter(1).link == "https://x.test/a.md"
    assert index.chapter(1).remote is None


def test_parse_markdown_keeps_trailing_hash_in_title() -> None:
    """Only a closing ``#`` sequence after a space is dropped."""

    index = BookIndex(
        title="Languages",
        chapters=[Chapter(number=1, title="Patterns in C#", link="/c.md")],
    )
    parsed = parse_markdown(render_markdown(index))
    assert parsed.chapter(1).title == "Patterns in C#"
    assert parsed == index

    scan = scan_markdown("# Book ##\n\n## Chapter 1. A ###\n\n[x](/a.md)\n")
    assert scan.title == "Book"
    assert scan.sections[0].title == "A"
