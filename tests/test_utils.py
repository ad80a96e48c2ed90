"""Tests for anchor and link helpers."""

from __future__ import annotations

import pytest

from bookindex.index.utils import (
    AnchorRegistry,
    github_raw_url,
    is_remote,
    local_path_of,
    slugify,
)


@pytest.mark.parametrize(
    ("heading", "anchor"),
    [
        ("Chapter 3. Value Objects", "chapter-3-value-objects"),
        ("Chapter 6. Domain-Events", "chapter-6-domain-events"),
        ("Table of Contents", "table-of-contents"),
        ("What's new?", "whats-new"),
    ],
)
def test_slugify_matches_github(heading: str, anchor: str) -> None:
    """Anchors follow the GitHub heading slug rules."""

    assert slugify(heading) == anchor


def test_anchor_registry_disambiguates_repeats() -> None:
    """Repeated headings get numbered suffixes."""

    anchors = AnchorRegistry()
    assert anchors.add("Intro") == "intro"
    assert anchors.add("Intro") == "intro-1"
    assert anchors.add("Intro") == "intro-2"
    assert anchors.add("Other") == "other"


def test_anchor_registry_skips_taken_suffix() -> None:
    """A heading that already slugified to ``x-1`` is not reused."""

    anchors = AnchorRegistry()
    anchors.add("Intro 1")
    anchors.add("Intro")
    assert anchors.add("Intro") == "intro-2"


def test_github_raw_url() -> None:
    """GitHub blob URLs are rewritten to raw content URLs."""

    url = (
        "https://github.com/mikel00per/book-ddd-in-php/blob/dev/"
        "chapters/03%20Value%20Objects.md"
    )
    assert github_raw_url(url) == (
        "https://raw.githubusercontent.com/mikel00per/book-ddd-in-php/dev/"
        "chapters/03%20Value%20Objects.md"
    )
    assert github_raw_url("https://example.com/a.md") == (
        "https://example.com/a.md"
    )


def test_local_path_of_unquotes() -> None:
    """Relative links become repository paths without escapes."""

    assert local_path_of("/chapters/03%20Value%20Objects.md#top") == (
        "chapters/03 Value Objects.md"
    )
    assert is_remote("https://x.test/a")
    assert not is_remote("/chapters/a.md")
