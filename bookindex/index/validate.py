"""Structural checks for book indexes and their Markdown rendering."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .book_index import BookIndex
from .issue import Issue
from .parse_markdown import _section_links, _toc_file_targets, scan_markdown
from .types import IssueList
from .utils import normalize_whitespace

logger = logging.getLogger(__name__)


def _check_numbering(numbers: Iterable[int]) -> IssueList:
    """Report chapter numbers that do not go 1, 2, 3, ... in order."""

    issues: IssueList = []
    for expected, number in enumerate(numbers, start=1):
        if number != expected:
            issues.append(
                Issue(
                    code="numbering",
                    message=f"expected chapter {expected}, found {number}",
                    number=number,
                )
            )
    return issues


def _check_duplicates(entries: Iterable[tuple[int, str]]) -> IssueList:
    """Report titles that appear more than once."""

    issues: IssueList = []
    seen: dict[str, int] = {}
    for number, title in entries:
        key = normalize_whitespace(title).casefold()
        if key in seen:
            issues.append(
                Issue(
                    code="duplicate-title",
                    message=(
                        f"title {title!r} already used by "
                        f"chapter {seen[key]}"
                    ),
                    number=number,
                )
            )
        else:
            seen[key] = number
    return issues


def validate_index(index: BookIndex) -> IssueList:
    """Check numbering and title uniqueness of an index.

    Args:
        index: The index to check.

    Returns:
        Issues found; empty when the index is well formed.
    """

    issues = _check_numbering(ch.number for ch in index.chapters)
    issues += _check_duplicates((ch.number, ch.title) for ch in index.chapters)
    return issues


def validate_markdown(text: str) -> IssueList:
    """Check a Markdown index document.

    Besides numbering and duplicate titles this compares the table of
    contents against the chapter sections, verifies that anchor targets
    exist and that every chapter has a link to its text.

    Args:
        text: Markdown source.

    Returns:
        Issues found; empty when the document is well formed.
    """

    scan = scan_markdown(text)
    issues: IssueList = []

    if not scan.title:
        issues.append(Issue(code="missing-title", message="no # heading"))

    if len(scan.toc) != len(scan.sections):
        issues.append(
            Issue(
                code="toc-mismatch",
                message=(
                    f"{len(scan.toc)} table of contents entries but "
                    f"{len(scan.sections)} chapter sections"
                ),
            )
        )

    for entry in scan.toc:
        if not entry.target.startswith("#"):
            continue
        if entry.target[1:] not in scan.anchors:
            issues.append(
                Issue(
                    code="broken-anchor",
                    message=(
                        f"{entry.label!r} points at missing {entry.target}"
                    ),
                    number=entry.number,
                )
            )

    toc_targets = _toc_file_targets(scan)
    for section in scan.sections:
        link, _ = _section_links(section, toc_targets.get(section.number))
        if link is None:
            issues.append(
                Issue(
                    code="missing-link",
                    message="section has no link to the chapter text",
                    number=section.number,
                )
            )

    issues += _check_numbering(s.number for s in scan.sections)
    issues += _check_duplicates((s.number, s.title) for s in scan.sections)

    for issue in issues:
        logger.debug(str(issue))
    return issues
