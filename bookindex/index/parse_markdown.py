"""Read a rendered or hand written Markdown index back into structures."""

from __future__ import annotations

import logging
import re

from attrs import define, field

from .book_index import BookIndex
from .chapter import Chapter
from .utils import (
    AnchorRegistry,
    chapter_file_name,
    is_remote,
    normalize_whitespace,
    remote_link,
)

logger = logging.getLogger(__name__)

HEADING_RE = re.compile(r"^(#{1,6})\s+(.+?)(?:\s+#+)?\s*$")
CHAPTER_RE = re.compile(r"^chapter\s+(\d+)\s*[.:]\s*(.+)$", re.IGNORECASE)
LINK_RE = re.compile(
    r"\[(?P<label>[^\]]*)\]\((?P<target><[^>]*>|[^)\s]+)(?:\s+\"[^\"]*\")?\)"
)
LIST_ITEM_RE = re.compile(r"^\s*(?:[-*+]|\d+[.)])\s+")
TOC_TITLES = ("table of contents", "contents", "index")

# Characters allowed next to links on a line holding only links.
_LINK_SEPARATORS = re.compile(r"^[\s|·•,\-]*$")


@define(slots=True)
class TocEntry:
    """Entry of the table of contents.

    Attributes:
        label: Visible link text.
        target: Anchor (``#...``) or link target.
        number: Chapter number found in the label, if any.
    """

    label: str
    target: str
    number: int | None = None


@define(slots=True)
class SectionScan:
    """Chapter section found in the document body.

    Attributes:
        number: Chapter number from the heading.
        title: Chapter title from the heading.
        anchor: Anchor a Markdown viewer assigns to the heading.
        level: Heading level of the section.
        summary: Paragraph text of the section.
        links: ``(label, target)`` pairs from link-only lines.
    """

    number: int
    title: str
    anchor: str
    level: int
    summary: str = ""
    links: list[tuple[str, str]] = field(factory=list)


@define(slots=True)
class MarkdownScan:
    """Raw structure extracted from a Markdown index."""

    title: str | None = None
    description: str = ""
    toc: list[TocEntry] = field(factory=list)
    sections: list[SectionScan] = field(factory=list)
    anchors: set[str] = field(factory=set)


def _strip_target(target: str) -> str:
    """Remove optional angle brackets around a link target."""

    if target.startswith("<") and target.endswith(">"):
        return target[1:-1]
    return target


def _join_paragraphs(lines: list[str]) -> str:
    """Join text lines into paragraphs separated by blank lines."""

    paragraphs: list[str] = []
    current: list[str] = []
    for line in lines + [""]:
        if line.strip():
            current.append(line)
        elif current:
            paragraphs.append(normalize_whitespace(" ".join(current)))
            current = []
    return "\n\n".join(paragraphs)


def scan_markdown(text: str) -> MarkdownScan:
    """Extract title, TOC entries and chapter sections from Markdown.

    Nothing is validated here; malformed documents produce partial scans
    that ``validate_markdown`` reports on.

    Args:
        text: Markdown source.

    Returns:
        The extracted structure.
    """

    scan = MarkdownScan()
    anchors = AnchorRegistry()

    state = "start"
    description: list[str] = []
    summary: list[str] = []
    section: SectionScan | None = None
    in_fence = False

    def close_section() -> None:
        if section is not None:
            section.summary = _join_paragraphs(summary)
            summary.clear()

    for line in text.splitlines():
        # Skip fenced code blocks entirely.
        if line.lstrip().startswith(("```", "~~~")):
            in_fence = not in_fence
            continue
        if in_fence:
            continue

        heading = HEADING_RE.match(line)
        if heading:
            level = len(heading.group(1))
            heading_text = heading.group(2)
            anchor = anchors.add(heading_text)
            scan.anchors.add(anchor)

            # Deeper headings inside a chapter section belong to it.
            if (
                state == "chapter"
                and section is not None
                and level > section.level
            ):
                summary.append("")
                continue

            close_section()
            section = None

            chapter = CHAPTER_RE.match(heading_text)
            if level == 1 and scan.title is None:
                scan.title = heading_text
                state = "preamble"
            elif heading_text.strip().lower() in TOC_TITLES:
                state = "toc"
            elif chapter:
                section = SectionScan(
                    number=int(chapter.group(1)),
                    title=chapter.group(2).strip(),
                    anchor=anchor,
                    level=level,
                )
                scan.sections.append(section)
                state = "chapter"
            else:
                state = "other"
            continue

        if state == "preamble":
            description.append(line)
        elif state == "toc":
            if not LIST_ITEM_RE.match(line):
                continue
            link = LINK_RE.search(line)
            if link is None:
                continue
            label = link.group("label")
            number = re.search(r"chapter\s+(\d+)", label, re.IGNORECASE)
            scan.toc.append(
                TocEntry(
                    label=label,
                    target=_strip_target(link.group("target")),
                    number=int(number.group(1)) if number else None,
                )
            )
        elif state == "chapter" and section is not None:
            links = list(LINK_RE.finditer(line))
            rest = LINK_RE.sub("", line)
            if links and _LINK_SEPARATORS.match(rest):
                section.links.extend(
                    (m.group("label"), _strip_target(m.group("target")))
                    for m in links
                )
            else:
                summary.append(line)

    close_section()
    scan.description = _join_paragraphs(description)
    logger.debug(
        f"Scanned {len(scan.toc)} TOC entries and "
        f"{len(scan.sections)} chapter sections"
    )
    return scan


def _toc_file_targets(scan: MarkdownScan) -> dict[int, str]:
    """Map chapter numbers to TOC targets that point at files."""

    return {
        entry.number: entry.target
        for entry in scan.toc
        if entry.number is not None and not entry.target.startswith("#")
    }


def _section_links(
    section: SectionScan, toc_target: str | None
) -> tuple[str | None, str | None]:
    """Pick the local and remote link of a section."""

    local = next((t for _, t in section.links if not is_remote(t)), None)
    remote = next((t for _, t in section.links if is_remote(t)), None)

    # A TOC entry pointing at the file directly stands in for a section link.
    if local is None and remote is None and toc_target:
        if is_remote(toc_target):
            remote = toc_target
        else:
            local = toc_target

    if local is None:
        return remote, None
    return local, remote


def _infer_remote_base(chapters: list[Chapter]) -> str | None:
    """Return the base URL shared by conventional remote chapter links."""

    for chapter in chapters:
        if not chapter.remote:
            continue
        file_name = chapter_file_name(chapter.number, chapter.title)
        suffix = remote_link("", file_name)
        if chapter.remote.endswith(suffix):
            return chapter.remote[: -len(suffix)] or None
    return None


def parse_markdown(text: str) -> BookIndex:
    """Build a ``BookIndex`` from Markdown text.

    Args:
        text: Markdown source, typically a README.

    Returns:
        The parsed index.

    Raises:
        ValueError: The document has no top level heading or a chapter has
            no link at all.
    """

    scan = scan_markdown(text)
    if not scan.title:
        raise ValueError("document has no top level heading")

    toc_targets = _toc_file_targets(scan)

    chapters: list[Chapter] = []
    for section in scan.sections:
        link, remote = _section_links(
            section, toc_targets.get(section.number)
        )
        if link is None:
            raise ValueError(f"chapter {section.number} has no link")
        chapters.append(
            Chapter(
                number=section.number,
                title=section.title,
                link=link,
                summary=section.summary,
                remote=remote,
            )
        )

    return BookIndex(
        title=scan.title,
        description=scan.description,
        remote_base=_infer_remote_base(chapters),
        chapters=chapters,
    )
