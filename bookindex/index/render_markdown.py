"""Render a book index into a navigable Markdown document."""

from __future__ import annotations

import logging

from .book_index import BookIndex
from .utils import AnchorRegistry

logger = logging.getLogger(__name__)

TOC_HEADING = "Table of Contents"
LOCAL_LABEL = "Read chapter"
REMOTE_LABEL = "GitHub"


def _target(link: str) -> str:
    """Wrap link targets containing spaces in angle brackets."""

    return f"<{link}>" if " " in link else link


def render_markdown(
    index: BookIndex, local: bool = True, remote: bool = True
) -> str:
    """Render a book index into a navigable Markdown document.

    The document starts with the book title and description, followed by a
    numbered table of contents whose entries point at the anchors of the
    chapter sections below it.

    Args:
        index: The index to render.
        local: Include the ``link`` of every chapter.
        remote: Include the ``remote`` link of chapters that have one.

    Returns:
        Markdown text ending with a single newline.
    """

    anchors = AnchorRegistry()

    # The title and TOC headings claim their anchors before the chapters so
    # the chapter anchors match what a Markdown viewer generates.
    anchors.add(index.title)
    anchors.add(TOC_HEADING)
    chapter_anchors = [anchors.add(ch.heading) for ch in index.chapters]

    lines = [f"# {index.title}", ""]
    if index.description:
        lines += [index.description, ""]

    lines += [f"## {TOC_HEADING}", ""]
    for chapter, anchor in zip(index.chapters, chapter_anchors):
        lines.append(f"{chapter.number}. [{chapter.heading}](#{anchor})")
    lines.append("")

    for chapter in index.chapters:
        lines += [f"## {chapter.heading}", ""]
        if chapter.summary:
            lines += [chapter.summary, ""]

        # Links line pointing at the full chapter text.
        links: list[str] = []
        if local:
            links.append(f"[{LOCAL_LABEL}]({_target(chapter.link)})")
        if remote and chapter.remote:
            links.append(f"[{REMOTE_LABEL}]({_target(chapter.remote)})")
        if links:
            lines += [" | ".join(links), ""]

    logger.debug(f"Rendered {len(index.chapters)} chapters of {index.title}")
    return "\n".join(lines).rstrip("\n") + "\n"
