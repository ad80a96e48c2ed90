"""Root page displaying the table of contents."""

from __future__ import annotations

from html import escape

from fastapi import APIRouter  # type: ignore[import-not-found]
from fastapi.responses import HTMLResponse  # type: ignore[import-not-found]

from ...index.utils import AnchorRegistry
from ..utils import current_index

router = APIRouter()


@router.get("/")
async def table_of_contents() -> HTMLResponse:
    """Render the index as a navigable HTML page."""

    index = current_index()

    # Repeated headings get -1, -2 suffixes so every id stays unique.
    anchors = AnchorRegistry()
    anchors.add(index.title)
    ids = [anchors.add(ch.heading) for ch in index.chapters]

    # Table of contents pointing at the chapter sections below it.
    items = "".join(
        f"<li><a href='#{anchor}'>{escape(ch.heading)}</a></li>"
        for ch, anchor in zip(index.chapters, ids)
    )
    parts = [f"<h1>{escape(index.title)}</h1>"]
    if index.description:
        parts.append(f"<p>{escape(index.description)}</p>")
    parts.append(f"<ol id='toc'>{items}</ol>")

    # One section per chapter with its summary and links.
    for ch, anchor in zip(index.chapters, ids):
        links = [f"<a href='{escape(ch.link)}'>Read chapter</a>"]
        if ch.remote:
            links.append(f"<a href='{escape(ch.remote)}'>GitHub</a>")
        parts.append(
            f"<section id='{anchor}'>"
            f"<h2>{escape(ch.heading)}</h2>"
            f"<p>{escape(ch.summary)}</p>"
            f"<p>{' | '.join(links)}</p>"
            "</section>"
        )

    return HTMLResponse("".join(parts))
