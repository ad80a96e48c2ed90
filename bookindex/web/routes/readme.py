"""Serve the rendered Markdown table of contents."""

from __future__ import annotations

from fastapi import APIRouter  # type: ignore[import-not-found]
from fastapi.responses import (  # type: ignore[import-not-found]
    PlainTextResponse,
)

from bookindex.index import render_markdown

from ..utils import current_index

router = APIRouter()


@router.get("/readme")
async def readme(remote: bool = True) -> PlainTextResponse:
    """Render the index as Markdown.

    Args:
        remote: Include links to the hosted copy of each chapter.
    """

    text = render_markdown(current_index(), remote=remote)
    return PlainTextResponse(text, media_type="text/markdown")
