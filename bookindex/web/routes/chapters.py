"""List the chapters of the served index."""

from __future__ import annotations

from attrs import asdict
from fastapi import APIRouter, HTTPException  # type: ignore[import-not-found]
from fastapi.responses import JSONResponse  # type: ignore[import-not-found]

from bookindex.index import Chapter

from ..utils import current_index

router = APIRouter()


def _chapter_payload(chapter: Chapter) -> dict[str, object]:
    """Return the JSON payload of a chapter including derived fields."""

    payload = asdict(chapter)
    payload["heading"] = chapter.heading
    payload["anchor"] = chapter.anchor
    return payload


@router.get("/chapters")
async def list_chapters() -> JSONResponse:
    """Return every chapter of the index in order."""

    index = current_index()
    return JSONResponse([_chapter_payload(ch) for ch in index.chapters])


@router.get("/chapters/{number}")
async def get_chapter(number: int) -> JSONResponse:
    """Return a single chapter.

    Args:
        number: Chapter number.

    Returns:
        The chapter fields, or a 404 error when no chapter has ``number``.
    """

    index = current_index()
    try:
        chapter = index.chapter(number)
    except KeyError:
        raise HTTPException(
            status_code=404, detail="Chapter not found"
        ) from None

    return JSONResponse(_chapter_payload(chapter))
