"""Report structural issues of the served index."""

from __future__ import annotations

from attrs import asdict
from fastapi import APIRouter  # type: ignore[import-not-found]
from fastapi.responses import JSONResponse  # type: ignore[import-not-found]

from bookindex.index import validate_index

from ..utils import current_index

router = APIRouter()


@router.get("/validate")
async def validate() -> JSONResponse:
    """Return the list of issues; an empty list means the index is valid."""

    issues = validate_index(current_index())
    return JSONResponse([asdict(issue) for issue in issues])
