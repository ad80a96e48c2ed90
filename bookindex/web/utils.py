"""Utility helpers for web routes."""

from __future__ import annotations

import os
from pathlib import Path

from fastapi import HTTPException  # type: ignore[import-not-found]

from bookindex.index import BookIndex
from bookindex.index_cache import load_index

DEFAULT_INDEX_PATH = Path("book") / "index.yaml"


def get_index_path() -> Path:
    """Return the index file served by the application.

    The ``BOOKINDEX_INDEX`` environment variable overrides the default
    ``book/index.yaml`` relative to the working directory.
    """

    return Path(os.environ.get("BOOKINDEX_INDEX", DEFAULT_INDEX_PATH))


def current_index() -> BookIndex:
    """Load the served index, translating failures into HTTP errors.

    Raises:
        HTTPException: 503 when the file is missing, 500 when it is invalid.
    """

    path = get_index_path()
    if not path.exists():
        raise HTTPException(status_code=503, detail="Index file not found")

    try:
        return load_index(path)
    except ValueError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
