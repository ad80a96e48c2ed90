"""Shared fixtures for index tests."""

from __future__ import annotations

from typing import Any, Dict

import pytest

from bookindex.index import BookIndex, build_index

JSONDict = Dict[str, Any]

REMOTE_BASE = "https://github.com/mikel00per/book-ddd-in-php/blob/dev"


@pytest.fixture
def index_data() -> JSONDict:
    """Return a small index mapping as stored in index files."""
    return {
        "title": "Domain-Driven Design in PHP",
        "description": "Chapter summaries.",
        "remote_base": REMOTE_BASE,
        "chapters": [
            {"number": 1, "title": "Getting Started", "summary": "Intro."},
            {"number": 2, "title": "Architectural Styles", "summary": "S."},
            {"number": 3, "title": "Value Objects", "summary": "Values."},
        ],
    }


@pytest.fixture
def sample_index(index_data: JSONDict) -> BookIndex:
    """Return the index built from ``index_data``."""
    return build_index(index_data)
