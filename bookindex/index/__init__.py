"""Book index models, renderer, parser and checkers."""

from .book_index import BookIndex
from .build_index import build_index, index_to_dict
from .chapter import Chapter
from .check_links import check_links
from .fetch_chapter import fetch_chapter
from .issue import Issue
from .link_result import LinkResult
from .parse_markdown import parse_markdown, scan_markdown
from .render_markdown import render_markdown
from .validate import validate_index, validate_markdown

__all__ = [
    "BookIndex",
    "Chapter",
    "Issue",
    "LinkResult",
    "build_index",
    "check_links",
    "fetch_chapter",
    "index_to_dict",
    "parse_markdown",
    "render_markdown",
    "scan_markdown",
    "validate_index",
    "validate_markdown",
]
