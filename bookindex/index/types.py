"""Common type aliases for index structures."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .chapter import Chapter  # noqa: F401
    from .issue import Issue  # noqa: F401
    from .link_result import LinkResult  # noqa: F401


JSONDict = dict[str, Any]
ChapterTuple = tuple["Chapter", ...]
IssueList = list["Issue"]
LinkResultList = list["LinkResult"]
