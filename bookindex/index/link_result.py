"""Outcome of checking a single chapter link."""

from __future__ import annotations

from attrs import define


@define(frozen=True, slots=True)
class LinkResult:
    """Outcome of checking a single chapter link.

    Attributes:
        number: Chapter number owning the link.
        target: The link as written in the index.
        kind: ``local`` for repository paths, ``remote`` for URLs.
        ok: Whether the target resolved to existing content.
        status: HTTP status code for remote targets.
        detail: Error text or resolved path.
    """

    number: int
    target: str
    kind: str
    ok: bool
    status: int | None = None
    detail: str = ""
