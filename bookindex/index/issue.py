"""Problem found while validating an index."""

from __future__ import annotations

from attrs import define


@define(frozen=True, slots=True)
class Issue:
    """Problem found while validating an index.

    Attributes:
        code: Short machine readable code such as ``numbering``.
        message: Human readable description.
        number: Chapter number the issue refers to, if any.
    """

    code: str
    message: str
    number: int | None = None

    def __str__(self) -> str:
        where = f"chapter {self.number}: " if self.number is not None else ""
        return f"[{self.code}] {where}{self.message}"
