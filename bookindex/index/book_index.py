"""Ordered table of contents of a book."""

from __future__ import annotations

from collections.abc import Iterator

from attrs import define, field

from .chapter import Chapter, _non_empty
from .types import ChapterTuple


@define(frozen=True, slots=True)
class BookIndex:
    """Ordered table of contents of a book.

    Attributes:
        title: Book title shown as the top level heading.
        description: Introductory text placed under the title.
        remote_base: Base URL of a hosted copy of the book repository.
        chapters: Chapters in authored order.
    """

    title: str = field(validator=_non_empty)
    description: str = ""
    remote_base: str | None = None
    chapters: ChapterTuple = field(default=(), converter=tuple)

    def chapter(self, number: int) -> Chapter:
        """Return the chapter with ``number``.

        Raises:
            KeyError: No chapter carries that number.
        """

        for chapter in self.chapters:
            if chapter.number == number:
                return chapter
        raise KeyError(number)

    def __len__(self) -> int:
        return len(self.chapters)

    def __iter__(self) -> Iterator[Chapter]:
        return iter(self.chapters)
