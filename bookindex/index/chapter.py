"""Chapter entry of a book index."""

from __future__ import annotations

from typing import Any

from attrs import define, field

from .utils import chapter_file_name, chapter_heading, slugify


def _non_empty(instance: Any, attribute: Any, value: str) -> None:
    """Reject empty or whitespace-only strings."""

    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{attribute.name} must be a non-empty string")


def _positive(instance: Any, attribute: Any, value: int) -> None:
    """Reject chapter numbers below one."""

    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"{attribute.name} must be a positive integer")


@define(frozen=True, slots=True)
class Chapter:
    """Chapter entry of a book index.

    Attributes:
        number: Chapter number, starting at 1.
        title: Chapter title without the "Chapter N." prefix.
        summary: Short description of the chapter content.
        link: Relative path or URL of the full chapter text.
        remote: Optional URL of a hosted copy of the chapter.
    """

    number: int = field(validator=_positive)
    title: str = field(validator=_non_empty)
    link: str = field(validator=_non_empty)
    summary: str = ""
    remote: str | None = None

    @property
    def heading(self) -> str:
        """Heading text such as ``Chapter 3. Value Objects``."""

        return chapter_heading(self.number, self.title)

    @property
    def anchor(self) -> str:
        """Anchor derived from the heading, without disambiguation."""

        return slugify(self.heading)

    @property
    def file_name(self) -> str:
        """File name of the chapter text such as ``03 Value Objects.md``."""

        return chapter_file_name(self.number, self.title)

    def targets(self) -> list[str]:
        """Return every link of the chapter, local first."""

        out = [self.link]
        if self.remote and self.remote != self.link:
            out.append(self.remote)
        return out
