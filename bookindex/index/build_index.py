"""Build index objects from plain mappings and back."""

from __future__ import annotations

from typing import Any

from attr import asdict

from .book_index import BookIndex
from .chapter import Chapter
from .types import JSONDict
from .utils import chapter_file_name, local_link, remote_link


def _text(value: Any, name: str, prefix: str = "") -> str:
    """Return a stripped string field, treating ``None`` as empty.

    Raises:
        ValueError: The value is not a string.
    """

    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{prefix}{name} must be a string")
    return value.strip()


def _number(value: Any, position: int) -> int:
    """Return a chapter number given as an integer or a digit string."""

    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().isdecimal():
        return int(value)
    raise ValueError(f"chapter #{position}: invalid number {value!r}")


def _build_chapter(
    raw: Any, position: int, remote_base: str | None
) -> Chapter:
    """Create a chapter from its mapping, deriving missing links.

    Args:
        raw: Mapping describing the chapter.
        position: 1-based position in the chapter list.
        remote_base: Base URL used to derive the ``remote`` link.

    Returns:
        The validated chapter.

    Raises:
        ValueError: The mapping is malformed.
    """

    if not isinstance(raw, dict):
        raise ValueError(f"chapter #{position}: expected a mapping")

    title = raw.get("title")
    if not isinstance(title, str) or not title.strip():
        raise ValueError(f"chapter #{position}: missing title")
    title = title.strip()

    number = _number(raw.get("number", position), position)
    prefix = f"chapter #{position}: "
    summary = _text(raw.get("summary"), "summary", prefix)

    file_name = chapter_file_name(number, title)

    # Derive links from the conventional chapter file layout when absent.
    link = raw.get("link")
    if link is None:
        link = local_link(file_name)

    remote = _text(raw.get("remote"), "remote", prefix) or None
    if remote is None and remote_base:
        remote = remote_link(remote_base, file_name)

    try:
        return Chapter(
            number=number,
            title=title,
            link=link,
            summary=summary,
            remote=remote,
        )
    except ValueError as exc:
        raise ValueError(f"chapter #{position}: {exc}") from exc


def build_index(data: JSONDict) -> BookIndex:
    """Build a ``BookIndex`` from a plain mapping.

    Args:
        data: Mapping with ``title``, ``description``, ``remote_base`` and a
            ``chapters`` list, as stored in index files.

    Returns:
        The validated index.

    Raises:
        ValueError: The mapping or one of its chapters is malformed.
    """

    if not isinstance(data, dict):
        raise ValueError("index data must be a mapping")

    remote_base = _text(data.get("remote_base"), "remote_base") or None
    raw_chapters = data.get("chapters") or []
    if not isinstance(raw_chapters, list):
        raise ValueError("chapters must be a list")

    chapters = [
        _build_chapter(raw, pos, remote_base)
        for pos, raw in enumerate(raw_chapters, start=1)
    ]

    return BookIndex(
        title=_text(data.get("title"), "title"),
        description=_text(data.get("description"), "description"),
        remote_base=remote_base,
        chapters=chapters,
    )


def index_to_dict(index: BookIndex) -> JSONDict:
    """Return a plain mapping that ``build_index`` accepts."""

    data = asdict(index, recurse=True, retain_collection_types=False)
    return data
