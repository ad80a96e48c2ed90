"""Helpers shared by the index renderer, parser and checkers."""

from __future__ import annotations

import re
from urllib.parse import quote, unquote, urlsplit

LOCAL_CHAPTERS_DIR = "chapters"


def normalize_whitespace(text: str) -> str:
    """Collapse consecutive whitespace into single spaces."""

    return re.sub(r"\s+", " ", text).strip()


def chapter_heading(number: int, title: str) -> str:
    """Return the heading text used for a chapter section."""

    return f"Chapter {number}. {title}"


def chapter_file_name(number: int, title: str) -> str:
    """Return the file name of a chapter such as ``03 Value Objects.md``."""

    return f"{number:02d} {title}.md"


def slugify(text: str) -> str:
    """Derive a heading anchor the way GitHub does.

    The text is lowercased, every character that is not a word character,
    a space or a hyphen is dropped and the remaining spaces become hyphens.
    Consecutive hyphens are preserved, matching GitHub.

    Args:
        text: Heading text.

    Returns:
        Anchor without the leading ``#``.
    """

    lowered = text.strip().lower()
    cleaned = re.sub(r"[^\w\- ]", "", lowered)
    return cleaned.replace(" ", "-")


class AnchorRegistry:
    """Hand out unique anchors, suffixing repeats with ``-1``, ``-2``..."""

    def __init__(self) -> None:
        self._seen: dict[str, int] = {}

    def add(self, text: str) -> str:
        base = slugify(text)
        count = self._seen.get(base)
        if count is None:
            self._seen[base] = 0
            return base

        # Skip suffixes already taken by a heading that slugified to them.
        while True:
            count += 1
            candidate = f"{base}-{count}"
            if candidate not in self._seen:
                break
        self._seen[base] = count
        self._seen[candidate] = 0
        return candidate


def local_link(file_name: str) -> str:
    """Return the repository-relative link for a chapter file."""

    return f"/{LOCAL_CHAPTERS_DIR}/{quote(file_name)}"


def remote_link(remote_base: str, file_name: str) -> str:
    """Return the mirror URL for a chapter file under ``remote_base``."""

    return f"{remote_base.rstrip('/')}/{LOCAL_CHAPTERS_DIR}/{quote(file_name)}"


def is_remote(target: str) -> bool:
    """Return ``True`` when ``target`` is an absolute HTTP(S) URL."""

    return urlsplit(target).scheme in ("http", "https")


def local_path_of(target: str) -> str:
    """Turn a relative link into a path relative to the repository root.

    Query strings and fragments are dropped and percent escapes decoded.
    """

    path = urlsplit(target).path
    return unquote(path).lstrip("/")


def github_raw_url(url: str) -> str:
    """Rewrite a GitHub ``blob`` URL to its raw content URL.

    Other URLs are returned unchanged.
    """

    parts = urlsplit(url)
    if parts.netloc != "github.com":
        return url

    match = re.match(r"^/([^/]+)/([^/]+)/blob/(.+)$", parts.path)
    if not match:
        return url

    owner, repo, rest = match.groups()
    return f"https://raw.githubusercontent.com/{owner}/{repo}/{rest}"
