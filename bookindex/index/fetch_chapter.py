"""Fetch chapter text, using local cache when possible."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import requests  # type: ignore[import-untyped]

from .chapter import Chapter
from .utils import github_raw_url, is_remote, local_path_of

logger = logging.getLogger(__name__)

CACHE_DIR = Path(
    os.environ.get("BOOKINDEX_CACHE", Path.home() / ".bookindex" / "chapters")
)


def fetch_chapter(
    chapter: Chapter,
    cache_dir: Path | None = None,
    root: Path | None = None,
) -> str:
    """Return the full text of ``chapter``.

    Local links are read from ``root`` when it is given. Otherwise the
    remote copy is downloaded and kept in ``cache_dir``.

    Args:
        chapter: Chapter whose text is wanted.
        cache_dir: Directory used for caching downloaded chapters.
        root: Repository root for relative links.

    Returns:
        Chapter text.

    Raises:
        ValueError: The chapter has no usable link.
        requests.HTTPError: The server answered with an error status.
    """

    if root is not None and not is_remote(chapter.link):
        path = root / local_path_of(chapter.link)
        if path.is_file():
            return path.read_text(encoding="utf-8")
        logger.debug(f"{path} not found, trying the remote copy")

    url = chapter.remote or (chapter.link if is_remote(chapter.link) else None)
    if url is None:
        raise ValueError(f"chapter {chapter.number} has no remote link")

    cache_dir = cache_dir or CACHE_DIR
    cache_dir.mkdir(parents=True, exist_ok=True)
    # Path separators in titles would escape the cache directory.
    safe_name = chapter.file_name.replace("/", "_").replace("\\", "_")
    cache_file = cache_dir / safe_name

    if cache_file.exists():
        return cache_file.read_text(encoding="utf-8")

    raw_url = github_raw_url(url)
    logger.info(f"Downloading chapter {chapter.number} from {raw_url}")
    response = requests.get(raw_url, timeout=30)
    response.raise_for_status()
    text = response.text
    # Readers never see a partially written file.
    part_file = cache_file.with_name(cache_file.name + ".part")
    part_file.write_text(text, encoding="utf-8")
    part_file.replace(cache_file)
    return text
