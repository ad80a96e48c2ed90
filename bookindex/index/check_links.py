"""Verify that every chapter link resolves to existing content."""

from __future__ import annotations

import logging
from pathlib import Path

import requests  # type: ignore[import-untyped]

from .book_index import BookIndex
from .link_result import LinkResult
from .types import LinkResultList
from .utils import is_remote, local_path_of

logger = logging.getLogger(__name__)

# Servers that refuse HEAD requests answer with one of these.
_HEAD_REFUSED = (403, 405)


def check_local(number: int, target: str, root: Path) -> LinkResult:
    """Check that a repository-relative link names a non-empty file.

    Args:
        number: Chapter number owning the link.
        target: Link as written in the index.
        root: Repository root the link is relative to.

    Returns:
        Result of the check.
    """

    path = root / local_path_of(target)
    ok = path.is_file() and path.stat().st_size > 0
    return LinkResult(
        number=number, target=target, kind="local", ok=ok, detail=str(path)
    )


def check_remote(
    number: int, target: str, session: requests.Session, timeout: float
) -> LinkResult:
    """Check that a URL answers with a 2xx status.

    Network failures are recorded in the result instead of raised.

    Args:
        number: Chapter number owning the link.
        target: URL to check.
        session: HTTP session used for the requests.
        timeout: Timeout in seconds for each request.

    Returns:
        Result of the check.
    """

    try:
        response = session.head(target, allow_redirects=True, timeout=timeout)

        # Fall back to a streamed GET when HEAD is not allowed.
        if response.status_code in _HEAD_REFUSED:
            response = session.get(
                target, allow_redirects=True, timeout=timeout, stream=True
            )
            response.close()
    except requests.RequestException as exc:
        logger.warning(f"chapter {number}: {target}: {exc}")
        return LinkResult(
            number=number,
            target=target,
            kind="remote",
            ok=False,
            detail=str(exc),
        )

    status = response.status_code
    return LinkResult(
        number=number,
        target=target,
        kind="remote",
        ok=200 <= status < 300,
        status=status,
        detail=response.reason or "",
    )


def check_links(
    index: BookIndex,
    root: Path | None = None,
    session: requests.Session | None = None,
    timeout: float = 10,
    include_remote: bool = True,
) -> LinkResultList:
    """Check every link of every chapter in ``index``.

    Args:
        index: Index whose links are checked.
        root: Repository root for relative links; defaults to the current
            directory.
        session: HTTP session; a new one is created when omitted.
        timeout: Timeout in seconds for each HTTP request.
        include_remote: Check URLs as well as local files.

    Returns:
        One result per link in chapter order.
    """

    root = root or Path(".")
    own_session = session is None
    http = session or requests.Session()

    results: LinkResultList = []
    try:
        for chapter in index.chapters:
            for target in chapter.targets():
                if is_remote(target):
                    if not include_remote:
                        continue
                    result = check_remote(
                        chapter.number, target, http, timeout
                    )
                else:
                    result = check_local(chapter.number, target, root)

                if not result.ok:
                    logger.info(f"Broken link in chapter {chapter.number}")
                logger.debug(f"{target}: ok={result.ok} ({result.detail})")
                results.append(result)
    finally:
        if own_session:
            http.close()

    return results
