"""Load and dump index files, caching parsed indexes."""

from __future__ import annotations

import time
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml  # type: ignore[import-untyped]

from bookindex.index import BookIndex, build_index, index_to_dict
from bookindex.json_utils import json_dumps, json_loads

# Types for cache storage and JSON mappings.
JSONDict = Dict[str, Any]
CacheEntry = Tuple[float, float, BookIndex]
CacheStore = Dict[Path, CacheEntry]

# Global in-memory cache and its time-to-live in seconds.
_CACHE: CacheStore = {}
_TTL_SECONDS = 15 * 60

FORMATS = ("json", "yaml")


def load_index(path: Path) -> BookIndex:
    """Return the index stored at ``path`` using a timed cache.

    Entries are reloaded when they expire or when the file was modified
    since it was cached.

    Args:
        path: Location of the JSON or YAML index file.

    Returns:
        The parsed index.

    Raises:
        ValueError: The file does not describe a valid index.
    """
    now = time.time()
    mtime = path.stat().st_mtime if path.exists() else 0.0
    cached = _CACHE.get(path)

    # Return cached entry when still valid.
    if cached and now - cached[0] < _TTL_SECONDS and cached[1] == mtime:
        return cached[2]

    index = build_index(_load_index_file(path))

    # Store fresh entry in the cache.
    _CACHE[path] = (now, mtime, index)
    return index


def _load_index_file(path: Path) -> JSONDict:
    """Read a structured index file from ``path``.

    Args:
        path: Location of the JSON or YAML index file.

    Returns:
        Parsed index mapping.
    """

    text = path.read_text(encoding="utf-8")

    # Decode JSON or YAML depending on file extension.
    if path.suffix == ".json":
        data = json_loads(text)
    else:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ValueError(f"{path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ValueError(f"{path}: index file must hold a mapping")
    return data


def dump_index(index: BookIndex, fmt: str = "yaml") -> str:
    """Serialize ``index`` as ``json`` or ``yaml`` text.

    Raises:
        ValueError: ``fmt`` is not a supported format.
    """

    data = index_to_dict(index)
    if fmt == "json":
        return json_dumps(data, pretty=True)
    if fmt == "yaml":
        return yaml.safe_dump(data, allow_unicode=True, sort_keys=False)
    raise ValueError(f"unsupported format {fmt!r}")
