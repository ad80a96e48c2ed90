"""JSON serialization helpers using optional orjson."""

from __future__ import annotations

try:
    import orjson  # type: ignore[import-not-found]
except ImportError:  # pragma: no cover - optional dependency
    orjson = None  # type: ignore[assignment]

import json


def json_dumps(data: object, pretty: bool = False) -> str:
    """Serialize data to a JSON string.

    Args:
        data: Data structure to serialize.
        pretty: Indent the output by two spaces.

    Returns:
        JSON representation of ``data``.
    """

    if orjson is not None:
        option = orjson.OPT_INDENT_2 if pretty else 0
        return orjson.dumps(data, option=option).decode()
    return json.dumps(data, ensure_ascii=False, indent=2 if pretty else None)


def json_loads(data: str | bytes) -> object:
    """Deserialize JSON data from a string or bytes."""

    if orjson is not None:
        return orjson.loads(data)
    if isinstance(data, (bytes, bytearray)):
        return json.loads(data.decode())
    return json.loads(data)
