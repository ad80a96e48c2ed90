"""Tests for JSON utility functions."""

import json

from pytest import MonkeyPatch

from bookindex import json_utils


def test_json_dumps_without_orjson(monkeypatch: MonkeyPatch) -> None:
    """Serialize using standard json when orjson is absent."""

    monkeypatch.setattr(json_utils, "orjson", None)
    data = {"title": "Entités"}
    assert json_utils.json_dumps(data) == json.dumps(data, ensure_ascii=False)
    assert json_utils.json_dumps(data, pretty=True) == json.dumps(
        data, ensure_ascii=False, indent=2
    )


def test_json_dumps_with_orjson(monkeypatch: MonkeyPatch) -> None:
    """Serialize using orjson when available."""

    class Fake:
        OPT_INDENT_2 = 1

        def __init__(self) -> None:
            self.options: list[int] = []

        def dumps(self, obj: object, option: int = 0) -> bytes:
            self.options.append(option)
            return b"{}"

    fake = Fake()
    monkeypatch.setattr(json_utils, "orjson", fake)
    assert json_utils.json_dumps({}) == "{}"
    assert json_utils.json_dumps({}, pretty=True) == "{}"
    assert fake.options == [0, 1]


def test_json_loads_without_orjson(monkeypatch: MonkeyPatch) -> None:
    """Deserialize JSON using standard json when orjson is absent."""

    monkeypatch.setattr(json_utils, "orjson", None)
    data = {"a": 1}
    text = json.dumps(data)
    assert json_utils.json_loads(text) == data
    assert json_utils.json_loads(text.encode()) == data
