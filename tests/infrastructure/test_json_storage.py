"""JsonStorage tests — Result-based file I/O."""

from taskhours.domain.shared import Err, Ok
from taskhours.infrastructure.storage import JsonStorage


def test_round_trip(tmp_path):
    storage = JsonStorage()
    path = tmp_path / "nested" / "data.json"

    assert storage.save_json(path, {"a": 1}) == Ok(None)
    assert storage.load_json(path) == Ok({"a": 1})


def test_missing_file(tmp_path):
    result = JsonStorage().load_json(tmp_path / "nope.json")
    assert isinstance(result, Err)
    assert "File not found" in result.error


def test_invalid_json(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")

    result = JsonStorage().load_json(path)

    assert isinstance(result, Err)
    assert "Invalid JSON" in result.error


def test_non_object_json(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2]", encoding="utf-8")

    result = JsonStorage().load_json(path)

    assert isinstance(result, Err)
    assert "Expected a JSON object" in result.error


def test_unserializable_data(tmp_path):
    result = JsonStorage().save_json(tmp_path / "x.json", {"a": object()})
    assert isinstance(result, Err)
    assert "not JSON serializable" in result.error


def test_non_utf8_file(tmp_path):
    path = tmp_path / "latin.json"
    path.write_bytes(b'{"name": "\xff"}')

    result = JsonStorage().load_json(path)

    assert isinstance(result, Err)
    assert "Invalid encoding" in result.error
