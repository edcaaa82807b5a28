import json
from pathlib import Path

import pytest

from src.conflicts.errors import InvalidScheduleDataError, ScheduleDataError
from src.conflicts.loader import load_snapshot

EXAMPLE = Path(__file__).resolve().parents[1] / "data" / "classes.example.json"


def test_load_example_snapshot() -> None:
    snapshot = load_snapshot(EXAMPLE)
    assert [t.id for t in snapshot.teachers] == ["T1", "T2"]
    assert [c.id for c in snapshot.classes] == ["classA", "classB", "classC"]
    # null schedule loads as an empty one
    assert snapshot.classes[2].schedule == []


def test_missing_file_raises_data_error(tmp_path: Path) -> None:
    with pytest.raises(ScheduleDataError, match="not found"):
        load_snapshot(tmp_path / "nope.json")


def test_invalid_json_raises_data_error(tmp_path: Path) -> None:
    path = tmp_path / "classes.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ScheduleDataError) as exc_info:
        load_snapshot(path)
    assert not isinstance(exc_info.value, InvalidScheduleDataError)


def test_malformed_snapshot_raises_invalid_data_error(tmp_path: Path) -> None:
    path = tmp_path / "classes.json"
    path.write_text(json.dumps({"classes": [{"name": "No id"}]}), encoding="utf-8")
    with pytest.raises(InvalidScheduleDataError):
        load_snapshot(path)


def test_empty_document_is_an_empty_snapshot(tmp_path: Path) -> None:
    path = tmp_path / "classes.json"
    path.write_text("{}", encoding="utf-8")
    snapshot = load_snapshot(path)
    assert snapshot.teachers == []
    assert snapshot.classes == []
