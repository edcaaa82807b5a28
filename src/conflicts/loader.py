"""Read a schedule snapshot (teachers and class schedules) from JSON."""

import json
from pathlib import Path

from pydantic import ValidationError

from src.conflicts.errors import InvalidScheduleDataError, ScheduleDataError
from src.conflicts.logging import get_logger
from src.conflicts.models import ScheduleSnapshot

log = get_logger(__name__)


def load_snapshot(path: str | Path) -> ScheduleSnapshot:
    """Load teachers and class schedules from a JSON file.

    Expected shape:
        {"teachers": [{"id": "T1", "name": "...", "capabilities": ["Math"]}],
         "classes": [{"id": "C1", "name": "...",
                      "schedule": [{"subject": "Math", "teacher_id": "T1",
                                    "time": "MWF 07:30-08:30"}]}]}

    Args:
        path: JSON file path.

    Returns:
        Validated ScheduleSnapshot.

    Raises:
        ScheduleDataError: If the file is missing or not valid JSON.
        InvalidScheduleDataError: If the JSON does not match the expected shape.
    """
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise ScheduleDataError(f"Schedule file not found: {path}")
    except json.JSONDecodeError as exc:
        raise ScheduleDataError(f"Schedule file {path} is not valid JSON: {exc}")

    try:
        snapshot = ScheduleSnapshot.model_validate(raw)
    except ValidationError as exc:
        raise InvalidScheduleDataError(f"Schedule file {path} is malformed: {exc}")

    log.info(
        "snapshot_loaded",
        path=str(path),
        teachers=len(snapshot.teachers),
        classes=len(snapshot.classes),
    )
    return snapshot
