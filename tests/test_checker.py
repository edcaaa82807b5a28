from pathlib import Path

import pytest
from pydantic import ValidationError

from src.conflicts.checker import (
    ScheduleConflictChecker,
    entries_from_classes,
    find_all_conflicts,
    find_conflict,
)
from src.conflicts.loader import load_snapshot
from src.conflicts.models import ClassRecord, ConflictResult, ScheduleEntry, ScheduleItem

EXAMPLE = Path(__file__).resolve().parents[1] / "data" / "classes.example.json"


def entry(owner: str, time_spec: str, teacher: str = "T1", subject: str = "") -> ScheduleEntry:
    return ScheduleEntry(
        teacher_id=teacher, time_spec=time_spec, subject_label=subject, owner_context=owner
    )


@pytest.fixture
def t1_schedule() -> list[ScheduleEntry]:
    return [
        entry("classA", "MWF 08:30-09:30", subject="Mathematics"),
        entry("classB", "TTh 08:00-09:00", subject="Science"),
    ]


def test_find_conflict_excludes_own_context() -> None:
    existing = [entry("classA", "Mon 07:30-08:30")]
    candidate = entry("classA", "Mon 07:30-08:30")
    assert find_conflict(candidate, existing, "classA") is None


def test_find_conflict_without_exclusion_compares_everything() -> None:
    existing = [entry("classA", "Mon 07:30-08:30")]
    candidate = entry("classA", "Mon 07:30-08:30")
    assert find_conflict(candidate, existing) is not None


def test_find_conflict_returns_first_match_in_input_order() -> None:
    first = entry("classA", "Mon 07:00-08:00")
    second = entry("classB", "Mon 07:30-08:30")
    candidate = entry("classC", "Mon 07:45-08:15")

    result = find_conflict(candidate, [first, second], "classC")
    assert result.conflicting == first

    result = find_conflict(candidate, [second, first], "classC")
    assert result.conflicting == second


def test_find_conflict_ignores_other_teachers() -> None:
    existing = [entry("classA", "Mon 07:30-08:30", teacher="T2")]
    assert find_conflict(entry("classB", "Mon 07:30-08:30"), existing, "classB") is None


def test_end_to_end_teacher_schedule(t1_schedule: list[ScheduleEntry]) -> None:
    result = find_conflict(entry("classC", "Wed 09:00-10:00"), t1_schedule, "classC")
    assert isinstance(result, ConflictResult)
    assert result.conflicting.owner_context == "classA"

    assert find_conflict(entry("classC", "Fri 09:30-10:30"), t1_schedule, "classC") is None


def test_find_conflict_does_not_raise_on_garbage() -> None:
    existing = [entry("classA", "??"), entry("classB", "")]
    assert find_conflict(entry("classC", "12:99-::"), existing, "classC") is None


def test_conflict_message_prefers_owner_label() -> None:
    other = ScheduleEntry(
        teacher_id="T1",
        time_spec="Mon 08:00-09:00",
        subject_label="Science",
        owner_context="classB",
        owner_label="Grade 8 - Bonifacio",
    )
    result = ConflictResult(candidate=entry("classA", "Mon 08:00-09:00"), conflicting=other)
    assert result.message == "Conflict with Grade 8 - Bonifacio (Science)"

    unlabeled = other.model_copy(update={"owner_label": None})
    result = ConflictResult(candidate=entry("classA", "Mon 08:00-09:00"), conflicting=unlabeled)
    assert result.message == "Conflict with classB (Science)"


def test_schedule_entry_is_immutable() -> None:
    e = entry("classA", "Mon 08:00-09:00")
    with pytest.raises(ValidationError):
        e.time_spec = "Tue 08:00-09:00"
    changed = e.model_copy(update={"time_spec": "Tue 08:00-09:00"})
    assert e.time_spec == "Mon 08:00-09:00"
    assert changed.time_spec == "Tue 08:00-09:00"


def test_entries_from_classes_skips_incomplete_rows() -> None:
    classes = [
        ClassRecord(
            id="classA",
            name="Grade 7 - Rizal",
            schedule=[
                ScheduleItem(subject="Mathematics", teacher_id="T1", time=" MWF 08:30-09:30 "),
                ScheduleItem(subject="Science", teacher_id="", time="TTh 08:00-09:00"),
                ScheduleItem(subject="English", teacher_id="T2", time="  "),
            ],
        ),
        ClassRecord(id="classB", schedule=None),
    ]
    entries = entries_from_classes(classes)
    assert entries == [
        ScheduleEntry(
            teacher_id="T1",
            time_spec="MWF 08:30-09:30",
            subject_label="Mathematics",
            owner_context="classA",
            owner_label="Grade 7 - Rizal",
        )
    ]


def test_find_all_conflicts_reports_each_pair_once() -> None:
    entries = [
        entry("classA", "MWF 07:30-08:30", teacher="T2"),
        entry("classB", "Mon 08:00-09:00", teacher="T2"),
        entry("classC", "Daily 08:15-08:45", teacher="T2"),
    ]
    conflicts = find_all_conflicts(entries)
    pairs = [(c.candidate.owner_context, c.conflicting.owner_context) for c in conflicts]
    assert pairs == [("classA", "classB"), ("classA", "classC"), ("classB", "classC")]


def test_find_all_conflicts_skips_same_owner() -> None:
    entries = [entry("classA", "Mon 08:00-09:00"), entry("classA", "Mon 08:30-09:30")]
    assert find_all_conflicts(entries) == []


def test_checker_over_example_snapshot() -> None:
    snapshot = load_snapshot(EXAMPLE)
    checker = ScheduleConflictChecker.from_classes(snapshot.classes)

    result = checker.find_conflict(entry("classC", "Wed 09:00-10:00"), exclude_owner_context="classC")
    assert result.message == "Conflict with Grade 7 - Rizal (Mathematics)"

    audit = checker.audit()
    assert len(audit) == 1
    assert audit[0].candidate.teacher_id == "T2"
    assert audit[0].conflicting.owner_context == "classB"


def test_checker_snapshot_is_a_tuple(t1_schedule: list[ScheduleEntry]) -> None:
    checker = ScheduleConflictChecker(t1_schedule)
    t1_schedule.clear()
    assert len(checker.existing_entries) == 2
    assert checker.time_specs_overlap("Mon 07:30-08:30", "Mon 08:00-09:00") is True
