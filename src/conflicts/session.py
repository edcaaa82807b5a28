"""ScheduleEditSession - conflict checks for a class schedule being edited.

Mirrors the schedule editor: the rows currently in the editor are checked
against each other and against the stored schedules of all other classes.
The edited class's own stored schedule is ignored, since the editor rows
replace it on save.
"""

from collections.abc import Iterable, Sequence

from src.conflicts.checker import entries_from_classes, find_conflict
from src.conflicts.errors import ScheduleConflictError
from src.conflicts.logging import get_logger
from src.conflicts.models import (
    ClassRecord,
    ConflictResult,
    ScheduleEntry,
    ScheduleItem,
    TeacherRecord,
)

log = get_logger(__name__)


def qualified_teachers(subject: str, teachers: Iterable[TeacherRecord]) -> list[TeacherRecord]:
    """Teachers whose capabilities include the subject.

    Args:
        subject: Subject name as it appears in the class's subject list.
        teachers: Candidate teachers.

    Returns:
        Qualified teachers in input order; empty for a blank subject.
    """
    if not subject:
        return []
    return [t for t in teachers if subject in t.capabilities]


class ScheduleEditSession:
    """Schedule rows of one class, open for editing."""

    def __init__(
        self,
        class_record: ClassRecord,
        rows: Sequence[ScheduleItem],
        all_classes: Iterable[ClassRecord],
    ) -> None:
        self.class_record = class_record
        self.rows: tuple[ScheduleItem, ...] = tuple(rows)
        self.stored_entries: tuple[ScheduleEntry, ...] = tuple(
            entries_from_classes(all_classes)
        )

    def _row_context(self, index: int) -> str:
        return f"{self.class_record.id}#{index}"

    def row_entry(self, index: int) -> ScheduleEntry:
        """Schedule entry for one editor row, owned by that row alone."""
        row = self.rows[index]
        name = self.class_record.name or self.class_record.id
        return ScheduleEntry(
            teacher_id=row.teacher_id,
            time_spec=row.time.strip(),
            subject_label=row.subject,
            owner_context=self._row_context(index),
            owner_label=f"{name} row {index + 1}",
        )

    def session_entries(self) -> list[ScheduleEntry]:
        return [self.row_entry(i) for i in range(len(self.rows))]

    def check_row(self, index: int) -> ConflictResult | None:
        """Check one editor row for collisions.

        Other editor rows are searched first, then the stored schedules of
        every other class.

        Args:
            index: Row position in the editor.

        Returns:
            The first ConflictResult found, or None. Rows without a teacher
            or time never conflict.
        """
        row = self.rows[index]
        if not row.teacher_id or not row.time.strip():
            return None

        candidate = self.row_entry(index)
        conflict = find_conflict(
            candidate, self.session_entries(), self._row_context(index)
        ) or find_conflict(candidate, self.stored_entries, self.class_record.id)

        if conflict is not None:
            log.info(
                "schedule_row_conflict",
                class_id=self.class_record.id,
                row=index,
                detail=conflict.message,
            )
        return conflict

    def conflicts(self) -> dict[int, ConflictResult]:
        """Conflicts for every row that has one, keyed by row index."""
        found: dict[int, ConflictResult] = {}
        for index in range(len(self.rows)):
            conflict = self.check_row(index)
            if conflict is not None:
                found[index] = conflict
        return found

    def to_schedule(self) -> list[ScheduleItem]:
        """Rows to persist: those with both a subject and a teacher."""
        return [
            ScheduleItem(subject=row.subject, teacher_id=row.teacher_id, time=row.time.strip())
            for row in self.rows
            if row.subject and row.teacher_id
        ]

    def validate(self) -> list[ScheduleItem]:
        """Return the save payload, refusing schedules that still collide.

        Raises:
            ScheduleConflictError: If any row conflicts.
        """
        found = self.conflicts()
        if found:
            raise ScheduleConflictError(found)
        return self.to_schedule()
