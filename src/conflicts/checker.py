"""ScheduleConflictChecker - finds teacher collisions between schedule entries.

The checker never reads ambient state: callers pass the entries to search,
either the rows of an open schedule editor or the stored schedules of every
other class. Both cases go through the same find_conflict() primitive.
"""

from collections.abc import Iterable, Sequence

from src.conflicts.logging import get_logger
from src.conflicts.models import ClassRecord, ConflictResult, ScheduleEntry
from src.conflicts.timespec import time_specs_overlap

log = get_logger(__name__)


def find_conflict(
    candidate: ScheduleEntry,
    existing_entries: Iterable[ScheduleEntry],
    exclude_owner_context: str | None = None,
) -> ConflictResult | None:
    """Return the first existing entry that collides with the candidate.

    Only entries for the same teacher are compared, and entries owned by
    exclude_owner_context are skipped so a class is never checked against
    itself. Entries are tested in input order; the first hit wins.

    Args:
        candidate: Proposed assignment.
        existing_entries: Snapshot to search.
        exclude_owner_context: Owner context to ignore, None to ignore nothing.

    Returns:
        ConflictResult for the first collision, or None.
    """
    for entry in existing_entries:
        if entry.teacher_id != candidate.teacher_id:
            continue
        if exclude_owner_context is not None and entry.owner_context == exclude_owner_context:
            continue
        if time_specs_overlap(candidate.time_spec, entry.time_spec):
            log.debug(
                "schedule_conflict_found",
                teacher_id=candidate.teacher_id,
                candidate=candidate.time_spec,
                existing=entry.time_spec,
                owner=entry.owner_context,
            )
            return ConflictResult(candidate=candidate, conflicting=entry)
    return None


def entries_from_classes(classes: Iterable[ClassRecord]) -> list[ScheduleEntry]:
    """Flatten stored class schedules into schedule entries.

    Rows without a teacher or a time cannot collide and are skipped.
    """
    entries: list[ScheduleEntry] = []
    for cls in classes:
        for item in cls.schedule:
            if not item.teacher_id or not item.time.strip():
                continue
            entries.append(
                ScheduleEntry(
                    teacher_id=item.teacher_id,
                    time_spec=item.time.strip(),
                    subject_label=item.subject,
                    owner_context=cls.id,
                    owner_label=cls.name or None,
                )
            )
    return entries


def find_all_conflicts(entries: Sequence[ScheduleEntry]) -> list[ConflictResult]:
    """Audit a whole snapshot for collisions between different owners.

    Each colliding pair is reported once, with the earlier entry as the
    candidate, in input order.
    """
    conflicts: list[ConflictResult] = []
    for i, candidate in enumerate(entries):
        for entry in entries[i + 1 :]:
            if entry.teacher_id != candidate.teacher_id:
                continue
            if entry.owner_context == candidate.owner_context:
                continue
            if time_specs_overlap(candidate.time_spec, entry.time_spec):
                conflicts.append(ConflictResult(candidate=candidate, conflicting=entry))

    log.debug("schedule_audited", entries=len(entries), conflicts=len(conflicts))
    return conflicts


class ScheduleConflictChecker:
    """Conflict checks against one materialized snapshot of existing entries.

    The snapshot is copied into a tuple on construction and never changes, so
    one checker can serve concurrent callers.
    """

    def __init__(self, existing_entries: Iterable[ScheduleEntry] = ()) -> None:
        self.existing_entries: tuple[ScheduleEntry, ...] = tuple(existing_entries)

    @classmethod
    def from_classes(cls, classes: Iterable[ClassRecord]) -> "ScheduleConflictChecker":
        """Build a checker over the stored schedules of the given classes."""
        return cls(entries_from_classes(classes))

    @staticmethod
    def time_specs_overlap(spec_a: str | None, spec_b: str | None) -> bool:
        return time_specs_overlap(spec_a, spec_b)

    def find_conflict(
        self, candidate: ScheduleEntry, exclude_owner_context: str | None = None
    ) -> ConflictResult | None:
        return find_conflict(candidate, self.existing_entries, exclude_owner_context)

    def audit(self) -> list[ConflictResult]:
        return find_all_conflicts(self.existing_entries)
