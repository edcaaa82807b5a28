"""Teacher schedule conflict checking for the school management dashboard.

Parses hand-typed class period times ("MWF 07:30-08:30") and finds teachers
booked into overlapping periods, within one edited schedule or across classes.
"""

from src.conflicts.checker import ScheduleConflictChecker, find_all_conflicts, find_conflict
from src.conflicts.models import ConflictResult, ParsedTimeSpec, ScheduleEntry
from src.conflicts.session import ScheduleEditSession, qualified_teachers
from src.conflicts.timespec import parse_time_spec, time_specs_overlap

__all__ = [
    "ScheduleConflictChecker",
    "ScheduleEditSession",
    "ScheduleEntry",
    "ParsedTimeSpec",
    "ConflictResult",
    "find_conflict",
    "find_all_conflicts",
    "parse_time_spec",
    "time_specs_overlap",
    "qualified_teachers",
]
