"""Pydantic models for schedule data.

All data structures use Pydantic v2 for validation, serialization, and type safety.
Entries and parse results are frozen: changing one means building a new one.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ScheduleEntry(BaseModel):
    """One teacher assignment to a class period.

    Built transiently from an editor row or a stored class schedule for the
    duration of a single conflict check.
    """

    model_config = ConfigDict(frozen=True)

    teacher_id: str
    time_spec: str = ""  # free text, e.g. "MWF 07:30-08:30", "TTh 1:00-2:00"
    subject_label: str = ""  # only used in conflict messages
    owner_context: str = ""  # class (or editor row) the entry belongs to
    owner_label: str | None = None  # class name for messages, e.g. "Grade 7 - Rizal"


class ParsedTimeSpec(BaseModel):
    """Days and minute range recovered from a time-spec string."""

    model_config = ConfigDict(frozen=True)

    days: frozenset[int] = frozenset()  # 0=Sunday..6=Saturday, empty = no day tokens
    start_minutes: int
    end_minutes: int


class ConflictResult(BaseModel):
    """A candidate entry and the first existing entry it collides with."""

    model_config = ConfigDict(frozen=True)

    candidate: ScheduleEntry
    conflicting: ScheduleEntry

    @property
    def message(self) -> str:
        owner = self.conflicting.owner_label or self.conflicting.owner_context
        return f"Conflict with {owner} ({self.conflicting.subject_label})"


class ScheduleItem(BaseModel):
    """A stored schedule row of a class: subject, teacher and time spec."""

    subject: str = ""
    teacher_id: str = ""
    time: str = ""


class ClassRecord(BaseModel):
    """A class (section) with its saved schedule rows."""

    id: str
    name: str = ""
    schedule: list[ScheduleItem] = Field(default_factory=list)

    @field_validator("schedule", mode="before")
    @classmethod
    def _null_schedule(cls, value):
        # Classes that were never scheduled are stored with a null schedule
        return [] if value is None else value


class TeacherRecord(BaseModel):
    """A teacher and the subjects they are qualified to teach."""

    id: str
    name: str = ""
    capabilities: list[str] = Field(default_factory=list)


class ScheduleSnapshot(BaseModel):
    """Materialized teachers and class schedules, as exported for checking."""

    teachers: list[TeacherRecord] = Field(default_factory=list)
    classes: list[ClassRecord] = Field(default_factory=list)
