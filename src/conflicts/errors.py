"""Error hierarchy for schedule loading and conflict validation.

Time-spec parsing never raises: a string without a recognizable time range
falls back to substring comparison. These exceptions cover the edges around
the checker, i.e. reading a schedule snapshot and refusing to save a
schedule that still collides.

Example usage:
    try:
        payload = session.validate()
    except ScheduleConflictError as exc:
        for index, conflict in exc.conflicts.items():
            print(index, conflict.message)
"""


class SchedulingError(Exception):
    """Base exception for all scheduling errors."""

    pass


class ScheduleDataError(SchedulingError):
    """Schedule snapshot could not be read.

    Examples: missing file, truncated or non-JSON content.
    """

    pass


class InvalidScheduleDataError(ScheduleDataError):
    """Schedule snapshot was read but does not match the expected shape.

    Examples: class without an id, schedule row that is not an object.
    """

    pass


class ScheduleConflictError(SchedulingError):
    """A schedule still contains teacher collisions and cannot be saved.

    Attributes:
        conflicts: Mapping of row index to the ConflictResult found for it.
    """

    def __init__(self, conflicts: dict) -> None:
        self.conflicts = conflicts
        details = "; ".join(
            f"row {index}: {conflict.message}" for index, conflict in conflicts.items()
        )
        super().__init__(f"{len(conflicts)} schedule conflict(s): {details}")
