"""Free-form time-spec parsing and overlap testing.

Time specs are typed by hand into the class schedule editor, so there is no
grammar to enforce. Accepted shapes include:

  "07:30 - 08:30"        no day tokens, applies to any day
  "MWF 07:30-08:30"      compact day codes
  "TTh 1:00-2:00"        "th" is Thursday, a lone "t" is Tuesday
  "Mon/Wed 9:00 to 10:00"
  "Daily 08:00-09:00"    "daily" / "every" mean Monday to Friday

Only the first time range in a string is used. Day tokens are read from the
text before it. Weekdays are numbered 0=Sunday..6=Saturday.
"""

import re

from src.conflicts.logging import get_logger
from src.conflicts.models import ParsedTimeSpec

log = get_logger(__name__)

# "7:30-8:30", "07:30 - 08:30", "07:30 to 08:30"
TIME_RANGE_RE = re.compile(
    r"(?<!\d)(\d{1,2}):(\d{2})\s*(?:-|\bto\b)\s*(\d{1,2}):(\d{2})",
    re.IGNORECASE,
)

# Day names, also matching the start of full names ("monday", "thurs")
DAY_NAME_RE = re.compile(r"(?<![a-z])(mon|tue|wed|thu|fri|sat|sun)")

DAY_NAMES: dict[str, int] = {
    "sun": 0,
    "mon": 1,
    "tue": 2,
    "wed": 3,
    "thu": 4,
    "fri": 5,
    "sat": 6,
}

# Compact codes, two-letter codes take precedence over their first letter
_COMPACT_PAIRS: dict[str, int] = {"th": 4, "su": 0}
_COMPACT_SINGLE: dict[str, int] = {"m": 1, "t": 2, "w": 3, "f": 5, "s": 6}

WEEKDAYS: frozenset[int] = frozenset({1, 2, 3, 4, 5})


def normalize_time_spec(spec: str | None) -> str:
    """Lowercase and trim a time spec for comparison."""
    return (spec or "").strip().lower()


def _compact_days(run: str) -> set[int]:
    """Decode a letter run made only of compact day codes ("mwf", "tth").

    Runs containing any other letter are ordinary words and contribute
    nothing.
    """
    days: set[int] = set()
    i = 0
    while i < len(run):
        pair = run[i : i + 2]
        if pair in _COMPACT_PAIRS:
            days.add(_COMPACT_PAIRS[pair])
            i += 2
            continue
        day = _COMPACT_SINGLE.get(run[i])
        if day is None:
            return set()
        days.add(day)
        i += 1
    return days


def parse_days(region: str) -> frozenset[int]:
    """Collect weekday numbers from the text preceding a time range.

    Args:
        region: Text before the time range, any case.

    Returns:
        Weekday numbers, empty when the region names no day at all.
    """
    region = region.lower()

    if "daily" in region or "every" in region:
        return WEEKDAYS

    days = {DAY_NAMES[name] for name in DAY_NAME_RE.findall(region)}
    if days:
        return frozenset(days)

    for run in re.findall(r"[a-z]+", region):
        days |= _compact_days(run)
    return frozenset(days)


def parse_time_spec(spec: str | None) -> ParsedTimeSpec | None:
    """Parse days and minute range out of a free-form time spec.

    Args:
        spec: Time-spec text, e.g. "MWF 07:30-08:30".

    Returns:
        ParsedTimeSpec, or None when the text holds no time range. A spec with
        a time range but no day tokens parses with an empty day set.
    """
    text = spec or ""
    match = TIME_RANGE_RE.search(text)
    if match is None:
        return None

    start_h, start_m, end_h, end_m = (int(g) for g in match.groups())
    return ParsedTimeSpec(
        days=parse_days(text[: match.start()]),
        start_minutes=start_h * 60 + start_m,
        end_minutes=end_h * 60 + end_m,
    )


def time_specs_overlap(spec_a: str | None, spec_b: str | None) -> bool:
    """Decide whether two time specs can fall on the same period.

    Blank specs never overlap. Specs equal after normalization always do,
    parsable or not. If either side has no time range, the comparison falls
    back to substring containment. Otherwise the day sets must intersect (an
    empty day set matches any day) and the ranges must overlap as half-open
    intervals, so back-to-back periods do not collide.

    Args:
        spec_a: First time spec.
        spec_b: Second time spec.

    Returns:
        True if the specs collide. Never raises.
    """
    a = normalize_time_spec(spec_a)
    b = normalize_time_spec(spec_b)
    if not a or not b:
        return False
    if a == b:
        return True

    parsed_a = parse_time_spec(a)
    parsed_b = parse_time_spec(b)
    if parsed_a is None or parsed_b is None:
        log.debug("time_spec_unparsed", spec_a=a, spec_b=b)
        return a in b or b in a

    if parsed_a.days and parsed_b.days and not parsed_a.days & parsed_b.days:
        return False

    return (
        parsed_a.start_minutes < parsed_b.end_minutes
        and parsed_a.end_minutes > parsed_b.start_minutes
    )
