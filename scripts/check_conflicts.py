"""Check teacher schedule conflicts against a class schedule snapshot.

Standalone CLI script. Loads the teachers/classes JSON snapshot, then either
checks one proposed assignment or audits every stored schedule, and writes
JSON (default) or a human-readable table to stdout.

Run with: python scripts/check_conflicts.py --teacher T1 --time "Wed 09:00-10:00" --class classC
Subject:  python scripts/check_conflicts.py --teacher T1 --time "MWF 8:00-9:00" --subject Science
Audit:    python scripts/check_conflicts.py --audit
Table:    python scripts/check_conflicts.py --audit --table
Data:     python scripts/check_conflicts.py --audit --data data/classes.example.json

Configuration comes from SCHEDULING_* environment variables or .env
(see src/conflicts/config.py).

Exit codes:
  0 = no conflict (or conflicts found with SCHEDULING_FAIL_ON_CONFLICT=false)
  1 = error (message on stderr)
  2 = conflict found
"""

import argparse
import json
import os
import sys

from dotenv import load_dotenv

load_dotenv()

# Add project root to path for src imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from src.conflicts.checker import ScheduleConflictChecker  # noqa: E402
from src.conflicts.config import get_config  # noqa: E402
from src.conflicts.errors import SchedulingError  # noqa: E402
from src.conflicts.loader import load_snapshot  # noqa: E402
from src.conflicts.logging import get_logger, setup_logging  # noqa: E402
from src.conflicts.models import ConflictResult, ScheduleEntry  # noqa: E402

log = get_logger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_CONFLICT = 2


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments using argparse."""
    parser = argparse.ArgumentParser(
        description="Check teacher schedule conflicts against stored class schedules.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--data",
        type=str,
        default=None,
        help="Schedule snapshot JSON file (default: SCHEDULING_DATA_FILE or data/classes.json).",
    )
    parser.add_argument(
        "--audit",
        action="store_true",
        help="Report every conflict between stored class schedules.",
    )
    parser.add_argument("--teacher", type=str, default=None, help="Teacher id to assign.")
    parser.add_argument(
        "--time",
        type=str,
        default=None,
        help='Proposed time spec, e.g. "MWF 07:30-08:30".',
    )
    parser.add_argument(
        "--class",
        dest="class_id",
        type=str,
        default=None,
        help="Class being scheduled; its own stored schedule is ignored.",
    )
    parser.add_argument("--subject", type=str, default="", help="Subject of the proposed period.")
    parser.add_argument(
        "--table",
        action="store_true",
        help="Output a human-readable table to stdout instead of JSON.",
    )
    return parser.parse_args(argv)


def _conflict_to_dict(conflict: ConflictResult) -> dict:
    return {
        "message": conflict.message,
        "candidate": conflict.candidate.model_dump(mode="json"),
        "conflicting": conflict.conflicting.model_dump(mode="json"),
    }


def _format_table(conflicts: list[ConflictResult], teacher_names: dict[str, str]) -> str:
    """Format conflicts as a human-readable table.

    Columns: Teacher | Time | Subject | Conflicts with | Existing time
    """
    if not conflicts:
        return "(no conflicts)"

    headers = ["Teacher", "Time", "Subject", "Conflicts with", "Existing time"]
    rows = []
    for c in conflicts:
        other = c.conflicting
        rows.append(
            [
                teacher_names.get(c.candidate.teacher_id, c.candidate.teacher_id),
                c.candidate.time_spec,
                c.candidate.subject_label or "-",
                f"{other.owner_label or other.owner_context} ({other.subject_label or '-'})",
                other.time_spec,
            ]
        )

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    lines = [
        " | ".join(h.ljust(widths[i]) for i, h in enumerate(headers)),
        "-+-".join("-" * w for w in widths),
    ]
    for row in rows:
        lines.append(" | ".join(cell.ljust(widths[i]) for i, cell in enumerate(row)))
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    config = get_config()
    setup_logging(json_output=config.log_json, log_level=config.log_level)

    if not args.audit and not (args.teacher and args.time):
        print("ERROR: --teacher and --time are required unless --audit is given", file=sys.stderr)
        return EXIT_ERROR

    try:
        snapshot = load_snapshot(args.data or config.data_file)
    except SchedulingError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_ERROR

    checker = ScheduleConflictChecker.from_classes(snapshot.classes)
    teacher_names = {t.id: t.name for t in snapshot.teachers if t.name}

    if args.audit:
        conflicts = checker.audit()
        output: object = [_conflict_to_dict(c) for c in conflicts]
    else:
        candidate = ScheduleEntry(
            teacher_id=args.teacher,
            time_spec=args.time.strip(),
            subject_label=args.subject,
            owner_context=args.class_id or "",
        )
        conflict = checker.find_conflict(candidate, exclude_owner_context=args.class_id)
        conflicts = [conflict] if conflict is not None else []
        output = {
            "conflict": conflict is not None,
            "message": conflict.message if conflict is not None else None,
            "conflicting": (
                conflict.conflicting.model_dump(mode="json") if conflict is not None else None
            ),
        }

    if args.table:
        print(_format_table(conflicts, teacher_names))
    else:
        print(json.dumps(output, indent=2, ensure_ascii=False))

    log.info("check_conflicts_done", audit=args.audit, conflicts=len(conflicts))
    if conflicts and config.fail_on_conflict:
        return EXIT_CONFLICT
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
