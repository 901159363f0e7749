"""
Shift conflict detection.

Works on anything shaped like a shift (employee_id, shift_date, start_time,
end_time and, for persisted rows, id), so the same checks serve manual shift
entry, schedule review and the generator's in-run shift list.
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import date, time
from typing import Any, Iterable, Literal, Optional

from core.timeutils import format_hhmm, times_overlap

ConflictType = Literal["time_overlap", "same_employee"]
Severity = Literal["none", "warning", "error"]


@dataclass(frozen=True)
class ShiftConflict:
    shift: Any
    conflict_type: ConflictType
    message: str


def detect_conflicts(
    employee_id: int,
    shift_date: date,
    start_time: time,
    end_time: time,
    shifts: Iterable[Any],
    exclude_shift_id: Optional[int] = None,
) -> list[ShiftConflict]:
    conflicts: list[ShiftConflict] = []
    for existing in shifts:
        if exclude_shift_id is not None and getattr(existing, "id", None) == exclude_shift_id:
            continue
        if existing.employee_id != employee_id or existing.shift_date != shift_date:
            continue
        if times_overlap(start_time, end_time, existing.start_time, existing.end_time):
            conflicts.append(
                ShiftConflict(
                    shift=existing,
                    conflict_type="time_overlap",
                    message=(
                        "Time overlap with existing shift: "
                        f"{format_hhmm(existing.start_time)} - {format_hhmm(existing.end_time)}"
                    ),
                )
            )
    return conflicts


def has_conflicts(
    employee_id: int,
    shift_date: date,
    start_time: time,
    end_time: time,
    shifts: Iterable[Any],
    exclude_shift_id: Optional[int] = None,
) -> bool:
    return bool(detect_conflicts(employee_id, shift_date, start_time, end_time, shifts, exclude_shift_id))


def get_all_conflicts(shifts: Iterable[Any]) -> dict[int, list[ShiftConflict]]:
    """Pairwise check across a set of persisted shifts, keyed by shift id (only shifts with conflicts)."""
    shifts = list(shifts)
    conflict_map: dict[int, list[ShiftConflict]] = {}
    for shift in shifts:
        conflicts = detect_conflicts(
            shift.employee_id,
            shift.shift_date,
            shift.start_time,
            shift.end_time,
            shifts,
            exclude_shift_id=shift.id,
        )
        if conflicts:
            conflict_map[shift.id] = conflicts
    return conflict_map


def conflict_severity(conflicts: list[ShiftConflict]) -> Severity:
    if not conflicts:
        return "none"
    if any(c.conflict_type == "time_overlap" for c in conflicts):
        return "error"
    return "warning"


def format_conflict_message(conflicts: list[ShiftConflict]) -> str:
    if not conflicts:
        return ""
    if len(conflicts) == 1:
        return conflicts[0].message
    lines = "\n".join(f"• {c.message}" for c in conflicts)
    return f"{len(conflicts)} conflicts detected:\n{lines}"


def validate_shift(
    employee_id: int,
    shift_date: date,
    start_time: Optional[time],
    end_time: Optional[time],
    shifts: Iterable[Any],
    exclude_shift_id: Optional[int] = None,
) -> tuple[bool, list[str]]:
    """Conflict messages plus basic time sanity; valid when there are no errors."""
    if start_time is None or end_time is None:
        return False, ["Start time and end time are required"]

    errors = [
        c.message
        for c in detect_conflicts(employee_id, shift_date, start_time, end_time, shifts, exclude_shift_id)
    ]
    if start_time == end_time:
        errors.append("Start time cannot be the same as end time")
    return not errors, errors
