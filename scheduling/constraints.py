"""Hard constraints: an employee failing any of these is not considered for a slot."""
from __future__ import annotations
from datetime import date, time, timedelta
from typing import Iterable, Sequence

from core.timeutils import MINUTES_PER_DAY, day_of_week, shift_hours, times_overlap, to_minutes
from shift.conflicts import has_conflicts

from .schema import ExistingShift, ScheduleShift, SchedulerContext

MIN_REST_HOURS = 8
STANDARD_WEEKLY_HOURS = 40
MAX_WEEKLY_HOURS = 48


def is_available(employee_id: int, shift_date: date, start: time, end: time, context: SchedulerContext) -> bool:
    for window in context.time_off.get(employee_id, []):
        if window.start_date <= shift_date <= window.end_date:
            return False

    weekday = day_of_week(shift_date)
    for block in context.availability.get(employee_id, []):
        if block.is_recurring:
            applies = block.day_of_week == weekday
        else:
            applies = block.specific_date == shift_date
        if not applies:
            continue
        if block.is_all_day:
            return False
        if block.unavailable_start_time is None or block.unavailable_end_time is None:
            continue
        if times_overlap(start, end, block.unavailable_start_time, block.unavailable_end_time):
            return False
    return True


def has_adequate_rest(
    employee_id: int,
    shift_date: date,
    start: time,
    prior_shifts: Iterable[ExistingShift | ScheduleShift],
) -> bool:
    """
    At least MIN_REST_HOURS between the end of every shift the employee worked
    the day before and `start`. A previous-day shift that ends before it starts
    ran past midnight and ends on `shift_date` itself.
    """
    previous_day = shift_date - timedelta(days=1)
    start_min = to_minutes(start) + MINUTES_PER_DAY
    for s in prior_shifts:
        if s.employee_id != employee_id or s.shift_date != previous_day:
            continue
        end_min = to_minutes(s.end_time)
        if end_min < to_minutes(s.start_time):
            end_min += MINUTES_PER_DAY
        if (start_min - end_min) / 60.0 < MIN_REST_HOURS:
            return False
    return True


def weekly_hours(employee_id: int, shifts: Iterable[ScheduleShift]) -> float:
    return sum(shift_hours(s.start_time, s.end_time) for s in shifts if s.employee_id == employee_id)


def exceeds_weekly_hours(
    employee_id: int,
    candidate_hours: float,
    prior_shifts: Iterable[ScheduleShift],
    allow_overtime: bool = False,
) -> bool:
    total = weekly_hours(employee_id, prior_shifts) + candidate_hours
    if not allow_overtime and total > STANDARD_WEEKLY_HOURS:
        return True
    return total > MAX_WEEKLY_HOURS


def overlaps_assigned_shift(
    employee_id: int,
    shift_date: date,
    start: time,
    end: time,
    prior_shifts: Sequence[ScheduleShift],
) -> bool:
    return has_conflicts(employee_id, shift_date, start, end, prior_shifts)
