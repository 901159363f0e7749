"""
Greedy week schedule generation.

Days run Monday to Sunday and slots in staffing-requirement order. Every slot
attempt picks the best eligible employee against the shifts produced so far
in the run; an earlier pick is never revisited, so a locally good choice can
starve a later slot.
"""
from __future__ import annotations
import logging
from datetime import date, time, timedelta
from typing import Optional

from sqlalchemy.orm import Session

from core.timeutils import day_of_week, format_hhmm, shift_hours, week_dates

from .constraints import exceeds_weekly_hours, has_adequate_rest, is_available, overlaps_assigned_shift
from .context import load_context
from .schema import GeneratedSchedule, GenerationOptions, ScheduleShift, SchedulerContext
from .scoring import score_candidate
from .stats import calculate_stats, empty_stats, fairness_warnings

_logger = logging.getLogger(__name__)

# attempts per open day that has no staffing requirements
DEFAULT_COVERAGE_STAFF = 2

NO_EMPLOYEES_WARNINGS = [
    "No active employees found (excluding managers)",
    'Please add employees with role="employee" to your restaurant',
]
NO_BUSINESS_HOURS_WARNINGS = [
    "No business hours configured",
    "Please configure your business hours in Settings → Business Hours section",
]
ALL_CLOSED_WARNINGS = [
    "All days are marked as closed",
    "Please mark at least one day as open in Settings → Business Hours",
]
NO_SHIFTS_WARNINGS = [
    "No shifts could be generated for this week",
    "Possible reasons:",
    "- All employees may be unavailable during business hours",
    "- Employees may have reached their max days/week limit",
    "- Weekly hour limits may be preventing assignments",
    "Try: Adjust employee availability, increase max days/week, or enable overtime",
]


def assign_best_employee(
    context: SchedulerContext,
    shift_date: date,
    start: time,
    end: time,
    week_shifts: list[ScheduleShift],
    options: GenerationOptions,
) -> Optional[ScheduleShift]:
    """Best-scoring employee passing every hard constraint, or None. Ties go to the first employee seen."""
    hours = shift_hours(start, end)
    rest_window = [*context.carryover_shifts, *week_shifts]

    best = None
    best_score = None
    for employee in context.employees:
        if not is_available(employee.id, shift_date, start, end, context):
            continue
        if not has_adequate_rest(employee.id, shift_date, start, rest_window):
            continue
        if exceeds_weekly_hours(employee.id, hours, week_shifts, options.allow_overtime):
            continue
        if overlaps_assigned_shift(employee.id, shift_date, start, end, week_shifts):
            continue

        score = score_candidate(employee, shift_date, start, end, context, week_shifts, options)
        if best_score is None or score > best_score:
            best, best_score = employee, score

    if best is None:
        return None
    return ScheduleShift(
        employee_id=best.id,
        shift_date=shift_date,
        start_time=start,
        end_time=end,
        position=best.position,
    )


def _fill_slot(
    context: SchedulerContext,
    shift_date: date,
    start: time,
    end: time,
    attempts: int,
    shifts: list[ScheduleShift],
    options: GenerationOptions,
) -> int:
    """Append up to `attempts` shifts for one slot; returns how many were filled."""
    filled = 0
    for _ in range(attempts):
        shift = assign_best_employee(context, shift_date, start, end, shifts, options)
        # nothing changed since the failed attempt, so later ones fail too
        if shift is None:
            break
        shifts.append(shift)
        filled += 1
    return filled


def _preflight(context: SchedulerContext) -> list[str]:
    if not context.employees:
        return list(NO_EMPLOYEES_WARNINGS)
    if not context.business_hours:
        return list(NO_BUSINESS_HOURS_WARNINGS)
    if all(bh.is_closed for bh in context.business_hours.values()):
        return list(ALL_CLOSED_WARNINGS)
    return []


def build_schedule(
    context: SchedulerContext,
    options: Optional[GenerationOptions] = None,
    *,
    logger: Optional[logging.Logger] = None,
) -> GeneratedSchedule:
    log = logger or _logger
    options = options or GenerationOptions()

    blocking = _preflight(context)
    if blocking:
        log.info("schedule for week %s not generated: %s", context.week_start, blocking[0])
        return GeneratedSchedule(shifts=[], warnings=blocking, stats=empty_stats())

    shifts: list[ScheduleShift] = []
    warnings: list[str] = []

    for current in week_dates(context.week_start):
        weekday = day_of_week(current)
        hours = context.business_hours.get(weekday)
        if hours is None or hours.is_closed:
            continue

        requirements = [r for r in context.staffing_requirements if r.day_of_week == weekday]
        if not requirements:
            if hours.open_time == hours.close_time:
                warnings.append(
                    f"Skipped {current.isoformat()}: business hours open and close at {format_hhmm(hours.open_time)}"
                )
                continue
            filled = _fill_slot(context, current, hours.open_time, hours.close_time, DEFAULT_COVERAGE_STAFF, shifts, options)
            if filled < DEFAULT_COVERAGE_STAFF:
                warnings.append(f"Could not find available staff for {current.isoformat()}")
            continue

        for req in requirements:
            if req.time_slot_start == req.time_slot_end:
                warnings.append(
                    f"Skipped zero-length staffing slot for {current.isoformat()} "
                    f"{format_hhmm(req.time_slot_start)}-{format_hhmm(req.time_slot_end)}"
                )
                continue
            filled = _fill_slot(
                context, current, req.time_slot_start, req.time_slot_end, req.optimal_staff, shifts, options
            )
            if filled < min(req.min_staff_required, req.optimal_staff):
                warnings.append(
                    f"Could not meet minimum staffing ({req.min_staff_required}) for {current.isoformat()} "
                    f"{format_hhmm(req.time_slot_start)}-{format_hhmm(req.time_slot_end)}"
                )
            log.debug(
                "%s %s-%s filled %d/%d",
                current,
                format_hhmm(req.time_slot_start),
                format_hhmm(req.time_slot_end),
                filled,
                req.optimal_staff,
            )

    if not shifts:
        warnings.extend(NO_SHIFTS_WARNINGS)

    stats = calculate_stats(shifts, context)
    warnings.extend(fairness_warnings(shifts, context))
    warnings = list(dict.fromkeys(warnings))

    log.info(
        "generated %d shifts (%.1f hours) for restaurant %s week %s with %d warnings",
        stats.total_shifts,
        stats.total_hours,
        context.restaurant_id,
        context.week_start,
        len(warnings),
    )
    return GeneratedSchedule(shifts=shifts, warnings=warnings, stats=stats)


def generate_schedule(
    db: Session,
    restaurant_id: int,
    week_start: date,
    options: Optional[GenerationOptions] = None,
    *,
    logger: Optional[logging.Logger] = None,
) -> GeneratedSchedule:
    """Load one week's context for a restaurant and build its schedule. Performs no writes."""
    week_end = week_start + timedelta(days=6)
    context = load_context(
        db,
        restaurant_id,
        week_start,
        week_end,
        (week_start.year, week_start.month),
        logger=logger,
    )
    return build_schedule(context, options, logger=logger)
