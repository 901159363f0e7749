from __future__ import annotations
import math
from collections import defaultdict
from typing import Sequence

from core.timeutils import shift_hours

from .schema import ScheduleShift, ScheduleStats, SchedulerContext

DEFAULT_HOURLY_RATE = 20.0
WEEKS_PER_MONTH = 4.33
UNDER_TARGET_RATIO = 0.7


def _hours_by_employee(shifts: Sequence[ScheduleShift]) -> dict[int, float]:
    hours: dict[int, float] = defaultdict(float)
    for s in shifts:
        hours[s.employee_id] += shift_hours(s.start_time, s.end_time)
    return dict(hours)


def fairness_warnings(shifts: Sequence[ScheduleShift], context: SchedulerContext) -> list[str]:
    """Named warnings for scheduled employees well below their weekly share of the monthly target."""
    warnings = []
    for employee_id, hours in _hours_by_employee(shifts).items():
        prefs = context.preferences.get(employee_id)
        if prefs is None:
            continue
        weekly_target = prefs.target_monthly_hours / WEEKS_PER_MONTH
        if hours < weekly_target * UNDER_TARGET_RATIO:
            employee = context.employee(employee_id)
            name = employee.full_name if employee else f"Employee {employee_id}"
            warnings.append(f"{name} has only {hours:.1f} hours (below target)")
    return warnings


def empty_stats() -> ScheduleStats:
    return ScheduleStats()


def calculate_stats(shifts: Sequence[ScheduleShift], context: SchedulerContext) -> ScheduleStats:
    if not shifts:
        return empty_stats()

    total_hours = 0.0
    total_cost = 0.0
    for s in shifts:
        hours = shift_hours(s.start_time, s.end_time)
        employee = context.employee(s.employee_id)
        rate = employee.hourly_rate if employee and employee.hourly_rate else DEFAULT_HOURLY_RATE
        total_hours += hours
        total_cost += hours * rate

    per_employee = list(_hours_by_employee(shifts).values())
    if len(per_employee) == 1:
        fairness = 100.0
    else:
        mean = sum(per_employee) / len(per_employee)
        variance = sum((h - mean) ** 2 for h in per_employee) / len(per_employee)
        fairness = max(0.0, 100.0 - math.sqrt(variance) * 10)

    return ScheduleStats(
        total_shifts=len(shifts),
        total_hours=total_hours,
        estimated_labor_cost=total_cost,
        employees_scheduled=len(per_employee),
        fairness_score=fairness,
    )
