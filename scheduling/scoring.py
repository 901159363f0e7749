"""
Soft preferences. A candidate that passed every hard constraint starts at
BASE_SCORE and is nudged up or down; the engine takes the highest.
"""
from __future__ import annotations
from datetime import date, time, timedelta
from typing import Sequence

from core.timeutils import is_weekend, shift_hours, to_minutes

from .schema import EmployeeSnapshot, GenerationOptions, ScheduleShift, SchedulerContext

BASE_SCORE = 100.0

COST_BASELINE_RATE = 15.0
COST_RATE_SPAN = 15.0
COST_WEIGHT = 10.0

MAX_DAYS_PENALTY = 100.0


def month_hours_to_date(employee_id: int, context: SchedulerContext) -> float:
    """Hours already stored for the employee in the month being scheduled."""
    return sum(shift_hours(s.start_time, s.end_time) for s in context.existing_shifts.get(employee_id, []))


def consecutive_days_worked(employee_id: int, shift_date: date, week_shifts: Sequence[ScheduleShift]) -> int:
    worked = {s.shift_date for s in week_shifts if s.employee_id == employee_id}
    count = 0
    day = shift_date - timedelta(days=1)
    while count < 7 and day in worked:
        count += 1
        day -= timedelta(days=1)
    return count


def _fairness_adjustment(percent_of_target: float) -> float:
    if percent_of_target < 90:
        return 30
    if percent_of_target < 100:
        return 15
    if percent_of_target > 110:
        return -30
    if percent_of_target > 100:
        return -15
    return 0


def score_candidate(
    employee: EmployeeSnapshot,
    shift_date: date,
    start: time,
    end: time,
    context: SchedulerContext,
    week_shifts: Sequence[ScheduleShift],
    options: GenerationOptions,
) -> float:
    score = BASE_SCORE
    prefs = context.preferences.get(employee.id)
    hours = shift_hours(start, end)

    if prefs is not None:
        # fairness: hours stored this month against the monthly target
        percent = month_hours_to_date(employee.id, context) / prefs.target_monthly_hours * 100
        score += _fairness_adjustment(percent)

        if prefs.preferred_shift_start_time is not None:
            diff = abs(to_minutes(start) - to_minutes(prefs.preferred_shift_start_time))
            if diff <= 30:
                score += 10
            elif diff > 120:
                score -= 10

        if prefs.preferred_shift_length_hours:
            diff = abs(hours - prefs.preferred_shift_length_hours)
            if diff <= 0.5:
                score += 10
            elif diff > 2:
                score -= 10

        if is_weekend(shift_date):
            score += 10 if prefs.prefers_weekends else -20

    streak = consecutive_days_worked(employee.id, shift_date, week_shifts)
    if streak >= 5:
        score -= 15
    elif streak == 0:
        score += 5

    if options.prioritize_cost and employee.hourly_rate:
        score -= (employee.hourly_rate - COST_BASELINE_RATE) / COST_RATE_SPAN * COST_WEIGHT

    if prefs is not None:
        days_this_week = sum(1 for s in week_shifts if s.employee_id == employee.id)
        if days_this_week >= prefs.max_days_per_week:
            score -= MAX_DAYS_PENALTY

    return score
