# tests/test_services/test_stats.py
import unittest
from datetime import date, time, timedelta

from scheduling.schema import DefaultPreferences, EmployeeSnapshot, ScheduleShift, ScheduleStats, SchedulerContext
from scheduling.stats import calculate_stats, empty_stats, fairness_warnings

MONDAY = date(2025, 3, 3)


def _ctx():
    employees = [
        EmployeeSnapshot(id=1, first_name="Ana", last_name="Lee", hourly_rate=25),
        EmployeeSnapshot(id=2, first_name="Ben", last_name="Roy"),
    ]
    return SchedulerContext(
        restaurant_id=1,
        week_start=MONDAY,
        week_end=MONDAY + timedelta(days=6),
        month=(2025, 3),
        employees=employees,
        preferences={e.id: DefaultPreferences(employee_id=e.id) for e in employees},
    )


def _shift(employee_id, day, start, end):
    return ScheduleShift(employee_id=employee_id, shift_date=MONDAY + timedelta(days=day), start_time=start, end_time=end)


class CalculateStatsTests(unittest.TestCase):
    def test_empty(self):
        self.assertEqual(calculate_stats([], _ctx()), ScheduleStats())
        self.assertEqual(empty_stats().fairness_score, 0)

    def test_single_employee_is_perfectly_fair(self):
        stats = calculate_stats([_shift(1, 0, time(9), time(17)), _shift(1, 1, time(9), time(13))], _ctx())
        self.assertEqual(stats.total_shifts, 2)
        self.assertEqual(stats.total_hours, 12)
        self.assertEqual(stats.estimated_labor_cost, 12 * 25)
        self.assertEqual(stats.employees_scheduled, 1)
        self.assertEqual(stats.fairness_score, 100)

    def test_default_rate_and_overnight_hours(self):
        stats = calculate_stats([_shift(2, 0, time(22), time(2))], _ctx())
        self.assertEqual(stats.total_hours, 4)
        self.assertEqual(stats.estimated_labor_cost, 80)

    def test_fairness_uses_population_stddev(self):
        # 8h vs 4h: stddev 2 -> 80
        stats = calculate_stats([_shift(1, 0, time(9), time(17)), _shift(2, 0, time(9), time(13))], _ctx())
        self.assertAlmostEqual(stats.fairness_score, 80)

    def test_fairness_score_floors_at_zero(self):
        shifts = [_shift(1, d, time(9), time(17)) for d in range(5)] + [_shift(2, 0, time(9), time(10))]
        self.assertEqual(calculate_stats(shifts, _ctx()).fairness_score, 0)


class FairnessWarningTests(unittest.TestCase):
    def test_warns_below_seventy_percent_of_weekly_share(self):
        # 160 / 4.33 * 0.7 is about 25.9h
        shifts = [_shift(1, d, time(9), time(17)) for d in range(3)] + [_shift(2, d, time(9), time(17)) for d in range(4)]
        self.assertEqual(fairness_warnings(shifts, _ctx()), ["Ana Lee has only 24.0 hours (below target)"])

    def test_unscheduled_employees_not_named(self):
        self.assertEqual(fairness_warnings([], _ctx()), [])
