# tests/test_services/test_scoring.py
import unittest
from datetime import date, time, timedelta

from scheduling.schema import (
    ConfiguredPreferences,
    DefaultPreferences,
    EmployeeSnapshot,
    ExistingShift,
    GenerationOptions,
    ScheduleShift,
    SchedulerContext,
)
from scheduling.scoring import consecutive_days_worked, month_hours_to_date, score_candidate

MONDAY = date(2025, 3, 3)
SATURDAY = MONDAY + timedelta(days=5)


def _ctx(employee, prefs=None, existing=None):
    return SchedulerContext(
        restaurant_id=1,
        week_start=MONDAY,
        week_end=MONDAY + timedelta(days=6),
        month=(2025, 3),
        employees=[employee],
        preferences={employee.id: prefs} if prefs is not None else {},
        existing_shifts={employee.id: existing} if existing else {},
    )


def _stored(hours_per_shift, count, employee_id=1):
    end = time(8 + hours_per_shift)
    return [
        ExistingShift(id=i + 1, employee_id=employee_id, shift_date=date(2025, 3, 1), start_time=time(8), end_time=end)
        for i in range(count)
    ]


def _run(employee_id, days):
    return [
        ScheduleShift(employee_id=employee_id, shift_date=d, start_time=time(9), end_time=time(17))
        for d in days
    ]


class ScoreCandidateTests(unittest.TestCase):
    def setUp(self):
        self.emp = EmployeeSnapshot(id=1, first_name="Ana", last_name="Lee", hourly_rate=30)
        self.opts = GenerationOptions()

    def _score(self, prefs=None, existing=None, shift_date=MONDAY, start=time(9), end=time(17), week=None, opts=None):
        ctx = _ctx(self.emp, prefs, existing)
        return score_candidate(self.emp, shift_date, start, end, ctx, week or [], opts or self.opts)

    def test_no_preferences_fresh_worker(self):
        self.assertEqual(self._score(), 105)

    def test_fairness_bands(self):
        prefs = DefaultPreferences(employee_id=1, target_monthly_hours=100)
        # 0% of target, fresh worker
        self.assertEqual(self._score(prefs), 100 + 30 + 5)
        # 95%
        self.assertEqual(self._score(prefs, _stored(5, 19)), 100 + 15 + 5)
        # exactly 100%
        self.assertEqual(self._score(prefs, _stored(10, 10)), 100 + 5)
        # 105%
        self.assertEqual(self._score(prefs, _stored(7, 15)), 100 - 15 + 5)
        # 120%
        self.assertEqual(self._score(prefs, _stored(10, 12)), 100 - 30 + 5)

    def test_preferred_start_and_length(self):
        prefs = ConfiguredPreferences(
            employee_id=1,
            target_monthly_hours=100,
            preferred_shift_start_time=time(9, 30),
            preferred_shift_length_hours=8,
        )
        stored = _stored(10, 10)  # neutral fairness
        self.assertEqual(self._score(prefs, stored), 100 + 10 + 10 + 5)
        # start 3h off, length 4h off
        self.assertEqual(self._score(prefs, stored, start=time(13), end=time(17)), 100 - 10 - 10 + 5)
        # start 1h off, length 1h off: neither bonus nor penalty
        self.assertEqual(self._score(prefs, stored, start=time(10, 30), end=time(17, 30)), 100 + 5)

    def test_weekend_alignment(self):
        stored = _stored(10, 10)
        likes = DefaultPreferences(employee_id=1, target_monthly_hours=100, prefers_weekends=True)
        dislikes = DefaultPreferences(employee_id=1, target_monthly_hours=100, prefers_weekends=False)
        self.assertEqual(self._score(likes, stored, shift_date=SATURDAY), 100 + 10 + 5)
        self.assertEqual(self._score(dislikes, stored, shift_date=SATURDAY), 100 - 20 + 5)
        self.assertEqual(self._score(dislikes, stored, shift_date=MONDAY), 100 + 5)

    def test_consecutive_days_penalty(self):
        days = [SATURDAY - timedelta(days=i) for i in range(1, 6)]  # Mon..Fri
        self.assertEqual(self._score(week=_run(1, days), shift_date=SATURDAY), 100 - 15)
        # one day worked: neither fresh nor tired
        self.assertEqual(self._score(week=_run(1, [MONDAY]), shift_date=MONDAY + timedelta(days=1)), 100)

    def test_cost_priority(self):
        opts = GenerationOptions(prioritize_cost=True)
        # rate 30 -> -10
        self.assertAlmostEqual(self._score(opts=opts), 95)
        cheap = EmployeeSnapshot(id=1, first_name="Ana", last_name="Lee", hourly_rate=15)
        ctx = _ctx(cheap)
        self.assertEqual(score_candidate(cheap, MONDAY, time(9), time(17), ctx, [], opts), 105)

    def test_cost_ignored_without_rate(self):
        emp = EmployeeSnapshot(id=1, first_name="Ana", last_name="Lee")
        ctx = _ctx(emp)
        opts = GenerationOptions(prioritize_cost=True)
        self.assertEqual(score_candidate(emp, MONDAY, time(9), time(17), ctx, [], opts), 105)

    def test_max_days_soft_cap(self):
        prefs = DefaultPreferences(employee_id=1, target_monthly_hours=100, max_days_per_week=1)
        stored = _stored(10, 10)
        week = _run(1, [MONDAY])
        self.assertEqual(self._score(prefs, stored, shift_date=MONDAY + timedelta(days=3), week=week), 100 + 5 - 100)

    def test_scoring_does_not_mutate_inputs(self):
        week = _run(1, [MONDAY])
        self._score(week=week, shift_date=MONDAY + timedelta(days=1))
        self.assertEqual(len(week), 1)


class ScoringHelperTests(unittest.TestCase):
    def test_month_hours_to_date(self):
        emp = EmployeeSnapshot(id=1, first_name="Ana", last_name="Lee")
        ctx = _ctx(emp, existing=_stored(8, 3) + [
            ExistingShift(id=99, employee_id=1, shift_date=date(2025, 3, 2), start_time=time(22), end_time=time(2))
        ])
        self.assertEqual(month_hours_to_date(1, ctx), 28)
        self.assertEqual(month_hours_to_date(2, ctx), 0)

    def test_consecutive_days_stops_at_gap(self):
        week = _run(1, [MONDAY, MONDAY + timedelta(days=2), MONDAY + timedelta(days=3)])
        self.assertEqual(consecutive_days_worked(1, MONDAY + timedelta(days=4), week), 2)
        self.assertEqual(consecutive_days_worked(1, MONDAY + timedelta(days=1), week), 1)
        self.assertEqual(consecutive_days_worked(2, MONDAY + timedelta(days=4), week), 0)
