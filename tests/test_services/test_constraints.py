# tests/test_services/test_constraints.py
import unittest
from datetime import date, time, timedelta

from scheduling.constraints import (
    exceeds_weekly_hours,
    has_adequate_rest,
    is_available,
    overlaps_assigned_shift,
)
from scheduling.schema import (
    AvailabilityBlock,
    EmployeeSnapshot,
    ExistingShift,
    ScheduleShift,
    SchedulerContext,
    TimeOffWindow,
)

MONDAY = date(2025, 3, 3)
TUESDAY = MONDAY + timedelta(days=1)


def _context(availability=None, time_off=None):
    return SchedulerContext(
        restaurant_id=1,
        week_start=MONDAY,
        week_end=MONDAY + timedelta(days=6),
        month=(2025, 3),
        employees=[EmployeeSnapshot(id=1, first_name="Ana", last_name="Lee")],
        availability=availability or {},
        time_off=time_off or {},
    )


def _run_shift(employee_id, shift_date, start, end):
    return ScheduleShift(employee_id=employee_id, shift_date=shift_date, start_time=start, end_time=end)


class AvailabilityTests(unittest.TestCase):
    def test_no_blocks_is_available(self):
        self.assertTrue(is_available(1, MONDAY, time(9), time(17), _context()))

    def test_approved_time_off_blocks_inclusive_range(self):
        ctx = _context(time_off={1: [TimeOffWindow(employee_id=1, start_date=MONDAY, end_date=TUESDAY)]})
        self.assertFalse(is_available(1, MONDAY, time(9), time(17), ctx))
        self.assertFalse(is_available(1, TUESDAY, time(9), time(17), ctx))
        self.assertTrue(is_available(1, TUESDAY + timedelta(days=1), time(9), time(17), ctx))

    def test_recurring_all_day_block(self):
        block = AvailabilityBlock(employee_id=1, day_of_week=0, is_all_day=True)
        ctx = _context(availability={1: [block]})
        self.assertFalse(is_available(1, MONDAY, time(9), time(17), ctx))
        self.assertFalse(is_available(1, MONDAY + timedelta(days=7), time(9), time(17), ctx))
        self.assertTrue(is_available(1, TUESDAY, time(9), time(17), ctx))

    def test_recurring_window_only_blocks_overlapping_times(self):
        block = AvailabilityBlock(
            employee_id=1, day_of_week=0, unavailable_start_time=time(8), unavailable_end_time=time(12)
        )
        ctx = _context(availability={1: [block]})
        self.assertFalse(is_available(1, MONDAY, time(9), time(17), ctx))
        self.assertTrue(is_available(1, MONDAY, time(12), time(20), ctx))

    def test_specific_date_block(self):
        block = AvailabilityBlock(
            employee_id=1,
            specific_date=TUESDAY,
            is_recurring=False,
            unavailable_start_time=time(18),
            unavailable_end_time=time(23),
        )
        ctx = _context(availability={1: [block]})
        self.assertFalse(is_available(1, TUESDAY, time(17), time(22), ctx))
        self.assertTrue(is_available(1, TUESDAY, time(9), time(17), ctx))
        self.assertTrue(is_available(1, MONDAY, time(17), time(22), ctx))

    def test_other_employees_blocks_ignored(self):
        block = AvailabilityBlock(employee_id=2, day_of_week=0, is_all_day=True)
        ctx = _context(availability={2: [block]})
        self.assertTrue(is_available(1, MONDAY, time(9), time(17), ctx))


class RestTests(unittest.TestCase):
    def test_no_previous_day_shift(self):
        self.assertTrue(has_adequate_rest(1, TUESDAY, time(6), []))

    def test_late_close_then_early_open_rejected(self):
        prior = [_run_shift(1, MONDAY, time(15), time(23))]
        self.assertFalse(has_adequate_rest(1, TUESDAY, time(6), prior))

    def test_exactly_eight_hours_is_enough(self):
        prior = [_run_shift(1, MONDAY, time(15), time(23))]
        self.assertTrue(has_adequate_rest(1, TUESDAY, time(7), prior))

    def test_overnight_previous_shift_ends_on_candidate_day(self):
        prior = [_run_shift(1, MONDAY, time(20), time(2))]
        self.assertFalse(has_adequate_rest(1, TUESDAY, time(9), prior))
        self.assertTrue(has_adequate_rest(1, TUESDAY, time(10), prior))

    def test_every_previous_day_shift_is_checked(self):
        prior = [
            _run_shift(1, MONDAY, time(6), time(10)),
            _run_shift(1, MONDAY, time(18), time(23)),
        ]
        self.assertFalse(has_adequate_rest(1, TUESDAY, time(6), prior))

    def test_carryover_shift_from_previous_week(self):
        sunday = MONDAY - timedelta(days=1)
        carryover = [ExistingShift(id=9, employee_id=1, shift_date=sunday, start_time=time(16), end_time=time(23, 30))]
        self.assertFalse(has_adequate_rest(1, MONDAY, time(7), carryover))
        self.assertTrue(has_adequate_rest(1, MONDAY, time(8), carryover))

    def test_other_employee_ignored(self):
        prior = [_run_shift(2, MONDAY, time(15), time(23))]
        self.assertTrue(has_adequate_rest(1, TUESDAY, time(6), prior))


class WeeklyHoursTests(unittest.TestCase):
    def setUp(self):
        # 4 x 9h = 36h already assigned
        self.prior = [_run_shift(1, MONDAY + timedelta(days=i), time(8), time(17)) for i in range(4)]

    def test_within_standard_week(self):
        self.assertFalse(exceeds_weekly_hours(1, 4, self.prior))

    def test_over_forty_without_overtime(self):
        self.assertTrue(exceeds_weekly_hours(1, 8, self.prior))

    def test_overtime_allows_up_to_forty_eight(self):
        self.assertFalse(exceeds_weekly_hours(1, 8, self.prior, allow_overtime=True))
        self.assertFalse(exceeds_weekly_hours(1, 12, self.prior, allow_overtime=True))
        self.assertTrue(exceeds_weekly_hours(1, 12.5, self.prior, allow_overtime=True))

    def test_only_own_hours_count(self):
        self.assertFalse(exceeds_weekly_hours(2, 8, self.prior))


class SelfOverlapTests(unittest.TestCase):
    def test_overlap_with_own_run_shift(self):
        prior = [_run_shift(1, MONDAY, time(9), time(17))]
        self.assertTrue(overlaps_assigned_shift(1, MONDAY, time(9), time(17), prior))
        self.assertFalse(overlaps_assigned_shift(1, MONDAY, time(17), time(22), prior))
        self.assertFalse(overlaps_assigned_shift(2, MONDAY, time(9), time(17), prior))
