from __future__ import annotations
import calendar
from datetime import date, time, timedelta
from typing import Union

TimeLike = Union[time, str]

MINUTES_PER_DAY = 24 * 60

# ---------- wall-clock times ----------

def to_minutes(value: TimeLike) -> int:
    """Minutes since midnight for a `time` or an "HH:MM[:SS]" string."""
    if isinstance(value, time):
        return value.hour * 60 + value.minute
    hours, minutes = value.split(":")[:2]
    return int(hours) * 60 + int(minutes)

def _span(start: TimeLike, end: TimeLike) -> tuple[int, int]:
    start_min = to_minutes(start)
    end_min = to_minutes(end)
    # end before start means the range runs past midnight
    if end_min < start_min:
        end_min += MINUTES_PER_DAY
    return start_min, end_min

def times_overlap(start_a: TimeLike, end_a: TimeLike, start_b: TimeLike, end_b: TimeLike) -> bool:
    """
    Half-open overlap check for two same-day time ranges.
    Touching endpoints (09:00-17:00 / 17:00-18:00) do not overlap.
    The second range is also tried one day later and one day earlier so the
    overnight tail of a range meets an early-morning window (22:00-02:00 vs 01:00-03:00).
    """
    a_start, a_end = _span(start_a, end_a)
    b_start, b_end = _span(start_b, end_b)
    for offset in (0, MINUTES_PER_DAY, -MINUTES_PER_DAY):
        if a_start < b_end + offset and b_start + offset < a_end:
            return True
    return False

def shift_hours(start: TimeLike, end: TimeLike) -> float:
    start_min, end_min = _span(start, end)
    return (end_min - start_min) / 60.0

def format_hhmm(value: TimeLike) -> str:
    if isinstance(value, time):
        return value.strftime("%H:%M")
    return value[:5]

# ---------- calendar ----------

def day_of_week(d: date) -> int:
    # 0=Mon .. 6=Sun, the convention business hours, staffing and availability rows use
    return d.weekday()

def is_weekend(d: date) -> bool:
    return day_of_week(d) >= 5

def week_dates(week_start: date) -> list[date]:
    return [week_start + timedelta(days=i) for i in range(7)]

def month_bounds(year: int, month: int) -> tuple[date, date]:
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)
