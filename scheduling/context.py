"""
Loads the read-only snapshot one generation run works from.

Each category is read independently. A failed read is logged and treated as
"nothing configured" for that category; the engine's preflight decides
whether the run can go on.
"""
from __future__ import annotations
import logging
from collections import defaultdict
from datetime import date, timedelta
from typing import Callable, Optional, TypeVar

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.timeutils import month_bounds
from employee.service import list_employees
from preference.service import list_preferences
from availability.service import list_availability
from businesshours.service import list_business_hours
from staffing.service import list_staffing_requirements
from shift.service import list_shifts
from timeoff.service import list_approved_time_off

from .schema import (
    AvailabilityBlock,
    BusinessHoursSnapshot,
    ConfiguredPreferences,
    DefaultPreferences,
    EmployeeSnapshot,
    ExistingShift,
    SchedulerContext,
    StaffingSlot,
    TimeOffWindow,
)

_logger = logging.getLogger(__name__)

T = TypeVar("T")

MANAGER_ROLE = "manager"


def _read(db: Session, log: logging.Logger, category: str, fetch: Callable[[], list[T]]) -> list[T]:
    try:
        return fetch()
    except SQLAlchemyError:
        log.exception("could not load %s, continuing as if none are configured", category)
        db.rollback()
        return []


def _is_schedulable(employee) -> bool:
    # NULL is_active predates the column and counts as active
    return employee.is_active is not False and employee.role != MANAGER_ROLE


def load_context(
    db: Session,
    restaurant_id: int,
    week_start: date,
    week_end: date,
    month: tuple[int, int],
    *,
    logger: Optional[logging.Logger] = None,
) -> SchedulerContext:
    log = logger or _logger

    # ---------- employees ----------
    rows = _read(db, log, "employees", lambda: list_employees(db, restaurant_id))
    employees = [EmployeeSnapshot.model_validate(e) for e in rows if _is_schedulable(e)]
    employee_ids = [e.id for e in employees]

    # ---------- preferences (defaulted per employee) ----------
    pref_rows = {
        p.employee_id: p
        for p in _read(db, log, "preferences", lambda: list_preferences(db, employee_ids))
    }
    preferences = {}
    for emp in employees:
        row = pref_rows.get(emp.id)
        if row is None:
            preferences[emp.id] = DefaultPreferences(employee_id=emp.id)
            continue
        try:
            preferences[emp.id] = ConfiguredPreferences.model_validate(row)
        except ValidationError:
            log.warning("ignoring invalid preferences for employee %s, using defaults", emp.id)
            preferences[emp.id] = DefaultPreferences(employee_id=emp.id)

    # ---------- availability ----------
    availability: dict[int, list[AvailabilityBlock]] = defaultdict(list)
    for block in _read(db, log, "availability", lambda: list_availability(db, restaurant_id)):
        availability[block.employee_id].append(AvailabilityBlock.model_validate(block))

    # ---------- business hours ----------
    business_hours = {
        bh.day_of_week: BusinessHoursSnapshot.model_validate(bh)
        for bh in _read(db, log, "business hours", lambda: list_business_hours(db, restaurant_id))
    }

    # ---------- staffing requirements ----------
    staffing = [
        StaffingSlot.model_validate(sr)
        for sr in _read(db, log, "staffing requirements", lambda: list_staffing_requirements(db, restaurant_id))
    ]

    # ---------- shifts already stored for the month ----------
    month_start, month_end = month_bounds(*month)
    existing: dict[int, list[ExistingShift]] = defaultdict(list)
    for s in _read(db, log, "month shifts", lambda: list_shifts(db, restaurant_id, month_start, month_end)):
        existing[s.employee_id].append(ExistingShift.model_validate(s))

    day_before = week_start - timedelta(days=1)
    carryover = [
        ExistingShift.model_validate(s)
        for s in _read(db, log, "carryover shifts", lambda: list_shifts(db, restaurant_id, day_before, day_before))
    ]

    # ---------- approved time off touching the week ----------
    time_off: dict[int, list[TimeOffWindow]] = defaultdict(list)
    for t in _read(db, log, "time off", lambda: list_approved_time_off(db, restaurant_id, week_start, week_end)):
        time_off[t.employee_id].append(TimeOffWindow.model_validate(t))

    log.info(
        "loaded scheduling context for restaurant %s week %s: %d employees, %d business days, "
        "%d staffing requirements, %d configured preferences",
        restaurant_id,
        week_start,
        len(employees),
        len(business_hours),
        len(staffing),
        len(pref_rows),
    )

    return SchedulerContext(
        restaurant_id=restaurant_id,
        week_start=week_start,
        week_end=week_end,
        month=month,
        employees=employees,
        preferences=preferences,
        availability=dict(availability),
        business_hours=business_hours,
        staffing_requirements=staffing,
        existing_shifts=dict(existing),
        carryover_shifts=carryover,
        time_off=dict(time_off),
    )
