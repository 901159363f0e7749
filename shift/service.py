# shift/service.py
from __future__ import annotations
from datetime import date
from typing import Iterable, Optional
from sqlalchemy import select
from sqlalchemy.orm import Session
from fastapi import HTTPException

from .models import Shift
from .schemas import REQUIRED_SHIFT_FIELDS, ShiftCreate, ShiftUpdate
from .conflicts import detect_conflicts, format_conflict_message
from employee.service import get_employee_for_restaurant

def get_shift_for_restaurant(db: Session, shift_id: int, restaurant_id: int) -> Optional[Shift]:
    stmt = select(Shift).where(Shift.id == shift_id, Shift.restaurant_id == restaurant_id)
    return db.scalars(stmt).first()

def list_shifts(
    db: Session,
    restaurant_id: int,
    start: Optional[date] = None,
    end: Optional[date] = None,
    *,
    employee_id: Optional[int] = None,
) -> list[Shift]:
    """Shifts for a restaurant, optionally limited to an inclusive date range."""
    stmt = select(Shift).where(Shift.restaurant_id == restaurant_id)
    if start is not None:
        stmt = stmt.where(Shift.shift_date >= start)
    if end is not None:
        stmt = stmt.where(Shift.shift_date <= end)
    if employee_id is not None:
        stmt = stmt.where(Shift.employee_id == employee_id)
    stmt = stmt.order_by(Shift.shift_date, Shift.start_time, Shift.id)
    return list(db.scalars(stmt))

def _ensure_employee_in_restaurant(db: Session, employee_id: int, restaurant_id: int) -> None:
    if not get_employee_for_restaurant(db, employee_id, restaurant_id):
        raise HTTPException(status_code=403, detail="employee does not belong to this restaurant")

def _raise_on_conflicts(
    db: Session,
    restaurant_id: int,
    employee_id: int,
    shift_date: date,
    start_time,
    end_time,
    exclude_shift_id: Optional[int] = None,
) -> None:
    same_day = list_shifts(db, restaurant_id, shift_date, shift_date, employee_id=employee_id)
    conflicts = detect_conflicts(employee_id, shift_date, start_time, end_time, same_day, exclude_shift_id)
    if conflicts:
        raise HTTPException(status_code=409, detail=format_conflict_message(conflicts))

def create_shift(db: Session, shift: ShiftCreate) -> Shift:
    _ensure_employee_in_restaurant(db, shift.employee_id, shift.restaurant_id)
    _raise_on_conflicts(
        db, shift.restaurant_id, shift.employee_id, shift.shift_date, shift.start_time, shift.end_time
    )

    row = Shift(
        restaurant_id=shift.restaurant_id,
        employee_id=shift.employee_id,
        shift_date=shift.shift_date,
        start_time=shift.start_time,
        end_time=shift.end_time,
        position=shift.position,
        notes=shift.notes,
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    return row

def update_shift(db: Session, shift_id: int, patch: ShiftUpdate, *, restaurant_id: int) -> Shift:
    row = get_shift_for_restaurant(db, shift_id, restaurant_id)
    if not row:
        raise HTTPException(status_code=404, detail="Shift not found")

    data = patch.model_dump(exclude_unset=True)
    cleared = [f for f in REQUIRED_SHIFT_FIELDS if f in data and data[f] is None]
    if cleared:
        raise HTTPException(status_code=422, detail=f"{', '.join(cleared)} cannot be null")

    new_employee = data.get("employee_id", row.employee_id)
    new_date = data.get("shift_date", row.shift_date)
    new_start = data.get("start_time", row.start_time)
    new_end = data.get("end_time", row.end_time)
    if new_start == new_end:
        raise HTTPException(status_code=422, detail="Start time cannot be the same as end time")

    if new_employee != row.employee_id:
        _ensure_employee_in_restaurant(db, new_employee, restaurant_id)
    _raise_on_conflicts(db, restaurant_id, new_employee, new_date, new_start, new_end, exclude_shift_id=row.id)

    for k, v in data.items():
        setattr(row, k, v)

    db.commit()
    db.refresh(row)
    return row

def delete_shift(db: Session, shift_id: int) -> None:
    row = db.get(Shift, shift_id)
    if row:
        db.delete(row)
        db.commit()

def add_shifts(
    db: Session,
    restaurant_id: int,
    shifts: Iterable,
    *,
    generation_run_id: Optional[int] = None,
) -> list[Shift]:
    """
    Stage many shifts in the current transaction. The caller commits,
    so a failed bulk insert can be rolled back together with whatever it belongs to.
    """
    rows = [
        Shift(
            restaurant_id=restaurant_id,
            employee_id=s.employee_id,
            shift_date=s.shift_date,
            start_time=s.start_time,
            end_time=s.end_time,
            position=s.position,
            notes=s.notes,
            generation_run_id=generation_run_id,
        )
        for s in shifts
    ]
    db.add_all(rows)
    db.flush()
    return rows
