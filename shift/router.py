from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, Query, status, HTTPException
from sqlalchemy.orm import Session
from core.database import get_db
from restaurant.deps import require_restaurant
from .schemas import (
    ShiftSchema,
    ShiftCreatePayload,
    ShiftCreate,
    ShiftUpdate,
    ConflictCheckPayload,
    ConflictCheckResponse,
    ShiftConflictSchema,
)
from .conflicts import detect_conflicts, conflict_severity, get_all_conflicts, validate_shift
from shift import service

shift_router = APIRouter(prefix="/restaurants/{restaurant_id}/shifts", tags=["Shifts"])

@shift_router.get("", response_model=list[ShiftSchema])
def list_shifts(
    start: Optional[date] = Query(None, description="First shift date (inclusive)"),
    end: Optional[date] = Query(None, description="Last shift date (inclusive)"),
    employee_id: Optional[int] = None,
    db: Session = Depends(get_db),
    restaurant = Depends(require_restaurant),
):
    return service.list_shifts(db, restaurant.id, start, end, employee_id=employee_id)

# Check a candidate shift before saving it
@shift_router.post("/conflicts", response_model=ConflictCheckResponse)
def check_conflicts(payload: ConflictCheckPayload, db: Session = Depends(get_db), restaurant = Depends(require_restaurant)):
    same_day = service.list_shifts(
        db, restaurant.id, payload.shift_date, payload.shift_date, employee_id=payload.employee_id
    )
    conflicts = detect_conflicts(
        payload.employee_id,
        payload.shift_date,
        payload.start_time,
        payload.end_time,
        same_day,
        payload.exclude_shift_id,
    )
    valid, errors = validate_shift(
        payload.employee_id,
        payload.shift_date,
        payload.start_time,
        payload.end_time,
        same_day,
        payload.exclude_shift_id,
    )
    return ConflictCheckResponse(
        valid=valid,
        severity=conflict_severity(conflicts),
        errors=errors,
        conflicts=[ShiftConflictSchema.model_validate(c) for c in conflicts],
    )

# Every conflicting shift in a stored date range, keyed by shift id
@shift_router.get("/conflicts", response_model=dict[int, list[ShiftConflictSchema]])
def list_conflicts(
    start: date = Query(..., description="First shift date (inclusive)"),
    end: date = Query(..., description="Last shift date (inclusive)"),
    db: Session = Depends(get_db),
    restaurant = Depends(require_restaurant),
):
    if start > end:
        raise HTTPException(status_code=422, detail="start must be on or before end")
    shifts = service.list_shifts(db, restaurant.id, start, end)
    return {
        shift_id: [ShiftConflictSchema.model_validate(c) for c in conflicts]
        for shift_id, conflicts in get_all_conflicts(shifts).items()
    }

@shift_router.post("", response_model=ShiftSchema, status_code=status.HTTP_201_CREATED)
def create_shift(payload: ShiftCreatePayload, db: Session = Depends(get_db), restaurant = Depends(require_restaurant)):
    internal = ShiftCreate(restaurant_id=restaurant.id, **payload.model_dump())
    return service.create_shift(db, internal)

@shift_router.patch("/{shift_id}", response_model=ShiftSchema)
def patch_shift(shift_id: int, payload: ShiftUpdate, db: Session = Depends(get_db), restaurant = Depends(require_restaurant)):
    if not service.get_shift_for_restaurant(db, shift_id, restaurant.id):
        raise HTTPException(status_code=404, detail="Shift not found")
    return service.update_shift(db, shift_id, payload, restaurant_id=restaurant.id)

@shift_router.delete("/{shift_id}")
def delete_shift(shift_id: int, db: Session = Depends(get_db), restaurant = Depends(require_restaurant)):
    if not service.get_shift_for_restaurant(db, shift_id, restaurant.id):
        raise HTTPException(status_code=404, detail="Shift not found")
    service.delete_shift(db, shift_id)
    return {"message": "Shift deleted"}
