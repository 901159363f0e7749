# scheduling/service.py
from __future__ import annotations
import logging
from datetime import datetime, timedelta, timezone

from fastapi import HTTPException
from sqlalchemy import select
from sqlalchemy.orm import Session

from employee.models import Employee
from shift.conflicts import detect_conflicts, format_conflict_message
from shift.service import add_shifts, list_shifts

from .models import GenerationRun, GenerationRunStatus
from .schema import PublishScheduleRequest

logger = logging.getLogger(__name__)

def list_generation_runs(db: Session, restaurant_id: int) -> list[GenerationRun]:
    stmt = (
        select(GenerationRun)
        .where(GenerationRun.restaurant_id == restaurant_id)
        .order_by(GenerationRun.created_at.desc(), GenerationRun.id.desc())
    )
    return list(db.scalars(stmt))

def _check_employees(db: Session, restaurant_id: int, employee_ids: set[int]) -> None:
    known = set(db.scalars(
        select(Employee.id).where(Employee.restaurant_id == restaurant_id, Employee.id.in_(employee_ids))
    ))
    if known != employee_ids:
        missing = ", ".join(str(i) for i in sorted(employee_ids - known))
        raise HTTPException(status_code=403, detail=f"employees not in this restaurant: {missing}")

def publish_schedule(db: Session, restaurant_id: int, payload: PublishScheduleRequest) -> GenerationRun:
    """
    Persist a reviewed schedule: one generation run plus its shifts, committed together.
    Every shift must fall inside the week and clash with neither a stored shift nor
    another shift in the payload.
    """
    week_end = payload.week_start + timedelta(days=6)
    for s in payload.shifts:
        if not payload.week_start <= s.shift_date <= week_end:
            raise HTTPException(
                status_code=422,
                detail=f"shift on {s.shift_date.isoformat()} is outside the week starting {payload.week_start.isoformat()}",
            )
        if s.start_time == s.end_time:
            raise HTTPException(status_code=422, detail="Start time cannot be the same as end time")

    _check_employees(db, restaurant_id, {s.employee_id for s in payload.shifts})

    stored = list_shifts(db, restaurant_id, payload.week_start, week_end)
    accepted = []
    for s in payload.shifts:
        conflicts = detect_conflicts(s.employee_id, s.shift_date, s.start_time, s.end_time, [*stored, *accepted])
        if conflicts:
            raise HTTPException(
                status_code=409,
                detail=f"Employee {s.employee_id} on {s.shift_date.isoformat()}: {format_conflict_message(conflicts)}",
            )
        accepted.append(s)

    run = GenerationRun(
        restaurant_id=restaurant_id,
        week_start_date=payload.week_start,
        generation_params=payload.options.model_dump(),
        total_shifts=payload.stats.total_shifts,
        total_hours=payload.stats.total_hours,
        estimated_labor_cost=payload.stats.estimated_labor_cost,
        warnings=list(payload.warnings),
        status=GenerationRunStatus.published,
        generated_by=payload.generated_by,
        published_at=datetime.now(timezone.utc),
    )
    db.add(run)
    db.flush()

    add_shifts(db, restaurant_id, payload.shifts, generation_run_id=run.id)
    db.commit()
    db.refresh(run)

    logger.info(
        "published %d shifts for restaurant %s week %s as run %s",
        len(payload.shifts),
        restaurant_id,
        payload.week_start,
        run.id,
    )
    return run
