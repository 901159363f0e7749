from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.database import get_db
from restaurant.deps import require_restaurant

from .engine import generate_schedule
from .schema import GenerateScheduleRequest, GeneratedSchedule, GenerationRunSchema, PublishScheduleRequest
from . import service

scheduling_router = APIRouter(prefix="/restaurants/{restaurant_id}/schedules", tags=["Scheduling"])

# Proposal only, nothing is stored until publish
@scheduling_router.post("/generate", response_model=GeneratedSchedule)
def generate(payload: GenerateScheduleRequest, db: Session = Depends(get_db), restaurant = Depends(require_restaurant)):
    return generate_schedule(db, restaurant.id, payload.week_start, payload.options())

@scheduling_router.post("/publish", response_model=GenerationRunSchema, status_code=status.HTTP_201_CREATED)
def publish(payload: PublishScheduleRequest, db: Session = Depends(get_db), restaurant = Depends(require_restaurant)):
    try:
        return service.publish_schedule(db, restaurant.id, payload)
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="schedule could not be saved, shifts conflict with stored data")

@scheduling_router.get("/runs", response_model=list[GenerationRunSchema])
def list_runs(db: Session = Depends(get_db), restaurant = Depends(require_restaurant)):
    return service.list_generation_runs(db, restaurant.id)
