from __future__ import annotations
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from .models import StaffingRequirement


def list_staffing_requirements(db: Session, restaurant_id: int) -> List[StaffingRequirement]:
    stmt = (
        select(StaffingRequirement)
        .where(StaffingRequirement.restaurant_id == restaurant_id)
        .order_by(StaffingRequirement.day_of_week, StaffingRequirement.time_slot_start, StaffingRequirement.id)
    )
    return list(db.scalars(stmt))
