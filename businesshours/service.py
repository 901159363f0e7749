from __future__ import annotations
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from .models import BusinessHours


def list_business_hours(db: Session, restaurant_id: int) -> List[BusinessHours]:
    stmt = (
        select(BusinessHours)
        .where(BusinessHours.restaurant_id == restaurant_id)
        .order_by(BusinessHours.day_of_week)
    )
    return list(db.scalars(stmt))
