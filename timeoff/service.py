from __future__ import annotations
from datetime import date
from typing import List

from sqlalchemy import select, and_
from sqlalchemy.orm import Session

from .models import TimeOffRequest, TimeOffStatus


def list_approved_time_off(db: Session, restaurant_id: int, start: date, end: date) -> List[TimeOffRequest]:
    """Approved requests whose inclusive range touches [start, end]."""
    stmt = (
        select(TimeOffRequest)
        .where(
            TimeOffRequest.restaurant_id == restaurant_id,
            TimeOffRequest.status == TimeOffStatus.approved,
            and_(TimeOffRequest.start_date <= end, TimeOffRequest.end_date >= start),
        )
        .order_by(TimeOffRequest.employee_id, TimeOffRequest.start_date)
    )
    return list(db.scalars(stmt))
