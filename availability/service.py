from __future__ import annotations
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from .models import EmployeeAvailability


def list_availability(db: Session, restaurant_id: int) -> List[EmployeeAvailability]:
    """All unavailability blocks recorded for a restaurant."""
    stmt = (
        select(EmployeeAvailability)
        .where(EmployeeAvailability.restaurant_id == restaurant_id)
        .order_by(EmployeeAvailability.employee_id, EmployeeAvailability.id)
    )
    return list(db.scalars(stmt))
