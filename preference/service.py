# preference/service.py
from __future__ import annotations
from typing import Iterable

from sqlalchemy import select
from sqlalchemy.orm import Session

from .models import EmployeePreference


def list_preferences(db: Session, employee_ids: Iterable[int]) -> list[EmployeePreference]:
    """
    Preference rows for the given employees. Employees without a row are simply absent.
    """
    ids = list(employee_ids)
    if not ids:
        return []
    statement = (
        select(EmployeePreference)
        .where(EmployeePreference.employee_id.in_(ids))
        .order_by(EmployeePreference.employee_id)
    )
    return list(db.scalars(statement))
