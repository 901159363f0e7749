from typing import Optional, List
from sqlalchemy.orm import Session
from sqlalchemy import select
from .models import Employee

def list_employees(db: Session, restaurant_id: int) -> List[Employee]:
    statement = (
        select(Employee)
        .where(Employee.restaurant_id == restaurant_id)
        .order_by(Employee.id.asc())
    )
    return list(db.scalars(statement))

def get_employee_for_restaurant(db: Session, employee_id: int, restaurant_id: int) -> Optional[Employee]:
    statement = select(Employee).where(Employee.id == employee_id, Employee.restaurant_id == restaurant_id)
    return db.scalars(statement).first()
