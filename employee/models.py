from __future__ import annotations
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import String, Boolean, Numeric, ForeignKey, CheckConstraint
from core.database import Base

class Employee(Base):
    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(primary_key=True)
    restaurant_id: Mapped[int] = mapped_column(ForeignKey("restaurants.id", ondelete="CASCADE"), index=True)

    first_name: Mapped[str] = mapped_column(String(128), nullable=False)
    last_name: Mapped[str] = mapped_column(String(128), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # manager | server | cook | bartender | host | employee
    role: Mapped[str] = mapped_column(String(32), nullable=False, default="employee")
    position: Mapped[str | None] = mapped_column(String(64), nullable=True)
    hourly_rate: Mapped[float | None] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=True)

    # rows created before the column existed carry NULL, which counts as active
    is_active: Mapped[bool | None] = mapped_column(Boolean, nullable=True, default=True)

    restaurant = relationship("Restaurant", back_populates="employees")

    __table_args__ = (
        CheckConstraint(
            "role IN ('manager', 'server', 'cook', 'bartender', 'host', 'employee')",
            name="ck_employee_role",
        ),
    )
