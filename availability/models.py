from __future__ import annotations
from datetime import date, time
from sqlalchemy import ForeignKey, Time, Date, Integer, Boolean, Text, CheckConstraint, Index
from sqlalchemy.orm import Mapped, mapped_column
from core.database import Base

class EmployeeAvailability(Base):
    """A window in which an employee can NOT work."""
    __tablename__ = "employee_availability"

    id: Mapped[int] = mapped_column(primary_key=True)
    employee_id: Mapped[int] = mapped_column(
        ForeignKey("employees.id", ondelete="CASCADE"), index=True
    )
    restaurant_id: Mapped[int] = mapped_column(
        ForeignKey("restaurants.id", ondelete="CASCADE"), index=True
    )

    # recurring blocks use day_of_week (0=Monday .. 6=Sunday), one-off blocks use specific_date
    day_of_week: Mapped[int | None] = mapped_column(Integer, nullable=True)
    specific_date: Mapped[date | None] = mapped_column(Date(), nullable=True)

    unavailable_start_time: Mapped[time | None] = mapped_column(Time(timezone=False), nullable=True)
    unavailable_end_time:   Mapped[time | None] = mapped_column(Time(timezone=False), nullable=True)

    is_all_day: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_recurring: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    reason: Mapped[str | None] = mapped_column(Text(), nullable=True)

    __table_args__ = (
        CheckConstraint("day_of_week IS NULL OR (day_of_week >= 0 AND day_of_week <= 6)", name="ck_availability_day"),
        CheckConstraint(
            "(day_of_week IS NOT NULL AND specific_date IS NULL AND is_recurring) OR "
            "(day_of_week IS NULL AND specific_date IS NOT NULL)",
            name="ck_availability_date_or_day",
        ),
        CheckConstraint(
            "is_all_day OR (unavailable_start_time IS NOT NULL AND unavailable_end_time IS NOT NULL)",
            name="ck_availability_time_required",
        ),
        Index("ix_availability_employee_day", "employee_id", "day_of_week"),
    )
