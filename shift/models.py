from __future__ import annotations
from typing import TYPE_CHECKING
from datetime import date, datetime, time
from sqlalchemy import Date, DateTime, Time, String, Text, ForeignKey, Index
from sqlalchemy.sql import func
from sqlalchemy.orm import Mapped, mapped_column, relationship
from core.database import Base

if TYPE_CHECKING:
    from employee.models import Employee

class Shift(Base):
    __tablename__ = "shifts"

    id: Mapped[int] = mapped_column(primary_key=True)

    restaurant_id: Mapped[int] = mapped_column(
        ForeignKey("restaurants.id", ondelete="CASCADE"), index=True
    )
    employee_id: Mapped[int] = mapped_column(
        ForeignKey("employees.id", ondelete="CASCADE"), index=True
    )
    # set when the shift came from a published generation run
    generation_run_id: Mapped[int | None] = mapped_column(
        ForeignKey("schedule_generation_runs.id", ondelete="SET NULL"), index=True, nullable=True
    )

    shift_date: Mapped[date] = mapped_column(Date(), nullable=False)
    # end_time < start_time means the shift runs past midnight
    start_time: Mapped[time] = mapped_column(Time(timezone=False), nullable=False)
    end_time: Mapped[time] = mapped_column(Time(timezone=False), nullable=False)

    position: Mapped[str | None] = mapped_column(String(64), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text(), nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # relationships
    employee: Mapped["Employee"] = relationship("Employee")

Index("ix_shifts_restaurant_date", Shift.restaurant_id, Shift.shift_date)
Index("ix_shifts_employee_date", Shift.employee_id, Shift.shift_date)
