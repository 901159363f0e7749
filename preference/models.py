from __future__ import annotations
from datetime import time
from sqlalchemy import ForeignKey, Time, Integer, Boolean, Numeric, Text, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column
from core.database import Base

class EmployeePreference(Base):
    __tablename__ = "employee_preferences"

    # one row per employee
    employee_id: Mapped[int] = mapped_column(
        ForeignKey("employees.id", ondelete="CASCADE"), primary_key=True)

    target_monthly_hours: Mapped[int] = mapped_column(Integer, nullable=False, default=160)
    preferred_shift_start_time: Mapped[time | None] = mapped_column(Time(timezone=False), nullable=True)
    preferred_shift_length_hours: Mapped[float | None] = mapped_column(
        Numeric(3, 1, asdecimal=False), nullable=True)
    max_days_per_week: Mapped[int] = mapped_column(Integer, nullable=False, default=6)
    prefers_weekends: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    notes: Mapped[str | None] = mapped_column(Text(), nullable=True)

    __table_args__ = (
        CheckConstraint("target_monthly_hours >= 40 AND target_monthly_hours <= 200", name="ck_pref_target_hours"),
        CheckConstraint("max_days_per_week >= 1 AND max_days_per_week <= 7", name="ck_pref_max_days"),
    )
