from __future__ import annotations
from datetime import date, datetime
from enum import Enum
from sqlalchemy import Date, DateTime, Text, ForeignKey, Enum as SAEnum, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column
from core.database import Base

class TimeOffStatus(str, Enum):
    pending = "pending"
    approved = "approved"
    denied = "denied"

class TimeOffRequest(Base):
    __tablename__ = "time_off_requests"

    id: Mapped[int] = mapped_column(primary_key=True)
    restaurant_id: Mapped[int] = mapped_column(
        ForeignKey("restaurants.id", ondelete="CASCADE"), index=True
    )
    employee_id: Mapped[int] = mapped_column(
        ForeignKey("employees.id", ondelete="CASCADE"), index=True
    )

    # inclusive range
    start_date: Mapped[date] = mapped_column(Date(), nullable=False)
    end_date: Mapped[date] = mapped_column(Date(), nullable=False)
    reason: Mapped[str | None] = mapped_column(Text(), nullable=True)

    status: Mapped[TimeOffStatus] = mapped_column(
        SAEnum(TimeOffStatus, name="time_off_status"),
        nullable=False,
        default=TimeOffStatus.pending,
    )
    reviewed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        CheckConstraint("end_date >= start_date", name="ck_time_off_range"),
    )
