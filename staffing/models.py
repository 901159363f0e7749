from __future__ import annotations
from datetime import time
from sqlalchemy import ForeignKey, Time, Integer, CheckConstraint, Index
from sqlalchemy.orm import Mapped, mapped_column
from core.database import Base

class StaffingRequirement(Base):
    __tablename__ = "staffing_requirements"

    id: Mapped[int] = mapped_column(primary_key=True)
    restaurant_id: Mapped[int] = mapped_column(
        ForeignKey("restaurants.id", ondelete="CASCADE"), index=True
    )

    # 0=Monday .. 6=Sunday
    day_of_week: Mapped[int] = mapped_column(Integer, nullable=False)
    time_slot_start: Mapped[time] = mapped_column(Time(timezone=False), nullable=False)
    time_slot_end: Mapped[time] = mapped_column(Time(timezone=False), nullable=False)

    min_staff_required: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    optimal_staff: Mapped[int] = mapped_column(Integer, nullable=False, default=2)

    __table_args__ = (
        CheckConstraint("day_of_week >= 0 AND day_of_week <= 6", name="ck_staffing_day"),
        CheckConstraint("min_staff_required >= 0", name="ck_staffing_min"),
        CheckConstraint("optimal_staff >= min_staff_required", name="ck_staffing_optimal"),
        Index("ix_staffing_day_time", "day_of_week", "time_slot_start"),
    )
