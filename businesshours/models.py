from __future__ import annotations
from datetime import time
from sqlalchemy import ForeignKey, Time, Integer, Boolean, UniqueConstraint, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column
from core.database import Base

class BusinessHours(Base):
    __tablename__ = "business_hours"

    id: Mapped[int] = mapped_column(primary_key=True)
    restaurant_id: Mapped[int] = mapped_column(
        ForeignKey("restaurants.id", ondelete="CASCADE"), index=True
    )

    # 0=Monday .. 6=Sunday
    day_of_week: Mapped[int] = mapped_column(Integer, nullable=False)

    open_time: Mapped[time] = mapped_column(Time(timezone=False), nullable=False)
    close_time: Mapped[time] = mapped_column(Time(timezone=False), nullable=False)
    is_closed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    __table_args__ = (
        UniqueConstraint("restaurant_id", "day_of_week", name="uq_business_hours_day"),
        CheckConstraint("day_of_week >= 0 AND day_of_week <= 6", name="ck_business_hours_day"),
    )
