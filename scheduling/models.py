from __future__ import annotations
from datetime import date, datetime
from enum import Enum
from sqlalchemy import Date, DateTime, Integer, Numeric, JSON, Enum as SAEnum, ForeignKey, Index
from sqlalchemy.sql import func
from sqlalchemy.orm import Mapped, mapped_column
from core.database import Base

class GenerationRunStatus(str, Enum):
    draft = "draft"
    published = "published"
    archived = "archived"

class GenerationRun(Base):
    """Audit record of one generated week: what was asked for and what came out."""
    __tablename__ = "schedule_generation_runs"

    id: Mapped[int] = mapped_column(primary_key=True)
    restaurant_id: Mapped[int] = mapped_column(ForeignKey("restaurants.id", ondelete="CASCADE"), index=True)

    week_start_date: Mapped[date] = mapped_column(Date(), nullable=False)
    generation_params: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)

    total_shifts: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    total_hours: Mapped[float | None] = mapped_column(Numeric(8, 2, asdecimal=False), nullable=True)
    estimated_labor_cost: Mapped[float | None] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=True)
    warnings: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    status: Mapped[GenerationRunStatus] = mapped_column(
        SAEnum(GenerationRunStatus, name="generation_run_status"),
        default=GenerationRunStatus.draft,
        nullable=False,
    )
    generated_by: Mapped[int | None] = mapped_column(Integer, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    published_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

Index("ix_generation_runs_restaurant_week", GenerationRun.restaurant_id, GenerationRun.week_start_date)
