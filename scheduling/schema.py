from __future__ import annotations
from datetime import date, datetime, time
from typing import Annotated, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator
from .models import GenerationRunStatus

# ---------- snapshot records (read-only for one generation run) ----------

class EmployeeSnapshot(BaseModel):
    id: int
    first_name: str
    last_name: str
    role: str = "employee"
    position: Optional[str] = None
    hourly_rate: Optional[float] = None
    is_active: Optional[bool] = None

    model_config = ConfigDict(from_attributes=True, frozen=True)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class _PreferenceFields(BaseModel):
    employee_id: int
    target_monthly_hours: int = Field(160, ge=40, le=200)
    preferred_shift_start_time: Optional[time] = None
    preferred_shift_length_hours: Optional[float] = None
    max_days_per_week: int = Field(6, ge=1, le=7)
    prefers_weekends: bool = True

    model_config = ConfigDict(from_attributes=True, frozen=True)


class ConfiguredPreferences(_PreferenceFields):
    """Preferences the employee saved."""
    source: Literal["configured"] = "configured"


class DefaultPreferences(_PreferenceFields):
    """Stand-in for an employee who never saved preferences."""
    source: Literal["default"] = "default"


Preferences = Annotated[Union[ConfiguredPreferences, DefaultPreferences], Field(discriminator="source")]


class AvailabilityBlock(BaseModel):
    employee_id: int
    day_of_week: Optional[int] = None
    specific_date: Optional[date] = None
    unavailable_start_time: Optional[time] = None
    unavailable_end_time: Optional[time] = None
    is_all_day: bool = False
    is_recurring: bool = True
    reason: Optional[str] = None

    model_config = ConfigDict(from_attributes=True, frozen=True)


class BusinessHoursSnapshot(BaseModel):
    day_of_week: int = Field(..., ge=0, le=6)
    open_time: time
    close_time: time
    is_closed: bool = False

    model_config = ConfigDict(from_attributes=True, frozen=True)


class StaffingSlot(BaseModel):
    day_of_week: int = Field(..., ge=0, le=6)
    time_slot_start: time
    time_slot_end: time
    min_staff_required: int = Field(1, ge=0)
    optimal_staff: int = Field(2, ge=0)

    model_config = ConfigDict(from_attributes=True, frozen=True)


class ExistingShift(BaseModel):
    id: Optional[int] = None
    employee_id: int
    shift_date: date
    start_time: time
    end_time: time

    model_config = ConfigDict(from_attributes=True, frozen=True)


class TimeOffWindow(BaseModel):
    employee_id: int
    start_date: date
    end_date: date

    model_config = ConfigDict(from_attributes=True, frozen=True)


class SchedulerContext(BaseModel):
    """Everything one generation run reads, loaded once."""
    restaurant_id: int
    week_start: date
    week_end: date
    month: tuple[int, int]  # (year, month) of week_start

    employees: list[EmployeeSnapshot] = Field(default_factory=list)
    preferences: dict[int, Preferences] = Field(default_factory=dict)
    availability: dict[int, list[AvailabilityBlock]] = Field(default_factory=dict)
    business_hours: dict[int, BusinessHoursSnapshot] = Field(default_factory=dict)
    staffing_requirements: list[StaffingSlot] = Field(default_factory=list)
    existing_shifts: dict[int, list[ExistingShift]] = Field(default_factory=dict)
    # persisted shifts on the day before week_start, for the rest rule
    carryover_shifts: list[ExistingShift] = Field(default_factory=list)
    time_off: dict[int, list[TimeOffWindow]] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    def employee(self, employee_id: int) -> Optional[EmployeeSnapshot]:
        return next((e for e in self.employees if e.id == employee_id), None)

# ---------- generation input / output ----------

class GenerationOptions(BaseModel):
    # recorded on the generation run; fairness scoring always applies
    prioritize_fairness: bool = True
    prioritize_cost: bool = False
    allow_overtime: bool = False


class ScheduleShift(BaseModel):
    employee_id: int
    shift_date: date
    start_time: time
    end_time: time
    position: Optional[str] = None
    notes: Optional[str] = None


class ScheduleStats(BaseModel):
    total_shifts: int = 0
    total_hours: float = 0.0
    estimated_labor_cost: float = 0.0
    employees_scheduled: int = 0
    fairness_score: float = 0.0


class GeneratedSchedule(BaseModel):
    shifts: list[ScheduleShift]
    warnings: list[str]
    stats: ScheduleStats

# ---------- HTTP payloads ----------

class GenerateScheduleRequest(GenerationOptions):
    week_start: date = Field(..., description="Monday of the week to generate")

    model_config = ConfigDict(extra="forbid")

    @field_validator("week_start")
    @classmethod
    def must_be_monday(cls, v: date) -> date:
        if v.weekday() != 0:
            raise ValueError("Week must start on a Monday")
        return v

    def options(self) -> GenerationOptions:
        return GenerationOptions(
            prioritize_fairness=self.prioritize_fairness,
            prioritize_cost=self.prioritize_cost,
            allow_overtime=self.allow_overtime,
        )


class PublishScheduleRequest(BaseModel):
    week_start: date
    options: GenerationOptions = Field(default_factory=GenerationOptions)
    shifts: list[ScheduleShift] = Field(..., min_length=1)
    warnings: list[str] = Field(default_factory=list)
    stats: ScheduleStats
    generated_by: Optional[int] = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("week_start")
    @classmethod
    def must_be_monday(cls, v: date) -> date:
        if v.weekday() != 0:
            raise ValueError("Week must start on a Monday")
        return v


class GenerationRunSchema(BaseModel):
    id: int
    restaurant_id: int
    week_start_date: date
    generation_params: dict
    total_shifts: int
    total_hours: Optional[float] = None
    estimated_labor_cost: Optional[float] = None
    warnings: list[str]
    status: GenerationRunStatus
    generated_by: Optional[int] = None
    created_at: Optional[datetime] = None
    published_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
