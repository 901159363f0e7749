from datetime import date, time
from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict, model_validator

class ShiftSchema(BaseModel):
    id: int
    restaurant_id: int
    employee_id: int
    shift_date: date
    start_time: time
    end_time: time
    position: Optional[str] = None
    notes: Optional[str] = None
    generation_run_id: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)

class ShiftCreatePayload(BaseModel):
    employee_id: int
    shift_date: date
    start_time: time
    end_time: time
    position: Optional[str] = None
    notes: Optional[str] = None

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def start_differs_from_end(self):
        # end < start is allowed (overnight), equal is a zero-length shift
        if self.start_time == self.end_time:
            raise ValueError("Start time cannot be the same as end time")
        return self

# Internal DTO the service uses
class ShiftCreate(BaseModel):
    restaurant_id: int
    employee_id: int
    shift_date: date
    start_time: time
    end_time: time
    position: Optional[str] = None
    notes: Optional[str] = None

REQUIRED_SHIFT_FIELDS = ("employee_id", "shift_date", "start_time", "end_time")

class ShiftUpdate(BaseModel):
    employee_id: Optional[int] = None
    shift_date: Optional[date] = None
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    position: Optional[str] = None
    notes: Optional[str] = None

    @model_validator(mode="after")
    def check_patch_fields(self):
        # omitted means unchanged; an explicit null would clear a required column
        cleared = [f for f in REQUIRED_SHIFT_FIELDS if f in self.model_fields_set and getattr(self, f) is None]
        if cleared:
            raise ValueError(f"{', '.join(cleared)} cannot be null")
        if self.start_time is not None and self.end_time is not None and self.start_time == self.end_time:
            raise ValueError("Start time cannot be the same as end time")
        return self

# ---------- conflicts ----------

class ConflictCheckPayload(BaseModel):
    employee_id: int
    shift_date: date
    start_time: time
    end_time: time
    exclude_shift_id: Optional[int] = None

    model_config = ConfigDict(extra="forbid")

class ShiftConflictSchema(BaseModel):
    shift: ShiftSchema
    conflict_type: Literal["time_overlap", "same_employee"]
    message: str

    model_config = ConfigDict(from_attributes=True)

class ConflictCheckResponse(BaseModel):
    valid: bool
    severity: Literal["none", "warning", "error"]
    errors: list[str]
    conflicts: list[ShiftConflictSchema]
