import uuid
from datetime import date, datetime
from pydantic import BaseModel, Field, field_validator

from planboard.services.priority import Priority
from planboard.services.scheduler import ScheduleRequest


class ScheduleRequestCreate(BaseModel):
    """
    Schema for a scheduling run.

    working_days uses 0=Sunday .. 6=Saturday. A start_date sent as a
    datetime is truncated to its date; it defaults to today.
    """
    available_hours_per_day: int = Field(gt=0)
    working_days: list[int] = Field(min_length=1)
    start_date: date = Field(default_factory=date.today)

    @field_validator("working_days")
    @classmethod
    def check_working_days(cls, value: list[int]) -> list[int]:
        invalid = sorted({day for day in value if not 0 <= day <= 6})
        if invalid:
            raise ValueError(f"working days must be between 0 (Sunday) and 6 (Saturday), got {invalid}")
        return value

    @field_validator("start_date", mode="before")
    @classmethod
    def strip_time(cls, value):
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, str) and "T" in value:
            return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
        return value

    def to_request(self) -> ScheduleRequest:
        return ScheduleRequest(
            hours_per_day=self.available_hours_per_day,
            working_days=frozenset(self.working_days),
            start_date=self.start_date,
        )


class ScheduledTaskRead(BaseModel):
    """Schema for one placed task."""
    task_id: uuid.UUID
    title: str
    suggested_start_date: date
    suggested_due_date: date
    estimated_hours: int
    priority: Priority

    model_config = {"from_attributes": True}


class ScheduleRead(BaseModel):
    """Schema for a generated schedule."""
    scheduled_tasks: list[ScheduledTaskRead]
    total_estimated_hours: int
    message: str

    model_config = {"from_attributes": True}
