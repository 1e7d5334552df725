import uuid
from datetime import date, datetime
from pydantic import BaseModel, Field


class TaskCreate(BaseModel):
    """Schema for creating a new task inside a project."""
    title: str = Field(min_length=1, max_length=200)
    due_date: date | None = None


class TaskUpdate(BaseModel):
    """Schema for replacing a task's editable fields."""
    title: str = Field(min_length=1, max_length=200)
    due_date: date | None = None
    is_completed: bool = False


class TaskRead(BaseModel):
    """Schema for reading a task."""
    id: uuid.UUID
    title: str
    due_date: date | None
    is_completed: bool
    created_at: datetime
    project_id: uuid.UUID

    model_config = {"from_attributes": True}
