import uuid
from datetime import datetime
from pydantic import BaseModel, Field

from planboard.schemas.task import TaskRead


class ProjectCreate(BaseModel):
    """Schema for creating a new project."""
    title: str = Field(min_length=3, max_length=100)
    description: str | None = Field(default=None, max_length=500)


class ProjectUpdate(BaseModel):
    """Schema for replacing a project's title and description."""
    title: str = Field(min_length=3, max_length=100)
    description: str | None = Field(default=None, max_length=500)


class ProjectRead(BaseModel):
    """Schema for reading a project with task counts."""
    id: uuid.UUID
    title: str
    description: str | None
    created_at: datetime
    task_count: int = 0
    completed_task_count: int = 0

    model_config = {"from_attributes": True}


class ProjectDetail(BaseModel):
    """Schema for a project together with its tasks."""
    id: uuid.UUID
    title: str
    description: str | None
    created_at: datetime
    tasks: list[TaskRead] = []

    model_config = {"from_attributes": True}
