import uuid
from datetime import date, datetime, timezone
from typing import TYPE_CHECKING
from sqlmodel import SQLModel, Field, Relationship

if TYPE_CHECKING:
    from planboard.models.project import Project


class Task(SQLModel, table=True):
    """
    Task model.

    Key fields:
    - due_date: optional deadline, drives scheduling order and priority
    - is_completed: completed tasks are skipped by the scheduler
    - created_at: tie-breaker when due dates are equal
    """

    __tablename__ = "tasks"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    title: str = Field(index=True, max_length=200)
    due_date: date | None = Field(default=None)
    is_completed: bool = Field(default=False)

    # Foreign keys
    project_id: uuid.UUID = Field(foreign_key="projects.id", index=True)

    # Timestamps
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    # Relationships
    project: "Project" = Relationship(back_populates="tasks")
