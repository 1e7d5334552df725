import uuid
from datetime import datetime, timezone
from typing import TYPE_CHECKING
from sqlmodel import SQLModel, Field, Relationship

if TYPE_CHECKING:
    from planboard.models.task import Task
    from planboard.models.user import User


class Project(SQLModel, table=True):
    """Project model - groups tasks together, visible only to its owner."""

    __tablename__ = "projects"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    title: str = Field(index=True, max_length=100)
    description: str | None = Field(default=None, max_length=500)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    # Foreign keys
    owner_id: uuid.UUID = Field(foreign_key="users.id", index=True)

    # Relationships
    owner: "User" = Relationship(back_populates="projects")
    tasks: list["Task"] = Relationship(
        back_populates="project",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"},
    )
