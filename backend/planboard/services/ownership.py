"""
Owner-scoped access to projects and tasks.

Every lookup takes the requesting user's id explicitly. A project or task
owned by someone else is reported exactly like a missing one (None), so
routes answer 404 in both cases.
"""

import uuid
from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlmodel import select

from planboard.models import Project, Task


async def list_owned_projects(
    session: AsyncSession,
    user_id: uuid.UUID,
) -> list[Project]:
    """All projects owned by the user, newest first, with tasks loaded."""
    result = await session.execute(
        select(Project)
        .where(Project.owner_id == user_id)
        .options(selectinload(Project.tasks))
        .order_by(Project.created_at.desc())
    )
    return list(result.scalars().all())


async def load_owned_project(
    session: AsyncSession,
    project_id: uuid.UUID,
    user_id: uuid.UUID,
) -> Project | None:
    """Project with its tasks, or None if missing or not owned by the user."""
    result = await session.execute(
        select(Project)
        .where(Project.id == project_id, Project.owner_id == user_id)
        .options(selectinload(Project.tasks))
    )
    return result.scalars().first()


async def load_owned_task(
    session: AsyncSession,
    task_id: uuid.UUID,
    user_id: uuid.UUID,
) -> Task | None:
    """Task resolved through its project's owner, or None."""
    result = await session.execute(
        select(Task)
        .join(Project, Task.project_id == Project.id)
        .where(Task.id == task_id, Project.owner_id == user_id)
    )
    return result.scalars().first()


def display_order(tasks: list[Task]) -> list[Task]:
    """Incomplete tasks first, then by due date (no due date last)."""
    return sorted(
        tasks,
        key=lambda task: (task.is_completed, task.due_date or date.max, task.created_at),
    )
