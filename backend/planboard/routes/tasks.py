"""
Task routes for the Planboard API.

Tasks are resolved through their project's owner; another user's task
answers 404 like a missing one.
"""

import uuid
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from planboard.auth import get_current_account
from planboard.database import get_session
from planboard.models import Task, User
from planboard.schemas import TaskUpdate, TaskRead
from planboard.services.ownership import load_owned_task
from planboard.exceptions import NotFoundError
from planboard.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter()


async def _get_owned_task(session: AsyncSession, task_id: uuid.UUID, user: User) -> Task:
    task = await load_owned_task(session, task_id, user.id)
    if not task:
        raise NotFoundError("Task", str(task_id))
    return task


@router.put("/{task_id}", response_model=TaskRead)
async def update_task(
    task_id: uuid.UUID,
    task_in: TaskUpdate,
    user: User = Depends(get_current_account),
    session: AsyncSession = Depends(get_session),
) -> Task:
    """Replace a task's title, due date and completion flag."""
    task = await _get_owned_task(session, task_id, user)

    update_data = task_in.model_dump()

    logger.info(f"Updating task {task_id}: {update_data}")

    for field, value in update_data.items():
        setattr(task, field, value)

    await session.flush()
    return task


@router.patch("/{task_id}/toggle", response_model=TaskRead)
async def toggle_task(
    task_id: uuid.UUID,
    user: User = Depends(get_current_account),
    session: AsyncSession = Depends(get_session),
) -> Task:
    """Flip a task between completed and not completed."""
    task = await _get_owned_task(session, task_id, user)

    task.is_completed = not task.is_completed
    await session.flush()

    logger.info(f"Toggled task {task_id}: is_completed={task.is_completed}")

    return task


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(
    task_id: uuid.UUID,
    user: User = Depends(get_current_account),
    session: AsyncSession = Depends(get_session),
) -> None:
    """Delete a task."""
    task = await _get_owned_task(session, task_id, user)

    logger.info(f"Deleting task {task_id}: '{task.title}'")

    await session.delete(task)
