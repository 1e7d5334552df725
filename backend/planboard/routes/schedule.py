"""
Scheduling routes for the Planboard API.
"""

import uuid
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from planboard.auth import get_current_account
from planboard.database import get_session
from planboard.models import User
from planboard.schemas import ScheduleRequestCreate, ScheduleRead
from planboard.services.ownership import load_owned_project
from planboard.services.scheduler import ScheduleResult, generate_schedule
from planboard.exceptions import NotFoundError
from planboard.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.post("/{project_id}/schedule", response_model=ScheduleRead)
async def create_schedule(
    project_id: uuid.UUID,
    schedule_in: ScheduleRequestCreate,
    user: User = Depends(get_current_account),
    session: AsyncSession = Depends(get_session),
) -> ScheduleResult:
    """
    Suggest start and end dates for a project's incomplete tasks.

    Nothing is persisted; calling again with the same input returns the
    same schedule.
    """
    project = await load_owned_project(session, project_id, user.id)
    if not project:
        raise NotFoundError("Project", str(project_id))

    request = schedule_in.to_request()
    logger.info(
        f"Scheduling project {project_id}: {len(project.tasks)} tasks, "
        f"{request.hours_per_day}h/day, days={sorted(request.working_days)}, start={request.start_date}"
    )

    return generate_schedule(project.tasks, request)
