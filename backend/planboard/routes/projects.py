"""
Project routes for the Planboard API.

Every route is scoped to the authenticated user's projects.
"""

import uuid
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from planboard.auth import get_current_account
from planboard.database import get_session
from planboard.models import Project, Task, User
from planboard.schemas import (
    ProjectCreate,
    ProjectUpdate,
    ProjectRead,
    ProjectDetail,
    TaskCreate,
    TaskRead,
)
from planboard.services.ownership import display_order, list_owned_projects, load_owned_project
from planboard.exceptions import NotFoundError
from planboard.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter()


def to_project_read(project: Project) -> ProjectRead:
    """ProjectRead with task counts; tasks must already be loaded."""
    return ProjectRead(
        id=project.id,
        title=project.title,
        description=project.description,
        created_at=project.created_at,
        task_count=len(project.tasks),
        completed_task_count=sum(1 for task in project.tasks if task.is_completed),
    )


@router.get("/", response_model=list[ProjectRead])
async def list_projects(
    user: User = Depends(get_current_account),
    session: AsyncSession = Depends(get_session),
) -> list[ProjectRead]:
    """List the caller's projects, newest first."""
    projects = await list_owned_projects(session, user.id)

    logger.debug(f"Listed {len(projects)} projects for user={user.id}")

    return [to_project_read(project) for project in projects]


@router.post("/", response_model=ProjectRead, status_code=status.HTTP_201_CREATED)
async def create_project(
    project_in: ProjectCreate,
    user: User = Depends(get_current_account),
    session: AsyncSession = Depends(get_session),
) -> ProjectRead:
    """Create a new project owned by the caller."""
    project = Project(**project_in.model_dump(), owner_id=user.id)
    session.add(project)
    await session.flush()

    logger.info(f"Created project: id={project.id} title='{project.title}' owner={user.id}")

    return ProjectRead(
        id=project.id,
        title=project.title,
        description=project.description,
        created_at=project.created_at,
    )


@router.get("/{project_id}", response_model=ProjectDetail)
async def get_project(
    project_id: uuid.UUID,
    user: User = Depends(get_current_account),
    session: AsyncSession = Depends(get_session),
) -> ProjectDetail:
    """Get a project with its tasks (incomplete first, then by due date)."""
    project = await load_owned_project(session, project_id, user.id)
    if not project:
        raise NotFoundError("Project", str(project_id))

    return ProjectDetail(
        id=project.id,
        title=project.title,
        description=project.description,
        created_at=project.created_at,
        tasks=[TaskRead.model_validate(task) for task in display_order(project.tasks)],
    )


@router.put("/{project_id}", response_model=ProjectRead)
async def update_project(
    project_id: uuid.UUID,
    project_in: ProjectUpdate,
    user: User = Depends(get_current_account),
    session: AsyncSession = Depends(get_session),
) -> ProjectRead:
    """Replace a project's title and description."""
    project = await load_owned_project(session, project_id, user.id)
    if not project:
        raise NotFoundError("Project", str(project_id))

    update_data = project_in.model_dump()

    logger.info(f"Updating project {project_id}: {update_data}")

    for field, value in update_data.items():
        setattr(project, field, value)

    await session.flush()
    return to_project_read(project)


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: uuid.UUID,
    user: User = Depends(get_current_account),
    session: AsyncSession = Depends(get_session),
) -> None:
    """Delete a project and all its tasks."""
    project = await load_owned_project(session, project_id, user.id)
    if not project:
        raise NotFoundError("Project", str(project_id))

    logger.info(f"Deleting project {project_id}: '{project.title}' ({len(project.tasks)} tasks)")

    await session.delete(project)


@router.get("/{project_id}/tasks", response_model=list[TaskRead])
async def list_project_tasks(
    project_id: uuid.UUID,
    user: User = Depends(get_current_account),
    session: AsyncSession = Depends(get_session),
) -> list[Task]:
    """List a project's tasks (incomplete first, then by due date)."""
    project = await load_owned_project(session, project_id, user.id)
    if not project:
        raise NotFoundError("Project", str(project_id))

    logger.debug(f"Listed {len(project.tasks)} tasks for project={project_id}")

    return display_order(project.tasks)


@router.post("/{project_id}/tasks", response_model=TaskRead, status_code=status.HTTP_201_CREATED)
async def create_task(
    project_id: uuid.UUID,
    task_in: TaskCreate,
    user: User = Depends(get_current_account),
    session: AsyncSession = Depends(get_session),
) -> Task:
    """Create a new task in one of the caller's projects."""
    project = await load_owned_project(session, project_id, user.id)
    if not project:
        raise NotFoundError("Project", str(project_id))

    task = Task(**task_in.model_dump(), project_id=project.id)
    session.add(task)
    await session.flush()

    logger.info(f"Created task: id={task.id} title='{task.title}' project={task.project_id}")

    return task
