from planboard.schemas.project import ProjectCreate, ProjectUpdate, ProjectRead, ProjectDetail
from planboard.schemas.task import TaskCreate, TaskUpdate, TaskRead
from planboard.schemas.schedule import ScheduleRequestCreate, ScheduledTaskRead, ScheduleRead
from planboard.schemas.user import UserRead

__all__ = [
    "ProjectCreate",
    "ProjectUpdate",
    "ProjectRead",
    "ProjectDetail",
    "TaskCreate",
    "TaskUpdate",
    "TaskRead",
    "ScheduleRequestCreate",
    "ScheduledTaskRead",
    "ScheduleRead",
    "UserRead",
]
