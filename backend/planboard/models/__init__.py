from planboard.models.user import User
from planboard.models.project import Project
from planboard.models.task import Task

__all__ = ["User", "Project", "Task"]
