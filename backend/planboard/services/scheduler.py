"""
Task scheduler: packs a project's incomplete tasks onto working days.

Tasks are placed one after another, earliest due date first:
- Each task gets an hour estimate from its title
- It starts on the first working day at or after the cursor
- It ends once enough working days have passed to cover the estimate
- The cursor then moves to the day after it ends, so tasks never share a day

The builder is a pure function of its inputs. It never reads the clock or
touches the database; the caller loads (and authorizes) the tasks.
"""

import uuid
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Iterable

from planboard.exceptions import InvalidScheduleError
from planboard.logging_config import get_logger
from planboard.models import Task
from planboard.services.estimator import estimate_hours
from planboard.services.priority import Priority, classify_priority
from planboard.services.workdays import next_working_day, span_end

logger = get_logger(__name__)

ALL_COMPLETED_MESSAGE = "All tasks are completed! No scheduling needed."


@dataclass(frozen=True)
class ScheduleRequest:
    """Calendar and capacity for one scheduling run."""
    hours_per_day: int
    working_days: frozenset[int]  # 0=Sunday .. 6=Saturday
    start_date: date


@dataclass(frozen=True)
class ScheduledTask:
    """Placement of a single task."""
    task_id: uuid.UUID
    title: str
    suggested_start_date: date
    suggested_due_date: date  # Last working day of the task's span
    estimated_hours: int
    priority: Priority


@dataclass(frozen=True)
class ScheduleResult:
    """Complete schedule for a project."""
    scheduled_tasks: list[ScheduledTask] = field(default_factory=list)
    total_estimated_hours: int = 0
    message: str = ALL_COMPLETED_MESSAGE


def validate_request(request: ScheduleRequest) -> None:
    """
    Reject requests the calendar walk cannot complete.

    Raises:
        InvalidScheduleError: no working days, a weekday outside 0..6,
            or non-positive hours per day.
    """
    if request.hours_per_day <= 0:
        raise InvalidScheduleError(
            "Available hours per day must be a positive integer",
            field="available_hours_per_day",
        )
    if not request.working_days:
        raise InvalidScheduleError(
            "At least one working day is required",
            field="working_days",
        )
    invalid_days = sorted(day for day in request.working_days if not 0 <= day <= 6)
    if invalid_days:
        raise InvalidScheduleError(
            f"Working days must be between 0 (Sunday) and 6 (Saturday), got {invalid_days}",
            field="working_days",
        )


def scheduling_order(tasks: Iterable[Task]) -> list[Task]:
    """
    Incomplete tasks in the order they will be placed.

    Earliest due date first; tasks without a due date go last.
    Equal due dates fall back to creation time.
    """
    incomplete = [task for task in tasks if not task.is_completed]
    return sorted(
        incomplete,
        key=lambda task: (task.due_date or date.max, task.created_at),
    )


def generate_schedule(tasks: Iterable[Task], request: ScheduleRequest) -> ScheduleResult:
    """
    Build a schedule for the given tasks.

    Args:
        tasks: All tasks of a project, already ownership-checked
        request: Capacity, working days and start date

    Returns:
        ScheduleResult with one entry per incomplete task, in placement order
    """
    validate_request(request)

    ordered = scheduling_order(tasks)
    if not ordered:
        return ScheduleResult()

    scheduled: list[ScheduledTask] = []
    cursor = request.start_date
    total_hours = 0

    for task in ordered:
        hours = estimate_hours(task.title)
        total_hours += hours

        start = next_working_day(cursor, request.working_days)
        end = span_end(start, hours, request.hours_per_day, request.working_days)
        priority = classify_priority(task.due_date, end)

        scheduled.append(ScheduledTask(
            task_id=task.id,
            title=task.title,
            suggested_start_date=start,
            suggested_due_date=end,
            estimated_hours=hours,
            priority=priority,
        ))
        logger.debug(
            f"Placed task {str(task.id)[:8]}... {start} -> {end} "
            f"({hours}h, {priority.value})"
        )

        cursor = end + timedelta(days=1)

    span_days = (scheduled[-1].suggested_due_date - request.start_date).days + 1
    logger.info(f"Scheduled {len(scheduled)} tasks over {span_days} days ({total_hours}h)")

    return ScheduleResult(
        scheduled_tasks=scheduled,
        total_estimated_hours=total_hours,
        message=f"Successfully scheduled {len(scheduled)} tasks over {span_days} days.",
    )
