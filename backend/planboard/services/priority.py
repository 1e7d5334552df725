"""
Priority classification relative to a task's scheduled finish.

The reference point is the scheduled end date, not today, so a task's
priority depends on where it lands in the queue.
"""

from datetime import date, datetime
from enum import Enum


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


# Slack (days between scheduled end and due date) thresholds
HIGH_MAX_SLACK = 2
MEDIUM_MAX_SLACK = 7


def _as_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def classify_priority(due_date: date | datetime | None, scheduled_end: date | datetime) -> Priority:
    """
    Classify a scheduled task.

    - No due date: medium
    - Finishes after the due date, or within 2 days of it: high
    - 3 to 7 days of slack: medium
    - More than 7 days of slack: low
    """
    if due_date is None:
        return Priority.MEDIUM

    days_until_due = (_as_date(due_date) - _as_date(scheduled_end)).days

    if days_until_due <= HIGH_MAX_SLACK:
        # Negative slack means the schedule already overruns the due date
        return Priority.HIGH
    if days_until_due <= MEDIUM_MAX_SLACK:
        return Priority.MEDIUM
    return Priority.LOW
