"""
Schedule builder: ordering, packing, totals and request validation.
"""

import uuid
import warnings
from datetime import date, datetime, timedelta

import pytest

from planboard.exceptions import InvalidScheduleError
from planboard.models import Task
from planboard.services.priority import Priority
from planboard.services.scheduler import (
    ALL_COMPLETED_MESSAGE,
    ScheduleRequest,
    generate_schedule,
    scheduling_order,
)
from planboard.services.workdays import weekday_index

MONDAY = date(2025, 1, 6)
WEEKDAYS = frozenset({1, 2, 3, 4, 5})
CREATED = datetime(2025, 1, 1, 9, 0)


def make_task(title, due_date=None, is_completed=False, created_offset=0):
    return Task(
        id=uuid.uuid4(),
        title=title,
        due_date=due_date,
        is_completed=is_completed,
        project_id=uuid.uuid4(),
        created_at=CREATED + timedelta(minutes=created_offset),
    )


def make_request(hours_per_day=8, working_days=WEEKDAYS, start_date=MONDAY):
    return ScheduleRequest(
        hours_per_day=hours_per_day,
        working_days=frozenset(working_days),
        start_date=start_date,
    )


class TestEndToEnd:

    def test_refactor_then_fix(self):
        """
        Scenario: "Refactor auth module" due in 3 days, "fix typo" with no due date,
        8h/day Mon-Fri starting Monday.
        Expected: refactor is 8h on Monday (3 days slack -> medium),
        fix is 2h on Tuesday (no due date -> medium).
        """
        refactor = make_task("Refactor auth module", due_date=MONDAY + timedelta(days=3))
        typo = make_task("fix typo", created_offset=1)

        result = generate_schedule([typo, refactor], make_request())

        first, second = result.scheduled_tasks
        assert first.task_id == refactor.id
        assert first.estimated_hours == 8
        assert first.suggested_start_date == MONDAY
        assert first.suggested_due_date == MONDAY
        assert first.priority == Priority.MEDIUM

        assert second.task_id == typo.id
        assert second.title == "fix typo"
        assert second.estimated_hours == 2
        assert second.suggested_start_date == date(2025, 1, 7)
        assert second.suggested_due_date == date(2025, 1, 7)
        assert second.priority == Priority.MEDIUM

        assert result.total_estimated_hours == 10
        assert result.message == "Successfully scheduled 2 tasks over 2 days."


class TestOrdering:

    def test_due_date_then_created_at_and_missing_due_last(self):
        late = make_task("Write docs", due_date=date(2025, 2, 1), created_offset=0)
        undated = make_task("Plan roadmap", created_offset=1)
        early_second = make_task("Review PR", due_date=date(2025, 1, 20), created_offset=3)
        early_first = make_task("Tidy board", due_date=date(2025, 1, 20), created_offset=2)

        ordered = scheduling_order([late, undated, early_second, early_first])

        assert [t.id for t in ordered] == [early_first.id, early_second.id, late.id, undated.id]

    def test_completed_tasks_are_skipped(self):
        done = make_task("Write docs", is_completed=True)
        open_task = make_task("Plan roadmap")

        result = generate_schedule([done, open_task], make_request())

        assert [s.task_id for s in result.scheduled_tasks] == [open_task.id]


class TestPacking:

    def test_tasks_never_overlap(self):
        tasks = [
            make_task(f"Implement feature {i}" if i % 2 else f"fix bug {i}", created_offset=i)
            for i in range(8)
        ]

        result = generate_schedule(tasks, make_request(hours_per_day=3, working_days={1, 3, 5}))

        for previous, current in zip(result.scheduled_tasks, result.scheduled_tasks[1:]):
            assert current.suggested_start_date > previous.suggested_due_date
        for item in result.scheduled_tasks:
            assert weekday_index(item.suggested_start_date) in {1, 3, 5}
            assert weekday_index(item.suggested_due_date) in {1, 3, 5}
            assert item.suggested_start_date <= item.suggested_due_date

    def test_weekend_start_moves_to_monday(self):
        saturday = date(2025, 1, 11)
        result = generate_schedule([make_task("Plan roadmap")], make_request(start_date=saturday))

        item = result.scheduled_tasks[0]
        assert item.suggested_start_date == date(2025, 1, 13)
        # Span counted from the request's start date, not the first working day
        assert result.message == "Successfully scheduled 1 tasks over 3 days."

    def test_multi_day_task_spans_weekend(self):
        """
        Scenario: 8h task at 2h/day from Thursday, Mon-Fri.
        Expected: Thu, Fri, Mon, Tue -> ends Tuesday; next task starts Wednesday.
        """
        thursday = date(2025, 1, 9)
        tasks = [
            make_task("Design API", created_offset=0),
            make_task("Plan roadmap", created_offset=1),
        ]

        result = generate_schedule(tasks, make_request(hours_per_day=2, start_date=thursday))

        design, plan = result.scheduled_tasks
        assert design.suggested_start_date == thursday
        assert design.suggested_due_date == date(2025, 1, 14)
        assert plan.suggested_start_date == date(2025, 1, 15)
        assert plan.suggested_due_date == date(2025, 1, 16)

    def test_priority_depends_on_queue_position(self):
        """
        Two tasks with the same due date: the later one finishes closer
        to (or past) the deadline and gets a higher priority.
        """
        due = MONDAY + timedelta(days=8)
        tasks = [
            make_task("Plan roadmap", due_date=due, created_offset=0),
            make_task("Write docs", due_date=due, created_offset=1),
        ]

        result = generate_schedule(tasks, make_request(hours_per_day=4))

        first, second = result.scheduled_tasks
        assert first.suggested_due_date == MONDAY
        assert first.priority == Priority.LOW
        assert second.suggested_due_date == date(2025, 1, 7)
        assert second.priority == Priority.MEDIUM


class TestResult:

    def test_no_incomplete_tasks(self):
        tasks = [make_task("Write docs", is_completed=True)]

        result = generate_schedule(tasks, make_request())

        assert result.scheduled_tasks == []
        assert result.total_estimated_hours == 0
        assert result.message == ALL_COMPLETED_MESSAGE

    def test_empty_task_list(self):
        result = generate_schedule([], make_request())
        assert result.message == "All tasks are completed! No scheduling needed."

    def test_deterministic(self):
        tasks = [
            make_task("Refactor auth module", due_date=date(2025, 1, 9)),
            make_task("fix typo", created_offset=1),
            make_task("Design the new onboarding flow for enterprise customers", created_offset=2),
        ]
        request = make_request(hours_per_day=5)

        assert generate_schedule(tasks, request) == generate_schedule(tasks, request)

    def test_inputs_are_not_mutated(self):
        tasks = [make_task("Plan roadmap"), make_task("Write docs", is_completed=True)]
        snapshot = [(t.id, t.title, t.due_date, t.is_completed) for t in tasks]

        generate_schedule(tasks, make_request())

        assert [(t.id, t.title, t.due_date, t.is_completed) for t in tasks] == snapshot


class TestValidation:

    def test_empty_working_days_rejected(self):
        with pytest.raises(InvalidScheduleError) as exc_info:
            generate_schedule([make_task("Plan roadmap")], make_request(working_days=set()))
        assert exc_info.value.field == "working_days"
        assert exc_info.value.status_code == 422

    def test_non_positive_hours_rejected(self):
        for hours in (0, -3):
            with pytest.raises(InvalidScheduleError) as exc_info:
                generate_schedule([make_task("Plan roadmap")], make_request(hours_per_day=hours))
            assert exc_info.value.field == "available_hours_per_day"

    def test_out_of_range_weekday_rejected(self):
        with pytest.raises(InvalidScheduleError):
            generate_schedule([make_task("Plan roadmap")], make_request(working_days={1, 7}))

    def test_validation_runs_even_without_tasks(self):
        with pytest.raises(InvalidScheduleError):
            generate_schedule([], make_request(working_days=set()))

    def test_error_construction_emits_no_warnings(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            error = InvalidScheduleError("At least one working day is required", field="working_days")
        assert error.status_code == 422
        assert error.details[0]["loc"] == ["body", "working_days"]
