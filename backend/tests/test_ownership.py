"""
Owner-scoped lookups and first-sight registration at the service layer.
"""

from datetime import date

import pytest

from planboard.exceptions import AccountConflictError
from planboard.models import Project, Task
from planboard.services.accounts import get_or_create_user
from planboard.services.ownership import (
    list_owned_projects,
    load_owned_project,
    load_owned_task,
)


@pytest.mark.asyncio
async def test_get_or_create_user_is_idempotent(test_session):
    first = await get_or_create_user(test_session, firebase_uid="uid-1", email="carol@example.com")
    second = await get_or_create_user(test_session, firebase_uid="uid-1", email="carol@example.com")

    assert first.id == second.id
    assert first.name == "carol"


@pytest.mark.asyncio
async def test_lookups_are_scoped_to_owner(test_session):
    owner = await get_or_create_user(test_session, firebase_uid="owner", email="owner@example.com")
    stranger = await get_or_create_user(test_session, firebase_uid="stranger", email="stranger@example.com")

    project = Project(title="Garden", owner_id=owner.id)
    test_session.add(project)
    await test_session.flush()
    task = Task(title="Plant tulips", due_date=date(2025, 4, 1), project_id=project.id)
    test_session.add(task)
    await test_session.commit()
    test_session.expunge_all()

    loaded = await load_owned_project(test_session, project.id, owner.id)
    assert loaded is not None
    assert [t.title for t in loaded.tasks] == ["Plant tulips"]

    assert await load_owned_project(test_session, project.id, stranger.id) is None
    assert await load_owned_task(test_session, task.id, stranger.id) is None
    assert (await load_owned_task(test_session, task.id, owner.id)).id == task.id

    assert [p.id for p in await list_owned_projects(test_session, owner.id)] == [project.id]
    assert await list_owned_projects(test_session, stranger.id) == []


@pytest.mark.asyncio
async def test_email_linked_to_another_uid_is_a_conflict(test_session):
    original = await get_or_create_user(test_session, firebase_uid="uid-old", email="dave@example.com")
    await test_session.commit()

    with pytest.raises(AccountConflictError) as exc_info:
        await get_or_create_user(test_session, firebase_uid="uid-new", email="dave@example.com")

    assert exc_info.value.status_code == 409
    assert exc_info.value.error_code == "account_conflict"
    # The original account is untouched and still resolves by its uid
    again = await get_or_create_user(test_session, firebase_uid="uid-old", email="dave@example.com")
    assert again.id == original.id


@pytest.mark.asyncio
async def test_rows_are_stamped_with_aware_timestamps(test_session):
    user = await get_or_create_user(test_session, firebase_uid="uid-tz", email="erin@example.com")
    project = Project(title="Timezones", owner_id=user.id)
    task = Task(title="Check offsets", project_id=project.id)

    assert project.created_at.tzinfo is not None
    assert task.created_at.tzinfo is not None

    test_session.add_all([project, task])
    await test_session.commit()
