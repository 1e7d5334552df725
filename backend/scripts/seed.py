#!/usr/bin/env python3
"""
Seed script to generate a demo project for trying out the scheduler.

Creates (or reuses) a user, then one project filled with tasks whose titles
mix complex, simple and neutral wording, with a spread of due dates.

Usage:
    python -m scripts.seed [--tasks 40] [--clear] [--schedule]

Options:
    --tasks N        Number of tasks to create (default: 40)
    --clear          Delete the user's existing projects first
    --email EMAIL    Owner email (default: demo@planboard.dev)
    --uid UID        Firebase uid of the owner (default: demo-user)
    --project NAME   Title of the project to create
    --schedule       Run the scheduler over the new project and print it
"""

import argparse
import asyncio
import random
import time
from datetime import date, datetime, timedelta, timezone
from typing import List

from sqlmodel import select

from planboard.database import async_session_maker, init_db
from planboard.models import Project, Task, User
from planboard.services.accounts import get_or_create_user
from planboard.services.ownership import load_owned_project
from planboard.services.scheduler import ScheduleRequest, generate_schedule

COMPLEX_TITLES = [
    "Implement billing webhooks",
    "Design onboarding flow",
    "Refactor notification service",
    "Develop reporting export",
    "Integration with calendar provider",
]
SIMPLE_TITLES = [
    "Fix typo on pricing page",
    "Update dependencies",
    "Quick copy change in footer",
    "Small layout tweak",
]
NEUTRAL_TITLES = [
    "Write release notes",
    "Review pull requests",
    "Prepare sprint demo",
    "Collect customer feedback from the last three support escalations",
]


async def clear_data(user: User):
    """Delete the user's projects (tasks cascade)."""
    print("Clearing existing projects...")
    async with async_session_maker() as session:
        result = await session.execute(select(Project).where(Project.owner_id == user.id))
        for project in result.scalars().all():
            await session.delete(project)
        await session.commit()
    print("Data cleared.")


async def create_user(uid: str, email: str) -> User:
    async with async_session_maker() as session:
        user = await get_or_create_user(session, firebase_uid=uid, email=email, name="Demo User")
        await session.commit()
        return user


async def create_project(title: str, owner: User) -> Project:
    """Create a project for the tasks."""
    async with async_session_maker() as session:
        project = Project(title=title, description="Demo project for the scheduler", owner_id=owner.id)
        session.add(project)
        await session.commit()
        await session.refresh(project)
        return project


def generate_tasks(project: Project, num_tasks: int) -> List[Task]:
    """
    Generate tasks with realistic variety.

    Strategy:
    - Titles drawn from complex / simple / neutral pools
    - 70% have a due date within the next six weeks
    - 15% are already completed
    """
    tasks = []
    today = date.today()
    created = datetime.now(timezone.utc)
    pools = COMPLEX_TITLES + SIMPLE_TITLES + NEUTRAL_TITLES

    for i in range(num_tasks):
        due_date = None
        if random.random() < 0.7:
            due_date = today + timedelta(days=random.randint(-3, 42))

        tasks.append(Task(
            title=f"{random.choice(pools)} #{i + 1}",
            due_date=due_date,
            is_completed=random.random() < 0.15,
            project_id=project.id,
            created_at=created + timedelta(seconds=i),
        ))

    return tasks


async def insert_tasks(tasks: List[Task]):
    async with async_session_maker() as session:
        print(f"Inserting {len(tasks)} tasks...")
        session.add_all(tasks)
        await session.commit()


async def print_schedule(project: Project, owner: User):
    """Run the scheduler on the seeded project (Mon-Fri, 6h/day, from today)."""
    async with async_session_maker() as session:
        loaded = await load_owned_project(session, project.id, owner.id)

    request = ScheduleRequest(
        hours_per_day=6,
        working_days=frozenset({1, 2, 3, 4, 5}),
        start_date=date.today(),
    )

    start_time = time.time()
    result = generate_schedule(loaded.tasks, request)
    elapsed = time.time() - start_time

    print(f"\n=== Schedule ===")
    for item in result.scheduled_tasks:
        print(
            f"{item.suggested_start_date} -> {item.suggested_due_date}  "
            f"{item.estimated_hours:>2}h  {item.priority.value:<6}  {item.title}"
        )
    print(result.message)
    print(f"Total estimated hours: {result.total_estimated_hours}")
    print(f"Scheduling time: {elapsed * 1000:.2f}ms")


async def main():
    parser = argparse.ArgumentParser(description="Seed the database with a demo project")
    parser.add_argument("--tasks", type=int, default=40, help="Number of tasks to create")
    parser.add_argument("--clear", action="store_true", help="Delete the user's projects first")
    parser.add_argument("--email", type=str, default="demo@planboard.dev", help="Owner email")
    parser.add_argument("--uid", type=str, default="demo-user", help="Owner Firebase uid")
    parser.add_argument("--project", type=str, default="Demo Project", help="Project title")
    parser.add_argument("--schedule", action="store_true", help="Print a schedule after seeding")

    args = parser.parse_args()

    print(f"=== Planboard Seed Script ===")

    await init_db()

    user = await create_user(args.uid, args.email)
    print(f"Owner: {user.email} ({user.id})")

    if args.clear:
        await clear_data(user)

    project = await create_project(args.project, user)
    print(f"Created project: {project.title} ({project.id})")

    tasks = generate_tasks(project, args.tasks)
    start_time = time.time()
    await insert_tasks(tasks)
    print(f"Insert time: {time.time() - start_time:.2f}s")

    if args.schedule:
        await print_schedule(project, user)

    print(f"\n=== Seeding Complete ===")
    print(f"Project ID: {project.id}")


if __name__ == "__main__":
    asyncio.run(main())
