"""
Working-day calendar arithmetic for the scheduler.

Weekdays are numbered 0=Sunday .. 6=Saturday. Callers must validate that the
working-day set is non-empty before walking; an empty set would never match.
"""

import math
from datetime import date, timedelta
from typing import Collection

ONE_DAY = timedelta(days=1)


def weekday_index(day: date) -> int:
    """Weekday of a date with Sunday as 0."""
    return day.isoweekday() % 7


def is_working_day(day: date, working_days: Collection[int]) -> bool:
    return weekday_index(day) in working_days


def next_working_day(candidate: date, working_days: Collection[int]) -> date:
    """Earliest date on or after candidate that falls on a working day."""
    day = candidate
    while not is_working_day(day, working_days):
        day += ONE_DAY
    return day


def working_days_needed(hours: int, hours_per_day: int) -> int:
    """Whole working days required to absorb the given hours."""
    return math.ceil(hours / hours_per_day)


def span_end(
    start: date,
    hours: int,
    hours_per_day: int,
    working_days: Collection[int],
) -> date:
    """
    Last working day of a span that begins on start.

    Counts working days forward from start (inclusive) until enough have been
    counted to cover the hours; non-working days in between are skipped over
    but still move the date.

    Example: start Friday, 16h at 8h/day, Mon-Fri working
    -> Friday counts as day 1, the weekend is skipped, Monday is day 2
    -> end date = Monday
    """
    needed = working_days_needed(hours, hours_per_day)
    end = start
    counted = 0

    while True:
        if is_working_day(end, working_days):
            counted += 1
        if counted >= needed:
            return end
        end += ONE_DAY
