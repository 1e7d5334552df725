"""
Workload estimation from task titles.

A keyword heuristic, not a model:
- Base estimate is 4 hours
- Complex keywords raise it to 8, simple keywords lower it to 2
  (complex keywords are checked first and win when both appear)
- Titles longer than 50 characters get 2 extra hours
- The result is capped at 16 hours
"""

DEFAULT_HOURS = 4
COMPLEX_HOURS = 8
SIMPLE_HOURS = 2
LONG_TITLE_LENGTH = 50
LONG_TITLE_BONUS = 2
MAX_HOURS = 16

COMPLEX_KEYWORDS = (
    "implement",
    "develop",
    "design",
    "architecture",
    "integration",
    "complex",
    "refactor",
)
SIMPLE_KEYWORDS = ("fix", "update", "change", "small", "quick", "simple")


def estimate_hours(title: str) -> int:
    """
    Estimate the effort for a task, in whole hours.

    Keyword matching is a case-insensitive substring test, so "fixture"
    counts as "fix". The length bonus uses the title as given.
    """
    lower_title = title.lower()

    hours = DEFAULT_HOURS
    if any(keyword in lower_title for keyword in COMPLEX_KEYWORDS):
        hours = COMPLEX_HOURS
    elif any(keyword in lower_title for keyword in SIMPLE_KEYWORDS):
        hours = SIMPLE_HOURS

    if len(title) > LONG_TITLE_LENGTH:
        hours += LONG_TITLE_BONUS

    return min(hours, MAX_HOURS)
