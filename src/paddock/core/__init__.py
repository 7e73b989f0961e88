"""Functional core - pure business logic with no I/O."""

from .tasks import Priority, Task, TaskSummary, summarize, validate_task_fields
from .view import SortMode, StatusFilter, ViewState, project
from .activity import ActivityEntry, MAX_ENTRIES, prepend_entry
from .races import NO_UPCOMING_RACE, Race, parse_schedule, select_next_race
from .forms import contact_errors, is_valid_email

__all__ = [
    # Tasks
    "Priority",
    "Task",
    "TaskSummary",
    "summarize",
    "validate_task_fields",
    # View
    "SortMode",
    "StatusFilter",
    "ViewState",
    "project",
    # Activity
    "ActivityEntry",
    "MAX_ENTRIES",
    "prepend_entry",
    # Races
    "NO_UPCOMING_RACE",
    "Race",
    "parse_schedule",
    "select_next_race",
    # Forms
    "contact_errors",
    "is_valid_email",
]
