"""Pure view projection - filter and sort tasks for display."""

import locale
import unicodedata
from dataclasses import dataclass
from enum import Enum

from .tasks import Priority, Task


class StatusFilter(Enum):
    ALL = "all"
    COMPLETED = "completed"
    PENDING = "pending"


class SortMode(Enum):
    NONE = "none"
    NAME = "name"
    DATE = "date"


@dataclass(frozen=True)
class ViewState:
    """
    Current filter and sort selection.

    priority is None for "all", otherwise an exact Priority match.
    """

    status: StatusFilter = StatusFilter.ALL
    priority: Priority | None = None
    sort: SortMode = SortMode.NONE

    @classmethod
    def from_options(cls, status: str = "all", priority: str = "all", sort: str = "none") -> "ViewState":
        """Build a ViewState from raw option strings."""
        return cls(
            status=StatusFilter(status.lower()),
            priority=None if priority.lower() == "all" else Priority.parse(priority),
            sort=SortMode(sort.lower()),
        )


def _name_key(task: Task) -> tuple[str, str]:
    # Accents only break ties, so "Émilia" sorts with "Emilia".
    folded = task.name.casefold()
    base = "".join(c for c in unicodedata.normalize("NFKD", folded) if not unicodedata.combining(c))
    return locale.strxfrm(base), locale.strxfrm(folded)


def project(tasks: list[Task], view: ViewState) -> list[Task]:
    """
    Map (tasks, view state) to the ordered subset for display.

    Pure function - never mutates the input. Sorts are stable, so ties
    keep repository order.
    """
    result = list(tasks)

    if view.status is StatusFilter.COMPLETED:
        result = [t for t in result if t.completed]
    elif view.status is StatusFilter.PENDING:
        result = [t for t in result if not t.completed]

    if view.priority is not None:
        result = [t for t in result if t.priority is view.priority]

    if view.sort is SortMode.NAME:
        result = sorted(result, key=_name_key)
    elif view.sort is SortMode.DATE:
        result = sorted(result, key=lambda t: t.date)

    return result
