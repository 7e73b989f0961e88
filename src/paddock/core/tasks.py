"""Pure task domain logic - no I/O dependencies."""

import uuid
from dataclasses import dataclass
from datetime import date
from enum import Enum

from paddock.errors import ValidationError


class Priority(Enum):
    """Plan priority, serialized by label."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @classmethod
    def parse(cls, value: "Priority | str | None") -> "Priority":
        """Parse a priority label (case-insensitive). Unset means Medium."""
        if isinstance(value, cls):
            return value
        if value is None or not str(value).strip():
            return cls.MEDIUM
        label = str(value).strip().capitalize()
        try:
            return cls(label)
        except ValueError:
            raise ValidationError(f"Unknown priority: {value}", ["priority"]) from None


@dataclass
class Task:
    """A fan plan with a due date and priority."""

    id: str
    name: str
    description: str
    date: date
    priority: Priority = Priority.MEDIUM
    completed: bool = False

    @property
    def status_label(self) -> str:
        return "Completed" if self.completed else "Upcoming"

    def to_dict(self) -> dict:
        """Serialize to the stored JSON shape."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "date": self.date.isoformat(),
            "priority": self.priority.value,
            "completed": self.completed,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Task":
        """Create Task from its stored JSON shape."""
        return cls(
            id=data["id"],
            name=data["name"],
            description=data.get("description", ""),
            date=date.fromisoformat(data["date"]),
            priority=Priority(data.get("priority", "Medium")),
            completed=bool(data.get("completed", False)),
        )


@dataclass
class TaskFields:
    """Validated, normalized user-editable task fields."""

    name: str
    description: str
    date: date
    priority: Priority


@dataclass
class TaskSummary:
    """Counts over the full collection."""

    total: int
    completed: int
    pending: int

    def format(self) -> str:
        return f"Total Plans: {self.total} | Completed: {self.completed} | Pending: {self.pending}"


def new_task_id() -> str:
    """Generate a collision-resistant task id (random 128-bit value)."""
    return uuid.uuid4().hex


def validate_task_fields(
    name: str | None,
    description: str | None,
    due: date | str | None,
    priority: Priority | str | None = None,
) -> TaskFields:
    """
    Validate and normalize task form input.

    Name, description and date are required after trimming. Priority
    defaults to Medium when unset. Raises ValidationError.
    """
    name = (name or "").strip()
    description = (description or "").strip()
    if isinstance(due, date):
        due_text = due.isoformat()
    else:
        due_text = (due or "").strip()

    missing = [
        field_name
        for field_name, value in (("name", name), ("description", description), ("date", due_text))
        if not value
    ]
    if missing:
        raise ValidationError("Please fill all fields.", missing)

    if isinstance(due, date):
        parsed = due
    else:
        try:
            parsed = date.fromisoformat(due_text)
        except ValueError:
            raise ValidationError(f"Invalid date: {due_text} (expected YYYY-MM-DD)", ["date"]) from None

    return TaskFields(
        name=name,
        description=description,
        date=parsed,
        priority=Priority.parse(priority),
    )


def summarize(tasks: list[Task]) -> TaskSummary:
    """Total/completed/pending counts."""
    completed = sum(1 for t in tasks if t.completed)
    return TaskSummary(total=len(tasks), completed=completed, pending=len(tasks) - completed)


def describe_added(task: Task) -> str:
    return f'Added: "{task.name}" ({task.priority.value})'


def describe_edited(task: Task) -> str:
    return f'Edited: "{task.name}" ({task.priority.value})'


def describe_toggled(task: Task) -> str:
    verb = "Completed" if task.completed else "Reopened"
    return f'{verb}: "{task.name}"'


def describe_deleted(task: Task) -> str:
    return f'Deleted: "{task.name}"'
