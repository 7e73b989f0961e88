"""Form controllers: add-plan, edit-plan and contact forms."""

import logging
from dataclasses import dataclass, field

from .core.forms import CONTACT_FIELDS, contact_errors
from .core.tasks import Priority, Task
from .errors import ValidationError
from .repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass
class TaskForm:
    """
    Add-plan form.

    On a successful submit the form is cleared; on a validation failure
    the contents stay and `error` holds the blocking message.
    """

    name: str = ""
    description: str = ""
    date: str = ""
    priority: str = Priority.MEDIUM.value
    error: str | None = None

    def clear(self) -> None:
        self.name = ""
        self.description = ""
        self.date = ""
        self.priority = Priority.MEDIUM.value
        self.error = None

    def submit(self, repository: TaskRepository) -> Task | None:
        try:
            task = repository.create(self.name, self.description, self.date, self.priority or None)
        except ValidationError as e:
            self.error = str(e)
            return None
        self.clear()
        return task


@dataclass
class EditTaskForm:
    """Edit-plan dialog, pre-populated from a task. Closes on success only."""

    task_id: str
    name: str
    description: str
    date: str
    priority: str
    is_open: bool = True
    error: str | None = None

    @classmethod
    def from_task(cls, task: Task) -> "EditTaskForm":
        return cls(
            task_id=task.id,
            name=task.name,
            description=task.description,
            date=task.date.isoformat(),
            priority=task.priority.value,
        )

    def submit(self, repository: TaskRepository) -> Task | None:
        """Apply the edit. NotFoundError propagates to the caller."""
        try:
            task = repository.update(
                self.task_id, self.name, self.description, self.date, self.priority or None
            )
        except ValidationError as e:
            self.error = str(e)
            return None
        self.error = None
        self.is_open = False
        return task


@dataclass
class ContactConfirmation:
    """Submitted contact values, shown verbatim."""

    name: str
    email: str
    message: str

    def format(self) -> str:
        return f"Name: {self.name}\nEmail: {self.email}\nMessage: {self.message}"


@dataclass
class ContactForm:
    """
    Contact form with required-field and email-format validation.

    Nothing is persisted or transmitted; submit() only produces a
    confirmation and resets the form.
    """

    name: str = ""
    email: str = ""
    message: str = ""
    touched: set[str] = field(default_factory=set)

    def values(self) -> dict[str, str]:
        return {"name": self.name, "email": self.email, "message": self.message}

    def errors(self) -> dict[str, str]:
        return contact_errors(self.values())

    @property
    def can_submit(self) -> bool:
        return not self.errors()

    def visible_errors(self) -> dict[str, str]:
        """Errors for fields the user has already touched."""
        return {k: v for k, v in self.errors().items() if k in self.touched}

    def update(self, **values: str) -> None:
        for key, value in values.items():
            if key not in CONTACT_FIELDS:
                raise ValidationError(f"Unknown contact field: {key}", [key])
            setattr(self, key, value)
            self.touched.add(key)

    def reset(self) -> None:
        self.name = ""
        self.email = ""
        self.message = ""
        self.touched.clear()

    def submit(self) -> ContactConfirmation:
        errors = self.errors()
        if errors:
            self.touched.update(CONTACT_FIELDS)
            raise ValidationError("; ".join(f"{k}: {v}" for k, v in errors.items()), list(errors))
        confirmation = ContactConfirmation(**self.values())
        logger.debug("Contact form submitted")
        self.reset()
        return confirmation
