"""Task repository - owned, ordered, persisted task collection."""

import logging
from dataclasses import replace
from datetime import date

from .activity import ActivityLog
from .core import tasks as core
from .core.tasks import Priority, Task, TaskSummary
from .errors import NotFoundError
from .store import PlannerStore

logger = logging.getLogger(__name__)


class TaskRepository:
    """
    In-memory task collection loaded once from the store.

    Each mutation builds the new collection, persists it, and only then
    replaces the in-memory one and records one activity entry. Failed
    operations (including a failed save) leave the collection and log
    untouched.
    """

    def __init__(self, store: PlannerStore, activity: ActivityLog):
        self.store = store
        self.activity = activity
        self._tasks: list[Task] = store.load_tasks()

    def _require(self, task_id: str) -> Task:
        task = self.find_by_id(task_id)
        if task is None:
            raise NotFoundError(task_id)
        return task

    def _commit(self, tasks: list[Task], message: str) -> None:
        self.store.save_tasks(tasks)
        self._tasks = tasks
        self.activity.record(message)
        logger.debug(message)

    def _replace(self, task: Task) -> list[Task]:
        return [task if t.id == task.id else t for t in self._tasks]

    def all(self) -> list[Task]:
        """All tasks in creation order (a copy)."""
        return list(self._tasks)

    def summary(self) -> TaskSummary:
        return core.summarize(self._tasks)

    def find_by_id(self, task_id: str) -> Task | None:
        return next((t for t in self._tasks if t.id == task_id), None)

    def create(
        self,
        name: str,
        description: str,
        due: date | str,
        priority: Priority | str | None = None,
    ) -> Task:
        """Validate, append a new pending task, and return it."""
        fields = core.validate_task_fields(name, description, due, priority)
        task = Task(
            id=core.new_task_id(),
            name=fields.name,
            description=fields.description,
            date=fields.date,
            priority=fields.priority,
        )
        self._commit([*self._tasks, task], core.describe_added(task))
        return task

    def update(
        self,
        task_id: str,
        name: str,
        description: str,
        due: date | str,
        priority: Priority | str | None = None,
    ) -> Task:
        """Overwrite the editable fields; id, position and completed are kept."""
        task = self._require(task_id)
        fields = core.validate_task_fields(name, description, due, priority)
        updated = replace(
            task,
            name=fields.name,
            description=fields.description,
            date=fields.date,
            priority=fields.priority,
        )
        self._commit(self._replace(updated), core.describe_edited(updated))
        return updated

    def toggle_complete(self, task_id: str) -> Task:
        task = self._require(task_id)
        updated = replace(task, completed=not task.completed)
        self._commit(self._replace(updated), core.describe_toggled(updated))
        return updated

    def delete(self, task_id: str) -> Task:
        task = self._require(task_id)
        remaining = [t for t in self._tasks if t.id != task_id]
        self._commit(remaining, core.describe_deleted(task))
        return task
