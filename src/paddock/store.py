"""Persistent snapshots of tasks, activity and the theme flag."""

import json
import logging

from .core.activity import ActivityEntry
from .core.tasks import Task
from .ports.key_value_store import KeyValueStore

logger = logging.getLogger(__name__)

TASKS_KEY = "fanTasks"
ACTIVITY_KEY = "fanActivity"
THEME_KEY = "darkMode"


class PlannerStore:
    """
    Loads and saves whole-collection snapshots through a KeyValueStore.

    Collections are stored as JSON arrays. Corrupt snapshots load as empty;
    individual bad records are skipped.
    """

    def __init__(self, backend: KeyValueStore):
        self.backend = backend

    def _load_list(self, key: str) -> list:
        raw = self.backend.get(key)
        if not raw:
            return []
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"Discarding unreadable {key} snapshot: {e}")
            return []
        if not isinstance(data, list):
            logger.warning(f"Discarding {key} snapshot: expected a list")
            return []
        return data

    def load_tasks(self) -> list[Task]:
        tasks = []
        for item in self._load_list(TASKS_KEY):
            try:
                tasks.append(Task.from_dict(item))
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                logger.warning(f"Skipping malformed task record: {e}")
        return tasks

    def save_tasks(self, tasks: list[Task]) -> None:
        self.backend.set(TASKS_KEY, json.dumps([t.to_dict() for t in tasks]))

    def load_activity(self) -> list[ActivityEntry]:
        entries = []
        for item in self._load_list(ACTIVITY_KEY):
            try:
                entries.append(ActivityEntry.from_dict(item))
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                logger.warning(f"Skipping malformed activity entry: {e}")
        return entries

    def save_activity(self, entries: list[ActivityEntry]) -> None:
        self.backend.set(ACTIVITY_KEY, json.dumps([e.to_dict() for e in entries]))


class ThemePreference:
    """Dark-mode flag stored as "enabled"/"disabled"."""

    def __init__(self, backend: KeyValueStore):
        self.backend = backend

    def is_dark(self) -> bool:
        return self.backend.get(THEME_KEY) == "enabled"

    def set_dark(self, enabled: bool) -> None:
        self.backend.set(THEME_KEY, "enabled" if enabled else "disabled")

    def toggle(self) -> bool:
        """Flip the flag, persist it, and return the new state."""
        enabled = not self.is_dark()
        self.set_dark(enabled)
        return enabled
