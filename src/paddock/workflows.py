"""Shared workflow layer between the CLI and the planner services.

open_planner() wires store, activity log and repository from config;
dispatch() maps a row action onto one repository operation by task id.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from .activity import ActivityLog
from .adapters.json_file_store import JsonFileStore
from .config import Config, load_config
from .errors import NotFoundError
from .ports.key_value_store import KeyValueStore
from .repository import TaskRepository
from .store import PlannerStore, ThemePreference

logger = logging.getLogger(__name__)


class TaskAction(Enum):
    """Closed set of per-row actions."""

    COMPLETE = "complete"
    DELETE = "delete"


@dataclass
class Planner:
    """Everything a session needs, loaded once at startup."""

    repository: TaskRepository
    activity: ActivityLog
    theme: ThemePreference


def get_backend(config: Config) -> JsonFileStore:
    """Resolve the key-value store from config."""
    return JsonFileStore(config.store_path)


def open_planner(config: Config | None = None, backend: KeyValueStore | None = None) -> Planner:
    """Load tasks and activity from the store and build the services."""
    config = config or load_config()
    backend = backend or get_backend(config)
    store = PlannerStore(backend)
    activity = ActivityLog(store)
    return Planner(
        repository=TaskRepository(store, activity),
        activity=activity,
        theme=ThemePreference(backend),
    )


def dispatch(planner: Planner, action: TaskAction, task_id: str) -> bool:
    """
    Run a row action. Returns False (and logs) if the task is gone.
    """
    try:
        if action is TaskAction.COMPLETE:
            planner.repository.toggle_complete(task_id)
        elif action is TaskAction.DELETE:
            planner.repository.delete(task_id)
    except NotFoundError as e:
        logger.warning(f"Ignoring {action.value}: {e}")
        return False
    return True
