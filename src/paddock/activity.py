"""Activity log service - bounded, persisted, newest first."""

from collections.abc import Callable
from datetime import datetime, timezone

from .core.activity import MAX_ENTRIES, ActivityEntry, prepend_entry
from .store import PlannerStore


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ActivityLog:
    """Keeps at most MAX_ENTRIES entries; every record() persists the log."""

    def __init__(
        self,
        store: PlannerStore,
        now: Callable[[], datetime] = _utcnow,
        limit: int = MAX_ENTRIES,
    ):
        self.store = store
        self.now = now
        self.limit = limit
        self._entries = store.load_activity()[:limit]

    def record(self, message: str) -> ActivityEntry:
        entry = ActivityEntry(message=message, timestamp=self.now())
        entries = prepend_entry(self._entries, entry, self.limit)
        self.store.save_activity(entries)
        self._entries = entries
        return entry

    def all(self) -> list[ActivityEntry]:
        return list(self._entries)
