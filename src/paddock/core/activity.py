"""Pure activity log logic - bounded, newest-first entries."""

from dataclasses import dataclass
from datetime import datetime

MAX_ENTRIES = 10


@dataclass(frozen=True)
class ActivityEntry:
    """A log line recording a task mutation."""

    message: str
    timestamp: datetime

    def format(self) -> str:
        return f"{self.timestamp.strftime('%Y-%m-%d %H:%M')}  {self.message}"

    def to_dict(self) -> dict:
        return {"message": self.message, "timestamp": self.timestamp.isoformat()}

    @classmethod
    def from_dict(cls, data: dict) -> "ActivityEntry":
        return cls(message=data["message"], timestamp=datetime.fromisoformat(data["timestamp"]))


def prepend_entry(
    entries: list[ActivityEntry],
    entry: ActivityEntry,
    limit: int = MAX_ENTRIES,
) -> list[ActivityEntry]:
    """Return a new list with entry first, truncated to the newest `limit`."""
    return [entry, *entries][:limit]
