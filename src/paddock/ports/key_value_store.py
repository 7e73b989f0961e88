"""Key-value store interface."""

from typing import Protocol


class KeyValueStore(Protocol):
    """Interface for string-keyed, string-valued persistence (localStorage-like)."""

    def get(self, key: str) -> str | None:
        """Read the value for a key. Returns None if not found."""
        ...

    def set(self, key: str, value: str) -> None:
        """Write/overwrite the value for a key."""
        ...

    def remove(self, key: str) -> None:
        """Delete a key. Missing keys are ignored."""
        ...
