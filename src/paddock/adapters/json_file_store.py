"""JSON file key-value store adapter."""

import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class JsonFileStore:
    """
    File-backed key-value store.

    Implements KeyValueStore protocol. All keys live in one JSON object;
    every write rewrites the whole file via a temp file + rename.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def _read_all(self) -> dict[str, str]:
        """Read the whole store. Missing or corrupt files read as empty."""
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text())
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not read store {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Store {self.path} is not a JSON object, ignoring")
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _write_all(self, data: dict[str, str]) -> None:
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        tmp_path.write_text(json.dumps(data, indent=2))
        os.replace(tmp_path, self.path)

    def get(self, key: str) -> str | None:
        """Read the value for a key. Returns None if not found."""
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        """Write/overwrite the value for a key."""
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def remove(self, key: str) -> None:
        """Delete a key. Missing keys are ignored."""
        data = self._read_all()
        if key in data:
            del data[key]
            self._write_all(data)
