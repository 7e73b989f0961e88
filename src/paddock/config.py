"""Configuration management for Paddock."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

PADDOCK_HOME = Path(os.environ.get("PADDOCK_HOME", Path.home() / "paddock"))
CONFIG_FILE = PADDOCK_HOME / "config" / "paddock.conf"
DATA_DIR = PADDOCK_HOME / "data"

DEFAULT_RACE_ENDPOINTS = [
    "https://api.jolpi.ca/ergast/f1/current.json",
    "https://ergast.com/api/f1/current.json",
]


@dataclass
class Config:
    """Paddock configuration."""

    race_endpoints: list[str] = field(default_factory=lambda: list(DEFAULT_RACE_ENDPOINTS))
    request_timeout: float = 10.0
    store_file: str = ""

    @property
    def store_path(self) -> Path:
        """Resolved path of the key-value store file."""
        if self.store_file:
            return Path(self.store_file).expanduser()
        return DATA_DIR / "store.json"


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from unquoted values."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    # Unquoted: strip inline comments
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config() -> Config:
    """Load configuration from paddock.conf file."""
    config = Config()

    if not CONFIG_FILE.exists():
        return config

    for line in CONFIG_FILE.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "race_endpoints":
                endpoints = [u.strip() for u in value.split(",") if u.strip()]
                if endpoints:
                    config.race_endpoints = endpoints
            case "request_timeout":
                try:
                    config.request_timeout = float(value)
                except ValueError:
                    logger.warning(f"Ignoring invalid REQUEST_TIMEOUT: {value!r}")
            case "store_file":
                config.store_file = value
            case _:
                logger.debug(f"Unknown config key: {key}")

    return config
