"""Ports - interfaces/protocols for external dependencies."""

from .key_value_store import KeyValueStore
from .race_source import RaceSource

__all__ = [
    "KeyValueStore",
    "RaceSource",
]
