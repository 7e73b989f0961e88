"""Adapters - I/O implementations of ports."""

from .json_file_store import JsonFileStore
from .memory_store import MemoryStore
from .race_api import RaceAPIAdapter, first_success

__all__ = [
    "JsonFileStore",
    "MemoryStore",
    "RaceAPIAdapter",
    "first_success",
]
