"""Adapters - I/O implementations of ports."""

from .file_day_store import FileDayStore
from .memory_day_store import InMemoryDayStore

__all__ = [
    "FileDayStore",
    "InMemoryDayStore",
]
