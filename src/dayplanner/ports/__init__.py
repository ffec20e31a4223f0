"""Ports - interfaces/protocols for external dependencies."""

from .day_store import DayStore

__all__ = [
    "DayStore",
]
