"""Functional core - pure business logic with no I/O."""

from .timegrid import InvalidFormat, slot_times, to_minutes, to_12_hour, date_key
from .intervals import clamp_to_slot, normalize_interval
from .tasks import Priority, PRIORITY_META, Task, Note, filter_by_priority
from .day import DayRecord, EMPTY_DAY, add_task, add_note, remove_task, remove_note, clear_day
from .coverage import build_coverage, tasks_at, notes_at
from .stats import (
    DayStats,
    compute_stats,
    scheduled_minutes,
    free_minutes,
    by_priority_minutes,
    per_task_duration,
)

__all__ = [
    # Time grid
    "InvalidFormat",
    "slot_times",
    "to_minutes",
    "to_12_hour",
    "date_key",
    # Intervals
    "clamp_to_slot",
    "normalize_interval",
    # Tasks and notes
    "Priority",
    "PRIORITY_META",
    "Task",
    "Note",
    "filter_by_priority",
    # Day record
    "DayRecord",
    "EMPTY_DAY",
    "add_task",
    "add_note",
    "remove_task",
    "remove_note",
    "clear_day",
    # Coverage
    "build_coverage",
    "tasks_at",
    "notes_at",
    # Statistics
    "DayStats",
    "compute_stats",
    "scheduled_minutes",
    "free_minutes",
    "by_priority_minutes",
    "per_task_duration",
]
