"""Time-usage statistics - pure functions over the task list.

Durations use a half-open [start, end) rule and count the union of occupied
slots, so overlapping tasks are never double counted. This deliberately
differs from the inclusive rule in coverage.py: a task ending at 10:00 is
shown in the 10:00 slot but does not occupy it.
"""

from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, Mapping

from .tasks import Priority, Task, sort_by_start
from .timegrid import DAY_MINUTES, SLOT_MINUTES, slot_index


@dataclass(frozen=True)
class DayStats:
    """All statistics for one task list. Read-only, shared between callers."""

    scheduled_minutes: int
    free_minutes: int
    by_priority: Mapping[Priority, int]
    durations: tuple[tuple[Task, int], ...]


def occupied_slots(tasks: Iterable[Task]) -> set[int]:
    """Union of slot indices holding any minute in [start, end) of any task."""
    slots: set[int] = set()
    for task in tasks:
        slots.update(range(slot_index(task.start), _ceil_slot(task.end_minutes)))
    return slots


def _ceil_slot(minutes: int) -> int:
    # Index one past the slot holding minute (minutes - 1).
    return -(-minutes // SLOT_MINUTES)


def scheduled_minutes(tasks: Iterable[Task]) -> int:
    """De-overlapped scheduled time. Zero-length tasks contribute nothing."""
    return len(occupied_slots(tasks)) * SLOT_MINUTES


def free_minutes(tasks: Iterable[Task]) -> int:
    return max(0, DAY_MINUTES - scheduled_minutes(tasks))


def by_priority_minutes(tasks: Iterable[Task]) -> dict[Priority, int]:
    """
    De-overlapped minutes per priority, in display order.

    Each priority is its own domain: a slot shared by an urgent and a normal
    task counts toward both, so the values may sum past scheduled_minutes.
    """
    tasks = list(tasks)
    return {
        priority: scheduled_minutes(t for t in tasks if t.priority == priority)
        for priority in Priority.ordered()
    }


def task_duration(task: Task) -> int:
    return max(0, task.end_minutes - task.start_minutes)


def per_task_duration(tasks: Iterable[Task]) -> list[tuple[Task, int]]:
    """Raw (not de-overlapped) duration of each task, ordered by start."""
    return [(task, task_duration(task)) for task in sort_by_start(list(tasks))]


@lru_cache(maxsize=32)
def _compute(tasks: tuple[Task, ...]) -> DayStats:
    scheduled = scheduled_minutes(tasks)
    return DayStats(
        scheduled_minutes=scheduled,
        free_minutes=max(0, DAY_MINUTES - scheduled),
        by_priority=MappingProxyType(by_priority_minutes(tasks)),
        durations=tuple(per_task_duration(tasks)),
    )


def compute_stats(tasks: Iterable[Task]) -> DayStats:
    """
    Compute every statistic for a task list.

    Pure function - memoized on the task tuple, so the result is read-only.
    Priority filters never apply here; every task counts.
    """
    return _compute(tuple(tasks))


def format_duration(minutes: int) -> str:
    """Format minutes for display: 90 -> "1h 30m", 45 -> "45m", 120 -> "2h"."""
    hours, mins = divmod(max(0, minutes), 60)
    if hours and mins:
        return f"{hours}h {mins}m"
    if hours:
        return f"{hours}h"
    return f"{mins}m"
