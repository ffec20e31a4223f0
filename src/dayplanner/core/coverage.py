"""Slot coverage - which tasks show up in which slot. No I/O dependencies.

Coverage uses an inclusive rule: a task from 09:00 to 10:00 appears in the
09:00, 09:30 and 10:00 slots. It is for display only; statistics count
time with a half-open rule (see stats.py).
"""

from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, Mapping

from .tasks import Note, Priority, Task, filter_by_priority
from .timegrid import SLOT_TIMES, to_minutes

Coverage = Mapping[str, frozenset[str]]


def covers(task: Task, slot: str) -> bool:
    """Check if a slot lies within the task, both endpoints included."""
    return task.start_minutes <= to_minutes(slot) <= task.end_minutes


@lru_cache(maxsize=32)
def _build(tasks: tuple[Task, ...]) -> Coverage:
    cover: dict[str, set[str]] = {slot: set() for slot in SLOT_TIMES}
    for task in tasks:
        for slot in SLOT_TIMES:
            if covers(task, slot):
                cover[slot].add(task.id)
    return MappingProxyType({slot: frozenset(ids) for slot, ids in cover.items()})


def build_coverage(tasks: Iterable[Task]) -> Coverage:
    """
    Map every slot time to the ids of the tasks covering it.

    Pure function - memoized on the task tuple, so repeated calls for an
    unchanged task list reuse the same read-only index.
    """
    return _build(tuple(tasks))


def tasks_at(
    slot: str,
    tasks: Iterable[Task],
    coverage: Coverage | None = None,
    priority_filter: "str | Priority | None" = None,
) -> list[Task]:
    """Tasks visible in a slot, in insertion order, after the priority filter."""
    tasks = tuple(tasks)
    coverage = coverage if coverage is not None else build_coverage(tasks)
    ids = coverage.get(slot, frozenset())
    return filter_by_priority([t for t in tasks if t.id in ids], priority_filter)


def notes_at(
    slot: str,
    notes: Iterable[Note],
    priority_filter: "str | Priority | None" = None,
) -> list[Note]:
    """Notes pinned to a slot, after the priority filter."""
    return filter_by_priority([n for n in notes if n.time == slot], priority_filter)


def task_starts_at(task: Task, slot: str) -> bool:
    """True for the slot where the task's title is shown."""
    return task.start == slot


def covered_slots(task: Task) -> list[str]:
    """All slot times a single task covers."""
    return [slot for slot in SLOT_TIMES if covers(task, slot)]
