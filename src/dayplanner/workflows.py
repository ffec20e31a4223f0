"""Session layer between the CLI and storage.

A PlannerSession owns the record for one selected date. Every mutation
produces a new record, saves it in full, and derived views (coverage and
statistics) are recomputed from the new task list.
"""

import logging
from datetime import date

from .adapters.file_day_store import FileDayStore
from .config import Config
from .core import day as day_ops
from .core.coverage import Coverage, build_coverage, notes_at, tasks_at
from .core.day import DayRecord
from .core.stats import DayStats, compute_stats
from .core.tasks import Note, Priority, Task
from .core.timegrid import SLOT_TIMES, date_key
from .ports.day_store import DayStore

logger = logging.getLogger(__name__)


def get_store(config: Config) -> FileDayStore:
    """Resolve the day store from config."""
    return FileDayStore(config.resolved_data_dir())


class PlannerSession:
    """The working state for one selected date."""

    def __init__(self, store: DayStore, selected: date | str, config: Config | None = None):
        self.store = store
        self.config = config or Config()
        self.date_key = date_key(selected)
        self.record = store.load(self.date_key)

    # ----- date selection -----

    def select_date(self, selected: date | str) -> None:
        """Switch dates: drop in-memory state and reload from the store."""
        self.date_key = date_key(selected)
        self.record = self.store.load(self.date_key)
        logger.debug(f"Selected {self.date_key}: {len(self.record.tasks)} tasks")

    # ----- mutations -----

    def _commit(self, record: DayRecord) -> None:
        self.record = record
        self.store.save(self.date_key, record)

    def add_task(
        self,
        title: str,
        start: str,
        end: str,
        priority: "str | Priority | None" = None,
        description: str = "",
        color: str = "",
    ) -> Task:
        task = Task.create(
            title,
            start,
            end,
            priority=priority or self.config.default_priority,
            description=description,
            color=color or self.config.default_color,
        )
        self._commit(day_ops.add_task(self.record, task))
        logger.info(f"Added task {task.id} {task.start}-{task.end} on {self.date_key}")
        return task

    def add_note(self, title: str, time: str, priority: "str | Priority | None" = None) -> Note:
        note = Note.create(title, time, priority=priority or self.config.default_priority)
        self._commit(day_ops.add_note(self.record, note))
        logger.info(f"Added note {note.id} at {note.time} on {self.date_key}")
        return note

    def remove_task(self, task_id: str) -> bool:
        """Remove a task. Returns False if no task had that id."""
        if self.record.find_task(task_id) is None:
            logger.debug(f"No task {task_id} on {self.date_key}")
            return False
        self._commit(day_ops.remove_task(self.record, task_id))
        return True

    def remove_note(self, note_id: str) -> bool:
        """Remove a note. Returns False if no note had that id."""
        if self.record.find_note(note_id) is None:
            logger.debug(f"No note {note_id} on {self.date_key}")
            return False
        self._commit(day_ops.remove_note(self.record, note_id))
        return True

    def clear(self) -> None:
        self._commit(day_ops.clear_day(self.record))

    # ----- derived views -----

    @property
    def coverage(self) -> Coverage:
        return build_coverage(self.record.tasks)

    @property
    def stats(self) -> DayStats:
        return compute_stats(self.record.tasks)

    def grid(self, priority_filter: "str | Priority | None" = None) -> list[tuple[str, list[Task], list[Note]]]:
        """Rows of (slot, visible tasks, visible notes) for all 48 slots."""
        coverage = self.coverage
        return [
            (
                slot,
                tasks_at(slot, self.record.tasks, coverage, priority_filter),
                notes_at(slot, self.record.notes, priority_filter),
            )
            for slot in SLOT_TIMES
        ]
