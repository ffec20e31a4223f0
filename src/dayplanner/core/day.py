"""Day record and its mutations - pure, each operation returns a new record."""

from dataclasses import dataclass, replace

from .tasks import Note, Task


@dataclass(frozen=True)
class DayRecord:
    """Tasks and notes for one calendar date."""

    tasks: tuple[Task, ...] = ()
    notes: tuple[Note, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.tasks and not self.notes

    def find_task(self, task_id: str) -> Task | None:
        return next((t for t in self.tasks if t.id == task_id), None)

    def find_note(self, note_id: str) -> Note | None:
        return next((n for n in self.notes if n.id == note_id), None)

    def to_dict(self) -> dict:
        return {
            "tasks": [t.to_dict() for t in self.tasks],
            "notes": [n.to_dict() for n in self.notes],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DayRecord":
        """
        Parse the stored {tasks, notes} shape.

        Raises TypeError, KeyError or ValueError on anything that does not
        match; callers at the storage boundary decide how to recover.
        """
        if not isinstance(data, dict):
            raise TypeError(f"Expected an object, got {type(data).__name__}")
        tasks = data.get("tasks", [])
        notes = data.get("notes", [])
        if not isinstance(tasks, list) or not isinstance(notes, list):
            raise TypeError("'tasks' and 'notes' must be lists")
        return cls(
            tasks=tuple(Task.from_dict(t) for t in tasks),
            notes=tuple(Note.from_dict(n) for n in notes),
        )


EMPTY_DAY = DayRecord()


def add_task(day: DayRecord, task: Task) -> DayRecord:
    return replace(day, tasks=day.tasks + (task,))


def add_note(day: DayRecord, note: Note) -> DayRecord:
    return replace(day, notes=day.notes + (note,))


def remove_task(day: DayRecord, task_id: str) -> DayRecord:
    """Drop a task by id. Unknown ids leave the record unchanged."""
    return replace(day, tasks=tuple(t for t in day.tasks if t.id != task_id))


def remove_note(day: DayRecord, note_id: str) -> DayRecord:
    """Drop a note by id. Unknown ids leave the record unchanged."""
    return replace(day, notes=tuple(n for n in day.notes if n.id != note_id))


def clear_day(day: DayRecord) -> DayRecord:
    return EMPTY_DAY
