"""Pure task and note domain logic - no I/O dependencies."""

import random
import string
from dataclasses import dataclass
from enum import Enum

from .intervals import clamp_to_slot, is_slot_aligned, normalize_interval
from .timegrid import InvalidFormat, to_minutes

DEFAULT_COLOR = "#c7d2fe"

_ID_ALPHABET = string.digits + string.ascii_lowercase


class Priority(Enum):
    """Priority tag carried by tasks and notes."""

    URGENT = "urgent"
    HIGH = "high"
    NORMAL = "normal"
    LOW = "low"

    @property
    def label(self) -> str:
        return PRIORITY_META[self].label

    @property
    def order(self) -> int:
        return PRIORITY_META[self].order

    @classmethod
    def parse(cls, value: "str | Priority") -> "Priority":
        """Accept a Priority or its (case-insensitive) string value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(p.value for p in cls)
            raise ValueError(f"Unknown priority {value!r} (expected one of: {choices})") from None

    @classmethod
    def ordered(cls) -> list["Priority"]:
        """Priorities in display order, most pressing first."""
        return sorted(cls, key=lambda p: p.order)


@dataclass(frozen=True)
class PriorityMeta:
    label: str
    order: int
    color: str


PRIORITY_META: dict[Priority, PriorityMeta] = {
    Priority.URGENT: PriorityMeta("Urgent", 0, "red"),
    Priority.HIGH: PriorityMeta("High", 1, "orange"),
    Priority.NORMAL: PriorityMeta("Normal", 2, "emerald"),
    Priority.LOW: PriorityMeta("Low", 3, "slate"),
}


def make_id() -> str:
    """Short random identifier (8 lowercase base-36 characters)."""
    return "".join(random.choices(_ID_ALPHABET, k=8))


@dataclass(frozen=True)
class Task:
    """A time-bounded block on the day grid."""

    id: str
    title: str
    start: str
    end: str
    priority: Priority = Priority.NORMAL
    description: str = ""
    color: str = DEFAULT_COLOR

    @property
    def start_minutes(self) -> int:
        return to_minutes(self.start)

    @property
    def end_minutes(self) -> int:
        return to_minutes(self.end)

    @classmethod
    def create(
        cls,
        title: str,
        start: str,
        end: str,
        priority: "str | Priority" = Priority.NORMAL,
        description: str = "",
        color: str = "",
    ) -> "Task":
        """
        Build a new task from raw user input.

        Title and description are trimmed, the interval is snapped to slots
        and ordered, and an empty color falls back to the default.
        Raises ValueError for an empty title or unknown priority.
        """
        title = (title or "").strip()
        if not title:
            raise ValueError("Task title must not be empty")
        start, end = normalize_interval(start, end)
        return cls(
            id=make_id(),
            title=title,
            start=start,
            end=end,
            priority=Priority.parse(priority),
            description=(description or "").strip(),
            color=color or DEFAULT_COLOR,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "start": self.start,
            "end": self.end,
            "color": self.color,
            "priority": self.priority.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Task":
        """
        Create Task from its stored JSON form.

        Reversed intervals written by older clients are reordered.
        Raises ValueError/KeyError if malformed.
        """
        start, end = data["start"], data["end"]
        if not is_slot_aligned(start) or not is_slot_aligned(end):
            raise InvalidFormat(f"Task times not slot-aligned: {start!r}-{end!r}")
        start, end = normalize_interval(start, end)
        return cls(
            id=str(data["id"]),
            title=str(data["title"]),
            start=start,
            end=end,
            priority=Priority.parse(data["priority"]),
            description=str(data.get("description", "")),
            color=str(data.get("color", DEFAULT_COLOR)),
        )


@dataclass(frozen=True)
class Note:
    """A zero-duration marker attached to one slot."""

    id: str
    time: str
    title: str
    priority: Priority = Priority.NORMAL

    @classmethod
    def create(cls, title: str, time: str, priority: "str | Priority" = Priority.NORMAL) -> "Note":
        """Build a new note, snapping its time to the containing slot."""
        title = (title or "").strip()
        if not title:
            raise ValueError("Note title must not be empty")
        return cls(id=make_id(), time=clamp_to_slot(time), title=title, priority=Priority.parse(priority))

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "time": self.time,
            "title": self.title,
            "priority": self.priority.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Note":
        time = data["time"]
        if not is_slot_aligned(time):
            raise InvalidFormat(f"Note time not slot-aligned: {time!r}")
        return cls(
            id=str(data["id"]),
            time=time,
            title=str(data["title"]),
            priority=Priority.parse(data["priority"]),
        )


def matches_filter(priority: Priority, priority_filter: "str | Priority | None") -> bool:
    """
    Check a priority against a display filter.

    None or "all" lets everything through. Presentation only - never
    applied to statistics inputs.
    """
    if priority_filter is None or priority_filter == "all":
        return True
    return priority == Priority.parse(priority_filter)


def filter_by_priority(items: list, priority_filter: "str | Priority | None") -> list:
    """Keep tasks or notes visible under the given priority filter."""
    return [item for item in items if matches_filter(item.priority, priority_filter)]


def sort_by_start(tasks: list[Task]) -> list[Task]:
    """Sort tasks by start time; ties keep insertion order."""
    return sorted(tasks, key=lambda t: t.start_minutes)
