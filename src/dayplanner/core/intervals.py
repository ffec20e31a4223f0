"""Snap user-entered times onto slot boundaries - no I/O dependencies."""

from .timegrid import from_minutes, split_time, to_minutes


def clamp_to_slot(t: str) -> str:
    """
    Round a time down onto its half-hour slot.

    Minutes below 30 become :00, anything else :30. The hour is clamped
    into 0-23, so "23:59" stays "23:30" and "25:10" becomes "23:00".
    Only unparseable strings raise (InvalidFormat).
    """
    hour, minute = split_time(t)
    minute = 30 if minute >= 30 else 0
    hour = max(0, min(23, hour))
    return f"{hour:02d}:{minute:02d}"


def normalize_interval(raw_start: str, raw_end: str) -> tuple[str, str]:
    """
    Clamp both ends to slots and order them so start <= end.

    A zero-length interval (start == end) is valid.
    """
    start = to_minutes(clamp_to_slot(raw_start))
    end = to_minutes(clamp_to_slot(raw_end))
    if start > end:
        start, end = end, start
    return from_minutes(start), from_minutes(end)


def is_slot_aligned(t: str) -> bool:
    """True if t is a valid HH:MM that falls exactly on a slot start."""
    return to_minutes(t) % 30 == 0 and clamp_to_slot(t) == t
