"""Pure time grid logic - the fixed 48 half-hour slots of a day."""

from datetime import date, datetime

SLOT_MINUTES = 30
SLOTS_PER_DAY = 48
DAY_MINUTES = SLOT_MINUTES * SLOTS_PER_DAY


class InvalidFormat(ValueError):
    """Raised when a time string cannot be read as HH:MM."""


def _format(hour: int, minute: int) -> str:
    return f"{hour:02d}:{minute:02d}"


SLOT_TIMES: tuple[str, ...] = tuple(
    _format(i // 2, SLOT_MINUTES if i % 2 else 0) for i in range(SLOTS_PER_DAY)
)


def slot_times() -> tuple[str, ...]:
    """All 48 slot start times, "00:00" through "23:30"."""
    return SLOT_TIMES


def split_time(t: str) -> tuple[int, int]:
    """
    Split "H:M" into integers without range checks.

    Both parts must be plain ASCII digits; the hour may carry a leading
    "-" so that clamping can pull it up to 00.
    Raises InvalidFormat if the string is not two integers around a colon.
    """
    if not isinstance(t, str):
        raise InvalidFormat(f"Expected a time string, got {t!r}")
    hour_str, sep, minute_str = t.strip().partition(":")
    if not sep:
        raise InvalidFormat(f"Missing ':' in time {t!r}")
    if not _is_digits(hour_str.removeprefix("-")) or not _is_digits(minute_str):
        raise InvalidFormat(f"Invalid time {t!r}")
    return int(hour_str), int(minute_str)


def _is_digits(s: str) -> bool:
    return s.isascii() and s.isdigit()


def to_minutes(t: str) -> int:
    """Minutes since midnight for a strict "HH:MM" value."""
    hour, minute = split_time(t)
    if not 0 <= hour <= 23 or not 0 <= minute <= 59:
        raise InvalidFormat(f"Time out of range: {t!r}")
    return hour * 60 + minute


def from_minutes(minutes: int) -> str:
    hour, minute = divmod(minutes, 60)
    return _format(hour, minute)


def slot_index(t: str) -> int:
    """Slot containing the given time."""
    return to_minutes(t) // SLOT_MINUTES


def to_12_hour(t: str) -> str:
    """Display form: "09:00" -> "9:00 AM", "00:30" -> "12:30 AM"."""
    hour, minute = divmod(to_minutes(t), 60)
    suffix = "AM" if hour < 12 else "PM"
    return f"{hour % 12 or 12}:{minute:02d} {suffix}"


def date_key(d: date | datetime | str) -> str:
    """
    Storage key for a calendar date (YYYY-MM-DD).

    Uses the date as given in the caller's local calendar; datetimes are
    not converted between timezones.
    """
    if isinstance(d, datetime):
        return d.date().isoformat()
    if isinstance(d, date):
        return d.isoformat()
    return date.fromisoformat(d).isoformat()
