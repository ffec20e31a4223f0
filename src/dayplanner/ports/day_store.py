"""Day storage interface."""

from typing import Protocol

from dayplanner.core.day import DayRecord


class DayStore(Protocol):
    """Interface for loading and saving one day's tasks and notes."""

    def load(self, date_key: str) -> DayRecord:
        """Load the record for a date. Missing or malformed data yields an empty record."""
        ...

    def save(self, date_key: str, record: DayRecord) -> None:
        """Write/overwrite the full record for a date."""
        ...
