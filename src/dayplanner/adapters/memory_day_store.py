"""In-memory day storage adapter."""

from dayplanner.core.day import DayRecord

from . import day_json


class InMemoryDayStore:
    """
    Day storage held in a dict of serialized JSON strings.

    Implements DayStore protocol. Records go through the same JSON encoding
    as the file store, so malformed payloads behave identically.
    """

    def __init__(self, initial: dict[str, str] | None = None):
        self.records: dict[str, str] = dict(initial or {})

    def load(self, date_key: str) -> DayRecord:
        return day_json.loads(self.records.get(date_key), date_key)

    def save(self, date_key: str, record: DayRecord) -> None:
        self.records[date_key] = day_json.dumps(record)

    def delete(self, date_key: str) -> None:
        self.records.pop(date_key, None)
