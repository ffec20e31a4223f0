"""File-based day storage adapter."""

import logging
from pathlib import Path

from dayplanner.core.day import DayRecord
from dayplanner.core.timegrid import date_key as normalize_key

from . import day_json

logger = logging.getLogger(__name__)


class FileDayStore:
    """
    File-based day storage.

    Implements DayStore protocol. Each day gets a JSON file.
    """

    def __init__(self, data_dir: Path | str):
        self.data_dir = Path(data_dir).expanduser()
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def _path_for_key(self, date_key: str) -> Path:
        """Get the file path for a given date key."""
        return self.data_dir / f"{normalize_key(date_key)}.json"

    def load(self, date_key: str) -> DayRecord:
        """Load the record for a date. Returns an empty record if missing or unreadable."""
        path = self._path_for_key(date_key)
        if not path.exists():
            return DayRecord()
        try:
            raw = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read {path}: {e}")
            return DayRecord()
        return day_json.loads(raw, date_key)

    def save(self, date_key: str, record: DayRecord) -> None:
        """Write/overwrite the record for a date."""
        path = self._path_for_key(date_key)
        path.write_text(day_json.dumps(record), encoding="utf-8")
        logger.debug(f"Saved {len(record.tasks)} tasks, {len(record.notes)} notes to {path}")

    def delete(self, date_key: str) -> None:
        """Remove the stored record for a date, if any."""
        self._path_for_key(date_key).unlink(missing_ok=True)

    def exists(self, date_key: str) -> bool:
        """Check if a record is stored for a date."""
        return self._path_for_key(date_key).exists()
