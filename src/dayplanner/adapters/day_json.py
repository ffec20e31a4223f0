"""JSON encoding shared by the day store adapters."""

import json
import logging

from dayplanner.core.day import EMPTY_DAY, DayRecord

logger = logging.getLogger(__name__)


def dumps(record: DayRecord) -> str:
    """
    Serialize a record to the stored {tasks, notes} JSON shape.

    Compact separators and raw unicode, matching what browser clients write
    with JSON.stringify, so records round-trip byte for byte.
    """
    return json.dumps(record.to_dict(), separators=(",", ":"), ensure_ascii=False)


def loads(raw: str | None, date_key: str = "") -> DayRecord:
    """
    Parse a stored record.

    Returns the empty record for missing or malformed payloads. Failures are
    logged, never raised.
    """
    if not raw:
        return EMPTY_DAY
    try:
        return DayRecord.from_dict(json.loads(raw))
    except (json.JSONDecodeError, TypeError, KeyError, ValueError, RecursionError) as e:
        logger.warning(f"Discarding malformed day record {date_key or '(unknown)'}: {e}")
        return EMPTY_DAY
