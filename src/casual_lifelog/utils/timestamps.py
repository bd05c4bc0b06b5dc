"""
Timestamp conversion and snippet id generation.

Snippets carry their creation time as integer epoch milliseconds; the remote
mirror exchanges it as an ISO-8601 string. Conversions go through integer
timedelta arithmetic so no precision is lost below the millisecond.
"""

import threading
import time
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple, Union

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
ONE_MS = timedelta(milliseconds=1)

_id_lock = threading.Lock()
_last_id_ns = 0


def now_ms() -> int:
    """Current time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


def epoch_ms_to_datetime(ms: int) -> datetime:
    return EPOCH + timedelta(milliseconds=ms)


def datetime_to_epoch_ms(value: datetime) -> int:
    """Convert a datetime to epoch ms. Naive datetimes are read as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return (value - EPOCH) // ONE_MS


def epoch_ms_to_iso(ms: int) -> str:
    """
    Format epoch milliseconds as an ISO-8601 UTC string.

    Examples:
        >>> epoch_ms_to_iso(1700000000123)
        '2023-11-14T22:13:20.123+00:00'
    """
    return epoch_ms_to_datetime(ms).isoformat(timespec="milliseconds")


def iso_to_epoch_ms(value: Union[str, datetime]) -> int:
    """
    Parse an ISO-8601 timestamp (or datetime) back to epoch milliseconds.

    Accepts a trailing "Z" as UTC. Sub-millisecond digits are truncated.
    """
    if isinstance(value, datetime):
        return datetime_to_epoch_ms(value)

    text = value.strip()
    if text.endswith("Z") or text.endswith("z"):
        text = text[:-1] + "+00:00"
    return datetime_to_epoch_ms(datetime.fromisoformat(text))


def new_snippet_id(clock_ns: Optional[int] = None) -> Tuple[str, int]:
    """
    Allocate a snippet id from a high-resolution clock.

    Ids are strictly increasing within the process, so two snippets created
    in the same nanosecond still get distinct ids.

    Returns:
        Tuple of (id, timestamp in epoch ms)
    """
    global _last_id_ns

    with _id_lock:
        ns = time.time_ns() if clock_ns is None else clock_ns
        if ns <= _last_id_ns:
            ns = _last_id_ns + 1
        _last_id_ns = ns

    return str(ns), ns // 1_000_000
