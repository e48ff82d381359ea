import time
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from .types import LogRecord


def timestamp(fast_time: bool) -> int | str:
    if fast_time:
        return time.time_ns() // 1_000_000
    now = datetime.now(UTC)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def make_record(
    level: str,
    name: str,
    message: str | None,
    fields: Any,
    *,
    fast_time: bool = False,
    defaults: Mapping[str, Any] | None = None,
) -> LogRecord:
    """
    Assemble one log record.

    Merge order is fixed: time and name, the level defaults, the message,
    then *fields*. Later keys win, so caller fields may replace any of the
    conventional ones. A *fields* value that is not a mapping adds nothing.
    """
    record: LogRecord = {"time": timestamp(fast_time), "name": name, "level": level}
    if defaults:
        record.update(defaults)
    if message is not None:
        record["message"] = message
    if isinstance(fields, Mapping):
        record.update(fields)
    return record
