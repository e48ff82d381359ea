from enum import StrEnum
from typing import Any, Protocol, TypeAlias

LogRecord: TypeAlias = dict[str, Any]


class Level(StrEnum):
    """Severity levels, least severe first."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"


LEVELS: tuple[str, ...] = tuple(level.value for level in Level)


class Sink(Protocol):
    """Protocol for log output destinations.

    A sink receives either one serialized JSON line (``bytes`` ending in a
    newline) or, when it sets ``object_mode = True``, the record dict itself.
    """

    def write(self, data: Any) -> Any:
        """Write one log event to the sink."""
        ...


def is_record_mode(sink: Any) -> bool:
    return getattr(sink, "object_mode", False) is True
