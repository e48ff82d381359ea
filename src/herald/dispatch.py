import logging
from typing import Any, Callable, TypeAlias

from .inputs import normalize
from .record import make_record
from .registry import LevelRegistry
from .serializer import serialize_line
from .types import LogRecord, Sink, is_record_mode

logger = logging.getLogger("herald")

LevelLogger: TypeAlias = Callable[..., None]


def _write(sink: Sink, data: bytes | LogRecord) -> None:
    try:
        sink.write(data)
    except Exception:
        logger.debug("Sink %r failed to write a log event", sink, exc_info=True)


def level_logger(registry: LevelRegistry, level: str, name: str) -> LevelLogger:
    """
    Build the function behind ``log.<level>`` for the logger called *name*.

    Sinks are looked up on every call, so registrations made after the logger
    was created still apply.
    """
    defaults = registry.defaults(level)

    def emit(*args: Any) -> None:
        sinks, fast_time, single_bytes_sink = registry.view(level)
        if not sinks:
            return

        fields, message = normalize(args)
        record = make_record(
            level, name, message, fields, fast_time=fast_time, defaults=defaults
        )

        if single_bytes_sink:
            # Fast path: the only sink anywhere takes bytes
            _write(sinks[0], serialize_line(record))
            return

        # Serialized lazily, at most once, shared by every bytes sink
        line: bytes | None = None
        for sink in sinks:
            if is_record_mode(sink):
                _write(sink, record)
                continue
            if line is None:
                line = serialize_line(record)
            _write(sink, line)

    emit.__name__ = level
    emit.__qualname__ = f"{name}.{level}"
    return emit
