"""
herald: structured logging with per-level sinks.

    import herald

    herald.output({"level": "info", "stream": herald.StreamSink()})
    log = herald.herald("api")
    log.info("listening on %s", 8080)
"""

from .exceptions import HeraldError, InvalidConfiguration
from .logger import Logger, herald
from .registry import LevelRegistry, Output, default_registry
from .settings import HeraldSettings
from .sinks import BufferSink, ListSink, RichSink, StreamSink
from .types import LEVELS, Level, LogRecord, Sink

get_logger = herald


def output(options) -> LevelRegistry:
    """Register one sink, or a list of them, on the default registry."""
    return default_registry.register(options)


register = output


def reset() -> LevelRegistry:
    return default_registry.reset()


def set_fast_time(enabled: bool = True) -> LevelRegistry:
    return default_registry.set_fast_time(enabled)


__all__ = [
    "BufferSink",
    "HeraldError",
    "HeraldSettings",
    "InvalidConfiguration",
    "LEVELS",
    "Level",
    "LevelRegistry",
    "ListSink",
    "LogRecord",
    "Logger",
    "Output",
    "RichSink",
    "Sink",
    "StreamSink",
    "default_registry",
    "get_logger",
    "herald",
    "output",
    "register",
    "reset",
    "set_fast_time",
]
