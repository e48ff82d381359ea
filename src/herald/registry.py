import threading
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, NamedTuple, TypeAlias

from .exceptions import InvalidConfiguration
from .settings import HeraldSettings
from .types import LEVELS, Sink, is_record_mode


@dataclass(frozen=True, slots=True)
class Output:
    """One sink registration: *stream* receives *level* and everything above."""

    level: str
    stream: Sink


OutputOptions: TypeAlias = Output | Mapping[str, Any]


class LevelView(NamedTuple):
    """What one dispatch needs from the registry, read under a single lock."""

    sinks: tuple[Sink, ...]
    fast_time: bool
    single_bytes_sink: bool


def _as_output(options: Any) -> Output:
    if isinstance(options, Output):
        level, stream = options.level, options.stream
    elif isinstance(options, Mapping):
        level, stream = options.get("level"), options.get("stream")
    else:
        raise InvalidConfiguration(
            f"Output options must be a mapping or Output, got {type(options).__name__}"
        )

    if not isinstance(level, str):
        raise InvalidConfiguration('Must provide a "level" option')
    if level not in LEVELS:
        raise InvalidConfiguration(
            f"Unknown level {level!r}, expected one of {', '.join(LEVELS)}"
        )
    if stream is None:
        raise InvalidConfiguration('Must provide a "stream" option')
    return Output(level, stream)


class LevelRegistry:
    """
    Per-level sink lists shared by every logger built on this registry.

    Registering a sink at a level adds it to that level and to every more
    severe one, so the cost of threshold expansion is paid here and not on
    each log call.
    """

    __slots__ = (
        "settings",
        "_lock",
        "_sinks",
        "_defaults",
        "_distinct",
        "_fast_time",
        "_has_record_mode",
    )

    def __init__(self, settings: HeraldSettings | None = None):
        self.settings = settings if settings is not None else HeraldSettings()
        self._lock = threading.RLock()
        self._sinks: dict[str, tuple[Sink, ...]] = {level: () for level in LEVELS}
        # Deployment fields are read once, here, and never per call
        deployment = self.settings.deployment_fields()
        self._defaults = {level: dict(deployment) for level in LEVELS}
        self._distinct: dict[int, Sink] = {}
        self._fast_time = self.settings.fast_time
        self._has_record_mode = False

    def register(self, options: OutputOptions | Sequence[OutputOptions]) -> "LevelRegistry":
        """Add one sink, or a list of them, at the given threshold levels."""
        if isinstance(options, (list, tuple)):
            return self.register_batch(options)

        output = _as_output(options)
        with self._lock:
            self._add(output)
        return self

    def register_batch(self, outputs: Sequence[OutputOptions]) -> "LevelRegistry":
        validated = [_as_output(options) for options in outputs]
        with self._lock:
            for output in validated:
                self._add(output)
        return self

    def _add(self, output: Output) -> None:
        start = LEVELS.index(output.level)
        for level in LEVELS[start:]:
            self._sinks[level] = (*self._sinks[level], output.stream)

        self._distinct[id(output.stream)] = output.stream
        if is_record_mode(output.stream):
            self._has_record_mode = True

    def reset(self) -> "LevelRegistry":
        """Drop every registration and restore the default timestamp mode."""
        with self._lock:
            self._sinks = {level: () for level in LEVELS}
            self._distinct.clear()
            self._fast_time = self.settings.fast_time
            self._has_record_mode = False
        return self

    def set_fast_time(self, enabled: bool = True) -> "LevelRegistry":
        with self._lock:
            self._fast_time = bool(enabled)
        return self

    def sinks(self, level: str) -> tuple[Sink, ...]:
        with self._lock:
            return self._sinks[level]

    def view(self, level: str) -> LevelView:
        with self._lock:
            return LevelView(
                self._sinks[level],
                self._fast_time,
                len(self._distinct) == 1 and not self._has_record_mode,
            )

    def defaults(self, level: str) -> dict[str, Any]:
        return self._defaults[level]

    @property
    def fast_time(self) -> bool:
        with self._lock:
            return self._fast_time

    @property
    def has_record_mode(self) -> bool:
        with self._lock:
            return self._has_record_mode

    @property
    def sink_count(self) -> int:
        with self._lock:
            return len(self._distinct)


default_registry = LevelRegistry()
