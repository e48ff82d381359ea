from .dispatch import LevelLogger, level_logger
from .registry import LevelRegistry, default_registry


class Logger:
    """
    A named logger: one method per severity level, callable for child loggers.

    Hierarchy is naming only. ``Logger("api")("db")`` is just a logger named
    ``api:db``; it shares nothing with its parent except the registry.
    """

    __slots__ = ("name", "registry", "debug", "info", "warn", "error")

    debug: LevelLogger
    info: LevelLogger
    warn: LevelLogger
    error: LevelLogger

    def __init__(self, name: str, registry: LevelRegistry | None = None):
        self.name = name
        self.registry = registry if registry is not None else default_registry
        self.debug = level_logger(self.registry, "debug", name)
        self.info = level_logger(self.registry, "info", name)
        self.warn = level_logger(self.registry, "warn", name)
        self.error = level_logger(self.registry, "error", name)

    def __call__(self, subname: str) -> "Logger":
        """Child logger named ``<name>:<subname>``."""
        return Logger(f"{self.name}:{subname}", self.registry)

    @property
    def warning(self) -> LevelLogger:
        return self.warn

    def __repr__(self) -> str:
        return f"Logger({self.name!r})"


def herald(name: str, registry: LevelRegistry | None = None) -> Logger:
    return Logger(name, registry)
