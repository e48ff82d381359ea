from datetime import datetime

from rich.console import Console, Group
from rich.text import Text

from herald.types import LogRecord

_SKIPPED_KEYS = ("time", "name", "level", "message", "err")


def log_level_color(level: str) -> str:
    return {
        "debug": "cyan",
        "info": "green",
        "warn": "yellow",
        "error": "red",
    }.get(level, "white")


def format_time(value: int | str) -> str:
    """Wall-clock ``HH:MM:SS.mmm`` for either timestamp representation."""
    if isinstance(value, int):
        moment = datetime.fromtimestamp(value / 1000)
    else:
        try:
            moment = datetime.fromisoformat(value.replace("Z", "+00:00")).astimezone()
        except ValueError:
            return str(value)
    return moment.strftime("%H:%M:%S.%f")[:-3]


class RichSink:
    """Human-friendly console output for development."""

    object_mode = True

    def __init__(self, console: Console | None = None):
        self.console = console or Console(stderr=True)

    def write(self, record: LogRecord) -> None:
        self.console.print(self.render(record))

    def render(self, record: LogRecord) -> Text | Group:
        level = str(record.get("level", ""))
        color = log_level_color(level)

        line = Text()
        line.append(f"{format_time(record.get('time', ''))} ", style="grey70")
        line.append(f"{level.upper():<5} ", style="bold " + color)
        line.append(f"{record.get('name', '')} ", style=color)

        if (message := record.get("message")) is not None:
            line.append(str(message), style="white")

        for key, value in record.items():
            if key in _SKIPPED_KEYS:
                continue
            line.append(f" {key}={value}", style="grey70")

        err = record.get("err")
        if not isinstance(err, dict):
            return line

        line.append(f" {err.get('name')}: {err.get('message')}", style=color)
        stack = Text(str(err.get("stack", "")), style="dim " + color)
        return Group(line, stack)
