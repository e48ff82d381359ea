"""
Classification of log call arguments.

The first positional argument of a log call decides how the call is read.
It is classified exactly once into one of the variants below, and each
variant knows which record fields it contributes.
"""

import traceback
from dataclasses import dataclass
from typing import Any, TypeAlias

from starlette.requests import Request

from .formatting import format_message
from .serializer import to_str
from .types import LogRecord


@dataclass(frozen=True, slots=True)
class FormatArgs:
    """Every argument belongs to a printf-style message."""

    args: tuple[Any, ...]


@dataclass(frozen=True, slots=True)
class BooleanInput:
    value: bool


@dataclass(frozen=True, slots=True)
class ErrorInput:
    exc: BaseException


@dataclass(frozen=True, slots=True)
class RequestInput:
    request: Request


@dataclass(frozen=True, slots=True)
class PlainObject:
    """Free-form caller data, merged into the record as-is."""

    value: Any


CallInput: TypeAlias = FormatArgs | BooleanInput | ErrorInput | RequestInput | PlainObject


def classify(args: tuple[Any, ...]) -> CallInput:
    if not args or args[0] is None:
        return FormatArgs(args[1:])

    first = args[0]
    if isinstance(first, str):
        return FormatArgs(args)
    if isinstance(first, bool):
        return BooleanInput(first)
    if isinstance(first, BaseException):
        return ErrorInput(first)
    if isinstance(first, Request):
        return RequestInput(first)
    return PlainObject(first)


def stack_to_string(exc: BaseException) -> str:
    """Traceback of *exc* followed by each explicit cause on its own line."""
    seen: set[int] = set()
    parts: list[str] = []
    current: BaseException | None = exc

    while current is not None and id(current) not in seen:
        seen.add(id(current))
        parts.append(
            "".join(
                traceback.format_exception(
                    type(current), current, current.__traceback__, chain=False
                )
            ).rstrip("\n")
        )
        current = current.__cause__

    return "\nCaused by: ".join(parts)


def error_fields(exc: BaseException) -> LogRecord:
    err: LogRecord = {
        "name": type(exc).__name__,
        "message": to_str(exc),
    }

    code = getattr(exc, "code", None)
    if code is None:
        code = getattr(exc, "errno", None)
    if code is not None:
        err["code"] = code

    err["stack"] = stack_to_string(exc)
    return {"err": err}


def request_fields(request: Request) -> LogRecord:
    scope = request.scope
    url = scope.get("path", "")
    if query := scope.get("query_string", b""):
        url += "?" + query.decode("latin-1")

    client = request.client
    return {
        "req": {
            "method": request.method,
            "url": url,
            "headers": dict(request.headers),
            "remoteAddress": client.host if client else None,
            "remotePort": client.port if client else None,
        }
    }


def normalize(args: tuple[Any, ...]) -> tuple[Any, str | None]:
    """
    Turn the arguments of one log call into ``(fields, message)``.

    ``fields`` is what the record builder merges last; ``message`` is
    ``None`` when the formatted text would be empty.
    """
    match classify(args):
        case FormatArgs(args=format_args):
            return {}, format_message(*format_args) or None
        case BooleanInput(value=value):
            return {}, "true" if value else "false"
        case ErrorInput(exc=exc):
            return error_fields(exc), format_message(*args[1:]) or None
        case RequestInput(request=request):
            return request_fields(request), format_message(*args[1:]) or None
        case PlainObject(value=value):
            return value, format_message(*args[1:]) or None
