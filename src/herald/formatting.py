import json
import math
import re
from typing import Any

from .serializer import CIRCULAR, dumps, to_repr, to_str

_PLACEHOLDER = re.compile(r"%[sdifjoO%]")


def _json(value: Any) -> str:
    try:
        return json.dumps(
            value, default=to_str, separators=(",", ":"), ensure_ascii=False
        )
    except ValueError:
        return CIRCULAR
    except (TypeError, RecursionError):
        return dumps(value)


def _number(value: Any) -> float | int | None:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


def _format_d(value: Any) -> str:
    number = _number(value)
    if number is None or (isinstance(number, float) and math.isnan(number)):
        return "NaN"
    if isinstance(number, float) and number.is_integer():
        return str(int(number))
    return str(number)


def _format_i(value: Any) -> str:
    number = _number(value)
    if number is None or (isinstance(number, float) and not math.isfinite(number)):
        return "NaN"
    return str(int(number))


def _format_f(value: Any) -> str:
    number = _number(value)
    if number is None:
        return "NaN"
    return str(float(number))


def _format_s(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple)):
        return _json(value)
    return to_str(value)


def render(value: Any) -> str:
    """Render an argument that no placeholder consumed."""
    if isinstance(value, str):
        return value
    return to_repr(value)


_CONVERTERS = {
    "s": _format_s,
    "d": _format_d,
    "i": _format_i,
    "f": _format_f,
    "j": _json,
    "o": to_repr,
    "O": to_repr,
}


def format_message(*args: Any) -> str:
    """printf-style formatting of log call arguments.

    The first argument is the format string when it is a ``str``. Arguments
    left over after the placeholders are consumed are appended, separated by
    spaces. A placeholder without a matching argument stays as-is.
    """
    if not args:
        return ""

    head, *rest = args
    if not isinstance(head, str):
        return " ".join(render(arg) for arg in args)

    remaining = iter(rest)
    consumed = 0

    def substitute(match: re.Match[str]) -> str:
        nonlocal consumed
        conversion = match.group()[1]
        if conversion == "%":
            return "%"
        if consumed >= len(rest):
            return match.group()
        value = next(remaining)
        consumed += 1
        return _CONVERTERS[conversion](value)

    message = _PLACEHOLDER.sub(substitute, head)
    leftovers = [render(arg) for arg in remaining]
    if leftovers:
        message = " ".join([message, *leftovers])
    return message
