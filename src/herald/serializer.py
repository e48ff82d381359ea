import json
from typing import Any

from .types import LogRecord

CIRCULAR = "[Circular]"
UNSERIALIZABLE = "[Unserializable]"

_SCALARS = (str, int, float, bool, type(None))


def to_str(value: Any) -> str:
    try:
        return str(value)
    except Exception:
        return UNSERIALIZABLE


def to_repr(value: Any) -> str:
    try:
        return repr(value)
    except Exception:
        return UNSERIALIZABLE


def _decycle(value: Any, ancestors: set[int]) -> Any:
    if isinstance(value, _SCALARS):
        return value

    if isinstance(value, (dict, list, tuple)):
        if id(value) in ancestors:
            return CIRCULAR
        ancestors.add(id(value))
        try:
            if isinstance(value, dict):
                return {
                    k if isinstance(k, str) else to_str(k): _decycle(v, ancestors)
                    for k, v in value.items()
                }
            return [_decycle(v, ancestors) for v in value]
        finally:
            ancestors.discard(id(value))

    return to_str(value)


def dumps(value: Any) -> str:
    """Compact JSON for any value, with the same fallbacks as :func:`serialize`."""
    try:
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError, RecursionError):
        pass

    try:
        return json.dumps(
            _decycle(value, set()), separators=(",", ":"), ensure_ascii=False
        )
    except (TypeError, ValueError, RecursionError):
        return json.dumps(UNSERIALIZABLE)


def serialize(record: LogRecord) -> str:
    """Compact single-line JSON for *record*.

    Never raises: reference cycles become ``"[Circular]"`` and values JSON
    cannot represent go through ``str``.
    """
    try:
        return json.dumps(record, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError, RecursionError):
        pass

    try:
        return json.dumps(
            _decycle(record, set()), separators=(",", ":"), ensure_ascii=False
        )
    except (TypeError, ValueError, RecursionError):
        fallback = {key: to_str(record.get(key)) for key in ("time", "name", "level")}
        fallback["message"] = UNSERIALIZABLE
        return json.dumps(fallback, separators=(",", ":"), ensure_ascii=False)


def serialize_line(record: LogRecord) -> bytes:
    return (serialize(record) + "\n").encode("utf-8")
