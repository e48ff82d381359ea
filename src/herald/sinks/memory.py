import json

from herald.types import LogRecord


class BufferSink:
    """Collects serialized lines in memory. Handy in tests."""

    object_mode = False

    def __init__(self) -> None:
        self._chunks: list[bytes] = []

    def write(self, data: bytes) -> None:
        self._chunks.append(data)

    def getvalue(self) -> bytes:
        return b"".join(self._chunks)

    def lines(self) -> list[str]:
        return self.getvalue().decode("utf-8").splitlines()

    def records(self) -> list[LogRecord]:
        return [json.loads(line) for line in self.lines()]

    def clear(self) -> None:
        self._chunks.clear()


class ListSink(list[LogRecord]):
    """Keeps the record dicts themselves, no serialization."""

    object_mode = True

    def write(self, record: LogRecord) -> None:
        self.append(record)
