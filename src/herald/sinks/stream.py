import io
import sys
from typing import IO, Any


class StreamSink:
    """Newline-delimited JSON to a file-like stream (stdout by default)."""

    object_mode = False

    def __init__(self, stream: IO[Any] | None = None, flush: bool = False):
        self.stream = stream if stream is not None else sys.stdout
        self.flush = flush
        self._text = isinstance(self.stream, io.TextIOBase)

    def write(self, data: bytes) -> None:
        if self._text:
            self.stream.write(data.decode("utf-8"))
        else:
            self.stream.write(data)
        if self.flush:
            self.stream.flush()
