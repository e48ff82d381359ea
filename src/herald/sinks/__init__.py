from .memory import BufferSink, ListSink
from .rich import RichSink
from .stream import StreamSink

__all__ = ["BufferSink", "ListSink", "RichSink", "StreamSink"]
