import io

from rich.console import Console

from herald import BufferSink, ListSink, Logger, RichSink, StreamSink
from herald.sinks.rich import format_time, log_level_color


class TestStreamSink:
    def test_binary_stream(self, registry):
        out = io.BytesIO()
        registry.register({"level": "info", "stream": StreamSink(out)})

        Logger("x", registry).info("hi")

        assert out.getvalue().endswith(b'"message":"hi"}\n')

    def test_text_stream(self, registry):
        out = io.StringIO()
        registry.register({"level": "info", "stream": StreamSink(out, flush=True)})

        Logger("x", registry).info("héllo")

        assert out.getvalue().endswith('"message":"héllo"}\n')


class TestMemorySinks:
    def test_buffer_sink_clear(self):
        sink = BufferSink()
        sink.write(b'{"a":1}\n')
        assert sink.records() == [{"a": 1}]
        sink.clear()
        assert sink.getvalue() == b""

    def test_list_sink_is_record_mode(self):
        assert ListSink.object_mode is True
        assert BufferSink.object_mode is False


class TestRichSink:
    def test_renders_line(self, registry):
        console = Console(file=io.StringIO(), width=200, color_system=None)
        registry.register({"level": "debug", "stream": RichSink(console)})

        Logger("api:db", registry).warn({"rows": 3}, "slow query")

        output = console.file.getvalue()
        assert "WARN" in output
        assert "api:db" in output
        assert "slow query" in output
        assert "rows=3" in output

    def test_renders_error_stack(self, registry):
        console = Console(file=io.StringIO(), width=200, color_system=None)
        registry.register({"level": "error", "stream": RichSink(console)})

        Logger("api", registry).error(ValueError("bad input"))

        output = console.file.getvalue()
        assert "ValueError: bad input" in output

    def test_level_colors(self):
        assert log_level_color("error") == "red"
        assert log_level_color("unknown") == "white"

    def test_format_time(self):
        assert format_time("not a time") == "not a time"
        assert len(format_time("2026-01-02T03:04:05.678Z")) == len("03:04:05.678")
        assert len(format_time(1_700_000_000_000)) == len("03:04:05.678")
