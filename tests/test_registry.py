import pytest

from herald import BufferSink, InvalidConfiguration, ListSink, Output


class TestRegister:
    def test_threshold_covers_level_and_above(self, registry):
        sink = BufferSink()
        registry.register({"level": "warn", "stream": sink})

        assert registry.sinks("debug") == ()
        assert registry.sinks("info") == ()
        assert registry.sinks("warn") == (sink,)
        assert registry.sinks("error") == (sink,)

    def test_debug_covers_everything(self, registry):
        sink = BufferSink()
        registry.register({"level": "debug", "stream": sink})

        for level in ("debug", "info", "warn", "error"):
            assert registry.sinks(level) == (sink,)

    def test_registration_order_is_write_order(self, registry):
        first, second = BufferSink(), BufferSink()
        registry.register({"level": "info", "stream": first})
        registry.register(Output("debug", second))

        assert registry.sinks("debug") == (second,)
        assert registry.sinks("error") == (first, second)

    def test_batch(self, registry):
        info, warn = BufferSink(), BufferSink()
        registry.register(
            [
                {"level": "info", "stream": info},
                {"level": "warn", "stream": warn},
            ]
        )

        assert registry.sinks("info") == (info,)
        assert registry.sinks("warn") == (info, warn)
        assert registry.sink_count == 2

    def test_register_returns_registry(self, registry):
        assert registry.register({"level": "info", "stream": BufferSink()}) is registry

    def test_record_mode_flag(self, registry):
        registry.register({"level": "error", "stream": BufferSink()})
        assert registry.has_record_mode is False

        registry.register({"level": "error", "stream": ListSink()})
        assert registry.has_record_mode is True

    def test_same_sink_twice_counts_once(self, registry):
        sink = BufferSink()
        registry.register({"level": "error", "stream": sink})
        registry.register({"level": "error", "stream": sink})

        assert registry.sinks("error") == (sink, sink)
        assert registry.sink_count == 1


class TestInvalidConfiguration:
    def test_unknown_level(self, registry):
        with pytest.raises(InvalidConfiguration, match="Unknown level"):
            registry.register({"level": "trace", "stream": BufferSink()})

    def test_missing_level(self, registry):
        with pytest.raises(InvalidConfiguration, match='"level"'):
            registry.register({"stream": BufferSink()})

    def test_non_string_level(self, registry):
        with pytest.raises(InvalidConfiguration):
            registry.register({"level": 10, "stream": BufferSink()})

    def test_missing_stream(self, registry):
        with pytest.raises(InvalidConfiguration, match='"stream"'):
            registry.register({"level": "info"})

    def test_wrong_shape(self, registry):
        with pytest.raises(InvalidConfiguration):
            registry.register("info")

    def test_is_a_value_error(self, registry):
        with pytest.raises(ValueError):
            registry.register({"level": "nope", "stream": BufferSink()})

    def test_invalid_batch_registers_nothing(self, registry):
        with pytest.raises(InvalidConfiguration):
            registry.register(
                [
                    {"level": "info", "stream": BufferSink()},
                    {"level": "bogus", "stream": BufferSink()},
                ]
            )

        assert registry.sinks("error") == ()


class TestReset:
    def test_clears_everything(self, registry):
        registry.register({"level": "debug", "stream": ListSink()})
        registry.set_fast_time()

        registry.reset()

        for level in ("debug", "info", "warn", "error"):
            assert registry.sinks(level) == ()
        assert registry.fast_time is False
        assert registry.has_record_mode is False
        assert registry.sink_count == 0

    def test_idempotent(self, registry):
        registry.reset()
        registry.reset()

        assert registry.sinks("debug") == ()
        assert registry.fast_time is False


class TestFastTime:
    def test_defaults_off(self, registry):
        assert registry.fast_time is False

    def test_no_argument_enables(self, registry):
        registry.set_fast_time()
        assert registry.fast_time is True

    def test_toggle_off(self, registry):
        registry.set_fast_time(True)
        registry.set_fast_time(False)
        assert registry.fast_time is False
