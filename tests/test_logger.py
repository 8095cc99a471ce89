"""Basic tests for logger system"""

import dataclasses
import io
import re

import pytest
from pathlib import Path
from unittest.mock import Mock, patch

from simplelog import LoggerBuilder, Severity, Logger, LoggerConfig, ModuleLog
from simplelog.core.log_entry import LogEntry
from simplelog.core.logger import INTERNAL_MODULE
from simplelog.filters import LevelFilter
from simplelog.writers import ConsoleWriter, QueuedFileWriter

ANSI = re.compile(r"\033\[[0-9;]*m")


class RecordingWriter:
    """Sink that keeps every entry it receives."""

    def __init__(self):
        self.entries = []

    def write(self, entry):
        self.entries.append(entry)

    @property
    def contents(self):
        return [e.content for e in self.entries]


def quiet_config(**kwargs):
    kwargs.setdefault("log_to_console", False)
    return LoggerConfig(**kwargs)


@pytest.fixture(autouse=True)
def reset_console_color():
    ConsoleWriter._foreground = ""
    yield
    ConsoleWriter._foreground = ""


class TestSeverity:
    """Test severity ordering."""

    def test_ordering(self):
        assert Severity.INFO < Severity.ANN
        assert Severity.ANN < Severity.WARN
        assert Severity.WARN < Severity.ERROR

    def test_from_string(self):
        assert Severity.from_string("WARN") == Severity.WARN
        assert Severity.from_string("ann") == Severity.ANN

    def test_from_string_invalid(self):
        with pytest.raises(ValueError):
            Severity.from_string("fatal")

    def test_color_codes(self):
        assert Severity.WARN.color_code == "\033[33m"
        assert Severity.ERROR.color_code == "\033[31m"
        assert Severity.ANN.color_code == "\033[36m"
        assert Severity.INFO.color_code == ""


class TestLogEntry:
    """Test log entry structure."""

    def test_create_entry(self):
        entry = LogEntry("Test message", Severity.WARN)
        assert entry.severity == Severity.WARN
        assert entry.content == "Test message"
        assert entry.module is None
        assert entry.source_location is None

    def test_immutable(self):
        entry = LogEntry("Test")
        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.content = "changed"

    def test_rejects_non_severity(self):
        with pytest.raises(TypeError):
            LogEntry("Test", 30)

    def test_coerces_content(self):
        assert LogEntry(42).content == "42"

    def test_to_dict(self):
        entry = LogEntry("Test", Severity.ANN, module="net")
        data = entry.to_dict()
        assert data["severity"] == "ANN"
        assert data["content"] == "Test"
        assert data["module"] == "net"


class TestLoggerConfig:
    """Test logger configuration."""

    def test_default_config(self):
        config = LoggerConfig.default()
        assert config.name == "simplelog"
        assert config.filter_threshold == Severity.INFO
        assert config.file_path is None
        assert config.log_to_console is True
        assert config.flush_interval_ms == 200

    def test_file_path_converted(self):
        config = LoggerConfig(file_path="logs/app.log")
        assert config.file_path == Path("logs/app.log")

    def test_production_config(self):
        config = LoggerConfig.production_config("app.log")
        assert config.filter_threshold == Severity.WARN
        assert config.file_path == Path("app.log")

    @pytest.mark.parametrize("kwargs", [
        {"flush_interval_ms": 0},
        {"shutdown_timeout": -1},
        {"filter_threshold": 30},
    ])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            LoggerConfig(**kwargs)


class TestLevelFilter:
    """Test the threshold filter."""

    def test_inclusive_min(self):
        f = LevelFilter(min_level=Severity.WARN)
        assert not f(LogEntry("a", Severity.ANN))
        assert f(LogEntry("b", Severity.WARN))
        assert f(LogEntry("c", Severity.ERROR))

    def test_max_level(self):
        f = LevelFilter(max_level=Severity.ANN)
        assert f(LogEntry("a", Severity.INFO))
        assert not f(LogEntry("b", Severity.WARN))

    def test_invalid_range(self):
        with pytest.raises(ValueError):
            LevelFilter(min_level=Severity.ERROR, max_level=Severity.INFO)


class TestLogger:
    """Test dispatch behaviour."""

    def test_no_default_sinks(self):
        logger = Logger(quiet_config())
        assert logger.get_writers() == []
        assert logger.get_writers(filtered=True) == []
        logger.info("nobody listens")
        assert logger.get_metrics()["logged"] == 1
        logger.shutdown()

    def test_console_sink_registered_on_filtered_path(self):
        logger = Logger(LoggerConfig())
        filtered = logger.get_writers(filtered=True)
        assert len(filtered) == 1
        assert isinstance(filtered[0], ConsoleWriter)
        assert logger.get_writers() == []
        logger.shutdown()

    def test_file_sink_registered_on_unfiltered_path(self, tmp_path):
        logger = Logger(quiet_config(file_path=tmp_path / "app.log"))
        writers = logger.get_writers()
        assert len(writers) == 1
        assert isinstance(writers[0], QueuedFileWriter)
        logger.shutdown()

    @pytest.mark.parametrize("severity", list(Severity))
    def test_unfiltered_path_is_unconditional(self, severity):
        logger = Logger(quiet_config(filter_threshold=Severity.ERROR))
        sink = RecordingWriter()
        logger.add_writer(sink)

        logger.log("m", severity)

        assert len(sink.entries) == 1
        logger.shutdown()

    @pytest.mark.parametrize("threshold", list(Severity))
    @pytest.mark.parametrize("severity", list(Severity))
    def test_filtered_path_respects_threshold(self, threshold, severity):
        logger = Logger(quiet_config(filter_threshold=threshold))
        sink = RecordingWriter()
        logger.add_writer(sink, filtered=True)

        logger.log("m", severity)

        assert (len(sink.entries) == 1) == (severity >= threshold)
        logger.shutdown()

    def test_unfiltered_before_filtered(self):
        logger = Logger(quiet_config())
        order = []
        filtered = Mock(spec=["write"])
        filtered.write.side_effect = lambda e: order.append("filtered")
        unfiltered = Mock(spec=["write"])
        unfiltered.write.side_effect = lambda e: order.append("unfiltered")

        # Registered filtered first on purpose
        logger.add_writer(filtered, filtered=True)
        logger.add_writer(unfiltered)
        logger.info("x")

        assert order == ["unfiltered", "filtered"]
        logger.shutdown()

    def test_registration_order(self):
        logger = Logger(quiet_config())
        order = []
        for name in ("a", "b", "c"):
            writer = Mock(spec=["write"])
            writer.write.side_effect = lambda e, n=name: order.append(n)
            logger.add_writer(writer)

        logger.info("x")

        assert order == ["a", "b", "c"]
        logger.shutdown()

    def test_same_entry_on_both_paths(self):
        logger = Logger(quiet_config())
        first, second = RecordingWriter(), RecordingWriter()
        logger.add_writer(first)
        logger.add_writer(second, filtered=True)

        logger.warn("shared", module="disk", source_location="main:1")

        assert first.entries[0] is second.entries[0]
        entry = first.entries[0]
        assert entry.severity == Severity.WARN
        assert entry.module == "disk"
        assert entry.source_location == "main:1"
        logger.shutdown()

    def test_failing_sink_is_isolated(self, capsys):
        logger = Logger(quiet_config())
        broken = Mock(spec=["write"])
        broken.write.side_effect = RuntimeError("boom")
        sink, console_sink = RecordingWriter(), RecordingWriter()
        logger.add_writer(broken)
        logger.add_writer(sink)
        logger.add_writer(console_sink, filtered=True)

        logger.error("still delivered")

        assert sink.contents == ["still delivered"]
        assert console_sink.contents == ["still delivered"]
        assert logger.get_metrics()["sink_errors"] == 1
        assert "boom" in capsys.readouterr().err
        logger.shutdown()

    def test_metrics(self):
        logger = Logger(quiet_config(filter_threshold=Severity.WARN))
        logger.info("a")
        logger.ann("b")
        logger.warn("c")

        metrics = logger.get_metrics()
        assert metrics["logged"] == 3
        assert metrics["filtered_out"] == 2
        assert metrics["sink_errors"] == 0
        logger.shutdown()

    def test_history(self):
        logger = Logger(quiet_config(keep_history=True))
        logger.info("one")
        logger.error("two")

        assert [e.content for e in logger.history] == ["one", "two"]
        logger.shutdown()

    def test_history_disabled_by_default(self):
        logger = Logger(quiet_config())
        logger.info("one")
        assert logger.history == []
        logger.shutdown()

    def test_threshold_scenario(self, tmp_path):
        stream = io.StringIO()
        log_file = tmp_path / "log.txt"
        logger = Logger(quiet_config(
            filter_threshold=Severity.WARN,
            file_path=log_file,
            flush_interval_ms=60000
        ))
        logger.add_writer(ConsoleWriter(stream=stream), filtered=True)

        logger.log("starting", Severity.INFO)
        logger.log("low disk", Severity.WARN)
        logger.log("crash", Severity.ERROR)
        logger.flush()

        output = stream.getvalue()
        assert "\033[33m" in output
        assert "\033[31m" in output
        console_lines = ANSI.sub("", output).splitlines()
        assert len(console_lines) == 2
        assert console_lines[0].endswith("(WARN) low disk")
        assert console_lines[1].endswith("(ERROR) crash")

        file_lines = log_file.read_text(encoding="utf-8").splitlines()
        assert len(file_lines) == 3
        assert file_lines[0].endswith("(INFO): starting")
        assert file_lines[1].endswith("(WARN): low disk")
        assert file_lines[2].endswith("(ERROR): crash")
        logger.shutdown()

    def test_without_file_path(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        stream = io.StringIO()
        logger = Logger(quiet_config(file_path=None))
        logger.add_writer(ConsoleWriter(stream=stream, colored=False), filtered=True)

        logger.info("hello")
        logger.flush()
        logger.shutdown()

        assert list(tmp_path.iterdir()) == []
        assert stream.getvalue().rstrip().endswith("(INFO) hello")

    def test_directory_creation_failure_propagates(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        with pytest.raises(OSError):
            Logger(quiet_config(file_path=blocker / "sub" / "app.log"))

    def test_shutdown_writes_pending_entries(self, tmp_path):
        log_file = tmp_path / "app.log"
        with Logger(quiet_config(file_path=log_file, flush_interval_ms=60000)) as logger:
            logger.info("pending")

        assert log_file.read_text(encoding="utf-8").rstrip().endswith("(INFO): pending")

    def test_shutdown_idempotent(self):
        logger = Logger(quiet_config())
        writer = Mock(spec=["write", "close"])
        logger.add_writer(writer)

        logger.shutdown()
        logger.shutdown()

        writer.close.assert_called_once()


class TestModuleLog:
    """Test module handles."""

    def test_create_module(self):
        logger = Logger(quiet_config())
        module = logger.create_module("storage")

        assert isinstance(module, ModuleLog)
        assert module.name == "storage"
        assert logger.modules == [module]
        logger.shutdown()

    def test_module_tag_matches_direct_call(self):
        logger = Logger(quiet_config(keep_history=True))
        module = logger.create_module("X")

        module.log("m", Severity.WARN)
        logger.log("m", Severity.WARN, module="X")

        via_handle, direct = logger.history
        assert dataclasses.replace(via_handle, created_at=direct.created_at) == direct
        logger.shutdown()

    def test_module_respects_logger_threshold(self):
        logger = Logger(quiet_config(filter_threshold=Severity.WARN))
        sink = RecordingWriter()
        logger.add_writer(sink, filtered=True)
        module = logger.create_module("net")

        module.info("quiet")
        module.error("loud")

        assert sink.contents == ["loud"]
        assert sink.entries[0].module == "net"
        logger.shutdown()

    def test_shortcuts(self):
        logger = Logger(quiet_config(keep_history=True))
        module = logger.create_module("m")
        module.info("a")
        module.ann("b")
        module.warn("c")
        module.error("d", source_location="f:3")

        history = logger.history
        assert [e.severity for e in history] == list(Severity)
        assert history[-1].source_location == "f:3"
        logger.shutdown()


class TestInternalErrors:
    """Test the logger's own error channel."""

    def test_report_skips_origin(self):
        logger = Logger(quiet_config())
        origin, other = RecordingWriter(), RecordingWriter()
        logger.add_writer(origin)
        logger.add_writer(other, filtered=True)

        logger._report_internal_error("queue broke", origin=origin)

        assert origin.entries == []
        assert other.contents == ["queue broke"]
        assert other.entries[0].severity == Severity.ERROR
        assert other.entries[0].module == INTERNAL_MODULE
        logger.shutdown()

    def test_reentrant_report_goes_to_stderr(self, capsys):
        logger = Logger(quiet_config())

        class ReportingWriter(RecordingWriter):
            def bind(self, bound):
                self.logger = bound

            def write(self, entry):
                super().write(entry)
                self.logger._report_internal_error(f"saw {entry.content}")

        sink = ReportingWriter()
        logger.add_writer(sink)

        logger.info("x")

        assert sink.contents == ["x", "saw x"]
        assert "saw saw x" in capsys.readouterr().err
        logger.shutdown()

    def test_file_queue_inconsistency_reported_through_logger(self, tmp_path):
        logger = Logger(quiet_config(file_path=tmp_path / "app.log", flush_interval_ms=60000))
        other = RecordingWriter()
        logger.add_writer(other)
        file_writer = logger.get_writers()[0]

        logger.info("only one")
        with patch.object(file_writer._queue, "qsize", return_value=2):
            logger.flush()

        assert other.contents[0] == "only one"
        assert other.entries[-1].severity == Severity.ERROR
        assert other.entries[-1].module == INTERNAL_MODULE
        assert file_writer.get_queue_size() == 0
        assert file_writer.get_stats().queue_inconsistencies == 1
        logger.shutdown()


class TestLoggerBuilder:
    """Test builder construction."""

    def test_builder_pattern(self, tmp_path):
        logger = (LoggerBuilder()
            .with_name("builder_test")
            .with_threshold(Severity.WARN)
            .with_console(colored=False)
            .with_file(str(tmp_path / "app.log"))
            .with_flush_interval(50)
            .build())

        assert logger.name == "builder_test"
        assert logger.filter_threshold == Severity.WARN
        assert isinstance(logger.get_writers()[0], QueuedFileWriter)
        assert logger.get_writers()[0].flush_interval_ms == 50
        assert logger.get_writers(filtered=True)[0].colored is False
        logger.shutdown()

    def test_custom_writers(self):
        sink, filtered_sink = RecordingWriter(), RecordingWriter()
        logger = (LoggerBuilder()
            .without_console()
            .with_threshold(Severity.ERROR)
            .add_writer(sink)
            .add_writer(filtered_sink, filtered=True)
            .build())

        logger.warn("w")
        logger.error("e")

        assert sink.contents == ["w", "e"]
        assert filtered_sink.contents == ["e"]
        logger.shutdown()

    def test_build_validates(self):
        with pytest.raises(ValueError):
            LoggerBuilder().with_flush_interval(0).build()
