"""
Tests for HeliumLogger rendering, filtering and configuration.
"""

from datetime import timezone

import pytest

from heliumlog.core.entry import EntryFormatter, LogEntry, RenderMode
from heliumlog.core.exceptions.custom_exceptions import (
    ConfigurationError,
    InvalidSeverityError,
)
from heliumlog.core.logger import HeliumLogger
from heliumlog.core.severity import Severity, TerminalColor
from heliumlog.core.sinks import MemorySink, StdoutSink
from heliumlog.core.template import Field, Token

DATE = "2026-10-19T08:30:15.123+00:00"


def render(logger, severity=Severity.INFO, message="hello", metadata=None, **kwargs):
    return logger.format_entry(
        severity,
        message,
        kwargs.pop("function", "handler()"),
        kwargs.pop("line", 42),
        kwargs.pop("file", "/srv/app/routes.py"),
        metadata,
        **kwargs,
    )


class TestDefaults:
    """Constructor defaults"""

    def test_defaults(self):
        logger = HeliumLogger()
        assert logger.threshold is Severity.VERBOSE
        assert isinstance(logger.sink, StdoutSink)
        assert logger.colored is False
        assert logger.details is True
        assert logger.full_file_path is False
        assert logger.format is None
        assert logger.formatter is None
        assert logger.render_mode() is RenderMode.DEFAULT

    def test_threshold_accepts_names(self):
        assert HeliumLogger("warning").threshold is Severity.WARNING

    def test_threshold_assignment_is_parsed(self, memory_sink):
        logger = HeliumLogger(Severity.ENTRY, memory_sink, format="(%msg)")
        logger.threshold = "warning"
        assert logger.threshold is Severity.WARNING

        logger.log(Severity.INFO, "hidden", "main", 1, "app.py")
        logger.log(Severity.ERROR, "shown", "main", 1, "app.py")
        assert memory_sink.lines == ["shown"]

    def test_invalid_threshold_assignment_keeps_previous(self):
        logger = HeliumLogger(Severity.INFO)
        with pytest.raises(InvalidSeverityError):
            logger.threshold = "loud"
        assert logger.threshold is Severity.INFO


class TestDefaultLayouts:
    """Built-in detailed and short layouts"""

    def test_detailed_layout(self, helium_logger, moment):
        line = render(helium_logger, timestamp=moment)
        assert line == f"{DATE} [INFO] [routes.py:42 handler()] hello"

    def test_short_layout(self, helium_logger, moment):
        helium_logger.details = False
        assert render(helium_logger, timestamp=moment) == f"{DATE} [INFO] hello"

    def test_clearing_format_restores_default_layout(self, helium_logger, moment):
        helium_logger.format = "(%msg)"
        assert render(helium_logger, timestamp=moment) == "hello"

        helium_logger.format = None
        assert helium_logger.template is None
        detailed = render(helium_logger, timestamp=moment)
        helium_logger.details = False
        short = render(helium_logger, timestamp=moment)

        assert detailed == f"{DATE} [INFO] [routes.py:42 handler()] hello"
        assert short == f"{DATE} [INFO] hello"

    def test_metadata_is_appended(self, helium_logger, moment):
        line = render(helium_logger, metadata="user=ada", timestamp=moment)
        assert line.endswith("hello user=ada")


class TestTemplates:
    """Template substitution"""

    def test_all_tokens(self, helium_logger, moment):
        helium_logger.format = (
            "(%date)|(%type)|(%file)|(%line)|(%func)|(%msg)|(%label)|(%metadata)"
        )
        line = render(
            helium_logger,
            Severity.WARNING,
            metadata="k=v",
            label="api",
            timestamp=moment,
        )
        assert line == f"{DATE}|WARNING|routes.py|42|handler()|hello|api|k=v"

    def test_missing_label_and_metadata_render_empty(self, helium_logger):
        helium_logger.format = "<(%label)><(%metadata)>"
        assert render(helium_logger) == "<><>"

    def test_unknown_tokens_pass_through(self, helium_logger):
        helium_logger.format = "(%noSoupForYou) (%msg)"
        assert render(helium_logger) == "(%noSoupForYou) hello"

    def test_template_is_compiled_on_assignment(self, helium_logger):
        helium_logger.format = "(%msg)"
        compiled = helium_logger.template
        render(helium_logger)
        render(helium_logger)
        assert helium_logger.template is compiled
        assert compiled.segments == (Token(Field.MESSAGE),)

        helium_logger.format = "(%type)"
        assert helium_logger.template is not compiled
        assert render(helium_logger) == "INFO"

    def test_full_path_token(self, helium_logger):
        helium_logger.format = "(%file)"
        helium_logger.full_file_path = True
        assert render(helium_logger) == "/srv/app/routes.py"


class TestFormatter:
    """Custom EntryFormatter strategies"""

    def test_callable_formatter_bypasses_template(self, helium_logger, moment):
        helium_logger.format = "(%msg)"
        helium_logger.colored = True
        helium_logger.formatter = lambda e: f"{e.severity.description}:{e.file}:{e.message}"

        assert helium_logger.render_mode() is RenderMode.FORMATTER
        assert render(helium_logger, Severity.ERROR) == "ERROR:routes.py:hello"

    def test_formatter_receives_entry(self, helium_logger, moment):
        received = []

        class Recorder(EntryFormatter):
            def format(self, entry: LogEntry) -> str:
                received.append(entry)
                return "recorded"

        helium_logger.formatter = Recorder()
        assert render(helium_logger, timestamp=moment) == "recorded"

        entry = received[0]
        assert entry.date == DATE
        assert entry.severity is Severity.INFO
        assert entry.file == "routes.py"
        assert entry.line == 42
        assert entry.function == "handler()"
        assert entry.message == "hello"

    def test_clearing_formatter_falls_back_to_template(self, helium_logger):
        helium_logger.format = "(%msg)!"
        helium_logger.formatter = lambda e: "custom"
        helium_logger.formatter = None
        assert helium_logger.render_mode() is RenderMode.TEMPLATE
        assert render(helium_logger) == "hello!"


class TestColors:
    """Colorization"""

    def test_colored_output_is_wrapped(self, helium_logger):
        helium_logger.format = "(%msg)"
        helium_logger.colored = True
        assert render(helium_logger, Severity.WARNING) == (
            f"{TerminalColor.YELLOW.value}hello{TerminalColor.FOREGROUND.value}"
        )
        assert render(helium_logger, Severity.INFO) == (
            f"{TerminalColor.FOREGROUND.value}hello{TerminalColor.FOREGROUND.value}"
        )

    def test_uncolored_output_ignores_severity(self, helium_logger):
        helium_logger.format = "(%file):(%line) (%msg)"
        lines = {
            render(helium_logger, level)
            for level in (Severity.WARNING, Severity.INFO, Severity.ERROR)
        }
        assert lines == {"routes.py:42 hello"}

    def test_colored_output_differs_by_severity(self, helium_logger):
        helium_logger.format = "[(%type)] (%msg)"
        helium_logger.colored = True
        lines = {
            render(helium_logger, level)
            for level in (Severity.WARNING, Severity.INFO, Severity.ERROR)
        }
        assert len(lines) == 3


class TestGetFile:
    """get_file"""

    def test_full_path(self):
        logger = HeliumLogger(full_file_path=True)
        assert logger.get_file(__file__) == __file__

    def test_basename(self):
        logger = HeliumLogger()
        assert logger.get_file("/srv/app/routes.py") == "routes.py"

    def test_path_without_separator(self):
        logger = HeliumLogger()
        assert logger.get_file("srv_app_routes.py") == "srv_app_routes.py"


class TestDates:
    """date_format and time_zone reconfiguration"""

    def test_date_format_change(self, helium_logger, moment):
        helium_logger.format = "(%date)"
        helium_logger.date_format = "%Y"
        assert render(helium_logger, timestamp=moment) == "2026"
        helium_logger.date_format = "%H:%M"
        assert render(helium_logger, timestamp=moment) == "08:30"

    def test_time_zone_change(self, helium_logger, moment):
        helium_logger.format = "(%date)"
        helium_logger.date_format = "%H:%M"
        helium_logger.time_zone = "Asia/Kolkata"
        assert render(helium_logger, timestamp=moment) == "14:00"
        helium_logger.time_zone = timezone.utc
        assert render(helium_logger, timestamp=moment) == "08:30"

    def test_invalid_time_zone_keeps_previous(self, helium_logger, moment):
        helium_logger.format = "(%date)"
        helium_logger.date_format = "%H:%M"
        with pytest.raises(ConfigurationError):
            helium_logger.time_zone = "Not/AZone"
        assert helium_logger.time_zone == "UTC"
        assert render(helium_logger, timestamp=moment) == "08:30"


class TestLog:
    """log() filtering and output"""

    def test_log_writes_to_sink(self, helium_logger, memory_sink):
        helium_logger.format = "[(%type)] (%msg)"
        helium_logger.log(Severity.NOTICE, "ready", "main", 1, "app.py")
        assert memory_sink.lines == ["[NOTICE] ready"]

    def test_log_renders_metadata_mapping(self, helium_logger, memory_sink):
        helium_logger.format = "(%msg) (%metadata)"
        helium_logger.log(
            Severity.INFO, "login", "main", 1, "app.py", {"user": "ada", "ok": True}
        )
        assert memory_sink.lines == ["login user=ada ok=True"]

    def test_below_threshold_is_not_formatted(self, memory_sink):
        calls = []
        logger = HeliumLogger(Severity.WARNING, memory_sink)
        logger.formatter = lambda e: calls.append(e) or "x"

        logger.log(Severity.INFO, "ignored", "main", 1, "app.py")
        logger.log(Severity.DEBUG, "ignored", "main", 1, "app.py")
        assert calls == []
        assert memory_sink.lines == []

        logger.log(Severity.ERROR, "kept", "main", 1, "app.py")
        assert memory_sink.lines == ["x"]

    def test_is_logging(self):
        logger = HeliumLogger(Severity.ERROR, MemorySink())
        assert logger.is_logging(Severity.ERROR)
        assert logger.is_logging(Severity.CRITICAL)
        assert not logger.is_logging(Severity.WARNING)
        assert not logger.is_logging(Severity.ENTRY)
