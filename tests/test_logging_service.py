import logging
import sys
from pathlib import Path
from typing import Optional

from propfilter.backend.services.logging.formatters.color_formatter import ColorFormatter
from propfilter.backend.services.logging.logging_service import setup_logging
from propfilter.utils.color_support import color_support


class LoggerState:
    def __init__(self) -> None:
        self.logger = logging.getLogger()
        self.handlers = list(self.logger.handlers)
        self.level = self.logger.level
        self.force_color: Optional[bool] = getattr(color_support, "_force_color", None)

    def restore(self) -> None:
        for handler in set(self.logger.handlers) - set(self.handlers):
            handler.close()
        self.logger.handlers.clear()
        for handler in self.handlers:
            self.logger.addHandler(handler)
        self.logger.setLevel(self.level)
        color_support.set_force_color(self.force_color)


def test_setup_logging_force_color():
    state = LoggerState()
    try:
        setup_logging(force_color=True, preserve_existing_handlers=True)
        assert color_support.supports_color() is True

        setup_logging(force_color=False, preserve_existing_handlers=True)
        assert color_support.supports_color() is False
    finally:
        state.restore()


def test_setup_logging_verbose_sets_debug_level():
    state = LoggerState()
    try:
        setup_logging(verbose=True, preserve_existing_handlers=True)
        assert logging.getLogger().level == logging.DEBUG

        setup_logging(verbose=False, preserve_existing_handlers=True)
        assert logging.getLogger().level == logging.INFO
    finally:
        state.restore()


def test_setup_logging_preserves_handlers_when_requested():
    state = LoggerState()
    sentinel = logging.NullHandler()
    state.logger.addHandler(sentinel)
    try:
        setup_logging(preserve_existing_handlers=True)
        assert sentinel in state.logger.handlers
    finally:
        state.logger.removeHandler(sentinel)
        state.restore()


def test_setup_logging_keeps_existing_console_formatter():
    state = LoggerState()
    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter("%(levelname)s: %(message)s [custom]")
    handler.setFormatter(formatter)
    state.logger.addHandler(handler)
    try:
        setup_logging(preserve_existing_handlers=True)
        assert handler.formatter is formatter
        console_handlers = [
            h for h in state.logger.handlers
            if isinstance(h, logging.StreamHandler) and h.stream in (sys.stdout, sys.stderr)
        ]
        assert console_handlers == [handler]
    finally:
        state.logger.removeHandler(handler)
        state.restore()


def test_setup_logging_writes_log_file(tmp_path: Path):
    state = LoggerState()
    log_file = tmp_path / "logs" / "propfilter.log"
    try:
        setup_logging(log_file=str(log_file), force_color=False)
        logging.getLogger("propfilter.test").warning("filter warning")
        for handler in logging.getLogger().handlers:
            handler.flush()
        content = log_file.read_text(encoding="utf-8")
        assert "[WARNING] propfilter.test: filter warning" in content
    finally:
        state.restore()


def test_color_formatter_leaves_record_untouched():
    state = LoggerState()
    try:
        color_support.set_force_color(True)
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "boom", None, None)
        formatted = ColorFormatter().format(record)
        assert "boom" in formatted
        assert "\x1b[" in formatted
        assert record.msg == "boom"
        assert record.levelname == "ERROR"
    finally:
        state.restore()


def test_color_formatter_plain_without_color():
    state = LoggerState()
    try:
        color_support.set_force_color(False)
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "plain", None, None)
        formatted = ColorFormatter(fmt="%(levelname)s %(message)s").format(record)
        assert formatted == "INFO plain"
    finally:
        state.restore()
