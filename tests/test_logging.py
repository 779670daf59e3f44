"""Tests for the logging helpers"""
import json
import logging

from sheet_export.core.logging import (
    ContextLoggerAdapter,
    JSONFormatter,
    flush_logging_handlers,
    setup_logging,
    with_log_context,
)


def _record(msg="hello", **extra):
    record = logging.LogRecord("sheet_export.test", logging.INFO, __file__, 10, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    def test_single_line_json(self):
        line = JSONFormatter().format(_record())
        assert "\n" not in line
        entry = json.loads(line)
        assert entry["level"] == "INFO"
        assert entry["message"] == "hello"
        assert entry["logger"] == "sheet_export.test"

    def test_extra_fields_merged(self):
        entry = json.loads(JSONFormatter().format(_record(sheet_name="Orders", _private=1)))
        assert entry["sheet_name"] == "Orders"
        assert "_private" not in entry

    def test_bad_placeholders_do_not_raise(self):
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "%d rows", ("many",), None)
        entry = json.loads(JSONFormatter().format(record))
        assert "log-message-format-error" in entry["message"]


class TestLogContext:
    def test_context_attached(self, caplog):
        log = with_log_context(logging.getLogger("sheet_export.ctx"), sheet_name="Staff")
        with caplog.at_level(logging.INFO, logger="sheet_export.ctx"):
            log.info("written")
        assert caplog.records[-1].sheet_name == "Staff"

    def test_nested_context_merges(self):
        outer = with_log_context(logging.getLogger("sheet_export.ctx"), sheet_name="A")
        inner = with_log_context(outer, row=3, ignored=None)
        assert isinstance(inner, ContextLoggerAdapter)
        assert inner.extra == {"sheet_name": "A", "row": 3}
        assert inner.logger is logging.getLogger("sheet_export.ctx")

    def test_call_extra_overrides_context(self, caplog):
        log = with_log_context(logging.getLogger("sheet_export.ctx"), sheet_name="A", row=1)
        with caplog.at_level(logging.INFO, logger="sheet_export.ctx"):
            log.info("written", extra={"row": 2})
        assert (caplog.records[-1].sheet_name, caplog.records[-1].row) == ("A", 2)

    def test_non_logger_passthrough(self):
        sentinel = object()
        assert with_log_context(sentinel, sheet_name="x") is sentinel


class TestSetupLogging:
    def test_explicit_level(self, restore_logging):
        logger = setup_logging("debug")
        assert logger.name == "sheet_export"
        assert logging.getLogger().level == logging.DEBUG

    def test_env_fallback(self, restore_logging, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        setup_logging()
        assert logging.getLogger().level == logging.ERROR

    def test_invalid_level_defaults_to_info(self, restore_logging, capsys):
        setup_logging("LOUD")
        assert logging.getLogger().level == logging.INFO
        assert "Invalid log level" in capsys.readouterr().err

    def test_log_file(self, restore_logging, tmp_path):
        log_file = tmp_path / "export.log"
        logger = setup_logging("INFO", log_format="json", log_file=log_file)
        logger.info("to file")
        for handler in logging.getLogger().handlers:
            handler.flush()
        entry = json.loads(log_file.read_text().strip().splitlines()[-1])
        assert entry["message"] == "to file"

    def test_flush_writes_pending_file_output(self, restore_logging, tmp_path):
        log_file = tmp_path / "flush.log"
        setup_logging("INFO", log_file=log_file).info("flushed line")
        flush_logging_handlers()
        assert "flushed line" in log_file.read_text()
