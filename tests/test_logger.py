# tests/test_logger.py

import logging
import sys

import pytest

from invoice_scanner.utils.logger import (
    ColoredFormatter,
    get_logger,
    parse_log_filter,
    setup_logger,
    setup_logger_from_config,
)


class TestParseLogFilter:
    def test_empty(self):
        assert parse_log_filter(None) == (None, {}, [])
        assert parse_log_filter("") == (None, {}, [])

    def test_bare_level(self):
        assert parse_log_filter("debug") == (logging.DEBUG, {}, [])

    def test_module_directives(self):
        default, modules, _ = parse_log_filter("warn, model_inference.stream=debug")

        assert default == logging.WARNING
        assert modules == {"invoice_scanner.model_inference.stream": logging.DEBUG}

    def test_qualified_names_are_kept(self):
        _, modules, _ = parse_log_filter("invoice_scanner.input_handler=error")

        assert modules == {"invoice_scanner.input_handler": logging.ERROR}

    def test_unknown_levels_are_skipped_and_reported(self):
        default, modules, rejected = parse_log_filter("loud, input_handler=shouty,info")

        assert default == logging.INFO
        assert modules == {}
        assert rejected == ["loud", "input_handler=shouty"]

    def test_last_bare_level_wins(self):
        assert parse_log_filter("info,error")[0] == logging.ERROR


class TestSetupLogger:
    def test_console_goes_to_stderr(self):
        logger = setup_logger(colorize=False)

        assert len(logger.handlers) == 1
        assert logger.handlers[0].stream is sys.stderr
        assert logger.propagate is False

    def test_configured_level(self):
        assert setup_logger(level="WARNING").level == logging.WARNING

    def test_env_filter_overrides_level(self, monkeypatch):
        monkeypatch.setenv("INVOICE_SCANNER_LOG", "debug,input_handler=error")

        logger = setup_logger(level="INFO")

        assert logger.level == logging.DEBUG
        assert logging.getLogger("invoice_scanner.input_handler").level == logging.ERROR
        logging.getLogger("invoice_scanner.input_handler").setLevel(logging.NOTSET)

    def test_unknown_level_logs_warning(self, monkeypatch, capsys):
        monkeypatch.setenv("INVOICE_SCANNER_LOG", "shouty,model_inference=loud")

        logger = setup_logger(level="INFO", colorize=False)

        err = capsys.readouterr().err
        assert logger.level == logging.INFO
        assert "Ignoring INVOICE_SCANNER_LOG directive 'shouty': unknown level" in err
        assert "'model_inference=loud'" in err

    def test_debug_overrides_env_filter(self, monkeypatch):
        monkeypatch.setenv("INVOICE_SCANNER_LOG", "error,model_inference=warn")

        logger = setup_logger(level="INFO", debug=True)

        assert logger.level == logging.DEBUG
        stream_logger = logging.getLogger("invoice_scanner.model_inference.stream")
        assert stream_logger.getEffectiveLevel() == logging.DEBUG

    def test_debug_clears_levels_from_earlier_setup(self, monkeypatch):
        monkeypatch.setenv("INVOICE_SCANNER_LOG", "input_handler=error")
        setup_logger()

        setup_logger(debug=True)

        assert logging.getLogger("invoice_scanner.input_handler").level == logging.NOTSET

    def test_custom_env_var(self, monkeypatch):
        monkeypatch.setenv("MY_LOG", "error")

        assert setup_logger(env_var="MY_LOG").level == logging.ERROR

    def test_colored_formatter(self):
        logger = setup_logger(colorize=True)

        assert isinstance(logger.handlers[0].formatter, ColoredFormatter)

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "scan.log"

        logger = setup_logger(log_file=str(log_file), colorize=False)
        logger.warning("written to file")
        for handler in logger.handlers:
            handler.flush()

        assert "written to file" in log_file.read_text(encoding="utf-8")
        for handler in logger.handlers[1:]:
            handler.close()

    def test_from_config(self):
        logger = setup_logger_from_config()

        assert logger.name == "invoice_scanner"
        assert logger.level == logging.INFO

    def test_repeated_setup_does_not_duplicate_handlers(self):
        setup_logger()
        logger = setup_logger()

        assert len(logger.handlers) == 1


class TestGetLogger:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("invoice_scanner.model_inference.client", "invoice_scanner.model_inference.client"),
            ("main", "invoice_scanner.main"),
            ("invoice_scanner", "invoice_scanner"),
        ],
    )
    def test_namespacing(self, name, expected):
        assert get_logger(name).name == expected
