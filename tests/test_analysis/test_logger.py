# Tests for logging utilities

import logging

import pytest
from src.analysis.logger import setup_logging, emit_diagnostics
from src.core.constants import LOGGER_NAME
from src.core.types import Diagnostic


@pytest.fixture
def clean_logger():
    """Restore the package logger after a test."""
    logger = logging.getLogger(LOGGER_NAME)
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)


class TestSetupLogging:

    def test_level(self, clean_logger):
        """Logger level should follow the argument."""
        logger = setup_logging(level="warning")

        assert logger is clean_logger
        assert logger.level == logging.WARNING

    def test_no_duplicate_handlers(self, clean_logger):
        """Repeated setup should not stack handlers."""
        setup_logging()
        setup_logging()

        assert len(clean_logger.handlers) == 1

    def test_log_file(self, clean_logger, temp_dir):
        """File handler should write records."""
        log_file = temp_dir / "logs" / "vehicle.log"
        logger = setup_logging(level="ERROR", log_file=log_file)

        logger.error("wheel_base_m %f is almost 0.0", 0.0)
        for handler in logger.handlers:
            handler.flush()

        assert len(logger.handlers) == 2
        assert "wheel_base_m 0.000000 is almost 0.0" in log_file.read_text()


class TestEmitDiagnostics:

    def test_forwarded_in_order(self, caplog):
        """Each diagnostic should become one record."""
        logger = logging.getLogger("test_emit")
        diagnostics = [
            Diagnostic(level="ERROR", message="first"),
            Diagnostic(level="WARNING", message="second"),
        ]
        with caplog.at_level(logging.DEBUG, logger="test_emit"):
            count = emit_diagnostics(diagnostics, logger)

        assert count == 2
        assert [r.getMessage() for r in caplog.records] == ["first", "second"]
        assert [r.levelno for r in caplog.records] == [logging.ERROR, logging.WARNING]

    def test_unknown_level_is_error(self, caplog):
        """Unknown level names should fall back to ERROR."""
        logger = logging.getLogger("test_emit")
        with caplog.at_level(logging.DEBUG, logger="test_emit"):
            emit_diagnostics([Diagnostic(level="LOUD", message="x")], logger)

        assert caplog.records[0].levelno == logging.ERROR

    def test_empty(self):
        """No diagnostics should emit nothing."""
        assert emit_diagnostics([], logging.getLogger("test_emit")) == 0
