"""
🧪 Tests Logging System
Handler setup, JSON formatting and logger factories
"""

import json
import logging
import sys

import pytest

from core.config import Settings
from core.logger import JSONFormatter, get_logger, get_solver_logger, setup_logging


@pytest.fixture
def restore_root_logger():
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers = handlers
    root_logger.setLevel(level)


class TestLoggingSetup:
    """Tests for setup_logging()"""

    def test_console_handler_only(self, restore_root_logger, tmp_path):
        setup_logging(Settings(logs_dir=tmp_path / "logs", log_to_file=False, log_level="WARNING"))

        handler_types = [type(h).__name__ for h in restore_root_logger.handlers]
        assert handler_types == ["RichHandler"]
        assert restore_root_logger.handlers[0].level == logging.WARNING
        assert not (tmp_path / "logs").exists()

    def test_file_handler(self, restore_root_logger, tmp_path):
        logs_dir = tmp_path / "logs"
        setup_logging(Settings(logs_dir=logs_dir, log_to_file=True))

        handler_types = [type(h).__name__ for h in restore_root_logger.handlers]
        assert "RichHandler" in handler_types
        assert "RotatingFileHandler" in handler_types

        get_solver_logger([1, 2, 3, 4, 5, 6], 21).info("Generation 1 done")
        for handler in restore_root_logger.handlers:
            handler.flush()

        lines = (logs_dir / "solver.log").read_text(encoding="utf-8").splitlines()
        record = json.loads(lines[-1])
        assert record["message"] == "Generation 1 done"
        assert record["numbers"] == [1, 2, 3, 4, 5, 6]
        assert record["target"] == 21


class TestJSONFormatter:

    def test_basic_fields(self):
        record = logging.LogRecord(
            name="genetic.genetic_solver", level=logging.INFO, pathname=__file__, lineno=10,
            msg="best improved to %s", args=(3,), exc_info=None
        )
        data = json.loads(JSONFormatter().format(record))

        assert data["level"] == "INFO"
        assert data["logger"] == "genetic.genetic_solver"
        assert data["message"] == "best improved to 3"
        assert "timestamp" in data

    def test_exception_included(self):
        try:
            raise RuntimeError("corrupt attempt")
        except RuntimeError:
            exc_info = sys.exc_info()

        record = logging.LogRecord(
            name="genetic.crossover", level=logging.ERROR, pathname=__file__, lineno=1,
            msg="skipped", args=(), exc_info=exc_info
        )
        data = json.loads(JSONFormatter().format(record))

        assert "RuntimeError: corrupt attempt" in data["exception"]


class TestLoggerFactories:

    def test_plain_logger(self):
        logger = get_logger("genetic.test")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "genetic.test"

    def test_logger_with_extra_data(self):
        logger = get_logger("genetic.test", {"run": 1})
        assert isinstance(logger, logging.LoggerAdapter)
        assert logger.extra == {"run": 1}

    def test_solver_logger(self):
        logger = get_solver_logger((1, 2, 3, 4, 5, 6), 21)
        assert logger.extra == {"numbers": [1, 2, 3, 4, 5, 6], "target": 21}

    def test_solver_logger_without_inputs(self):
        assert isinstance(get_solver_logger(), logging.Logger)
