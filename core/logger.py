"""
📝 Logging System
Console and rotating JSON file logging for solver runs
"""

import logging
import logging.handlers
import json
from typing import Optional, Dict, Any, Sequence
from datetime import datetime, timezone

import structlog
from rich.logging import RichHandler
from rich.console import Console

from .config import Settings, get_settings


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured log files"""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # Custom fields attached through get_logger(extra_data=...)
        for key in ("numbers", "target", "generation"):
            if hasattr(record, key):
                log_data[key] = getattr(record, key)
        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Configure the logging system"""
    if settings is None:
        settings = get_settings()

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(logging.DEBUG)

    # Console handler with Rich
    console_handler = RichHandler(
        console=Console(stderr=True),
        show_time=True,
        show_path=settings.debug,
        rich_tracebacks=True
    )
    console_handler.setLevel(getattr(logging, settings.log_level))
    console_handler.setFormatter(logging.Formatter("%(name)s - %(message)s"))
    root_logger.addHandler(console_handler)

    if settings.log_to_file:
        settings.logs_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            filename=settings.logs_dir / "solver.log",
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding="utf-8"
        )
        file_handler.setLevel(logging.DEBUG if settings.debug else logging.INFO)
        file_handler.setFormatter(JSONFormatter())
        root_logger.addHandler(file_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer()
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logger = get_logger("numbers_ga.startup")
    logger.debug(
        "Logging system initialized (level=%s, file=%s, environment=%s)",
        settings.log_level,
        settings.logs_dir / "solver.log" if settings.log_to_file else None,
        settings.environment,
    )


def get_logger(name: str, extra_data: Optional[Dict[str, Any]] = None) -> logging.Logger:
    """
    Return a logger, wrapped in an adapter when extra data is given.

    Args:
        name: Logger name (e.g. "genetic.genetic_solver")
        extra_data: Fields attached to every record emitted through the logger

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)

    if extra_data:
        logger = logging.LoggerAdapter(logger, extra_data)

    return logger


def get_solver_logger(numbers: Optional[Sequence[int]] = None, target: Optional[int] = None) -> logging.Logger:
    """
    Return a logger tagged with the inputs of one solver run.

    Args:
        numbers: The six input numbers
        target: The target value
    """
    extra_data = {}
    if numbers is not None:
        extra_data["numbers"] = list(numbers)
    if target is not None:
        extra_data["target"] = target

    return get_logger("numbers_ga.solver", extra_data)
