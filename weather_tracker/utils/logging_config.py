import logging
import sys
from pathlib import Path
from typing import Optional

import structlog

from weather_tracker.config.config import Config, config


class CustomFormatter(logging.Formatter):
    """Custom formatter that implements the format: [yyyy-mm-dd hh:mm:ss] [log_type] [class_name]: {message}"""

    def format(self, record):
        # Extract class name from the logger name
        class_name = record.name.split('.')[-1] if '.' in record.name else record.name

        timestamp = self.formatTime(record, '%Y-%m-%d %H:%M:%S')

        formatted_message = f"[{timestamp}] [{record.levelname}] [{class_name}]: {record.getMessage()}"

        if record.exc_info:
            formatted_message += '\n' + self.formatException(record.exc_info)

        return formatted_message


def get_log_file_path(settings: Config) -> Path:
    """Get the log file path based on environment, creating the directory."""
    logs_dir = settings.get_log_directory()
    logs_dir.mkdir(parents=True, exist_ok=True)
    return logs_dir / f"weather_tracker_{settings.environment}.log"


def setup_logging(settings: Optional[Config] = None):
    """
    Configure logging for the application.

    Stdlib logging gets the bracketed line format on stdout (and optionally a
    per-environment file); structlog renders its key/value events into the
    message part, as JSON when ``log_format`` is ``json``.
    """
    settings = settings or config
    level = getattr(logging, settings.log_level.upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    formatter = CustomFormatter()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_file_path = None
    if settings.log_to_file:
        log_file_path = get_log_file_path(settings)
        file_handler = logging.FileHandler(log_file_path, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    if settings.log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = logging.getLogger(__name__)
    if log_file_path:
        logger.info(f"Logging configured - writing to {log_file_path}")
    else:
        logger.info("Logging configured - writing to stdout")
