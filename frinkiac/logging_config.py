"""Structured logging for the Frinkiac client.

Every record goes to a rotating JSON file (``logs/frinkiac.log``) and to a
plain console stream. JSON records carry the service name and version, plus
whatever context ``log_with_context`` attaches. The ``event_type`` field
groups them, e.g. ``frinkiac_search``, ``http_request`` or ``layout_error``.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from pythonjsonlogger import jsonlogger

from frinkiac import __version__

LOG_DIR = Path(__file__).parent.parent / "logs"
LOG_FILE = "frinkiac.log"
SERVICE_NAME = "frinkiac-client"

# Libraries that log every request; the client's own event hooks cover these
NOISY_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def setup_logging(log_level: str = "INFO", log_dir: Path | None = None) -> logging.Logger:
    """Install the JSON file handler and the console handler on the root logger.

    Args:
        log_level: Console and root level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for the rotating JSON log (defaults to ./logs)

    Returns:
        The configured root logger
    """
    level = getattr(logging, log_level.upper())
    log_dir = log_dir or LOG_DIR
    log_dir.mkdir(exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    # 10MB per file, 5 backups
    json_handler = RotatingFileHandler(
        log_dir / LOG_FILE,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    json_handler.setFormatter(
        jsonlogger.JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(filename)s %(lineno)d",
            static_fields={"service": SERVICE_NAME, "version": __version__},
            timestamp=True,
        )
    )
    json_handler.setLevel(logging.DEBUG)
    root_logger.addHandler(json_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    **extra_fields: Any,
) -> None:
    """Log ``message`` with ``extra_fields`` as top-level JSON keys.

    Args:
        logger: Logger instance
        level: Method name on the logger (debug, info, warning, error, critical)
        message: Log message
        **extra_fields: Structured context; pass ``event_type`` on every call
    """
    getattr(logger, level.lower())(message, extra=extra_fields)
