"""
Logging configuration for the bank service.

Console output always; a rotating log file when ``logging.file`` is configured.
"""

import logging
from logging.handlers import RotatingFileHandler

from bank.core.config import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

SERVICE_LOGGER = "bank"


def setup_logging(settings: Settings) -> None:
    """
    Configure the ``bank`` logger tree. Safe to call more than once.
    """
    level = getattr(logging, settings.logging.level.upper(), logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)

    logger = logging.getLogger(SERVICE_LOGGER)
    logger.setLevel(level)
    # Avoid duplicate handlers if setup_logging is called multiple times
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    log_file = settings.logging.file
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=settings.logging.max_bytes,
            backupCount=settings.logging.backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Keep SQLAlchemy quiet unless echo is requested explicitly
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.database.echo else logging.WARNING
    )
