"""
Logging configuration for the shopping cart service.

Sets the root level and format once at startup; modules log through
``logging.getLogger(__name__)``.
"""

import logging

from app.config import settings


LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"

# Third-party loggers that are noisy at INFO
QUIET_LOGGERS = {
    "sqlalchemy.engine": "WARNING",
    "alembic.runtime.migration": "WARNING",
}


def configure_logging(level_name: str = None):
    """Configure logging for the application."""
    level_name = (level_name or settings.log_level).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(level=log_level, format=LOG_FORMAT)
    logging.getLogger().setLevel(log_level)

    for logger_name, quiet_level in QUIET_LOGGERS.items():
        logging.getLogger(logger_name).setLevel(getattr(logging, quiet_level))

