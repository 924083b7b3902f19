"""Logging setup."""

import logging

from finance_survey.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging() -> None:
    """Configure root logging once per process."""
    level = logging.DEBUG if settings.is_development else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)

    # Driver chatter is noisy at DEBUG
    logging.getLogger("pymongo").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
