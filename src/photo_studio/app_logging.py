"""Logging configuration helpers."""

import logging

from photo_studio.config import Settings

LOGGER_NAME = "photo_studio"
LOG_FORMAT = "%(asctime)s %(levelname)s: %(name)s: %(message)s"


def configure_logging(settings: Settings) -> logging.Logger:
    """Send ``photo_studio`` logs to stderr and report where data is kept.

    Repeated calls only update the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(settings.log_level.upper())
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    logger.info(
        "Environment %s, studio data in %s",
        settings.environment,
        settings.data_dir.resolve(),
    )
    return logger
