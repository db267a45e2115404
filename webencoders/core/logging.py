"""Logging utilities for webencoders modules."""

import logging

PACKAGE_LOGGER = 'webencoders'


def get_logger(name: str, default_level: int = logging.WARNING) -> logging.Logger:
    """Get a package logger without overriding an explicit configuration.

    The default level is applied only while nothing else configured the
    logger: its own level is still NOTSET and the root logger has no
    handlers. A level set by webencoders.setup_logging() or by the
    application is never touched, however many codecs are created.

    Args:
        name: Logger name (typically __name__)
        default_level: Level used while the logger is unconfigured

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    logger.propagate = True

    if logger.level == logging.NOTSET and not logging.getLogger().handlers:
        logger.setLevel(default_level)

    return logger


def configure_package_loggers(level: int, names=(PACKAGE_LOGGER, 'webencoders.codec')) -> None:
    """Sets the level of every package logger."""
    for name in names:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.propagate = True
