"""Logging helpers shared by stormstatsd modules."""

import logging

LOGGER_NAME = "stormstatsd"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a standard library logger inside the stormstatsd hierarchy.

    Args:
        name: Module name, usually __name__. Names outside the package are
            nested under the "stormstatsd" logger.

    Returns:
        A logging.Logger. No handlers are attached; applications configure
        output themselves.
    """
    if not name or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if name.startswith(f"{LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def log_exception(
    message: str,
    *args: object,
    logger: logging.Logger | None = None,
    exc_info: BaseException | bool = True,
) -> None:
    """Log an ERROR record carrying exception information.

    Args:
        message: Log message, %-style.
        *args: Arguments for the message.
        logger: Logger to use (default: the package logger).
        exc_info: Exception instance, or True to use the one being handled.
    """
    (logger or get_logger()).error(message, *args, exc_info=exc_info)
