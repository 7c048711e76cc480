import logging

LOG_FORMAT = '[%(asctime)s] %(levelname)s [%(name)s]: %(message)s'


def configure_logging(level: str = "INFO", name: str = "internlink") -> logging.Logger:
    """
    Configures and returns the package logger.

    Module loggers (logging.getLogger(__name__)) inherit from it, so this only
    needs to run once per app. Existing handlers are cleared first so building
    several apps in one process (tests) does not duplicate output.
    """
    logger = logging.getLogger(name)

    if logger.hasHandlers():
        logger.handlers.clear()

    logger.setLevel(level.upper())
    formatter = logging.Formatter(LOG_FORMAT)

    ch = logging.StreamHandler()
    ch.setLevel(level.upper())
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    logger.propagate = False
    return logger
