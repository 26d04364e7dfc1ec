import logging
import os

_DEFAULT_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def setup_logging(level: str | None = None) -> logging.Logger:
    """Library-friendly: do not touch root handlers.

    Ensure the 'attendance_tracker' logger exists with a NullHandler; the app
    factory decides where records actually go.
    """
    logger = logging.getLogger("attendance_tracker")
    logger.setLevel(getattr(logging, (level or _DEFAULT_LEVEL).upper(), logging.INFO))
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())
    logger.propagate = True
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    base = logging.getLogger("attendance_tracker")
    if not name or name == base.name:
        return base
    if name.startswith(base.name + "."):
        return logging.getLogger(name)
    return base.getChild(name)


logger = setup_logging()
