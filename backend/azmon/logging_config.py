"""Logging setup."""
import logging


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure the package logger with a single console handler."""
    logger = logging.getLogger("azmon")
    logger.setLevel(level.upper())

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
        logger.addHandler(handler)

    return logger
