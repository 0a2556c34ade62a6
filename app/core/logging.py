import logging
import sys

def get_logger(name: str, log_level: str | None = None) -> logging.Logger:
    """
    Configures and returns a logger.

    The level falls back to the LOG_LEVEL setting. A logger that already has a
    handler is returned as-is, so repeated imports don't duplicate output.
    """
    logger = logging.getLogger(name)
    if log_level is None:
        from app.core.config import get_settings
        log_level = get_settings().LOG_LEVEL
    logger.setLevel(log_level.upper())

    if logger.handlers:
        return logger

    # Create a handler to write logs to the console
    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger
