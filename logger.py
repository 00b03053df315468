import logging
import sys

from config import get_settings


class LevelColorFormatter(logging.Formatter):
    """Logging formatter that colors each record by its level."""

    grey = "\x1b[38;20m"
    green = "\x1b[32;20m"
    yellow = "\x1b[33;20m"
    red = "\x1b[31;20m"
    bold_red = "\x1b[31;1m"
    reset = "\x1b[0m"
    format_str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    COLORS = {
        logging.DEBUG: grey,
        logging.INFO: green,
        logging.WARNING: yellow,
        logging.ERROR: red,
        logging.CRITICAL: bold_red,
    }

    def format(self, record):
        color = self.COLORS.get(record.levelno, self.reset)
        formatter = logging.Formatter(
            color + self.format_str + self.reset, datefmt="%Y-%m-%d %H:%M:%S"
        )
        return formatter.format(record)


def get_logger(name: str) -> logging.Logger:
    """Returns a stdout logger for `name` at the configured log level."""
    logger = logging.getLogger(name)

    # hasHandlers() walks up to root, so check this logger's own handlers
    if not logger.handlers:
        logger.setLevel(get_settings().log_level)

        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(LevelColorFormatter())
        logger.addHandler(handler)

    return logger
