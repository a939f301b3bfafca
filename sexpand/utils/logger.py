import logging

from sexpand.utils.config import getenv

FORMAT = "%(asctime)s - %(levelname)s - %(message)s (%(filename)s:%(lineno)d)"
DATEFMT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LEVEL = logging.WARNING


class LogFormatter(logging.Formatter):
    COLORS = {
        logging.DEBUG: "\x1b[38;20m",
        logging.INFO: "\x1b[37;0m",
        logging.WARNING: "\x1b[33;20m",
        logging.ERROR: "\x1b[31;20m",
        logging.CRITICAL: "\x1b[31;1m",
    }
    RESET = "\x1b[0m"

    def __init__(self):
        super().__init__(FORMAT, datefmt=DATEFMT)

    def format(self, record):
        color = self.COLORS.get(record.levelno, "")
        return color + super().format(record) + self.RESET


def resolve_level(name: str) -> int | None:
    """Map a level name such as ``debug`` to its number, or None if unknown."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else None


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(LogFormatter())
        logger.addHandler(handler)
    logger.propagate = False

    level_name = getenv("SEXPAND_LOG_LEVEL")
    level = resolve_level(level_name) if level_name else DEFAULT_LEVEL
    if level is None:
        logger.setLevel(DEFAULT_LEVEL)
        logger.warning("Ignoring unknown SEXPAND_LOG_LEVEL %r", level_name)
    else:
        logger.setLevel(level)
    return logger


LOGGER = get_logger("sexpand")
