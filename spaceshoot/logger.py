"""File logging for the game's ``spaceshoot`` logger hierarchy."""

import logging
import sys
from pathlib import Path

LOGGER_NAME = "spaceshoot"
DEFAULT_LOG_PATH = Path("..", "..", "logs", "async_game.log")

_PATTERN = "[%(asctime)s.%(msecs)03d] [%(levelname)s] [thread %(thread)d] %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class _LowerLevelFormatter(logging.Formatter):
    """Formatter that prints level names in lower case."""

    def format(self, record):
        original = record.levelname
        record.levelname = original.lower()
        try:
            return super().format(record)
        finally:
            record.levelname = original


class _GameFileHandler(logging.FileHandler):
    """File handler installed by :func:`init_async_logger`."""


def init_async_logger(path=DEFAULT_LOG_PATH):
    """Send the game's log records at INFO and above to ``path``.

    The file is truncated. Returns the configured logger, or ``None`` after
    reporting on stderr when the file cannot be opened.
    """
    logger = logging.getLogger(LOGGER_NAME)
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = _GameFileHandler(path, mode="w", encoding="utf-8")
    except OSError as exc:
        print(f"Asynchronous logger initialization failed: {exc}", file=sys.stderr)
        return None

    handler.setFormatter(_LowerLevelFormatter(_PATTERN, _DATE_FORMAT))
    for old in [h for h in logger.handlers if isinstance(h, _GameFileHandler)]:
        logger.removeHandler(old)
        old.close()
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.info("Asynchronous logger initialized successfully")
    return logger