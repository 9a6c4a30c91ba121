"""Application logger for the bidding app: stderr plus an optional log file."""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "bidding_app"

_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _attach(log: logging.Logger, handler: logging.Handler) -> None:
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
    log.addHandler(handler)


def setup_logger(
    name: str = LOGGER_NAME,
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """
    Attach handlers to the named logger once and return it.

    Args:
        name: Logger name; module loggers come from get_logger().
        level: Level as an int or a name such as "DEBUG".
        log_file: Bids and rejections are also appended here when set;
            missing parent directories are created.

    Returns:
        The logger. Later calls for the same name (every Streamlit rerun
        executes app.py again) leave its handlers and level untouched.
    """
    log = logging.getLogger(name)
    if log.handlers:
        return log

    log.setLevel(level.upper() if isinstance(level, str) else level)
    _attach(log, logging.StreamHandler(sys.stderr))

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        _attach(log, logging.FileHandler(path, encoding="utf-8"))

    return log


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    return logging.getLogger(name)
