# === FILE: content_scrape/logger.py ===
"""Project-wide logging for **content_scrape**.

The resolver, the crawler, the CSV writer and the engine all log through the
one named logger defined here::

    from content_scrape.logger import logger
    logger.info("Found %d URLs", len(urls))

Output goes to stdout, plus a rotating file when the CLI gets ``--log-file``.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Union

_DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_LOGGER_NAME: Final[str] = "ContentScrape"

_LevelT = Union[int, str]


def _file_handler(file: Path | str) -> RotatingFileHandler:
    return RotatingFileHandler(
        filename=str(file),
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )


def configure(*, level: _LevelT = "INFO", log_file: str | Path | None = None) -> logging.Logger:
    """(Re)configure the project logger.

    Parameters
    ----------
    level
        Numeric or textual logging level (e.g. ``"DEBUG"``).
    log_file
        Path to a logfile. *None* → console-only output.

    Previous handlers are closed and dropped, so the CLI (and every test) can
    call this again without duplicated lines or a stale stdout.
    """
    lg = logging.getLogger(_LOGGER_NAME)
    lg.setLevel(level)

    for old in list(lg.handlers):
        lg.removeHandler(old)
        old.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        handlers.append(_file_handler(log_file))
    for handler in handlers:
        handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))
        lg.addHandler(handler)

    lg.propagate = False
    return lg


logger: logging.Logger = configure()

__all__ = ["logger", "configure"]
