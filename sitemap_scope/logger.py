# === FILE: sitemap_scope/logger.py ===
"""Logging for **SitemapScope**.

Library modules log through the shared :data:`logger` and only at DEBUG:
dropped links, rejected formats and the detected format. The CLI raises the
level and may add a log file with :func:`init_logging`. Records go to
*stderr* so that the JSON printed by ``sitemap-scope detect`` stays clean
on stdout.

    from sitemap_scope.logger import logger
    logger.debug("Format %s gives %d links", fmt.value, count)
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Union

DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_LOGGER_NAME: Final[str] = "SitemapScope"
_MAX_LOG_BYTES: Final[int] = 5 * 1024 * 1024
_LOG_BACKUPS: Final[int] = 3

_LevelT = Union[int, str]


def _build_handler(target: Path | str | None, fmt: str) -> logging.Handler:
    """stderr handler when *target* is None, rotating file handler otherwise."""
    handler: logging.Handler
    if target is None:
        handler = logging.StreamHandler(sys.stderr)
    else:
        handler = RotatingFileHandler(
            filename=str(target),
            maxBytes=_MAX_LOG_BYTES,
            backupCount=_LOG_BACKUPS,
            encoding="utf-8",
        )
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def configure(
    *,
    level: _LevelT = "WARNING",
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
    replace_handlers: bool = True,
) -> logging.Logger:
    """Set the level and handlers of the package logger.

    Parameters
    ----------
    level
        Numeric or textual logging level, e.g. ``"DEBUG"``.
    log_file
        Extra rotating log file next to stderr output; *None* for stderr only.
    log_format
        Format string shared by all handlers.
    replace_handlers
        Close and drop the current handlers first (the default).
    """
    lg = logging.getLogger(_LOGGER_NAME)
    lg.setLevel(level)

    if replace_handlers:
        for handler in list(lg.handlers):
            lg.removeHandler(handler)
            handler.close()

    lg.addHandler(_build_handler(None, log_format))
    if log_file is not None:
        lg.addHandler(_build_handler(log_file, log_format))

    # records from this package never reach the root logger
    lg.propagate = False
    return lg


def init_logging(
    level: _LevelT = "WARNING",
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Reset the package logger; used by the CLI for its ``--log-*`` options."""
    return configure(level=level, log_file=log_file, log_format=log_format, replace_handlers=True)


logger: logging.Logger = init_logging()

__all__ = ["logger", "configure", "init_logging", "DEFAULT_FORMAT"]
