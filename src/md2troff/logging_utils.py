"""Logging set-up for the md2troff command line.

The CLI may write macros or PDF bytes to stdout, so every log record goes to
stderr and, optionally, to a log file.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Union

from md2troff.constants import LOG_FORMAT, TRACE_DATE_FORMAT, TRACE_LOG_FORMAT


def _resolve_level(log_level: int | str) -> int:
    if isinstance(log_level, int):
        return log_level
    return getattr(logging, str(log_level).upper(), logging.INFO)


def _make_formatter(trace_mode: bool) -> logging.Formatter:
    if trace_mode:
        return logging.Formatter(TRACE_LOG_FORMAT, datefmt=TRACE_DATE_FORMAT)
    return logging.Formatter(LOG_FORMAT)


def _attach(logger: logging.Logger, handler: logging.Handler, level: int, formatter: logging.Formatter) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def configure_logging(
    log_level: int | str,
    log_file: Optional[Union[str, Path]] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Replace the root logging handlers with md2troff's stderr/file handlers.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "DEBUG"). Unknown names
        fall back to INFO.
    log_file : str or Path, optional
        File that receives a copy of every record, appended to.
    trace_mode : bool, default False
        Include timestamps, logger names and line numbers.

    Returns
    -------
    logging.Logger
        The configured root logger instance.

    """
    level = _resolve_level(log_level)
    formatter = _make_formatter(trace_mode)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    _attach(root_logger, logging.StreamHandler(sys.stderr), level, formatter)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            root_logger.warning("Could not open log file %s: %s", log_file, exc)
        else:
            _attach(root_logger, file_handler, level, formatter)
            root_logger.debug("Appending log records to %s", log_file)

    return root_logger
