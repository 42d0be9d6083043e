"""Logging setup for the docxdiff command line.

Console records go through :class:`rich.logging.RichHandler` on stderr, the
same stream as the change summary, so stdout stays reserved for the diff
itself. An optional log file receives plain-text records.
"""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

# Libraries whose DEBUG output would drown the engine's own trace
NOISY_LOGGERS = ("chardet", "mammoth")

FILE_FORMAT = "%(levelname)s: %(message)s"
TRACE_FILE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"


def resolve_level(log_level: int | str) -> int:
    """Turn a level name or number into a numeric logging level."""
    if isinstance(log_level, int):
        return log_level
    return getattr(logging, str(log_level).upper(), logging.INFO)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Configure root logging handlers for the command line.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "INFO").
    log_file : str, optional
        Path to a log file that receives a plain-text copy of the records.
    trace_mode : bool, default False
        Show timestamps and logger names, and render tracebacks with rich.

    Returns
    -------
    logging.Logger
        The configured root logger instance.

    """
    level = resolve_level(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = RichHandler(
        console=Console(stderr=True),
        level=level,
        show_time=trace_mode,
        show_path=trace_mode,
        rich_tracebacks=trace_mode,
        markup=False,
    )
    console_handler.setFormatter(logging.Formatter("[%(name)s] %(message)s" if trace_mode else "%(message)s"))
    root_logger.addHandler(console_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            root_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            file_handler.setLevel(level)
            file_handler.setFormatter(
                logging.Formatter(
                    TRACE_FILE_FORMAT if trace_mode else FILE_FORMAT,
                    datefmt="%Y-%m-%d %H:%M:%S" if trace_mode else None,
                )
            )
            root_logger.addHandler(file_handler)
            root_logger.info("Logging to file: %s", log_file)

    return root_logger
