"""Logging setup for the filelist command line."""

import logging
from typing import Optional, TextIO

ROOT_LOGGER_NAME = "filelist"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(verbose: bool = False, stream: Optional[TextIO] = None) -> logging.Logger:
    """Attach a console handler to the package logger.

    Library modules only create loggers; handlers are installed here, by the CLI. Calling
    this again replaces the handler installed by the previous call.

    Args:
        verbose: If True, log at DEBUG; otherwise only errors are shown.
        stream: Where to write. Defaults to stderr.

    Returns:
        The package root logger.
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    level = logging.DEBUG if verbose else logging.ERROR
    root_logger.setLevel(level)

    for handler in list(root_logger.handlers):
        if getattr(handler, "_filelist_console", False):
            root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(stream)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    console_handler._filelist_console = True  # type: ignore[attr-defined]
    root_logger.addHandler(console_handler)
    return root_logger
