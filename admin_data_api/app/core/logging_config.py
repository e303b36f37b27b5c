"""
Logging configuration for the Admin Data API.

``setup_logging`` configures the ``admin_data_api`` package logger
rather than the root logger, so uvicorn and the test runner keep their
own handlers while every module logger below the package
(``logging.getLogger(__name__)``) inherits the level and handlers set
here.  Records still propagate to the root logger.

The function may run many times per process (``create_app`` is called
once per test).  The level is applied on every call; a handler is only
added if an equivalent one is not attached yet.
"""

import logging
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "admin_data_api"

_CONSOLE_HANDLER = "admin_data_api.console"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _has_file_handler(logger: logging.Logger, path: Path) -> bool:
    return any(
        isinstance(handler, logging.FileHandler) and Path(handler.baseFilename) == path
        for handler in logger.handlers
    )


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure the package logger and return it.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"`` or ``"info"``.  Unknown names
        fall back to ``INFO``.
    logfile : Optional[str]
        Extra file to write records to (``LOG_FILE``).  Relative paths
        are taken from the working directory and missing parent
        directories are created.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not any(handler.get_name() == _CONSOLE_HANDLER for handler in logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.set_name(_CONSOLE_HANDLER)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).expanduser().resolve()
        if not _has_file_handler(logger, log_path):
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
