# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

"""
Logging helpers.

Modules obtain their logger through ``get_logger(__name__)``; entry points call
``configure_logging`` once to attach handlers.
"""

import logging
import os
import sys
from typing import Optional

ROOT_LOGGER_NAME = "ddl2md"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_NAME = "ddl2md.log"


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package namespace."""
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(debug: bool = False, log_dir: Optional[str] = None, console_output: bool = True) -> None:
    """
    Configure the package logger.

    Args:
        debug: DEBUG level when True, INFO otherwise
        log_dir: Directory for a log file; no file logging when None
        console_output: Whether to log to stderr
    """
    level = logging.DEBUG if debug else logging.INFO
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)

    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if log_dir:
        log_dir = os.path.expanduser(log_dir)
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(os.path.join(log_dir, LOG_FILE_NAME), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    if not root.handlers:
        root.addHandler(logging.NullHandler())
