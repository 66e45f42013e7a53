"""Shared helpers: logger setup."""

# Carca Manager
# Copyright (C) 2025  Carca Manager developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import logging
from pathlib import Path
from typing import Optional, Union

from carcamanager.constants import APP_PACKAGE, LOG_FORMAT


def setup_logger(name: str) -> logging.Logger:
    """Return the logger for a module.

    Handlers are attached once to the package logger by
    :func:`configure_logging`; module loggers only propagate to it.
    """
    return logging.getLogger(name)


def configure_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """Attach a single handler to the package logger.

    Args:
        level: Logging level for the package logger
        log_file: When given, log records go to this file instead of stderr.
            The full-screen UI always passes a file so log lines never
            draw over the screen.

    Returns:
        The configured package logger
    """
    package_logger = logging.getLogger(APP_PACKAGE)
    package_logger.setLevel(level)

    for existing in list(package_logger.handlers):
        if not isinstance(existing, logging.NullHandler):
            package_logger.removeHandler(existing)
            existing.close()

    if log_file:
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    return package_logger


__all__ = ["setup_logger", "configure_logging"]
