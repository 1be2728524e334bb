"""Shared helpers: logging setup and identifier generation."""

# Esports Scheduler
# Copyright (C) 2025  Esports Scheduler developers
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

import itertools
import logging
from typing import Optional, Union

from esportscheduler.constants import LOG_FORMAT, PACKAGE_LOGGER_NAME

_id_counter = itertools.count(1)

# Handler installed by the last configure_logging call
_installed_handler: Optional[logging.Handler] = None

# The library stays silent unless the application configures logging.
logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())


def setup_logger(name: str) -> logging.Logger:
    """Return the logger for a module of this package.

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        A standard library logger under the package namespace
    """
    return logging.getLogger(name)


def configure_logging(
    level: Union[int, str] = logging.INFO,
    handler: Optional[logging.Handler] = None,
) -> logging.Logger:
    """Attach a formatted handler to the package logger.

    Meant for applications embedding the scheduler; calling it again
    replaces the handler installed by a previous call.

    Args:
        level: Logging level name or number
        handler: Handler to use, a stderr stream handler by default

    Returns:
        The configured package logger
    """
    global _installed_handler

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if _installed_handler is not None:
        logger.removeHandler(_installed_handler)

    handler = handler or logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    _installed_handler = handler
    logger.setLevel(level)
    return logger


def generate_id(prefix: str) -> str:
    """Generate a process-unique identifier such as ``Match-7``."""
    return f"{prefix}-{next(_id_counter)}"
