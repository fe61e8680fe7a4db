"""Shared utilities for Social Doubles."""

# Social Doubles
# Copyright (C) 2025  Social Doubles developers
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
import os
import sys

from socialdoubles.constants import (
    DEFAULT_LOG_LEVEL,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    LOG_LEVEL_ENV_VAR,
)

PACKAGE_LOGGER_NAME = "socialdoubles"


def _configure_package_logger() -> logging.Logger:
    """Attach the console handler to the package logger exactly once."""
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if package_logger.handlers:
        return package_logger

    level_name = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    return package_logger


def setup_logger(name: str) -> logging.Logger:
    """Get a module logger that reports through the package logger.

    Args:
        name: Module name, usually ``__name__``

    Returns:
        Logger instance
    """
    _configure_package_logger()
    return logging.getLogger(name)
