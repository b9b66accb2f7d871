# SPDX-License-Identifier: GPL-3.0-or-later

# Copyright (C) 2026 Darkmine Pty Ltd

# This file is part of geosk.

# geosk is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

# geosk is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.

# You should have received a copy of the GNU General Public License
# along with geosk.  If not, see <https://www.gnu.org/licenses/>.

"""Logging setup for the command line entry point.

Library modules only create loggers (children of ``geosk``); handlers are
attached here, once, by whoever runs the process.
"""

import logging
import sys

LOGGER_NAME = "geosk"
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(stream=None, level=logging.INFO):
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Re-running in the same interpreter must not duplicate output lines
    for handler in list(logger.handlers):
        if getattr(handler, "_geosk_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT))
    handler._geosk_handler = True
    logger.addHandler(handler)
    return logger
