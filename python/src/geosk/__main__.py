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

"""Merge the borehole exports in ``input/`` into ``output/geology-sk.csv``.

Run from the directory holding ``input/``::

    python -m geosk
"""

import logging
import sys

from geosk.datamodel import OBJECTID
from geosk.logger import configure_logging
from geosk.survey import data, export, validate
from geosk.survey.model import ExportOptions

INPUT_PATTERN = "input/*.json"
OUTPUT_FILE = "./output/geology-sk.csv"
OUTPUT_FORMAT = "csv"

log = logging.getLogger("geosk.main")


def run(pattern=INPUT_PATTERN, options=None):
    options = options or ExportOptions(output_file=OUTPUT_FILE, format=OUTPUT_FORMAT)
    files = data.locate_files(pattern)
    log.debug('Found %d files matching "%s"', len(files), pattern)
    entries = data.process_entry_files(files)

    missing = validate.report_missing_ids(entries)
    if missing:
        log.warning("%d entries have no %s", len(missing), OBJECTID)

    export.save_entries(entries, options)
    return entries


def main():
    configure_logging()
    try:
        run()
    except (OSError, ValueError) as exc:
        log.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
