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

"""Serialization of merged borehole records to JSON, CSV or GeoJSON."""

import enum
import json
import logging
import os

import pyproj

from . import data, validate
from .model import ExportOptions

log = logging.getLogger(__name__)

CSV_LINE_TERMINATOR = "\r\n"


def _csv_value(value):
    # lowercase like the JSON literals
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


class ExportFormat(enum.Enum):
    JSON = "json"
    CSV = "csv"
    GEOJSON = "geojson"

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f'Invalid export format "{value}"') from None


def to_json(entries):
    return json.dumps(list(entries), indent=2, ensure_ascii=False)


def to_csv(entries):
    """Render records as CSV with the first record's fields as header.

    Records with a different field set are written against that header
    anyway; missing fields come out empty and extra ones are dropped.
    """
    entries = list(entries)
    if not entries:
        return ""
    divergent = validate.report_divergent_fields(entries)
    if divergent:
        log.warning(
            "%d entries do not share the fields of the first entry, writing its %d columns only",
            len(divergent),
            len(entries[0]),
        )
    rows = [{key: _csv_value(val) for key, val in entry.items()} for entry in entries]
    frame = data.entries_frame(rows)
    return frame.to_csv(index=False, lineterminator=CSV_LINE_TERMINATOR)


def to_geojson(entries, crs=None, target_crs=None):
    gdf = data.entries_geoframe(entries, crs=crs)
    if target_crs is not None:
        gdf = gdf.to_crs(target_crs)
    return gdf.to_json(drop_id=True, ensure_ascii=False, indent=2)


def serialize_entries(entries, fmt, options=None):
    options = options or ExportOptions()
    fmt = ExportFormat.parse(fmt)
    if fmt is ExportFormat.JSON:
        return to_json(entries)
    elif fmt is ExportFormat.CSV:
        return to_csv(entries)
    elif fmt is ExportFormat.GEOJSON:
        return to_geojson(entries, crs=options.crs, target_crs=options.target_crs)
    raise ValueError(f'Invalid export format "{fmt.value}"')


def _check_crs(crs):
    try:
        pyproj.CRS.from_user_input(crs)
    except pyproj.exceptions.CRSError as exc:
        raise ValueError(f'Invalid CRS "{crs}"') from exc


def _check_options(options):
    fmt = ExportFormat.parse(options.format)
    if fmt is ExportFormat.GEOJSON:
        if options.crs is None and options.target_crs is not None:
            raise ValueError("GeoJSON reprojection requires a source CRS")
        for crs in (options.crs, options.target_crs):
            if crs is not None:
                _check_crs(crs)
    return fmt


def save_entries(entries, options=None):
    """Write records to ``options.output_file``, creating its directory.

    The format and CRS settings are checked before anything touches the
    filesystem. An existing output file is overwritten.
    """
    options = options or ExportOptions()
    fmt = _check_options(options)
    entries = list(entries)

    output_dir = options.output_dir
    log.info('Creating parent directory "%s"', output_dir)
    os.makedirs(output_dir, exist_ok=True)

    log.info('Writing %d entries to file "%s"', len(entries), options.output_file)
    content = serialize_entries(entries, fmt, options)
    with open(options.output_file, "w", encoding="utf-8", newline="") as f:
        f.write(content)
