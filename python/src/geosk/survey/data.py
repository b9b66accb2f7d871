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

"""File discovery, loading and merging helpers for borehole survey exports.

Source files are ArcGIS feature service query dumps shaped as
``{"features": [{"attributes": {...}}, ...]}``. Each attribute payload is one
borehole record; records from all files are concatenated in file order and
deduplicated by ``objectid`` so the first occurrence wins.
"""

import glob
import json
import logging
import os
from concurrent.futures import ThreadPoolExecutor
from numbers import Number
from pathlib import Path

import pandas as pd
import geopandas as gpd
import shapely.geometry

from geosk.datamodel import (
    ATTRIBUTES,
    FEATURES,
    GEOSK_DATA_MODEL_ENTRY,
    OBJECTID,
    SOURCE_CRS,
    SURADNICA_X,
    SURADNICA_Y,
)
from . import validate

log = logging.getLogger(__name__)


def empty_document():
    return {}


class ParseResult:
    """Outcome of parsing one source document.

    Holds either the parsed ``document`` or the ``error`` that prevented
    parsing. ``or_empty()`` collapses a failure to the empty document.
    """

    def __init__(self, document=None, error=None):
        self.document = document
        self.error = error

    @property
    def ok(self):
        return self.error is None

    def or_empty(self):
        if self.ok:
            return self.document
        return empty_document()

    def __repr__(self):
        if self.ok:
            return f"ParseResult(document={type(self.document).__name__})"
        return f"ParseResult(error={self.error!r})"


_GLOB_MAGIC = set("*?[")


def _pattern_root(pattern):
    parts = Path(pattern).parts
    literal = []
    for part in parts:
        if _GLOB_MAGIC & set(part):
            break
        literal.append(part)
    else:
        # no wildcard at all, the last part is the file itself
        literal = literal[:-1]
    return Path(*literal) if literal else Path(".")


def locate_files(pattern):
    """Expand a glob pattern into a sorted list of matching paths.

    The directory the pattern starts from is listed up front: glob swallows
    listing errors, so a permission problem would otherwise look like an
    empty input. A directory that does not exist matches nothing.
    """
    root = _pattern_root(os.fspath(pattern))
    try:
        with os.scandir(root):
            pass
    except FileNotFoundError:
        return []
    return sorted(glob.glob(os.fspath(pattern), recursive=True))


def parse_document(text):
    try:
        return ParseResult(document=json.loads(text))
    except json.JSONDecodeError as exc:
        return ParseResult(error=exc)


def load_file(filename):
    # Undecodable bytes are replaced rather than failing the read
    content = Path(filename).read_text(encoding="utf-8", errors="replace")
    result = parse_document(content)
    if not result.ok:
        log.warning('Skipping "%s": not a valid JSON document (%s)', filename, result.error)
    return result.or_empty()


def extract_entries(document):
    if not isinstance(document, dict):
        return []
    features = document.get(FEATURES)
    if not isinstance(features, list):
        return []

    entries = []
    for feature in features:
        if not isinstance(feature, dict):
            continue
        attributes = feature.get(ATTRIBUTES)
        if not isinstance(attributes, dict):
            continue
        entries.append(dict(attributes))
    return entries


def _load_entries(filename):
    entries = extract_entries(load_file(filename))
    log.debug('Extracted %d entries from "%s"', len(entries), filename)
    return entries


def dedupe_entries(entries):
    """Drop records whose ``objectid`` was already seen, keeping the first."""
    entries = list(entries)
    keys = pd.Series([validate.entry_id_key(entry) for entry in entries], dtype=object)
    duplicated = keys.duplicated(keep="first")
    if duplicated.any():
        log.debug("Dropped %d duplicate entries by %s", int(duplicated.sum()), OBJECTID)
    return [entry for entry, is_dup in zip(entries, duplicated) if not is_dup]


def process_entry_files(filenames, max_workers=None):
    """Load every file on a thread pool and merge the extracted records.

    Parameters
    ----------
    filenames : iterable of str or pathlib.Path
        Source files. Their order decides which duplicate survives.
    max_workers : int, optional
        Thread pool size, ``ThreadPoolExecutor`` default when omitted.

    Returns
    -------
    list of dict
        Records with unique ``objectid`` values, in file-then-position order.
    """
    filenames = list(filenames)
    if not filenames:
        return []

    # map() yields in submission order, whatever order the reads finish in
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        entries_per_file = list(executor.map(_load_entries, filenames))

    entries = [entry for file_entries in entries_per_file for entry in file_entries]
    return dedupe_entries(entries)


def _union_columns(entries):
    # known borehole fields first, in data model order, then anything else
    present = set()
    for entry in entries:
        present.update(entry)
    columns = {col: None for col in GEOSK_DATA_MODEL_ENTRY if col in present}
    for entry in entries:
        for key in entry:
            columns.setdefault(key, None)
    return list(columns)


def entries_frame(entries, columns=None):
    """Tabulate records, one row each.

    Columns default to the fields of the first record. Values stay Python
    objects so integers are not widened to floats by missing values.
    """
    entries = list(entries)
    if columns is None:
        columns = list(entries[0].keys()) if entries else []
    rows = [[entry.get(col) for col in columns] for entry in entries]
    return pd.DataFrame(rows, columns=columns, dtype=object)


def _is_coordinate(value):
    return isinstance(value, Number) and not isinstance(value, bool) and not pd.isna(value)


def _entry_point(entry):
    x = entry.get(SURADNICA_X)
    y = entry.get(SURADNICA_Y)
    if not _is_coordinate(x) or not _is_coordinate(y):
        return None
    return shapely.geometry.Point(-float(y), -float(x))


def entries_geoframe(entries, crs=SOURCE_CRS):
    """Records as point features in Krovak East North (or ``crs``)."""
    entries = list(entries)
    frame = entries_frame(entries, columns=_union_columns(entries))
    geometry = [_entry_point(entry) for entry in entries]
    return gpd.GeoDataFrame(frame, geometry=gpd.GeoSeries(geometry, crs=crs), crs=crs)
