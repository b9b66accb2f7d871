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

"""QA helpers for merged borehole records."""

import math

from geosk.datamodel import OBJECTID


# Key of records that have no objectid field at all, distinct from null
ABSENT_ID = ("absent",)
_NAN_ID = ("nan",)


def id_key(value):
    """Normalize an ``objectid`` value into a hashable dedupe key.

    ``None`` and NaN are keys of their own, all NaNs sharing one. Unhashable
    ids never compare equal to anything else.
    """
    if isinstance(value, float) and math.isnan(value):
        return _NAN_ID
    if isinstance(value, (dict, list)):
        return ("unhashable", id(value))
    return value


def entry_id_key(entry, id_col=OBJECTID):
    if id_col not in entry:
        return ABSENT_ID
    return id_key(entry[id_col])


def report_missing_ids(entries, id_col=OBJECTID):
    issues = []
    for idx, entry in enumerate(entries):
        if entry_id_key(entry, id_col) in (ABSENT_ID, _NAN_ID, None):
            issues.append({"index": idx, "type": "missing_id", "entry": entry})
    return issues


def report_divergent_fields(entries):
    """Compare each record's field set against the first record.

    Returns a list of issue dicts with the fields missing from, or extra to,
    the record at ``index``.
    """
    issues = []
    if not entries:
        return issues
    expected = list(entries[0].keys())
    expected_set = set(expected)
    for idx, entry in enumerate(entries[1:], start=1):
        missing = [col for col in expected if col not in entry]
        extra = [col for col in entry if col not in expected_set]
        if missing or extra:
            issues.append({
                "index": idx,
                "objectid": entry.get(OBJECTID),
                "type": "divergent_fields",
                "missing": missing,
                "extra": extra,
            })
    return issues
