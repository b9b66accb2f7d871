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

"""
Geosk Data Model

Field names of the borehole survey records published by the Slovak geological
survey (ArcGIS feature service query exports), and the wrapper keys of the
source documents that carry them.

Records are passed through untouched, so this model documents what to expect
rather than enforcing it.
"""

# Source document wrapper keys
FEATURES = "features"
ATTRIBUTES = "attributes"

# Dedupe key, unique across the merged dataset
OBJECTID = "objectid"

BOREHOLE_NUMBER_FULL = "evidencnecislovrtupomocne"
BOREHOLE_NUMBER = "evidencnecislovrtu"
ORIGINAL_NUMBER = "povodneevidencnecislo"
MAP_SHEET = "mapa"
BASIN = "povodie"
HYDRO_REGION = "hydrorajon"
LOCALITY = "lokalita"
OPERATOR = "prevadzajucaorganizacia"
SURADNICA_X = "suradnicax"
SURADNICA_Y = "suradnicay"
ELEVATION_TERRAIN = "suradnicazteren"
ELEVATION_CASING = "suradnicazpazenie"
DEPTH = "hlbkavrtu"
BOREHOLE_TYPE = "typvrtu"
BOREHOLE_TYPE_DESCRIPTION = "typvrtupopis"
REPORT_ARCHIVE_NUMBER = "archivnecislospravy"
REPORT_ARCHIVE_STRING = "archivnecisloretazec"
CLASSIFIED_UNTIL = "utajeniespravydo"
PROCESSED_DATE = "spracovaldatum"
NOTE = "poznamka"
PDF = "pdf"

# S-JTSK as published: positive southing (x) and westing (y) in metres.
# EPSG:5514 (Krovak East North) places the point at (-y, -x).
SOURCE_CRS = "EPSG:5514"
WGS84 = "EPSG:4326"

# One record per borehole, example values as of 2022-01-16
GEOSK_DATA_MODEL_ENTRY = {
    # 433
    OBJECTID: int,
    # 'L-33-12-A-c/136'
    BOREHOLE_NUMBER_FULL: str,
    # 136
    BOREHOLE_NUMBER: int,
    # 'P-6'
    ORIGINAL_NUMBER: str,
    # 'L-33-12-A-c', the 1:25 000 map sheet
    MAP_SHEET: str,
    # 'Dunaj'
    BASIN: str,
    # '52 Q'
    HYDRO_REGION: str,
    # 'Gabčíkovo'
    LOCALITY: str,
    # usually null
    OPERATOR: str,
    # 1310246.4
    SURADNICA_X: float,
    # 538640.31
    SURADNICA_Y: float,
    # 112.87, terrain elevation in metres
    ELEVATION_TERRAIN: float,
    # 113.49, casing top elevation in metres
    ELEVATION_CASING: float,
    # 10, borehole depth in metres
    DEPTH: float,
    # 4
    BOREHOLE_TYPE: int,
    # 'monitorovací vrt'
    BOREHOLE_TYPE_DESCRIPTION: str,
    # '93548', nullable
    REPORT_ARCHIVE_NUMBER: str,
    # nullable
    REPORT_ARCHIVE_STRING: str,
    # unknown, usually null
    CLASSIFIED_UNTIL: object,
    # 1477267200000, epoch milliseconds
    PROCESSED_DATE: int,
    # unknown, usually null
    NOTE: object,
    # '12Ac136.pdf'
    PDF: str,
}
