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

"""Export settings for merged borehole records."""

import os

from geosk.datamodel import SOURCE_CRS, WGS84

DEFAULT_OUTPUT_FILE = "./output.json"
DEFAULT_FORMAT = "json"


class ExportOptions:
    def __init__(self, output_file=DEFAULT_OUTPUT_FILE, format=DEFAULT_FORMAT, crs=SOURCE_CRS, target_crs=WGS84):
        self.output_file = output_file
        self.format = format
        # crs/target_crs only apply to GeoJSON output
        self.crs = crs
        self.target_crs = target_crs

    @property
    def output_dir(self):
        return os.path.dirname(os.fspath(self.output_file)) or "."

    def update(self, **kwargs):
        for key, val in kwargs.items():
            if key not in self.to_dict():
                raise ValueError(f"Unknown export option: {key}")
            setattr(self, key, val)
        return self

    def to_dict(self):
        return {
            "output_file": self.output_file,
            "format": self.format,
            "crs": self.crs,
            "target_crs": self.target_crs,
        }
