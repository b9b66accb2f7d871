# SPDX-License-Identifier: GPL-3.0-or-later

# Copyright (C) 2026 Darkmine Pty Ltd

import json
from pathlib import Path
import sys

import pytest


ROOT = Path(__file__).resolve().parents[1]
PYTHON_SRC_PATH = ROOT / "python" / "src"

if str(PYTHON_SRC_PATH) not in sys.path:
    sys.path.insert(0, str(PYTHON_SRC_PATH))


SAMPLE_ENTRY = {
    "objectid": 433,
    "evidencnecislovrtupomocne": "L-33-12-A-c/136",
    "evidencnecislovrtu": 136,
    "povodneevidencnecislo": "P-6",
    "mapa": "L-33-12-A-c",
    "povodie": "Dunaj",
    "hydrorajon": "52 Q",
    "lokalita": "Gabčíkovo",
    "prevadzajucaorganizacia": None,
    "suradnicax": 1310246.4,
    "suradnicay": 538640.31,
    "suradnicazteren": 112.87,
    "suradnicazpazenie": 113.49,
    "hlbkavrtu": 10,
    "typvrtu": 4,
    "typvrtupopis": "monitorovací vrt",
    "archivnecislospravy": "93548",
    "archivnecisloretazec": None,
    "utajeniespravydo": None,
    "spracovaldatum": 1477267200000,
    "poznamka": None,
    "pdf": "12Ac136.pdf",
}


def feature_collection(*entries):
    return {"features": [{"attributes": entry} for entry in entries]}


@pytest.fixture
def write_export(tmp_path):
    """Write a source document (or raw text) under ``tmp_path/input``."""
    input_dir = tmp_path / "input"
    input_dir.mkdir(exist_ok=True)

    def _write(name, document):
        path = input_dir / name
        if isinstance(document, str):
            path.write_text(document, encoding="utf-8")
        else:
            path.write_text(json.dumps(document, ensure_ascii=False), encoding="utf-8")
        return path

    return _write
