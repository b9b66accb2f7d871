# Copyright (C) 2026 Darkmine Pty Ltd
# SPDX-License-Identifier: GPL-3.0-or-later

from . import data, export, model, validate

__all__ = [
	"data",
	"export",
	"model",
	"validate",
]
