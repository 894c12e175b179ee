#!/usr/bin/env python3
#-*- coding: utf-8 -*-
#
# Product Changelog Drafter
# Copyright (C) 2025 [Your Name/Institution]
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
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
#
# Filename: src/product_manifest.py

"""
Loads the product manifest: the current version number and release date of
each product.

The manifest is a JSON object:

    {
        "Highcharts": {"nr": "4.2.0", "date": "2015-12-10"},
        "Highstock": {"nr": "4.2.0", "date": "2015-12-10"}
    }

Older build trees ship it as `products.js` with a `var products = ` assignment
in front and an optional trailing semicolon; both are stripped before parsing.
"""

import json
import re
from pathlib import Path
from typing import Dict

ASSIGNMENT_PREFIX = re.compile(r"^\s*(?:var|let|const)\s+\w+\s*=\s*")


def parse_manifest(text: str) -> Dict[str, dict]:
    """Parses manifest text, tolerating a leading JavaScript assignment."""
    text = ASSIGNMENT_PREFIX.sub("", text, count=1).strip()
    if text.endswith(";"):
        text = text[:-1]
    products = json.loads(text)
    if not isinstance(products, dict):
        raise ValueError("Product manifest must be a JSON object keyed by product name.")
    return products


def load_manifest(path) -> Dict[str, dict]:
    """
    Reads and parses the manifest file. Key order follows the file.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the content is not a JSON object (json.JSONDecodeError
            is a ValueError).
    """
    return parse_manifest(Path(path).read_text(encoding="utf-8"))

# === End of src/product_manifest.py ===
