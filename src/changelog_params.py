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
# Filename: src/changelog_params.py

"""
Reads `--key value` pairs from the command line.

Every token starting with `--` becomes a key and the token after it becomes
its value, verbatim. Nothing is validated here: a missing value maps to None
and required keys such as `after` are checked by the code that uses them.
"""

from typing import Dict, List, Optional


def get_params(argv: List[str]) -> Dict[str, Optional[str]]:
    """Returns a mapping of flag name (without dashes) to its raw value."""
    params = {}
    for i, arg in enumerate(argv):
        if arg.startswith("--"):
            params[arg[2:]] = argv[i + 1] if i + 1 < len(argv) else None
    return params

# === End of src/changelog_params.py ===
