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
# Filename: src/wash_log.py

"""
Prepares the commit log for one product.

The three products share one Git history. Commits meant for Highstock or
Highmaps carry a label (`Highstock: ...`, `Highmaps: ...`); every other commit
goes into the Highcharts changelog for review.

Washing a log:
1.  Keeps only the commits newer than the last official release marker.
2.  Picks the commits belonging to the product and strips their label.
3.  Sorts the entries alphabetically so additions, fixes etc. line up.
4.  Moves the entries starting with "Fixed" to the end and reports where
    they start, so the HTML builder can put them in a "Bug fixes" panel.
"""

import re
from typing import List, Optional, Tuple

PRIMARY_PRODUCT = "Highcharts"
LABELLED_PRODUCTS = ("Highstock", "Highmaps")

RELEASE_MARKER = re.compile(r"official release ---$")
FIX_PREFIX = "Fixed"


def label_pattern(name: str) -> re.Pattern:
    """Matches a product label at the start of a line, with one optional space."""
    return re.compile(rf"^{re.escape(name)}:\s?")


def is_labelled(item: str) -> bool:
    """True if the line carries the label of any secondary product."""
    return any(item.startswith(f"{name}:") for name in LABELLED_PRODUCTS)


def take_until_release(log: List[str]) -> List[str]:
    """
    Returns the commits newer than the last official release.

    Raises:
        RuntimeError: If no release marker is found in the log.
    """
    for i, item in enumerate(log):
        if RELEASE_MARKER.search(item):
            return log[:i]
    raise RuntimeError("Last release not located, try setting an older start date.")


def wash_log(name: str, log: List[str]) -> Tuple[List[str], Optional[int]]:
    """
    Returns the sorted entries for a product and the index where fixes begin.

    The index is None when the product has no "Fixed" entries.
    """
    recent = take_until_release(log)

    if name in LABELLED_PRODUCTS:
        pattern = label_pattern(name)
        washed = [pattern.sub("", item, count=1) for item in recent if item.startswith(f"{name}:")]
    elif name == PRIMARY_PRODUCT:
        washed = [item for item in recent if not is_labelled(item)]
    else:
        washed = []

    washed.sort()

    fixes = [message for message in washed if message.startswith(FIX_PREFIX)]
    if not fixes:
        return washed, None

    others = [message for message in washed if not message.startswith(FIX_PREFIX)]
    return others + fixes, len(others)

# === End of src/wash_log.py ===
