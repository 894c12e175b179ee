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
# Filename: src/changelog_html.py

"""
Renders a washed product log as an HTML changelog fragment.

The fragment is a header paragraph and a bullet list. When the log has a
"Fixed" tail group, the list is closed at that point and the fixes go into a
collapsible Bootstrap accordion panel titled "Bug fixes". Panel ids are
derived from the product prefix and the dashed version number so several
fragments can live on one page.

Commit text is trusted and inserted as-is; only `#123` issue references are
rewritten into links.
"""

import logging
import re
from pathlib import Path
from typing import Dict, List, Optional

from colorama import Fore

DEFAULT_ISSUE_URL = "https://github.com/highslide-software/highcharts.com/issues/"

PRODUCT_PREFIXES = {
    "Highstock": "hs-",
    "Highmaps": "hm-",
}
PRIMARY_PRODUCT = "Highcharts"

ISSUE_REFERENCE = re.compile(r"#([0-9]+)")

FIXES_PANEL_OPEN = """
</ul>
<div id="accordion" class="panel-group">
    <div class="panel panel-default">
        <div id="{prefix}heading-{slug}-bug-fixes" class="panel-heading">
            <h4 class="panel-title">
                <a href="#{prefix}{slug}-bug-fixes" data-toggle="collapse" data-parent="#accordion">
                    Bug fixes
                </a>
            </h4>
        </div>
        <div id="{prefix}{slug}-bug-fixes" class="panel-collapse collapse">
            <div class="panel-body">
                <ul>"""

FIXES_PANEL_CLOSE = """
            </div>
        </div>
    </div>
</div>"""


def link_issues(text: str, issue_url: str = DEFAULT_ISSUE_URL) -> str:
    """Turns every `#<digits>` into a link to the issue tracker."""
    return ISSUE_REFERENCE.sub(lambda m: f'<a href="{issue_url}{m.group(1)}">#{m.group(1)}</a>', text)


def product_prefix(name: str) -> str:
    return PRODUCT_PREFIXES.get(name, "")


def version_slug(version: str) -> str:
    return version.replace(".", "-")


def render_changelog(name: str, version: str, date: str, entries: List[str],
                     start_fixes: Optional[int], products: Dict[str, dict],
                     issue_url: str = DEFAULT_ISSUE_URL) -> str:
    """
    Builds the HTML fragment for one product.

    Args:
        name (str): Product name, e.g. 'Highstock'.
        version (str): Version number shown in the header and panel ids.
        date (str): Release date shown in the header.
        entries (list): Washed log entries.
        start_fixes (int or None): Index of the first "Fixed" entry.
        products (dict): The full manifest, used to cite the Highcharts version.
        issue_url (str): Base URL that issue numbers are appended to.

    Returns:
        str: The HTML fragment.
    """
    s = f"<p>{name} {version} ({date})</p>\n<ul>\n"

    if name in PRODUCT_PREFIXES:
        primary_version = products[PRIMARY_PRODUCT]["nr"]
        s += (f"    <li>Most changes listed under {PRIMARY_PRODUCT} {primary_version}"
              f" above also apply to {name} {version}.</li>\n")

    if not entries:
        return s + "</ul>\n"

    prefix = product_prefix(name)
    slug = version_slug(version)

    for i, li in enumerate(entries):
        li = link_issues(li, issue_url)

        if i == start_fixes:
            s += "\n"
            s += FIXES_PANEL_OPEN.format(prefix=prefix, slug=slug)

        s += f"\n                    <li>{li}</li>"

    s += "\n                </ul>"
    if start_fixes is not None:
        s += FIXES_PANEL_CLOSE

    return s


def changelog_filename(name: str) -> str:
    return f"changelog-{name.lower()}.htm"


def write_changelog(name: str, html: str, output_dir: Path) -> Path:
    """Writes the fragment to changelog-<name>.htm and returns the path."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    filepath = output_dir / changelog_filename(name)
    filepath.write_text(html, encoding="utf-8")
    logging.info(f"{Fore.GREEN}Wrote draft to {filepath}")
    return filepath

# === End of src/changelog_html.py ===
