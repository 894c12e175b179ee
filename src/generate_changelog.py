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
# Filename: src/generate_changelog.py

"""
Changelog Draft Generator.

Copies the commit messages since the last release and drafts one HTML
changelog per product listed in the product manifest.

Workflow:
1.  **Read Parameters**: `--key value` pairs from the command line.
2.  **Fetch Log**: Runs `git log` once for the requested date range.
3.  **Load Manifest**: Reads each product's version number and release date.
4.  **Draft Changelogs**: For every product, in manifest order, washes the
    shared log, renders the HTML fragment and writes
    `changelog-<product>.htm`.

Parameters:
    --after DATE         Start date, any date Git accepts. Required.
    --before DATE        Optional end date, defaults to today.
    --manifest PATH      Product manifest (default from config.ini).
    --output-dir DIR     Where drafts are written (default from config.ini).
    --sandbox-path DIR   Run against a sandbox directory instead of the project root.
    --verbose            Enable debug logging.

Usage:
    pdm run changelog --after 2015-12-10
"""

import argparse
import logging
import os
import subprocess
import sys
from pathlib import Path
from typing import Dict, List, Optional

from colorama import Fore, init

# Ensure the src directory is in the Python path
sys.path.append(str(Path(__file__).resolve().parent))
from changelog_html import DEFAULT_ISSUE_URL, render_changelog, write_changelog  # noqa: E402
from changelog_params import get_params  # noqa: E402
from config_loader import APP_CONFIG, get_config_value, get_path  # noqa: E402
from git_log import fetch_log, split_log  # noqa: E402
from product_manifest import load_manifest  # noqa: E402
from wash_log import wash_log  # noqa: E402

# Initialize colorama
init(autoreset=True, strip=False)

# --- Setup Logging ---
logging.basicConfig(level=logging.INFO, format='%(message)s')

DEFAULT_MANIFEST_PATH = "build/dist/products.json"


def build_changelog(name: str, product: dict, log: List[str], products: Dict[str, dict],
                    output_dir: Path, issue_url: str = DEFAULT_ISSUE_URL) -> Path:
    """Washes the shared log for one product, renders it and writes the draft."""
    entries, start_fixes = wash_log(name, log)
    if not entries:
        logging.warning(f"{Fore.YELLOW}No new commits found for {name}.")
    else:
        logging.debug(f"{name}: {len(entries)} entries, fixes start at {start_fixes}")

    # Manifests may hold plain JSON numbers, e.g. "nr": 4.2
    html = render_changelog(name, str(product["nr"]), str(product["date"]), entries, start_fixes,
                            products, issue_url=issue_url)
    return write_changelog(name, html, output_dir)


def parse_options(argv: List[str]) -> argparse.Namespace:
    """
    Parses the run options. The --after/--before date range is left to
    get_params(), so unknown arguments are ignored here.
    """
    parser = argparse.ArgumentParser(
        description="Draft per-product HTML changelogs from the commits since the last release.",
        epilog="Date range: --after DATE (required) and --before DATE (optional), any date Git accepts.",
        allow_abbrev=False,
    )
    parser.add_argument("--manifest", type=str, help="Product manifest (default from config.ini).")
    parser.add_argument("--output-dir", type=str, help="Where drafts are written (default from config.ini).")
    parser.add_argument("--sandbox-path", type=str, help="Path to the sandbox directory for testing.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    options, _ = parser.parse_known_args(argv)
    return options


def main(argv: Optional[List[str]] = None) -> int:
    """Orchestrates the changelog drafting process."""
    argv = sys.argv[1:] if argv is None else argv
    options = parse_options(argv)
    params = get_params(argv)

    if options.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if options.sandbox_path:
        os.environ["PROJECT_SANDBOX_PATH"] = options.sandbox_path

    manifest_path = Path(get_path(
        options.manifest
        or get_config_value(APP_CONFIG, 'Changelog', 'manifest_path', fallback=DEFAULT_MANIFEST_PATH)
    ))
    output_dir = Path(get_path(
        options.output_dir
        or get_config_value(APP_CONFIG, 'Changelog', 'output_dir', fallback='.')
    ))
    issue_url = get_config_value(APP_CONFIG, 'Changelog', 'issue_url', fallback=DEFAULT_ISSUE_URL)

    # Get the Git log
    try:
        log = split_log(fetch_log(params, cwd=get_path(".")))
    except ValueError as e:
        logging.error(f"{Fore.RED}ERROR: {e}")
        sys.exit(1)
    except (subprocess.CalledProcessError, OSError):
        sys.exit(1)
    logging.info(f"Fetched {len(log)} commit(s) after {params['after']}.")

    # Load the current products and versions
    try:
        products = load_manifest(manifest_path)
    except FileNotFoundError:
        logging.error(f"{Fore.RED}ERROR: Product manifest not found: {manifest_path}")
        sys.exit(1)
    except (OSError, ValueError) as e:
        logging.error(f"{Fore.RED}ERROR: Could not read product manifest {manifest_path}: {e}")
        sys.exit(1)

    # Create one changelog per product
    for name, product in products.items():
        try:
            build_changelog(name, product, log, products, output_dir, issue_url=issue_url)
        except RuntimeError as e:
            logging.error(f"{Fore.RED}ERROR: {e}")
            sys.exit(1)
        except KeyError as e:
            logging.error(f"{Fore.RED}ERROR: Manifest is missing {e} while drafting {name}.")
            sys.exit(1)
        except OSError as e:
            logging.error(f"{Fore.RED}ERROR: Could not write draft for {name}: {e}")
            sys.exit(1)

    return 0

if __name__ == "__main__":
    sys.exit(main())

# === End of src/generate_changelog.py ===
