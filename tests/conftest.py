#!/usr/bin/env python3
# -*- coding: utf-8 -*-
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
# Filename: tests/conftest.py

import json
import os
import sys

import pytest

# Add the 'src' directory to the Python path so the scripts' own
# `from config_loader import ...` style imports resolve under pytest.
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
src_path = os.path.join(project_root, 'src')

if src_path not in sys.path:
    sys.path.insert(0, src_path)


@pytest.fixture
def sample_log():
    """A shared commit log, newest first, as split from `git log`."""
    return [
        "Fixed #3 bug",
        "Highstock: Added range selector option",
        "Highmaps: Fixed #12, map navigation lost zoom",
        "Added chart type",
        "Highstock:Fixed #7 navigator overlap",
        "Fixed #1 axis labels",
        "Highmaps: Added map bubble series",
        "--- 4.2.0 official release ---",
        "Old entry",
        "Highstock: Old stock entry",
    ]


@pytest.fixture
def sandbox(tmp_path, monkeypatch):
    """
    A sandbox project root with a product manifest. PROJECT_SANDBOX_PATH is
    restored after the test, also when the code under test sets it itself.
    """
    monkeypatch.setenv("PROJECT_SANDBOX_PATH", str(tmp_path))

    manifest_dir = tmp_path / "build" / "dist"
    manifest_dir.mkdir(parents=True)

    def _write_manifest(products, legacy=False):
        text = json.dumps(products, indent=4)
        if legacy:
            path = manifest_dir / "products.js"
            path.write_text(f"var products = {text};\n", encoding="utf-8")
        else:
            path = manifest_dir / "products.json"
            path.write_text(text, encoding="utf-8")
        return path

    return {"root": tmp_path, "write_manifest": _write_manifest}

# === End of tests/conftest.py ===
