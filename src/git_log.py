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
# Filename: src/git_log.py

"""
Fetches commit subjects from Git for a date range.

The log is requested as one subject per commit followed by `<br>`, newest
commit first. Any failure of the git process is logged and re-raised; there
is no retry.
"""

import logging
import re
import subprocess
from typing import Dict, List, Optional

from colorama import Fore

COMMIT_DELIMITER = "<br>"


def build_log_command(params: Dict[str, Optional[str]]) -> List[str]:
    """Builds the `git log` argument list for the --after/--before bounds."""
    command = ["git", "log", f"--after={{{params.get('after')}}}", f"--format=%s{COMMIT_DELIMITER}"]
    if params.get("before"):
        command.append(f"--before={{{params['before']}}}")
    return command


def fetch_log(params: Dict[str, Optional[str]], cwd: Optional[str] = None) -> str:
    """
    Runs `git log` and returns its raw stdout.

    Raises:
        ValueError: If no `after` date was supplied.
        subprocess.CalledProcessError: If git exits with a non-zero status.
        OSError: If git cannot be executed at all.
    """
    if not params.get("after"):
        raise ValueError("Missing required parameter --after <date>.")

    command = build_log_command(params)
    logging.debug(f"Executing: {' '.join(command)}")
    try:
        result = subprocess.run(
            command,
            cwd=cwd,
            check=True,
            capture_output=True,
            text=True,
            encoding='utf-8'
        )
    except subprocess.CalledProcessError as e:
        logging.error(f"{Fore.RED}git log failed with exit code {e.returncode}: {(e.stderr or '').strip()}")
        raise
    except OSError as e:
        logging.error(f"{Fore.RED}Could not run git: {e}")
        raise
    return result.stdout


def split_log(raw_log: str) -> List[str]:
    """Splits raw `git log` output into commit subjects, dropping the trailing empty element."""
    log = re.split(re.escape(COMMIT_DELIMITER) + r"\r?\n", raw_log)
    log.pop()
    return log

# === End of src/git_log.py ===
