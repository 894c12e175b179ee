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
# Filename: src/config_loader.py

"""
Shared Configuration Loader (config_loader.py)

Loads the changelog drafter's settings once per process and exposes them to
the other scripts in `src/`.

Key Features:
-   **Loads `config.ini`**: Parses the `[Changelog]` settings (manifest
    location, output directory, issue tracker URL) into the global
    `APP_CONFIG` object. `PROJECT_CONFIG_OVERRIDE` may point at another file.
-   **Loads `.env`**: Environment overrides such as `PROJECT_SANDBOX_PATH`
    can be kept in a `.env` file at the project root.
-   **Safe Value Retrieval**: `get_config_value()` returns typed values with
    fallbacks and strips inline comments.
-   **Sandbox Paths**: `get_path()` resolves project-relative paths against
    `PROJECT_SANDBOX_PATH` when it is set, so tests never touch the real tree.

Global Objects Provided:
-   `PROJECT_ROOT`: The directory holding `pyproject.toml`, or the current
    working directory when the scripts run from an installed copy.
-   `APP_CONFIG`: A `configparser.ConfigParser` holding `config.ini`.
-   `ENV_LOADED`: True if a `.env` file was loaded.

Usage by other scripts:
    from config_loader import APP_CONFIG, get_config_value, get_path

    manifest = get_config_value(APP_CONFIG, 'Changelog', 'manifest_path',
                                fallback='build/dist/products.json')
    manifest_path = get_path(manifest)
"""

import configparser
import logging
import os
import pathlib

from dotenv import load_dotenv

CONFIG_FILENAME = "config.ini"
DOTENV_FILENAME = ".env"

logger = logging.getLogger(__name__)
if not logger.hasHandlers():
    handler = logging.StreamHandler()
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)

def get_project_root() -> str:
    """Searches upwards for pyproject.toml, falling back to the working directory."""
    current_path = pathlib.Path(__file__).resolve()
    while current_path != current_path.parent:
        if (current_path / "pyproject.toml").exists():
            return str(current_path)
        current_path = current_path.parent
    return str(pathlib.Path.cwd())

PROJECT_ROOT = get_project_root()

def load_app_config():
    config = configparser.ConfigParser()

    # An override file is used for sandboxed runs.
    override_path = os.getenv('PROJECT_CONFIG_OVERRIDE')
    if override_path and os.path.exists(override_path):
        config_path = override_path
        logger.debug(f"Using override config from env var: {config_path}")
    else:
        config_path = os.path.join(PROJECT_ROOT, CONFIG_FILENAME)

    if os.path.exists(config_path):
        try:
            # 'utf-8-sig' tolerates a BOM written by Windows editors.
            config.read(config_path, encoding='utf-8-sig')
            logger.debug(f"Successfully loaded configuration from: {config_path}")
        except configparser.Error as e:
            logger.error(f"Error parsing configuration file {config_path}: {e}")
    else:
        logger.warning(f"{CONFIG_FILENAME} not found at project root: {config_path}. Using fallbacks.")

    return config

def load_env_vars():
    """Loads environment variables from a .env file at the project root."""
    dotenv_path = os.path.join(PROJECT_ROOT, DOTENV_FILENAME)
    if not os.path.exists(dotenv_path):
        logger.debug(f".env file not found at {dotenv_path}.")
        return False
    if load_dotenv(dotenv_path):
        logger.debug(f"Successfully loaded .env file from: {dotenv_path}")
        return True
    logger.warning(f"Found .env file at {dotenv_path}, but it may be empty or failed to load.")
    return False

def get_config_value(config: configparser.ConfigParser, section: str, key: str,
                     fallback=None, value_type=str):
    """
    Gets a typed value from a ConfigParser, with a fallback.

    Inline comments introduced by ';' or ' #' are stripped before conversion.
    A bare '#' is kept because URLs and markers may contain one.

    Args:
        config (configparser.ConfigParser): The loaded config object.
        section (str): The section name in the INI file.
        key (str): The key name in the section.
        fallback: Returned when the key is missing or conversion fails.
        value_type (type): One of str, int, bool.

    Returns:
        The configured value converted to value_type, or the fallback.
    """
    if not config.has_section(section) or not config.has_option(section, key):
        return fallback

    raw_value = config.get(section, key)
    cleaned_value = raw_value
    for comment_marker in [';', ' #']:
        if comment_marker in cleaned_value:
            cleaned_value = cleaned_value.split(comment_marker, 1)[0]
    cleaned_value = cleaned_value.strip()

    if value_type == str:
        if cleaned_value.lower() == 'none':
            return None
        return cleaned_value
    elif value_type == int:
        try:
            return int(cleaned_value)
        except ValueError:
            logger.warning(f"Config: Error converting [{section}]/{key} value '{raw_value}' "
                           f"to int. Using fallback: {fallback}")
            return fallback
    elif value_type == bool:
        try:
            return config.getboolean(section, key)
        except ValueError:
            logger.warning(f"Config: Error converting [{section}]/{key} value '{raw_value}' "
                           f"to bool. Using fallback: {fallback}")
            return fallback

    logger.error(f"Config: Unsupported value_type '{value_type.__name__}' for key '{key}'. Using fallback.")
    return fallback

def get_path(relative_path: str) -> str:
    """
    Resolves a path relative to the sandbox or project root.

    Absolute paths are returned unchanged. Otherwise, if PROJECT_SANDBOX_PATH
    is set it is used as the root, else PROJECT_ROOT.
    """
    if os.path.isabs(relative_path):
        return relative_path
    sandbox_path = get_sandbox_path()
    if sandbox_path:
        return os.path.join(sandbox_path, relative_path)
    return os.path.join(PROJECT_ROOT, relative_path)

def get_sandbox_path() -> str | None:
    """Returns the path to the current sandbox, or None if not in a sandbox."""
    return os.getenv('PROJECT_SANDBOX_PATH')

# Global config object, loaded once
ENV_LOADED = load_env_vars()
APP_CONFIG = load_app_config()

# === End of src/config_loader.py ===
