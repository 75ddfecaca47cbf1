"""Configuration loading utilities."""

import json
import logging
import os
import re
from functools import lru_cache
from pathlib import Path
from typing import Any

from core.exceptions import ConfigError

from .defaults import (
    CONFIG_DIR_NAME,
    CONFIG_FILENAME_JSON,
    CONFIG_FILENAME_JSONC,
    PERMISSION_MODE_ENV,
)
from .main_config import Config

logger = logging.getLogger(__name__)


def strip_jsonc_comments(content: str) -> str:
    """
    Strip comments from JSONC content to convert to valid JSON.

    Handles:
    - Single-line comments: // comment
    - Multi-line comments: /* comment */

    Args:
        content: JSONC content string

    Returns:
        JSON string with comments removed
    """
    # Remove single-line comments
    content = re.sub(r"//.*?$", "", content, flags=re.MULTILINE)
    # Remove multi-line comments
    content = re.sub(r"/\*.*?\*/", "", content, flags=re.DOTALL)
    return content


def load_config_file(path: Path, strict: bool = False) -> dict[str, Any] | None:
    """
    Load a config file from the given path.

    Supports both .json and .jsonc files with comment stripping.

    Args:
        path: Path to the config file
        strict: Raise ConfigError instead of skipping an unreadable file

    Returns:
        Parsed config dictionary or None if file doesn't exist

    Raises:
        ConfigError: If strict and the file cannot be read or parsed
    """
    if not path.exists():
        return None

    try:
        content = path.read_text()
        # Strip comments if JSONC
        if path.suffix == ".jsonc":
            content = strip_jsonc_comments(content)
        data = json.loads(content)
    except (json.JSONDecodeError, OSError) as e:
        if strict:
            raise ConfigError(str(path), str(e)) from e
        logger.warning("Failed to load config from %s: %s", path, e)
        return None

    if not isinstance(data, dict):
        if strict:
            raise ConfigError(str(path), "top-level value must be an object")
        logger.warning("Ignoring config %s: top-level value must be an object", path)
        return None
    return data


def merge_configs(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Deep merge two configuration dictionaries.

    Args:
        base: Base configuration
        override: Override configuration (takes precedence)

    Returns:
        Merged configuration dictionary
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value

    return result


def load_config(project_root: Path | None = None, strict: bool = False) -> Config:
    """
    Load configuration from multiple sources with precedence.

    Looks for config files in the following order:
    1. Global: ~/.modeguard/modeguard.jsonc
    2. Project-level: modeguard.jsonc, modeguard.json, .modeguard/modeguard.jsonc

    The first project config found is merged over the global config. The
    MODEGUARD_PERMISSION_MODE environment variable overrides
    permissions.default_mode; unrecognized modes fall back to ask.

    Args:
        project_root: Project root directory (defaults to current working directory)
        strict: Raise ConfigError for unreadable config files

    Returns:
        Loaded and merged Config model
    """
    if project_root is None:
        project_root = Path.cwd()

    # Try global config first (lower precedence)
    global_config_path = Path.home() / CONFIG_DIR_NAME / CONFIG_FILENAME_JSONC
    config_data = load_config_file(global_config_path, strict) or {}

    # Try project-level configs (higher precedence)
    project_config_paths = [
        project_root / CONFIG_FILENAME_JSONC,
        project_root / CONFIG_FILENAME_JSON,
        project_root / CONFIG_DIR_NAME / CONFIG_FILENAME_JSONC,
    ]

    for path in project_config_paths:
        project_config = load_config_file(path, strict)
        if project_config:
            logger.debug("Loaded project config from %s", path)
            config_data = merge_configs(config_data, project_config)
            break

    env_mode = os.environ.get(PERMISSION_MODE_ENV)
    if env_mode:
        config_data = merge_configs(config_data, {"permissions": {"default_mode": env_mode}})

    # Create and validate Config model
    return Config(**config_data)


@lru_cache(maxsize=1)
def get_config(project_root: Path | None = None) -> Config:
    """
    Get cached configuration.

    This function caches the config to avoid repeated file I/O.
    To reload the config, clear the cache with get_config.cache_clear().

    Args:
        project_root: Project root directory (defaults to current working directory)

    Returns:
        Cached Config model
    """
    root = project_root or Path.cwd()
    return load_config(root)
