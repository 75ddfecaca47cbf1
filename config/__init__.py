"""
Configuration module for the permission engine.

Exports the configuration models and loader functions.
"""

from .defaults import DEFAULT_PERMISSION_MODE, PERMISSION_MODE_ENV
from .loader import get_config, load_config, load_config_file, merge_configs, strip_jsonc_comments
from .main_config import Config
from .permissions_config import PermissionsConfig

__all__ = [
    # Constants
    "DEFAULT_PERMISSION_MODE",
    "PERMISSION_MODE_ENV",
    # Config models
    "Config",
    "PermissionsConfig",
    # Loader functions
    "load_config",
    "get_config",
    "load_config_file",
    "merge_configs",
    "strip_jsonc_comments",
]
