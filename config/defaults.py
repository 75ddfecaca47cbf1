"""Default configuration values."""

from core.permissions import PermissionMode

DEFAULT_PERMISSION_MODE = PermissionMode.ASK

# Environment variable overriding permissions.default_mode
PERMISSION_MODE_ENV = "MODEGUARD_PERMISSION_MODE"

# Config file locations
CONFIG_DIR_NAME = ".modeguard"
CONFIG_FILENAME_JSONC = "modeguard.jsonc"
CONFIG_FILENAME_JSON = "modeguard.json"
