"""Permission mode resolution."""

import logging
from typing import Any

from .models import ModeConfig, PermissionMode
from .patterns import READ_ONLY_BASH_PATTERNS, SAFE_MODE_BLOCKED_TOOLS

logger = logging.getLogger(__name__)

# Mode used whenever a mode value cannot be interpreted
FALLBACK_MODE = PermissionMode.ASK

SAFE_MODE_CONFIG = ModeConfig(
    blocked_tools=SAFE_MODE_BLOCKED_TOOLS,
    read_only_bash_patterns=READ_ONLY_BASH_PATTERNS,
    prompt_for_bash=False,
)

ASK_MODE_CONFIG = ModeConfig(
    blocked_tools=frozenset(),
    read_only_bash_patterns=READ_ONLY_BASH_PATTERNS,
    prompt_for_bash=True,
)

ALLOW_ALL_MODE_CONFIG = ModeConfig(
    blocked_tools=frozenset(),
    read_only_bash_patterns=(),
    prompt_for_bash=False,
)

_MODE_CONFIGS: dict[PermissionMode, ModeConfig] = {
    PermissionMode.SAFE: SAFE_MODE_CONFIG,
    PermissionMode.ASK: ASK_MODE_CONFIG,
    PermissionMode.ALLOW_ALL: ALLOW_ALL_MODE_CONFIG,
}


def parse_mode(value: Any) -> PermissionMode:
    """
    Coerce a value into a PermissionMode.

    Accepts enum members and their string values (case and surrounding
    whitespace are ignored). Anything else falls back to ask mode so a
    corrupted setting never results in unattended execution.

    Args:
        value: Mode value to interpret

    Returns:
        The matching PermissionMode, or PermissionMode.ASK
    """
    if isinstance(value, PermissionMode):
        return value
    if isinstance(value, str):
        try:
            return PermissionMode(value.strip().lower())
        except ValueError:
            pass
    logger.warning("Unrecognized permission mode %r, falling back to %s", value, FALLBACK_MODE.value)
    return FALLBACK_MODE


def resolve_mode_config(mode: Any) -> ModeConfig:
    """
    Get the policy for a permission mode.

    Args:
        mode: The permission mode (unknown values resolve to ask mode)

    Returns:
        ModeConfig for the mode
    """
    return _MODE_CONFIGS[parse_mode(mode)]


def is_write_tool(tool_name: str) -> bool:
    """Check if a tool is one of the write tools blocked in safe mode."""
    return tool_name in SAFE_MODE_BLOCKED_TOOLS
