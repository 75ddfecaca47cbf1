"""
Permission system for agent command execution.

Provides a three-level permission mode (safe/ask/allow-all) per session and
decides whether shell commands and tool calls may run, are blocked, or need
a human decision.
"""

from .checker import PermissionChecker
from .classifier import (
    is_compound,
    is_compound_safe,
    is_read_only,
    normalize_command,
    split_compound,
)
from .dangerous import has_blocked_construct, is_always_blocked
from .models import (
    MODE_INFO,
    MODE_ORDER,
    CommandDecision,
    ModeConfig,
    ModeInfo,
    PermissionCheckResult,
    PermissionMode,
    SessionPermissionState,
    SessionPermissionSummary,
)
from .modes import is_write_tool, parse_mode, resolve_mode_config
from .patterns import (
    ALWAYS_BLOCKED_PATTERNS,
    BLOCKED_SHELL_CONSTRUCTS,
    READ_ONLY_BASH_PATTERNS,
    SAFE_MODE_BLOCKED_TOOLS,
    SHELL_TOOL_NAMES,
)
from .store import PermissionStore

__all__ = [
    # Modes
    "PermissionMode",
    "MODE_ORDER",
    "MODE_INFO",
    "ModeInfo",
    "ModeConfig",
    "parse_mode",
    "resolve_mode_config",
    "is_write_tool",
    # Models
    "CommandDecision",
    "PermissionCheckResult",
    "SessionPermissionState",
    "SessionPermissionSummary",
    # Pattern catalog
    "ALWAYS_BLOCKED_PATTERNS",
    "BLOCKED_SHELL_CONSTRUCTS",
    "READ_ONLY_BASH_PATTERNS",
    "SAFE_MODE_BLOCKED_TOOLS",
    "SHELL_TOOL_NAMES",
    # Functions
    "normalize_command",
    "split_compound",
    "is_compound",
    "is_read_only",
    "is_compound_safe",
    "is_always_blocked",
    "has_blocked_construct",
    # Classes
    "PermissionChecker",
    "PermissionStore",
]
