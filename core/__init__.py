"""
Core business logic package.

This package contains the transport-agnostic permission engine.
The server package provides HTTP bindings around these core operations.
"""

from .exceptions import ConfigError, CoreError
from .permissions import (
    PermissionCheckResult,
    PermissionChecker,
    PermissionMode,
    PermissionStore,
)

__all__ = [
    # Exceptions
    "CoreError",
    "ConfigError",
    # Permissions
    "PermissionMode",
    "PermissionCheckResult",
    "PermissionChecker",
    "PermissionStore",
]
