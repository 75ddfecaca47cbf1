"""
Server-side state management.

The permission checker is created by the entry point and handed to the
server here, so route handlers never construct their own store.
"""

from core.permissions import PermissionChecker


# =============================================================================
# Permission Management
# =============================================================================

_permission_checker: PermissionChecker | None = None


def set_permission_checker(checker: PermissionChecker | None) -> None:
    """Set the permission checker instance."""
    global _permission_checker
    _permission_checker = checker


def get_permission_checker() -> PermissionChecker | None:
    """Get the current permission checker instance."""
    return _permission_checker
