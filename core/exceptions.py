"""
Core domain exceptions.

These exceptions are transport-agnostic and should be caught by the server
layer to convert into appropriate HTTP responses. Permission decisions are
never reported through exceptions; see PermissionCheckResult.
"""


class CoreError(Exception):
    """Base exception for all core errors."""

    pass


class ConfigError(CoreError):
    """Raised when a configuration file cannot be read or parsed."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid configuration in {path}: {reason}")
