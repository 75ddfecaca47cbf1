"""Dangerous command and shell construct detection."""

from .classifier import normalize_command, split_compound
from .patterns import ALWAYS_BLOCKED_PATTERNS, BLOCKED_SHELL_CONSTRUCTS


def is_always_blocked(command: str) -> tuple[bool, str | None]:
    """
    Check if a command matches an always-blocked pattern.

    The whole command is checked first, then each chained segment, so
    "ls && rm -rf /" is caught as well as "rm -rf /".

    Args:
        command: The bash command to check

    Returns:
        Tuple of (is_blocked, reason)
    """
    candidates = [normalize_command(command), *split_compound(command)]
    for candidate in candidates:
        for pattern, reason in ALWAYS_BLOCKED_PATTERNS:
            if pattern.search(candidate):
                return True, reason
    return False, None


def has_blocked_construct(command: str) -> tuple[bool, str | None]:
    """
    Check if a command uses a blocked shell construct.

    Constructs are output redirection, command substitution, background
    execution and process substitution.

    Args:
        command: The bash command to check

    Returns:
        Tuple of (is_blocked, construct-specific reason)
    """
    normalized = normalize_command(command)
    for pattern, reason in BLOCKED_SHELL_CONSTRUCTS:
        if pattern.search(normalized):
            return True, reason
    return False, None
