"""Lexical classification of shell commands.

This is a best-effort classifier, not a shell parser. Commands are split on
chain operators outside of quotes and each segment is matched against the
read-only allowlist.
"""

import re
from typing import Iterable

from .patterns import READ_ONLY_BASH_PATTERNS

_WHITESPACE_RE = re.compile(r"\s+")

# Single-character chain separators; && and || are handled separately
_CHAIN_CHARS = "|;\n"
# Every chain operator, quoting ignored
_OPERATOR_RE = re.compile(r"&&|\|\||[|;\n]")


def normalize_command(command: str) -> str:
    """
    Normalize a command for matching and memoization.

    Trims the command and collapses every whitespace run to a single space,
    so "git   status" and "git status" are the same command.

    Args:
        command: Raw command string

    Returns:
        Normalized command string
    """
    if not isinstance(command, str):
        return ""
    return _WHITESPACE_RE.sub(" ", command.strip())


def split_compound(command: str) -> list[str]:
    """
    Split a command on |, ||, &&, ; and newlines.

    Operators inside single, double or ANSI-C ($'...') quotes, or escaped
    with a backslash, do not split. If a quote is still open at the end of
    the command, quoting is ignored and every operator splits. Segments are
    normalized and empty segments are dropped.

    Args:
        command: Raw command string

    Returns:
        List of normalized, non-empty segments
    """
    if not isinstance(command, str):
        return []

    parts: list[str] = []
    current: list[str] = []
    # Closing character of the open quote; backslashes escape except in '...'
    quote: str | None = None
    escapes = True
    i = 0
    while i < len(command):
        c = command[i]
        if c == "\\" and escapes and i + 1 < len(command):
            current.append(command[i : i + 2])
            i += 2
            continue
        if quote is not None:
            if c == quote:
                quote = None
                escapes = True
            current.append(c)
            i += 1
            continue
        if command[i : i + 2] == "$'":
            quote = "'"
            current.append("$'")
            i += 2
        elif c in ("'", '"'):
            quote = c
            escapes = c == '"'
            current.append(c)
            i += 1
        elif command[i : i + 2] in ("&&", "||"):
            parts.append("".join(current))
            current = []
            i += 2
        elif c in _CHAIN_CHARS:
            parts.append("".join(current))
            current = []
            i += 1
        else:
            current.append(c)
            i += 1
    parts.append("".join(current))

    if quote is not None:
        parts = _OPERATOR_RE.split(command)

    segments = (normalize_command(part) for part in parts)
    return [segment for segment in segments if segment]


def is_compound(command: str) -> bool:
    """Check if a command chains more than one segment."""
    return len(split_compound(command)) > 1


def is_read_only(command: str, patterns: Iterable[re.Pattern[str]] = READ_ONLY_BASH_PATTERNS) -> bool:
    """
    Check if a command matches the read-only allowlist.

    Args:
        command: Command to check (normalized before matching)
        patterns: Allowlist to match against

    Returns:
        True if any pattern matches
    """
    normalized = normalize_command(command)
    if not normalized:
        return False
    return any(pattern.search(normalized) for pattern in patterns)


def is_compound_safe(command: str, patterns: Iterable[re.Pattern[str]] = READ_ONLY_BASH_PATTERNS) -> bool:
    """
    Check if every segment of a compound command is read-only.

    A compound command is as dangerous as its most dangerous segment.

    Args:
        command: Command to check
        patterns: Allowlist to match each segment against

    Returns:
        True only if all non-empty segments are read-only
    """
    patterns = tuple(patterns)
    segments = split_compound(command)
    if not segments:
        return False
    return all(is_read_only(segment, patterns) for segment in segments)
