"""Permission checker implementation."""

import logging
from typing import Any, Iterable

from .classifier import is_compound, is_compound_safe, is_read_only, normalize_command
from .dangerous import has_blocked_construct, is_always_blocked
from .models import (
    CommandDecision,
    PermissionCheckResult,
    PermissionMode,
    SessionPermissionSummary,
)
from .modes import resolve_mode_config
from .patterns import SHELL_TOOL_NAMES
from .store import PermissionStore

logger = logging.getLogger(__name__)

PREVIOUSLY_DENIED_REASON = "Previously denied this session"
COMPOUND_PROMPT_REASON = "Compound command requires approval"
COMPOUND_BLOCKED_REASON = "Compound command contains non-read-only operations"
NOT_IN_ALLOWLIST_REASON = "Command not in read-only allowlist (safe mode)"
APPROVAL_REQUIRED_REASON = "Command requires user approval"


class PermissionChecker:
    """
    Permission checker for tool operations.

    Decides whether a shell command or tool call may run, must be blocked,
    or needs a human decision. Decisions are returned as data; nothing is
    executed and nothing is raised for well-formed input.
    """

    def __init__(self, store: PermissionStore, shell_tools: Iterable[str] = SHELL_TOOL_NAMES):
        """
        Initialize the permission checker.

        Args:
            store: Permission store for session state
            shell_tools: Tool names whose payload is a shell command
        """
        self.store = store
        self.shell_tools = frozenset(shell_tools)

    def check_bash(self, session_id: str, command: str) -> PermissionCheckResult:
        """
        Check permission for a bash command.

        Rules are applied in a fixed order and the first applicable rule
        decides:
        1. Always-blocked patterns (every mode)
        2. Blocked shell constructs (safe and ask)
        3. Allow-all mode allows
        4. Approved earlier this session
        5. Denied earlier this session
        6. Compound commands: allowed only if every segment is read-only
        7. Read-only allowlist
        8. Safe mode blocks, ask mode prompts

        Args:
            session_id: The session ID
            command: The bash command to check

        Returns:
            PermissionCheckResult for the command
        """
        result = self._check_bash(session_id, command)
        logger.debug(
            "Bash check for session %s: %r -> allowed=%s prompt=%s reason=%s",
            session_id,
            normalize_command(command),
            result.allowed,
            result.requires_prompt,
            result.reason,
        )
        return result

    def _check_bash(self, session_id: str, command: str) -> PermissionCheckResult:
        state = self.store.get_state(session_id)
        mode = state.mode
        config = resolve_mode_config(mode)
        raw = command if isinstance(command, str) else ""
        normalized = normalize_command(raw)

        blocked, reason = is_always_blocked(raw)
        if blocked:
            return PermissionCheckResult.block(reason)

        if mode != PermissionMode.ALLOW_ALL:
            blocked, reason = has_blocked_construct(raw)
            if blocked:
                return PermissionCheckResult.block(reason)

        if mode == PermissionMode.ALLOW_ALL:
            return PermissionCheckResult.allow()

        decision = state.decisions.get(normalized)
        if decision == CommandDecision.APPROVED:
            return PermissionCheckResult.allow()
        if decision == CommandDecision.DENIED:
            return PermissionCheckResult.block(PREVIOUSLY_DENIED_REASON)

        if is_compound(raw):
            if is_compound_safe(raw, config.read_only_bash_patterns):
                return PermissionCheckResult.allow()
            if config.prompt_for_bash:
                return PermissionCheckResult.prompt(COMPOUND_PROMPT_REASON)
            return PermissionCheckResult.block(COMPOUND_BLOCKED_REASON)

        if is_read_only(normalized, config.read_only_bash_patterns):
            return PermissionCheckResult.allow()

        if config.prompt_for_bash:
            return PermissionCheckResult.prompt(APPROVAL_REQUIRED_REASON)
        return PermissionCheckResult.block(NOT_IN_ALLOWLIST_REASON)

    def check_tool(
        self,
        session_id: str,
        tool_name: str,
        args: dict[str, Any] | None = None,
    ) -> PermissionCheckResult:
        """
        Check permission for a tool call.

        Shell tools carrying a command in their arguments are decided by
        check_bash in every mode, so always-blocked commands stay blocked
        under allow-all. Other tools only go through the mode's blocklist.

        Args:
            session_id: The session ID
            tool_name: Name of the tool being called
            args: Optional tool arguments

        Returns:
            PermissionCheckResult for the tool call
        """
        if tool_name in self.shell_tools:
            command = (args or {}).get("command")
            if isinstance(command, str):
                return self.check_bash(session_id, command)

        mode = self.store.get_mode(session_id)
        if mode == PermissionMode.ALLOW_ALL:
            return PermissionCheckResult.allow()

        config = resolve_mode_config(mode)
        if tool_name in config.blocked_tools:
            logger.debug("Tool %s blocked for session %s (%s)", tool_name, session_id, mode.value)
            return PermissionCheckResult.block(f"Tool '{tool_name}' is blocked in {mode.value} mode")

        return PermissionCheckResult.allow()

    # -------------------------------------------------------------------------
    # Session state
    # -------------------------------------------------------------------------

    def get_session_mode(self, session_id: str) -> PermissionMode:
        return self.store.get_mode(session_id)

    def set_session_mode(self, session_id: str, mode: Any) -> None:
        self.store.set_mode(session_id, mode)

    def approve_command(self, session_id: str, command: str) -> None:
        self.store.approve_command(session_id, command)

    def deny_command(self, session_id: str, command: str) -> None:
        self.store.deny_command(session_id, command)

    def get_summary(self, session_id: str) -> SessionPermissionSummary:
        return self.store.get_summary(session_id)

    def clear_session_state(self, session_id: str) -> None:
        self.store.clear_session(session_id)

    def clear_all_session_states(self) -> None:
        self.store.clear_all()

    def get_default_mode(self) -> PermissionMode:
        return self.store.get_default_mode()

    def set_default_mode(self, mode: Any) -> None:
        self.store.set_default_mode(mode)
