"""Permission storage for session-level permissions."""

import logging
from typing import Any, Dict

from .classifier import normalize_command
from .models import (
    CommandDecision,
    PermissionMode,
    SessionPermissionState,
    SessionPermissionSummary,
)
from .modes import parse_mode

logger = logging.getLogger(__name__)


class PermissionStore:
    """
    Storage for session-specific permission state.

    Tracks each session's mode and the commands a human approved or denied
    during the session. State lives in memory only and is owned by whoever
    constructs the store. The store does no locking; callers running on
    several threads must serialize access themselves.
    """

    def __init__(self, default_mode: Any = PermissionMode.ASK):
        """
        Initialize the permission store.

        Args:
            default_mode: Mode given to newly created sessions
        """
        # Session ID -> SessionPermissionState
        self._sessions: Dict[str, SessionPermissionState] = {}
        self._default_mode = parse_mode(default_mode)

    def get_default_mode(self) -> PermissionMode:
        """Get the mode applied to newly created sessions."""
        return self._default_mode

    def set_default_mode(self, mode: Any) -> None:
        """
        Set the mode applied to newly created sessions.

        Existing sessions keep their current mode.

        Args:
            mode: The new default (unknown values fall back to ask)
        """
        self._default_mode = parse_mode(mode)
        logger.info("Default permission mode set to %s", self._default_mode.value)

    def get_state(self, session_id: str) -> SessionPermissionState:
        """
        Get permission state for a session.

        Args:
            session_id: The session ID

        Returns:
            SessionPermissionState for the session (creates default if not exists)
        """
        state = self._sessions.get(session_id)
        if state is None:
            state = SessionPermissionState(session_id=session_id, mode=self._default_mode)
            self._sessions[session_id] = state
            logger.debug("Created permission state for session %s (%s)", session_id, state.mode.value)
        return state

    def get_mode(self, session_id: str) -> PermissionMode:
        """Get the current permission mode for a session."""
        return self.get_state(session_id).mode

    def set_mode(self, session_id: str, mode: Any) -> None:
        """
        Set the permission mode for a session.

        Approvals and denials are tied to the mode they were given under,
        so both are cleared.

        Args:
            session_id: The session ID
            mode: The new mode (unknown values fall back to ask)
        """
        state = self.get_state(session_id)
        state.mode = parse_mode(mode)
        state.decisions.clear()
        logger.info("Permission mode for session %s set to %s", session_id, state.mode.value)

    def approve_command(self, session_id: str, command: str) -> None:
        """
        Record that a command was approved for the rest of the session.

        Args:
            session_id: The session ID
            command: The command as proposed (normalized before storing)
        """
        self._record(session_id, command, CommandDecision.APPROVED)

    def deny_command(self, session_id: str, command: str) -> None:
        """
        Record that a command was denied for the rest of the session.

        Args:
            session_id: The session ID
            command: The command as proposed (normalized before storing)
        """
        self._record(session_id, command, CommandDecision.DENIED)

    def _record(self, session_id: str, command: str, decision: CommandDecision) -> None:
        normalized = normalize_command(command)
        self.get_state(session_id).decisions[normalized] = decision
        logger.info("Command %s for session %s: %s", decision.value, session_id, normalized)

    def get_decision(self, session_id: str, command: str) -> CommandDecision | None:
        """
        Get the recorded decision for a command.

        Args:
            session_id: The session ID
            command: The command to look up

        Returns:
            The decision if one was recorded, None otherwise
        """
        return self.get_state(session_id).decisions.get(normalize_command(command))

    def get_summary(self, session_id: str) -> SessionPermissionSummary:
        """
        Get a read-only summary of a session's permission state.

        Args:
            session_id: The session ID

        Returns:
            SessionPermissionSummary for the session
        """
        state = self.get_state(session_id)
        return SessionPermissionSummary(
            mode=state.mode,
            approved_count=len(state.approved_commands),
            denied_count=len(state.denied_commands),
            created_at=state.created_at,
        )

    def session_ids(self) -> list[str]:
        """Get the IDs of all sessions with permission state."""
        return list(self._sessions)

    def clear_session(self, session_id: str) -> None:
        """
        Clear all permission state for a session.

        Args:
            session_id: The session ID
        """
        if session_id in self._sessions:
            del self._sessions[session_id]
            logger.info("Cleared permissions for session: %s", session_id)

    def clear_all(self) -> None:
        """Clear permission state for every session."""
        count = len(self._sessions)
        self._sessions.clear()
        logger.info("Cleared permissions for %d sessions", count)
