"""Permission system models."""

import re
import time
from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, Field


class PermissionMode(str, Enum):
    """Permission mode for an agent session, most to least restrictive."""

    SAFE = "safe"
    ASK = "ask"
    ALLOW_ALL = "allow-all"

    @property
    def rank(self) -> int:
        """Position in MODE_ORDER; lower is more restrictive."""
        return MODE_ORDER.index(self)


MODE_ORDER: list[PermissionMode] = [
    PermissionMode.SAFE,
    PermissionMode.ASK,
    PermissionMode.ALLOW_ALL,
]


class CommandDecision(str, Enum):
    """A human decision recorded for a command within a session."""

    APPROVED = "approved"
    DENIED = "denied"


@dataclass(frozen=True)
class ModeConfig:
    """Concrete policy applied by a permission mode."""

    blocked_tools: frozenset[str]
    read_only_bash_patterns: tuple[re.Pattern[str], ...]
    prompt_for_bash: bool
    read_only_mcp_patterns: tuple[re.Pattern[str], ...] = field(default=())
    prompt_for_mcp: bool = False


class ModeInfo(BaseModel):
    """Display information for a permission mode."""

    label: str
    description: str
    icon: str


MODE_INFO: dict[PermissionMode, ModeInfo] = {
    PermissionMode.SAFE: ModeInfo(
        label="Safe Mode",
        description="Read-only operations. Blocks file writes, edits, and destructive commands.",
        icon="shield",
    ),
    PermissionMode.ASK: ModeInfo(
        label="Ask Mode",
        description="Prompts for approval before executing bash commands.",
        icon="help-circle",
    ),
    PermissionMode.ALLOW_ALL: ModeInfo(
        label="Allow All",
        description="Auto-approves all commands. Use with caution.",
        icon="zap",
    ),
}


class PermissionCheckResult(BaseModel):
    """Outcome of a permission check.

    Three shapes are produced:
    - allowed: ``allowed=True``
    - hard block: ``allowed=False`` with a ``reason``
    - prompt: ``allowed=False``, ``requires_prompt=True`` with a ``reason``
    """

    allowed: bool
    reason: str | None = None
    requires_prompt: bool | None = None

    @classmethod
    def allow(cls) -> "PermissionCheckResult":
        return cls(allowed=True)

    @classmethod
    def block(cls, reason: str) -> "PermissionCheckResult":
        return cls(allowed=False, reason=reason)

    @classmethod
    def prompt(cls, reason: str) -> "PermissionCheckResult":
        return cls(allowed=False, requires_prompt=True, reason=reason)


class SessionPermissionState(BaseModel):
    """Permission state held for one agent session."""

    session_id: str
    mode: PermissionMode
    created_at: float = Field(default_factory=time.time)
    # normalized command -> decision
    decisions: dict[str, CommandDecision] = Field(default_factory=dict)

    @property
    def approved_commands(self) -> set[str]:
        return {cmd for cmd, d in self.decisions.items() if d == CommandDecision.APPROVED}

    @property
    def denied_commands(self) -> set[str]:
        return {cmd for cmd, d in self.decisions.items() if d == CommandDecision.DENIED}


class SessionPermissionSummary(BaseModel):
    """Read-only diagnostic view of a session's permission state."""

    mode: PermissionMode
    approved_count: int
    denied_count: int
    created_at: float
