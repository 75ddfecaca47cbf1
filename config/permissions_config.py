"""PermissionsConfig model."""

from pydantic import BaseModel, Field, field_validator

from core.permissions import SHELL_TOOL_NAMES, PermissionMode, parse_mode

from .defaults import DEFAULT_PERMISSION_MODE


class PermissionsConfig(BaseModel):
    """Permission engine configuration."""

    default_mode: PermissionMode = Field(
        default=DEFAULT_PERMISSION_MODE,
        description="Permission mode given to newly created sessions",
    )
    shell_tools: list[str] = Field(
        default_factory=lambda: sorted(SHELL_TOOL_NAMES),
        description="Tool names whose payload is a shell command",
    )

    @field_validator("default_mode", mode="before")
    @classmethod
    def _fail_closed(cls, value: object) -> PermissionMode:
        # A corrupted setting resolves to ask, never to allow-all
        return parse_mode(value)
