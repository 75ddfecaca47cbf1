"""SetModeRequest model."""

from pydantic import BaseModel

from core.permissions import PermissionMode


class SetModeRequest(BaseModel):
    mode: PermissionMode
