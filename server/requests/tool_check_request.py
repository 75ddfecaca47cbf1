"""ToolCheckRequest model."""

from typing import Any

from pydantic import BaseModel


class ToolCheckRequest(BaseModel):
    tool_name: str
    args: dict[str, Any] | None = None
