"""CommandRequest model."""

from pydantic import BaseModel


class CommandRequest(BaseModel):
    command: str  # exact command as proposed; normalized by the engine
