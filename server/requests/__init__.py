"""
HTTP request models for the API.

These are Pydantic models for validating and parsing API requests.
"""

from .command_request import CommandRequest
from .set_mode_request import SetModeRequest
from .tool_check_request import ToolCheckRequest

__all__ = [
    # Mode requests
    "SetModeRequest",
    # Check requests
    "CommandRequest",
    "ToolCheckRequest",
]
