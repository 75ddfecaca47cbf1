"""Permission mode, check and approval endpoints."""

import logging

from fastapi import APIRouter, HTTPException

from core.permissions import (
    MODE_INFO,
    MODE_ORDER,
    PermissionCheckResult,
    PermissionChecker,
)
from ..requests import CommandRequest, SetModeRequest, ToolCheckRequest
from ..state import get_permission_checker

logger = logging.getLogger(__name__)

router = APIRouter()


def _require_checker() -> PermissionChecker:
    checker = get_permission_checker()
    if checker is None:
        raise HTTPException(status_code=500, detail="Permission checker not initialized")
    return checker


# =============================================================================
# Modes
# =============================================================================


@router.get("/permission/modes")
async def list_modes() -> dict:
    """
    List available permission modes with their display information.

    Returns:
        Modes ordered from most to least restrictive, their info, and the
        default mode for new sessions
    """
    checker = _require_checker()
    return {
        "modes": [mode.value for mode in MODE_ORDER],
        "info": {mode.value: info.model_dump() for mode, info in MODE_INFO.items()},
        "default_mode": checker.get_default_mode().value,
    }


@router.put("/permission/default-mode")
async def set_default_mode(request: SetModeRequest) -> dict:
    """
    Set the permission mode given to new sessions.

    Args:
        request: The new default mode

    Returns:
        Success confirmation with the new default
    """
    checker = _require_checker()
    try:
        checker.set_default_mode(request.mode)
    except Exception as e:
        logger.error("Failed to set default permission mode: %s", e)
        raise HTTPException(status_code=500, detail=str(e))
    return {"success": True, "default_mode": request.mode.value}


@router.get("/session/{sessionID}/permission/mode")
async def get_session_mode(sessionID: str) -> dict:
    """
    Get the current permission mode for a session.

    Args:
        sessionID: The session ID

    Returns:
        Session permission summary with the current mode and its info
    """
    checker = _require_checker()
    summary = checker.get_summary(sessionID)
    return {
        **summary.model_dump(mode="json"),
        "current_mode": summary.mode.value,
        "mode_info": MODE_INFO[summary.mode].model_dump(),
    }


@router.put("/session/{sessionID}/permission/mode")
async def set_session_mode(sessionID: str, request: SetModeRequest) -> dict:
    """
    Set the permission mode for a session.

    Changing the mode clears the session's approvals and denials.

    Args:
        sessionID: The session ID
        request: The new mode

    Returns:
        Success confirmation with the new mode and its info
    """
    checker = _require_checker()
    try:
        checker.set_session_mode(sessionID, request.mode)
    except Exception as e:
        logger.error("Failed to set permission mode for session %s: %s", sessionID, e)
        raise HTTPException(status_code=500, detail=str(e))
    return {
        "success": True,
        "mode": request.mode.value,
        "mode_info": MODE_INFO[request.mode].model_dump(),
    }


# =============================================================================
# Checks
# =============================================================================


@router.post("/session/{sessionID}/permission/check/bash", response_model_exclude_none=True)
async def check_bash_command(sessionID: str, request: CommandRequest) -> PermissionCheckResult:
    """
    Check whether a bash command may run.

    Args:
        sessionID: The session ID
        request: The command to check

    Returns:
        Permission check result
    """
    checker = _require_checker()
    try:
        return checker.check_bash(sessionID, request.command)
    except Exception as e:
        logger.error("Bash permission check failed for session %s: %s", sessionID, e)
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/session/{sessionID}/permission/check/tool", response_model_exclude_none=True)
async def check_tool_call(sessionID: str, request: ToolCheckRequest) -> PermissionCheckResult:
    """
    Check whether a tool call may run.

    Args:
        sessionID: The session ID
        request: The tool name and optional arguments

    Returns:
        Permission check result
    """
    checker = _require_checker()
    try:
        return checker.check_tool(sessionID, request.tool_name, request.args)
    except Exception as e:
        logger.error("Tool permission check failed for session %s: %s", sessionID, e)
        raise HTTPException(status_code=500, detail=str(e))


# =============================================================================
# Approvals
# =============================================================================


@router.post("/session/{sessionID}/permission/approve")
async def approve_command(sessionID: str, request: CommandRequest) -> dict:
    """
    Approve a command for the rest of the session.

    Args:
        sessionID: The session ID
        request: The command exactly as it was checked

    Returns:
        Success confirmation
    """
    checker = _require_checker()
    try:
        checker.approve_command(sessionID, request.command)
        return {"success": True}
    except Exception as e:
        logger.error("Failed to approve command for session %s: %s", sessionID, e)
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/session/{sessionID}/permission/deny")
async def deny_command(sessionID: str, request: CommandRequest) -> dict:
    """
    Deny a command for the rest of the session.

    Args:
        sessionID: The session ID
        request: The command exactly as it was checked

    Returns:
        Success confirmation
    """
    checker = _require_checker()
    try:
        checker.deny_command(sessionID, request.command)
        return {"success": True}
    except Exception as e:
        logger.error("Failed to deny command for session %s: %s", sessionID, e)
        raise HTTPException(status_code=500, detail=str(e))


# =============================================================================
# Session state
# =============================================================================


@router.get("/session/{sessionID}/permissions")
async def get_session_permissions(sessionID: str) -> dict:
    """
    Get the permission summary for a session.

    Args:
        sessionID: The session ID

    Returns:
        Mode, approval and denial counts, and creation time
    """
    checker = _require_checker()
    summary = checker.get_summary(sessionID)
    return {"session_id": sessionID, **summary.model_dump(mode="json")}


@router.delete("/session/{sessionID}/permissions")
async def clear_session_permissions(sessionID: str) -> dict:
    """
    Clear all permission state for a session.

    Args:
        sessionID: The session ID

    Returns:
        Success confirmation
    """
    checker = _require_checker()
    checker.clear_session_state(sessionID)
    return {"success": True}
