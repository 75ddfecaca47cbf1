"""
Health check endpoint.
"""

from fastapi import APIRouter

from ..state import get_permission_checker


router = APIRouter()


@router.get("/health")
async def health() -> dict:
    """Health check endpoint."""
    return {"status": "ok", "permission_checker_configured": get_permission_checker() is not None}
