"""
Permission server entry point.
"""
import logging
import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import get_config
from core.permissions import PermissionChecker, PermissionStore
from server import app, set_permission_checker
from server.logging_config import setup_logging

# Initialize logging before anything else
setup_logging()
logger = logging.getLogger(__name__)

# Constants
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000


def create_permission_checker() -> PermissionChecker:
    """Build a permission checker from the loaded configuration."""
    settings = get_config().permissions
    store = PermissionStore(default_mode=settings.default_mode)
    return PermissionChecker(store, shell_tools=settings.shell_tools)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Own the permission store for the lifetime of the server."""
    logger.info("Initializing permission system...")
    checker = create_permission_checker()
    set_permission_checker(checker)
    logger.info("Permission system ready (default mode: %s)", checker.get_default_mode().value)

    yield

    checker.clear_all_session_states()
    set_permission_checker(None)
    logger.info("Permission system stopped")


app.router.lifespan_context = lifespan


def main() -> None:
    """Start the permission server."""
    host = os.environ.get("HOST", DEFAULT_HOST)
    port = int(os.environ.get("PORT", str(DEFAULT_PORT)))

    logger.info("Server listening on %s:%d", host, port)
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
