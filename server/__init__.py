"""
Permission engine API server.

Exposes session permission modes, command checks and approvals over HTTP.
"""

from .app import app
from .routes import register_routes
from .state import get_permission_checker, set_permission_checker

# Register all routes with the app
register_routes(app)

__all__ = ["app", "set_permission_checker", "get_permission_checker"]
