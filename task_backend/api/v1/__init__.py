"""
API layer for the task backend.

Exposes HTTP endpoints under /api/v1 (users and tasks).
"""
from .user_controller import router as user_router
from .task_controller import router as task_router
from .error_handlers import register_error_handlers
from .middleware import RequestLoggingMiddleware


__all__ = ["user_router", "task_router", "register_error_handlers", "RequestLoggingMiddleware"]
