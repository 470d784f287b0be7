# Standard library imports
import logging
from typing import Dict, Type

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

# Local application imports
from ...domain.exceptions import (
    TaskBackendError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ConflictError,
)

logger = logging.getLogger(__name__)


STATUS_CODE_MAP: Dict[Type[TaskBackendError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    AuthenticationError: status.HTTP_401_UNAUTHORIZED,
    AuthorizationError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
}


def status_code_for(exc: TaskBackendError) -> int:
    """Map an error kind to its HTTP status; unknown kinds are server errors"""
    for error_class in type(exc).__mro__:
        if error_class in STATUS_CODE_MAP:
            return STATUS_CODE_MAP[error_class]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def handle_task_backend_error(request: Request, exc: TaskBackendError) -> JSONResponse:
    """Translate a domain error into a JSON error response"""
    status_code = status_code_for(exc)
    
    log = logger.error if status_code >= 500 else logger.warning
    log(
        f"{exc.__class__.__name__} on {request.method} {request.url.path}: {exc.message}"
    )
    
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": exc.message,
            "error_type": exc.error_type,
        },
    )


def register_error_handlers(application: FastAPI) -> None:
    """Register handlers for every domain error kind"""
    application.add_exception_handler(TaskBackendError, handle_task_backend_error)
