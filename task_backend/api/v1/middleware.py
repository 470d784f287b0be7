# Standard library imports
import logging
import time

# External package imports
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every request on the way in and its status and duration on the way out"""
    
    async def dispatch(self, request: Request, call_next):
        method = request.method
        path = request.url.path
        start_time = time.perf_counter()
        
        logger.info(f"→ {method} {path}")
        
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(f"← {method} {path} 500 - {duration_ms:.0f}ms", exc_info=True)
            raise
        
        duration_ms = (time.perf_counter() - start_time) * 1000
        log = logger.error if response.status_code >= 500 else logger.info
        log(f"← {method} {path} {response.status_code} - {duration_ms:.0f}ms")
        return response
