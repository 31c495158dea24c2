"""
API Key Authentication Middleware for the name search API.

Validates the X-API-Key header against the configured keys. Health checks
and the documentation endpoints stay public.
"""
import logging
from typing import Iterable, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse


logger = logging.getLogger(__name__)

# Endpoints that don't require authentication
PUBLIC_PATHS = {
    "/api",
    "/docs",
    "/redoc",
    "/openapi.json",
    "/api/v1/health",
}


class APIKeyMiddleware(BaseHTTPMiddleware):
    """Rejects requests without a valid API key when keys are configured."""

    def __init__(self, app, api_keys: Optional[Iterable[str]] = None):
        """
        Args:
            app: ASGI application
            api_keys: Valid API keys. Authentication is disabled when empty.
        """
        super().__init__(app)
        self.api_keys = set(api_keys or ())
        self.auth_enabled = bool(self.api_keys)

        if self.auth_enabled:
            logger.info(f"API Key authentication enabled with {len(self.api_keys)} key(s)")
        else:
            logger.info("API Key authentication disabled (no keys configured)")

    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        if not self.auth_enabled or path in PUBLIC_PATHS:
            return await call_next(request)

        api_key = request.headers.get("X-API-Key")
        if not api_key:
            logger.warning(f"Missing API key for {request.method} {path}")
            return self._unauthorized("Missing X-API-Key header")

        if api_key not in self.api_keys:
            logger.warning(f"Invalid API key for {request.method} {path}")
            return self._unauthorized("Invalid API key")

        return await call_next(request)

    @staticmethod
    def _unauthorized(message: str) -> JSONResponse:
        return JSONResponse(
            status_code=401,
            content={
                "status": "error",
                "code": "UNAUTHORIZED",
                "message": message,
                "details": {}
            }
        )
