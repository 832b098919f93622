"""Shared-secret check for mutating calls."""

import logging
import secrets

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

logger = logging.getLogger(__name__)

MUTATING_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})


def api_key_matches(provided: str | None, expected: str) -> bool:
    """Constant-time compare; an unset server key rejects everything."""
    if not expected or not provided:
        return False
    return secrets.compare_digest(provided.encode("utf-8"), expected.encode("utf-8"))


class ApiKeyMiddleware(BaseHTTPMiddleware):
    """Reject POST/PUT/PATCH/DELETE without the configured key before routing or body parsing."""

    def __init__(self, app, api_key: str, header_name: str = "x-api-key"):
        super().__init__(app)
        self.api_key = api_key
        self.header_name = header_name

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.method in MUTATING_METHODS and not api_key_matches(
            request.headers.get(self.header_name), self.api_key
        ):
            logger.warning("rejected %s %s: missing or invalid api key", request.method, request.url.path)
            return JSONResponse(status_code=401, content={"detail": "Invalid or missing API key"})
        return await call_next(request)
