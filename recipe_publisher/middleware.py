"""CORS for the admin page.

Every response, errors and preflight included, carries the CORS headers.
With ALLOWED_ORIGINS set, a request from any other Origin is answered 403
before it reaches routing or the password check. Requests without an Origin
header (curl, server-to-server) are not cross-origin and pass through.
"""

import logging
from typing import Callable, Optional

from fastapi import Request
from fastapi.responses import JSONResponse, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .exceptions import ForbiddenOrigin
from .settings import Settings

logger = logging.getLogger("recipe_publisher.middleware")

ALLOW_HEADERS = "Content-Type, Authorization"
ALLOW_METHODS = "POST, OPTIONS"


def cors_headers(origin: Optional[str], allowlist: list[str]) -> dict:
    headers = {
        "Access-Control-Allow-Headers": ALLOW_HEADERS,
        "Access-Control-Allow-Methods": ALLOW_METHODS,
    }
    if not allowlist:
        headers["Access-Control-Allow-Origin"] = "*"
    else:
        headers["Vary"] = "Origin"
        if origin in allowlist:
            headers["Access-Control-Allow-Origin"] = origin
    return headers


class CORSGuardMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, settings_provider: Callable[[], Settings]):
        super().__init__(app)
        self.settings_provider = settings_provider

    def _settings(self, request: Request) -> Settings:
        # Honour app.dependency_overrides so tests can swap settings
        provider = request.app.dependency_overrides.get(self.settings_provider, self.settings_provider)
        return provider()

    async def dispatch(self, request: Request, call_next):
        allowlist = self._settings(request).origin_allowlist
        origin = request.headers.get("origin")
        headers = cors_headers(origin, allowlist)

        if allowlist and origin and origin not in allowlist:
            logger.warning(f"Rejected {request.method} {request.url.path} from origin {origin}")
            return JSONResponse(status_code=ForbiddenOrigin.status_code, content=ForbiddenOrigin().to_body(), headers=headers)

        # Preflight
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=headers)

        response = await call_next(request)
        response.headers.update(headers)
        return response
