"""HTTP middleware for the catalog API.

Three layers wrap every request, outermost first:

1. ``RequestIdMiddleware`` assigns the correlation id and logs one line
   per request.
2. ``ApiKeyMiddleware`` guards the catalog routes with a Bearer key.
3. ``ErrorHandlerMiddleware`` turns anything the handlers let escape into
   an ``INTERNAL_ERROR`` body.
"""

import hmac
import time
from typing import Callable
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from catalog_api.infrastructure.config import settings

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"

# Everything under these prefixes needs an API key; health and docs stay open
PROTECTED_PREFIXES = ("/items",)


def _error_body(request: Request, error_code: str, message: str) -> dict[str, object]:
    return {
        "error_code": error_code,
        "message": message,
        "details": [],
        "request_id": getattr(request.state, "request_id", None),
    }


# ============================================================================
# Correlation
# ============================================================================


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Attach a correlation id to the request, its logs and its response.

    A client-supplied ``X-Request-ID`` is reused; otherwise a UUID4 is
    generated.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        request.state.request_id = request_id
        structlog.contextvars.bind_contextvars(request_id=request_id)

        started = time.perf_counter()
        response: Response | None = None
        try:
            response = await call_next(request)
        finally:
            logger.info(
                "Catalog request",
                method=request.method,
                path=request.url.path,
                query=request.url.query or None,
                status_code=response.status_code if response is not None else 500,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            structlog.contextvars.unbind_contextvars("request_id")

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


# ============================================================================
# Authentication
# ============================================================================


def requires_api_key(path: str) -> bool:
    """Check whether a request path belongs to the protected catalog routes."""
    return any(path == prefix or path.startswith(f"{prefix}/") for prefix in PROTECTED_PREFIXES)


def bearer_token(header: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` header.

    Returns:
        The token, or None when the header is not a Bearer credential.
    """
    if not header:
        return None
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


class ApiKeyMiddleware(BaseHTTPMiddleware):
    """Reject catalog requests without the configured API key.

    Missing or malformed credentials get ``UNAUTHORIZED``; a well-formed
    but wrong key gets ``INVALID_API_KEY``. Both are 401 with a
    ``WWW-Authenticate: Bearer`` challenge.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        path = request.url.path
        if not requires_api_key(path):
            return await call_next(request)

        header = request.headers.get("Authorization")
        token = bearer_token(header)

        if token is None:
            reason = "missing" if not header else "malformed"
            logger.warning("Catalog request without credentials", path=path, reason=reason)
            return self._reject(
                request,
                "UNAUTHORIZED",
                "Send the API key as 'Authorization: Bearer <api_key>'",
            )

        if not hmac.compare_digest(token.encode(), settings.catalog_api_key.encode()):
            logger.warning("Catalog request with wrong API key", path=path)
            return self._reject(request, "INVALID_API_KEY", "Invalid API key")

        return await call_next(request)

    @staticmethod
    def _reject(request: Request, error_code: str, message: str) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content=_error_body(request, error_code, message),
            headers={"WWW-Authenticate": "Bearer"},
        )


# ============================================================================
# Unhandled errors
# ============================================================================


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Render exceptions that escape the route handlers as a 500 body.

    Repository and connectivity failures are not handled by the routes;
    they end up here and are logged with the request's correlation id.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception:
            logger.exception(
                "Catalog request failed",
                method=request.method,
                path=request.url.path,
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=_error_body(request, "INTERNAL_ERROR", "An internal error occurred"),
            )


def setup_middleware(app: FastAPI) -> None:
    """Install the middleware stack.

    Starlette runs the last-added middleware first, so they are added
    innermost to outermost.
    """
    app.add_middleware(ErrorHandlerMiddleware)
    app.add_middleware(ApiKeyMiddleware)
    app.add_middleware(RequestIdMiddleware)
