"""Request Context Middleware — request ids and one access log line per request.

Invariants:
    - request.state.request_id is set before any route runs
    - Exactly one access log line per request, including requests that raise
    - Successful responses carry X-Request-ID (incoming value reused, else minted);
      500 responses get it from the catch-all handler in api/error_handlers.py

Design Decisions:
    - BaseHTTPMiddleware: enough for a JSON API without streaming responses
    - Unhandled exceptions are logged as 500 and re-raised: the app's catch-all
      handler builds the response, this middleware never swallows the error
"""

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

logger = logging.getLogger("apicrud.access")


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Attach a request id and log method, path, status and duration."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        start = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            _log_access(request, request_id, 500, start)
            raise

        response.headers[REQUEST_ID_HEADER] = request_id
        _log_access(request, request_id, response.status_code, start)
        return response


def _log_access(
    request: Request, request_id: str, status_code: int, start: float,
) -> None:
    logger.info(
        f"{request.method} {request.url.path} {status_code}",
        extra={
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "status_code": status_code,
            "duration_ms": round((time.perf_counter() - start) * 1000, 2),
            "client_ip": request.client.host if request.client else None,
        },
    )
