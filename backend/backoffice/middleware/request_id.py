"""
Back Office Backend — Request ID Middleware
=============================================

What:  Assigns a correlation id to each incoming request and returns it in
       the `X-Request-ID` response header.
Why:   Every log line written while serving a request carries the same id,
       and error envelopes echo it so support can find the matching logs.
How:   Stores the id in a ContextVar; `RequestIdFilter` copies it onto every
       LogRecord so the log format can print `%(request_id)s`.
"""

import logging
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on the same thread each see their own id
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIdFilter(logging.Filter):
    """Adds `record.request_id` ("-" outside a request) to every log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get() or "-"
        return True


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Uses the client's X-Request-ID when present (end-to-end tracing from the
    frontend), otherwise generates a short 8-character id.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]

        # Not reset afterwards: the catch-all 500 handler runs outside this
        # middleware and still needs the id. Each request has its own context.
        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)

        response.headers["X-Request-ID"] = rid
        return response
