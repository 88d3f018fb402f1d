"""
Grandma Recipes API: Request ID Middleware
===========================================

What:  Assigns a short correlation ID to each request and echoes it back in
       the X-Request-ID response header.
How:   Reuses a client-supplied X-Request-ID when present, otherwise
       generates one. The ID is stored in a ContextVar so loggers and the
       exception handlers can include it without threading it through calls.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        return response
