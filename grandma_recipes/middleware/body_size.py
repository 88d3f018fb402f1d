"""
Grandma Recipes API: Body Size Middleware
==========================================

What:  Rejects requests whose declared Content-Length exceeds
       settings.max_body_size (25 MiB by default) with HTTP 413.
How:   Checks the header only; the body is never read here. Recipe
       submissions may embed base64 images, so the limit is generous.
"""

import logging
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from grandma_recipes.config import settings

logger = logging.getLogger(__name__)


class BodySizeLimitMiddleware(BaseHTTPMiddleware):

    def __init__(self, app, max_body_size: Optional[int] = None, **kwargs):
        super().__init__(app, **kwargs)
        self.max_body_size = max_body_size if max_body_size is not None else settings.max_body_size

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        declared = request.headers.get("content-length")
        if declared is not None and declared.isdigit() and int(declared) > self.max_body_size:
            logger.warning(
                "Rejected %s %s: body of %s bytes exceeds limit of %d",
                request.method,
                request.url.path,
                declared,
                self.max_body_size,
            )
            return JSONResponse(
                status_code=413,
                content={
                    "success": False,
                    "error": "payload_too_large",
                    "message": f"Request body exceeds the {self.max_body_size} byte limit.",
                    "details": {"max_body_size": self.max_body_size},
                },
            )
        return await call_next(request)
