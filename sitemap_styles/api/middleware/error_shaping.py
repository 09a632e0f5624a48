from __future__ import annotations

import logging
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse, Response

log = logging.getLogger("sitemaps.errors")


class SafeErrorMiddleware(BaseHTTPMiddleware):
    """
    Outermost guard: a failing hook or plugin becomes a plain 500.

    - Never return stack traces to clients
    - Preserve request_id if present
    - Log traceback server-side
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            rid = getattr(request.state, "request_id", None) or request.headers.get("x-request-id")
            log.exception(
                "Unhandled error: %s: %s rid=%s path=%s",
                type(e).__name__,
                e,
                rid,
                request.url.path,
            )
            payload = {"detail": "Internal Server Error"}
            if rid:
                payload["request_id"] = rid
            return JSONResponse(status_code=500, content=payload)
