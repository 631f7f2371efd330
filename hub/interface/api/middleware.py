"""HTTP middleware."""

import re
from collections.abc import Callable

import logfire
from fastapi import Request, Response, status
from starlette.middleware.base import BaseHTTPMiddleware

from hub.domain.service import too_large_message
from hub.interface.api.errors import error_response

UPLOAD_PATH = re.compile(r"^/groups/[^/]+/papers/?$")

# Room for the boundaries and the metadata fields sent with the file
MULTIPART_OVERHEAD = 64 * 1024


class UploadSizeLimitMiddleware(BaseHTTPMiddleware):
    """Reject paper uploads whose declared size is over the limit.

    Starlette spools the whole multipart body before a route runs, so the
    check has to happen on ``Content-Length`` before the body is read.
    Chunked uploads without a length are still cut off while the file is
    staged.
    """

    def __init__(self, app, max_bytes: int):
        super().__init__(app)
        self.max_bytes = max_bytes

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.method == "POST" and UPLOAD_PATH.match(request.url.path):
            declared = request.headers.get("content-length", "")
            if declared.isdigit() and int(declared) > self.max_bytes + MULTIPART_OVERHEAD:
                logfire.warn(
                    "Upload rejected before parsing",
                    content_length=int(declared),
                    max_bytes=self.max_bytes,
                    path=request.url.path,
                )
                return error_response(
                    status.HTTP_400_BAD_REQUEST, too_large_message(self.max_bytes)
                )
        return await call_next(request)
