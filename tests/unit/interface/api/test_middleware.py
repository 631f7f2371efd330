"""Unit tests for the upload size middleware."""

import json

import pytest

from hub.interface.api.middleware import MULTIPART_OVERHEAD, UploadSizeLimitMiddleware

MAX_BYTES = 10 * 1024 * 1024


class RecordingApp:
    """Inner ASGI app that notes whether it was reached."""

    def __init__(self):
        self.called = False

    async def __call__(self, scope, receive, send):
        self.called = True
        await send({"type": "http.response.start", "status": 201, "headers": []})
        await send({"type": "http.response.body", "body": b"{}"})


async def call(path: str, content_length: int | None, method: str = "POST"):
    """Run one request through the middleware and collect the response."""
    inner = RecordingApp()
    middleware = UploadSizeLimitMiddleware(inner, max_bytes=MAX_BYTES)
    headers = [(b"content-type", b"multipart/form-data; boundary=x")]
    if content_length is not None:
        headers.append((b"content-length", str(content_length).encode()))
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": method,
        "scheme": "http",
        "path": path,
        "raw_path": path.encode(),
        "query_string": b"",
        "root_path": "",
        "headers": headers,
        "client": ("127.0.0.1", 1234),
        "server": ("testserver", 80),
    }
    async def receive():
        return {"type": "http.request", "body": b"", "more_body": False}

    messages = []

    async def send(message):
        messages.append(message)

    await middleware(scope, receive, send)
    status = next(m["status"] for m in messages if m["type"] == "http.response.start")
    body = b"".join(m.get("body", b"") for m in messages if m["type"] == "http.response.body")
    return inner.called, status, body


class TestUploadSizeLimitMiddleware:
    """Tests for rejecting oversized uploads from their declared length."""

    @pytest.mark.asyncio
    async def test_declared_oversize_rejected_without_reaching_route(self):
        called, status, body = await call(
            "/groups/abc/papers", MAX_BYTES + MULTIPART_OVERHEAD + 1
        )

        assert called is False
        assert status == 400
        assert json.loads(body) == {
            "success": False,
            "message": "File too large. Maximum size is 10MB.",
        }

    @pytest.mark.asyncio
    async def test_upload_within_limit_passes(self):
        called, status, _ = await call("/groups/abc/papers", MAX_BYTES)

        assert called is True
        assert status == 201

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "path,method,content_length",
        [
            ("/groups/abc/papers", "POST", None),
            ("/groups/abc/papers", "GET", MAX_BYTES * 2),
            ("/papers/abc/comments", "POST", MAX_BYTES * 2),
        ],
    )
    async def test_other_requests_untouched(self, path, method, content_length):
        """Only declared paper uploads are checked; the rest reach the app."""
        called, _, _ = await call(path, content_length, method=method)

        assert called is True
