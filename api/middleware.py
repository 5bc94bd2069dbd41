"""
ASGI middleware that lets handlers speak snake_case while clients speak camelCase.

Request bodies are converted camelCase -> snake_case before routing; JSON
responses are converted snake_case -> camelCase on the way out. Anything that
does not parse as a JSON object or array passes through byte-for-byte.
"""
from __future__ import annotations

import json
import logging
import time
from typing import Optional

from fastapi import Request
from starlette.datastructures import Headers, MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from utils.case import KeyCase, KeyCaseCodec

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


def _is_json(content_type: Optional[str]) -> bool:
    return bool(content_type) and JSON_CONTENT_TYPE in content_type


def transcode_body(raw: bytes, convention: KeyCase, codec: KeyCaseCodec) -> bytes:
    """Re-encode a JSON object/array with converted keys; return raw unchanged otherwise."""
    if not raw:
        return raw
    try:
        payload = json.loads(raw)
    except ValueError:
        logger.debug("case conversion skipped: body is not valid JSON")
        return raw
    if not isinstance(payload, (dict, list)):
        return raw
    converted = codec.convert(payload, convention)
    try:
        return json.dumps(converted, ensure_ascii=False, allow_nan=False, separators=(",", ":")).encode("utf-8")
    except ValueError:
        # NaN/Infinity parse fine but cannot be re-encoded as strict JSON
        return raw


class CaseConverterMiddleware:
    def __init__(self, app: ASGIApp, codec: KeyCaseCodec | None = None) -> None:
        self.app = app
        self.codec = codec or KeyCaseCodec()

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        responder = _ResponseTranscoder(send, self.codec)
        headers = Headers(scope=scope)
        # Request side only touches JSON bodies and GETs; multipart uploads stream through.
        if not _is_json(headers.get("content-type")) and scope["method"] != "GET":
            await self.app(scope, receive, responder.send)
            return

        raw, disconnected = await _read_body(receive)
        body = transcode_body(raw, KeyCase.SNAKE, self.codec)
        if body is not raw:
            request_headers = MutableHeaders(scope=scope)
            request_headers["content-length"] = str(len(body))

        await self.app(scope, _replay(body, receive, disconnected), responder.send)


async def _read_body(receive: Receive) -> tuple[bytes, bool]:
    chunks = []
    while True:
        message = await receive()
        if message["type"] == "http.disconnect":
            return b"".join(chunks), True
        chunks.append(message.get("body", b""))
        if not message.get("more_body", False):
            return b"".join(chunks), False


def _replay(body: bytes, receive: Receive, disconnected: bool) -> Receive:
    sent = False

    async def replay() -> Message:
        nonlocal sent
        if not sent:
            sent = True
            return {"type": "http.request", "body": body, "more_body": False}
        if disconnected:
            return {"type": "http.disconnect"}
        return await receive()

    return replay


class _ResponseTranscoder:
    """Buffers a JSON response until complete, then sends it camelCased with the original status."""

    def __init__(self, send: Send, codec: KeyCaseCodec):
        self._send = send
        self._codec = codec
        self._start: Optional[Message] = None
        self._chunks: list[bytes] = []

    async def send(self, message: Message) -> None:
        if message["type"] == "http.response.start":
            if _is_json(Headers(raw=message.get("headers", [])).get("content-type")):
                self._start = message
                return
            await self._send(message)
            return

        if message["type"] != "http.response.body" or self._start is None:
            await self._send(message)
            return

        self._chunks.append(message.get("body", b""))
        if message.get("more_body", False):
            return

        raw = b"".join(self._chunks)
        body = transcode_body(raw, KeyCase.CAMEL, self._codec)
        start = self._start
        if body is not raw:
            headers = MutableHeaders(raw=list(start.get("headers", [])))
            headers["content-length"] = str(len(body))
            start = {**start, "headers": headers.raw}
        await self._send(start)
        await self._send({"type": "http.response.body", "body": body, "more_body": False})


async def log_requests(request: Request, call_next):
    """METHOD status latency path, one line per request."""
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info("%s | %3d | %.1fms | %s", request.method, response.status_code, elapsed_ms, request.url.path)
    return response
