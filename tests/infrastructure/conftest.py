"""Client test fixtures — in-process fake backend + ExamAPIClient wired to it.

Invariants:
    - Every test gets a fresh FakeBackend (no responses configured, no calls recorded)
    - Unconfigured paths answer 404 so a wrong path fails loudly
    - client fixture talks to the fake through httpx.ASGITransport (no sockets)

Design Decisions:
    - FastAPI catch-all route: records method/path/body/content-type for every request,
      then replays the configured (status, body) for that path
    - String/bytes bodies sent as text/plain: lets tests return malformed JSON
"""

import json

import httpx
import pytest
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response

from exam_client.infrastructure.exam_api_client import ExamAPIClient

BASE_URL = "http://exam-backend.test"


class FakeBackend:
    """Scriptable stand-in for the exam-assistant HTTP server."""

    def __init__(self):
        self.calls: list[dict] = []
        self._responses: dict[str, tuple[int, object]] = {}
        self.app = FastAPI()
        self.app.add_api_route(
            "/{path:path}", self._handle, methods=["GET", "POST"],
        )

    def respond(self, path: str, body: object, status: int = 200) -> None:
        self._responses[path] = (status, body)

    async def _handle(self, request: Request):
        raw = await request.body()
        self.calls.append({
            "method": request.method,
            "path": request.url.path,
            "body": json.loads(raw) if raw else None,
            "content_type": request.headers.get("content-type"),
        })
        status, body = self._responses.get(
            request.url.path, (404, {"success": False, "message": "no route"}),
        )
        if isinstance(body, (str, bytes)):
            return Response(content=body, status_code=status, media_type="text/plain")
        return JSONResponse(content=body, status_code=status)


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
async def client(backend):
    """ExamAPIClient pointed at the fake backend."""
    async with ExamAPIClient(
        BASE_URL, transport=httpx.ASGITransport(app=backend.app),
    ) as c:
        yield c


@pytest.fixture
def mock_transport_client():
    """Factory: ExamAPIClient over httpx.MockTransport(handler).

    Caller closes the client (use `async with`).
    """
    def _make(handler) -> ExamAPIClient:
        return ExamAPIClient(BASE_URL, transport=httpx.MockTransport(handler))
    return _make
