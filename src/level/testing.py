"""Async test client for the level ASGI app.

Returns a ``TestResponse`` with status, headers and body. Sends requests
through the ASGI interface directly, no HTTP involved::

    client = TestClient(App(load_posts))
    response = await client.get("/acme/feed?state=open")
    assert response.status == 200
    assert response.json()["view"] == "feed"
"""

import json as json_module
from dataclasses import dataclass
from typing import Any
from urllib.parse import unquote

from level.app import App


class TestClient:
    __test__ = False  # Tell pytest this is not a test class

    __slots__ = ("app",)

    def __init__(self, app: App) -> None:
        self.app = app

    async def get(self, path: str) -> "TestResponse":
        """Send a GET request."""
        return await self.request("GET", path)

    async def request(self, method: str, path: str) -> "TestResponse":
        """Send an arbitrary request through the ASGI app."""
        path_part, _, query_string = path.partition("?")

        scope: dict[str, Any] = {
            "type": "http",
            "asgi": {"version": "3.0"},
            "http_version": "1.1",
            "method": method.upper(),
            "path": unquote(path_part),
            "raw_path": path_part.encode("latin-1"),
            "query_string": query_string.encode("latin-1"),
            "root_path": "",
            "headers": [],
            "server": ("testserver", 80),
            "client": ("127.0.0.1", 0),
        }

        async def receive() -> dict[str, Any]:
            return {"type": "http.request", "body": b"", "more_body": False}

        status = 0
        raw_headers: list[tuple[bytes, bytes]] = []
        body_parts: list[bytes] = []

        async def send(message: dict[str, Any]) -> None:
            nonlocal status, raw_headers
            if message["type"] == "http.response.start":
                status = message["status"]
                raw_headers = list(message.get("headers", []))
            elif message["type"] == "http.response.body":
                body_parts.append(message.get("body", b""))

        await self.app(scope, receive, send)

        content_type = ""
        headers: list[tuple[str, str]] = []
        for name_b, value_b in raw_headers:
            name, value = name_b.decode("latin-1"), value_b.decode("latin-1")
            if name == "content-type":
                content_type = value
            else:
                headers.append((name, value))

        return TestResponse(
            body=b"".join(body_parts),
            status=status,
            content_type=content_type,
            headers=tuple(headers),
        )


@dataclass(frozen=True, slots=True)
class TestResponse:
    """A response captured from the ASGI send() calls."""

    __test__ = False

    status: int
    content_type: str
    headers: tuple[tuple[str, str], ...]
    body: bytes

    def header(self, name: str) -> str | None:
        """Return the first header named *name* (case-insensitive)."""
        lowered = name.lower()
        for key, value in self.headers:
            if key == lowered:
                return value
        return None

    def json(self) -> Any:
        return json_module.loads(self.body)
