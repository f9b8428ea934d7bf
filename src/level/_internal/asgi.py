"""Typed ASGI definitions.

Replaces the standard Scope = MutableMapping[str, Any] with a typed
dataclass for internal use.
"""

from collections.abc import Awaitable, Callable, MutableMapping
from dataclasses import dataclass
from typing import Any, TypeAlias
from urllib.parse import quote

# Raw ASGI callables and scope
Scope: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[MutableMapping[str, Any]]]
Send: TypeAlias = Callable[[MutableMapping[str, Any]], Awaitable[None]]


@dataclass(frozen=True, slots=True)
class HTTPScope:
    """The parts of an HTTP scope the app routes on.

    ``path`` is percent-decoded by the server; ``raw_path`` is the path
    exactly as it appeared on the request line.
    """

    method: str
    path: str
    query_string: bytes
    raw_path: bytes = b""

    @classmethod
    def from_scope(cls, scope: Scope) -> "HTTPScope":
        """Parse raw ASGI scope into typed object."""
        return cls(
            method=scope["method"],
            path=scope["path"],
            query_string=scope.get("query_string", b""),
            raw_path=scope.get("raw_path") or b"",
        )

    @property
    def route_path(self) -> str:
        """The still-encoded path to route on.

        Servers may omit ``raw_path``; the decoded path is re-encoded then,
        which cannot tell an encoded ``%2F`` from a separator.
        """
        if self.raw_path:
            return self.raw_path.decode("latin-1")
        return quote(self.path, safe="/")
