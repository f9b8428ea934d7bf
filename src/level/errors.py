"""Level exception hierarchy.

Shared across the router, the route table, and the ASGI app so every
module raises and catches the same types.
"""

from dataclasses import dataclass


class LevelError(Exception):
    """Base for all level-specific errors."""


class ConfigurationError(LevelError):
    """Raised when a route table or app configuration is invalid.

    Typically raised while the route table is being built at import time.
    """


@dataclass(frozen=True, slots=True)
class HTTPError(LevelError):
    """An error that maps directly to an HTTP status code.

    Raised by the router or the app. The ASGI app catches these and
    renders them as JSON error bodies.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """404 — no route matched the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class MethodNotAllowed(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """405 — route exists but not for this HTTP method.

    Includes an ``Allow`` header listing the valid methods.
    """

    def __init__(self, allowed: frozenset[str], detail: str = "") -> None:
        allow_value = ", ".join(sorted(allowed))
        default_detail = f"Method not allowed. Allowed methods: {allow_value}"
        super().__init__(
            status=405,
            detail=detail or default_detail,
            headers=(("Allow", allow_value),),
        )
