"""ASGI app serving post listings as JSON.

Feed and inbox URLs resolve to ``Params``, posts come from a
caller-supplied source, and the filtered listing goes back as JSON::

    def load_posts(space_slug: str) -> list[Post]:
        ...

    app = App(load_posts, config=AppConfig(page_size=50))

Any URL that is not a post listing is a 404. The app owns no storage and
keeps no per-request state.
"""

import logging
import traceback
from collections.abc import Awaitable, Callable, Iterable
from datetime import UTC, datetime

from level._internal.asgi import HTTPScope, Receive, Scope, Send
from level._internal.invoke import invoke
from level.config import AppConfig
from level.errors import HTTPError, MethodNotAllowed, NotFound
from level.http.query import QueryParams
from level.http.response import Response
from level.posts import Post, filter_posts
from level.routes import ROUTER, Posts
from level.routes.posts import Params, to_string
from level.server.sender import send_response

logger = logging.getLogger("level.server")

PostSource = Callable[[str], Iterable[Post] | Awaitable[Iterable[Post]]]


def _utcnow() -> datetime:
    return datetime.now(UTC)


class App:
    """Thin ASGI surface over route params and post filtering."""

    __slots__ = ("clock", "config", "posts")

    def __init__(
        self,
        posts: PostSource,
        *,
        config: AppConfig | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.posts = posts
        self.config = config or AppConfig()
        self.clock = clock

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            return

        request = HTTPScope.from_scope(scope)
        try:
            response = await self._dispatch(request)
        except HTTPError as exc:
            logger.debug("%d %s %s: %s", exc.status, request.method, request.path, exc.detail)
            response = Response.json({"error": exc.detail}, status=exc.status)
            for name, value in exc.headers:
                response = response.with_header(name, value)
        except Exception as exc:
            logger.exception("500 %s %s", request.method, request.path)
            body: dict[str, str] = {"error": "Internal Server Error"}
            if self.config.debug:
                body["traceback"] = "".join(traceback.format_exception(exc))
            response = Response.json(body, status=500)

        await send_response(response, send, head=request.method == "HEAD")

    async def _dispatch(self, request: HTTPScope) -> Response:
        # Every app route answers GET; resolve the page first so that only
        # post listings can answer 405.
        match = ROUTER.match("GET", request.route_path)
        route = match.route.handler(QueryParams(request.query_string), **match.path_params)
        if not isinstance(route, Posts):
            raise NotFound(f"{request.path!r} is not a post listing")
        if request.method not in match.route.methods:
            raise MethodNotAllowed(match.route.methods)
        return await self.list_posts(route.params)

    async def list_posts(self, params: Params) -> Response:
        """Load, filter and serialize the listing for *params*."""
        loaded = await invoke(self.posts, params.space_slug)
        listed = filter_posts(loaded, params, self.clock())[: self.config.page_size]
        return Response.json(
            {
                "space": params.space_slug,
                "view": params.view.value,
                "url": to_string(params),
                "filters": {
                    "state": params.state.to_query(),
                    "inbox_state": params.inbox_state.to_query(),
                    "last_activity": params.last_activity.to_query(),
                },
                "posts": [post.to_dict() for post in listed],
            }
        )
