"""Application routes — every page of the client as a typed value.

Each route is a frozen dataclass that knows its canonical URL.
``parse`` resolves a URL through the compiled route table and returns
``None`` when nothing matches, so callers can fall through to a
not-found page::

    route = parse("/acme/groups/42")   # Group(space_slug="acme", group_id="42")
    to_string(route)                   # "/acme/groups/42"

The posts listing is delegated to ``level.routes.posts``.
"""

from collections.abc import Callable
from dataclasses import dataclass
from urllib.parse import quote, urlsplit

from level.errors import NotFound
from level.http.query import QueryParams
from level.routes import posts
from level.routing import Route, Router


def _segment(value: str) -> str:
    return quote(value, safe="")


@dataclass(frozen=True, slots=True)
class Spaces:
    def to_string(self) -> str:
        return "/spaces"


@dataclass(frozen=True, slots=True)
class NewSpace:
    def to_string(self) -> str:
        return "/spaces/new"


@dataclass(frozen=True, slots=True)
class UserSettings:
    def to_string(self) -> str:
        return "/user/settings"


@dataclass(frozen=True, slots=True)
class Root:
    """Space landing page; the client redirects it to the default listing."""

    space_slug: str

    def to_string(self) -> str:
        return f"/{_segment(self.space_slug)}"


@dataclass(frozen=True, slots=True)
class Posts:
    params: posts.Params

    def to_string(self) -> str:
        return posts.to_string(self.params)


@dataclass(frozen=True, slots=True)
class Post:
    space_slug: str
    post_id: str

    def to_string(self) -> str:
        return f"/{_segment(self.space_slug)}/posts/{_segment(self.post_id)}"


@dataclass(frozen=True, slots=True)
class Groups:
    space_slug: str

    def to_string(self) -> str:
        return f"/{_segment(self.space_slug)}/groups"


@dataclass(frozen=True, slots=True)
class NewGroup:
    space_slug: str

    def to_string(self) -> str:
        return f"/{_segment(self.space_slug)}/groups/new"


@dataclass(frozen=True, slots=True)
class Group:
    space_slug: str
    group_id: str

    def to_string(self) -> str:
        return f"/{_segment(self.space_slug)}/groups/{_segment(self.group_id)}"


@dataclass(frozen=True, slots=True)
class SpaceUsers:
    space_slug: str

    def to_string(self) -> str:
        return f"/{_segment(self.space_slug)}/users"


@dataclass(frozen=True, slots=True)
class SpaceUser:
    space_slug: str
    space_user_id: str

    def to_string(self) -> str:
        return f"/{_segment(self.space_slug)}/users/{_segment(self.space_user_id)}"


@dataclass(frozen=True, slots=True)
class InviteUsers:
    space_slug: str

    def to_string(self) -> str:
        return f"/{_segment(self.space_slug)}/invites"


@dataclass(frozen=True, slots=True)
class SpaceSettings:
    space_slug: str

    def to_string(self) -> str:
        return f"/{_segment(self.space_slug)}/settings"


AppRoute = (
    Spaces
    | NewSpace
    | UserSettings
    | Root
    | Posts
    | Post
    | Groups
    | NewGroup
    | Group
    | SpaceUsers
    | SpaceUser
    | InviteUsers
    | SpaceSettings
)


def _feed(query: QueryParams, space_slug: str) -> Posts:
    return Posts(posts.from_feed(query, space_slug))


def _inbox(query: QueryParams, space_slug: str) -> Posts:
    return Posts(posts.from_inbox(query, space_slug))


def _ignore_query(cls: type) -> Callable[..., AppRoute]:
    """Adapt a route class to the ``handler(query, **path_params)`` shape."""

    def build(query: QueryParams, **path_params: str) -> AppRoute:
        return cls(**path_params)

    build.__name__ = cls.__name__
    return build


_ROUTES = (
    Route("/spaces", _ignore_query(Spaces), name="spaces"),
    Route("/spaces/new", _ignore_query(NewSpace), name="new_space"),
    Route("/user/settings", _ignore_query(UserSettings), name="user_settings"),
    Route("/{space_slug}", _ignore_query(Root), name="root"),
    Route(posts.FEED_PATH, _feed, name="feed"),
    Route(posts.INBOX_PATH, _inbox, name="inbox"),
    Route("/{space_slug}/posts/{post_id}", _ignore_query(Post), name="post"),
    Route("/{space_slug}/groups", _ignore_query(Groups), name="groups"),
    Route("/{space_slug}/groups/new", _ignore_query(NewGroup), name="new_group"),
    Route("/{space_slug}/groups/{group_id}", _ignore_query(Group), name="group"),
    Route("/{space_slug}/users", _ignore_query(SpaceUsers), name="space_users"),
    Route("/{space_slug}/users/{space_user_id}", _ignore_query(SpaceUser), name="space_user"),
    Route("/{space_slug}/invites", _ignore_query(InviteUsers), name="invite_users"),
    Route("/{space_slug}/settings", _ignore_query(SpaceSettings), name="space_settings"),
)

ROUTER = Router()
for _route in _ROUTES:
    ROUTER.add(_route)
ROUTER.compile()


def parse(url: str) -> AppRoute | None:
    """Resolve *url* to a route value, or ``None`` if no route matches."""
    parts = urlsplit(url)
    try:
        match = ROUTER.match("GET", parts.path)
    except NotFound:
        return None
    return match.route.handler(QueryParams(parts.query), **match.path_params)


def to_string(route: AppRoute) -> str:
    """Return the canonical URL of *route*."""
    return route.to_string()


__all__ = [
    "ROUTER",
    "AppRoute",
    "Group",
    "Groups",
    "InviteUsers",
    "NewGroup",
    "NewSpace",
    "Post",
    "Posts",
    "Root",
    "SpaceSettings",
    "SpaceUser",
    "SpaceUsers",
    "Spaces",
    "UserSettings",
    "parse",
    "to_string",
]
