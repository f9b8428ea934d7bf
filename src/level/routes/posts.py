"""Route params for a space's post listing.

A ``Params`` value is the complete filter state of the posts list: which
space, open/closed state, inbox triage state, and last-activity bucket.
It converts to and from its URL::

    params = init("acme").with_state(PostStateFilter.OPEN)
    to_string(params)                       # "/acme/inbox?state=open"
    parse("/acme/feed?last_activity=today") # Params(space_slug="acme", ...)

Two URL shapes exist. ``/{space_slug}/feed`` carries ``state`` and
``last_activity``; ``/{space_slug}/inbox`` additionally carries
``inbox_state``. Which one a value serializes to is derived from its
inbox state (see ``Params.view``); it is not stored.

Serialization of ``InboxStateFilter.UNREAD`` is lossy: it derives the
feed view, the feed URL has no ``inbox_state``, and parsing a feed URL
forces ``InboxStateFilter.ALL``.
"""

from dataclasses import dataclass, replace
from enum import Enum
from urllib.parse import quote, urlsplit

from level.errors import NotFound
from level.filters import InboxStateFilter, LastActivityFilter, PostStateFilter
from level.http.query import QueryParams, encode_query
from level.routing import Route, Router

FEED_PATH = "/{space_slug}/feed"
INBOX_PATH = "/{space_slug}/inbox"

_INBOX_VIEW_STATES = frozenset({InboxStateFilter.UNDISMISSED, InboxStateFilter.DISMISSED})


class PostsView(Enum):
    """Which listing a ``Params`` value renders as."""

    FEED = "feed"
    INBOX = "inbox"


@dataclass(frozen=True, slots=True)
class Params:
    """Filter state for a space's post listing. Immutable.

    Build with ``init()`` or ``parse()``, never field by field. Every
    ``with_*`` call returns a new value.
    """

    space_slug: str
    state: PostStateFilter
    inbox_state: InboxStateFilter
    last_activity: LastActivityFilter

    @property
    def view(self) -> PostsView:
        """``INBOX`` for undismissed or dismissed inbox states, else ``FEED``."""
        if self.inbox_state in _INBOX_VIEW_STATES:
            return PostsView.INBOX
        return PostsView.FEED

    def with_state(self, state: PostStateFilter) -> "Params":
        return replace(self, state=state)

    def with_inbox_state(self, inbox_state: InboxStateFilter) -> "Params":
        return replace(self, inbox_state=inbox_state)

    def with_last_activity(self, last_activity: LastActivityFilter) -> "Params":
        return replace(self, last_activity=last_activity)

    def clear_filters(self) -> "Params":
        """Reset every filter to its "all" value, keeping the space.

        Unlike ``init()``, the inbox state becomes ``ALL`` rather than
        ``UNDISMISSED``, so a cleared value lands on the feed.
        """
        return replace(
            self,
            state=PostStateFilter.ALL,
            inbox_state=InboxStateFilter.ALL,
            last_activity=LastActivityFilter.ALL,
        )


def init(space_slug: str) -> Params:
    """Default filter state for *space_slug*: the undismissed inbox."""
    return Params(
        space_slug=space_slug,
        state=PostStateFilter.ALL,
        inbox_state=InboxStateFilter.UNDISMISSED,
        last_activity=LastActivityFilter.ALL,
    )


def from_feed(query: QueryParams, space_slug: str) -> Params:
    """Build params from a matched feed URL. Inbox state is always ``ALL``."""
    return Params(
        space_slug=space_slug,
        state=PostStateFilter.from_query(query.get("state")),
        inbox_state=InboxStateFilter.ALL,
        last_activity=LastActivityFilter.from_query(query.get("last_activity")),
    )


def from_inbox(query: QueryParams, space_slug: str) -> Params:
    """Build params from a matched inbox URL."""
    return Params(
        space_slug=space_slug,
        state=PostStateFilter.from_query(query.get("state")),
        inbox_state=InboxStateFilter.from_query(query.get("inbox_state")),
        last_activity=LastActivityFilter.from_query(query.get("last_activity")),
    )


_router = Router()
_router.add(Route(FEED_PATH, from_feed, name="feed"))
_router.add(Route(INBOX_PATH, from_inbox, name="inbox"))
_router.compile()


def parse(url: str) -> Params | None:
    """Parse a posts URL, or return ``None`` if it is not one.

    Feed is tried before inbox. Unrecognized query values fall back to
    each filter's default; only the path shape can make a parse fail.
    """
    parts = urlsplit(url)
    try:
        match = _router.match("GET", parts.path)
    except NotFound:
        return None
    return match.route.handler(QueryParams(parts.query), **match.path_params)


def to_string(params: Params) -> str:
    """Serialize *params* to its canonical URL.

    Parameters with default values are omitted, and the order is fixed:
    ``state``, ``inbox_state`` (inbox only), ``last_activity``.
    """
    slug = quote(params.space_slug, safe="")
    state = params.state.to_query()
    last_activity = params.last_activity.to_query()

    if params.view is PostsView.INBOX:
        query = encode_query(
            [
                ("state", state),
                ("inbox_state", params.inbox_state.to_query()),
                ("last_activity", last_activity),
            ]
        )
        return f"/{slug}/inbox{query}"

    query = encode_query([("state", state), ("last_activity", last_activity)])
    return f"/{slug}/feed{query}"
