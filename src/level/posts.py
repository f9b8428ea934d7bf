"""Posts as seen by one viewer, and the listing filter that reads ``Params``.

``filter_posts`` is the consumer of route params: given every post the
viewer can see and the current filter state, it returns the listing in
display order.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from level.filters import InboxStateFilter, PostStateFilter
from level.routes.posts import Params, PostsView


class PostState(Enum):
    OPEN = "open"
    CLOSED = "closed"


class InboxState(Enum):
    """Where a post sits in the viewer's inbox.

    ``EXCLUDED`` posts were never delivered to the inbox (the viewer is
    not subscribed); they still show on the feed.
    """

    EXCLUDED = "excluded"
    UNREAD = "unread"
    READ = "read"
    DISMISSED = "dismissed"


@dataclass(frozen=True, slots=True)
class Post:
    """A top-level post in a space."""

    id: str
    space_slug: str
    author: str
    body: str
    state: PostState
    inbox_state: InboxState
    last_activity_at: datetime

    def to_dict(self) -> dict[str, str]:
        return {
            "id": self.id,
            "space_slug": self.space_slug,
            "author": self.author,
            "body": self.body,
            "state": self.state.value,
            "inbox_state": self.inbox_state.value,
            "last_activity_at": self.last_activity_at.isoformat(),
        }


# Only the inbox-view states; the others derive the feed view.
_INBOX_MATCHES: dict[InboxStateFilter, frozenset[InboxState]] = {
    InboxStateFilter.UNDISMISSED: frozenset({InboxState.UNREAD, InboxState.READ}),
    InboxStateFilter.DISMISSED: frozenset({InboxState.DISMISSED}),
}


def _matches_state(post: Post, state: PostStateFilter) -> bool:
    if state is PostStateFilter.OPEN:
        return post.state is PostState.OPEN
    if state is PostStateFilter.CLOSED:
        return post.state is PostState.CLOSED
    return True


def filter_posts(posts: Iterable[Post], params: Params, now: datetime) -> list[Post]:
    """Select and order the posts shown for *params*.

    The inbox filter applies only when ``params.view`` is the inbox; the
    feed shows posts regardless of triage. The last-activity cutoff is
    inclusive. Results are newest activity first, ties broken by id.
    """
    cutoff = params.last_activity.cutoff(now)
    inbox = _INBOX_MATCHES[params.inbox_state] if params.view is PostsView.INBOX else None

    selected = [
        post
        for post in posts
        if post.space_slug == params.space_slug
        and _matches_state(post, params.state)
        and (inbox is None or post.inbox_state in inbox)
        and (cutoff is None or post.last_activity_at >= cutoff)
    ]
    selected.sort(key=lambda post: post.id)
    selected.sort(key=lambda post: post.last_activity_at, reverse=True)
    return selected
