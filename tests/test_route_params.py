"""Tests for level.routes.posts — posts-list params and their URLs."""

import dataclasses

import pytest

from level.filters import InboxStateFilter, LastActivityFilter, PostStateFilter
from level.routes.posts import Params, PostsView, init, parse, to_string


class TestInit:
    def test_defaults(self) -> None:
        params = init("acme")
        assert params.space_slug == "acme"
        assert params.state is PostStateFilter.ALL
        assert params.inbox_state is InboxStateFilter.UNDISMISSED
        assert params.last_activity is LastActivityFilter.ALL

    @pytest.mark.parametrize("slug", ["acme", "level-hq", "team_42", "a"])
    def test_space_slug_preserved(self, slug: str) -> None:
        assert init(slug).space_slug == slug

    def test_default_view_is_inbox(self) -> None:
        assert init("acme").view is PostsView.INBOX


class TestImmutability:
    def test_frozen(self) -> None:
        params = init("acme")
        with pytest.raises(dataclasses.FrozenInstanceError):
            params.state = PostStateFilter.OPEN  # type: ignore[misc]

    def test_with_state_returns_new_value(self) -> None:
        params = init("acme")
        updated = params.with_state(PostStateFilter.CLOSED)
        assert updated.state is PostStateFilter.CLOSED
        assert params.state is PostStateFilter.ALL

    def test_with_inbox_state(self) -> None:
        updated = init("acme").with_inbox_state(InboxStateFilter.DISMISSED)
        assert updated.inbox_state is InboxStateFilter.DISMISSED
        assert updated.space_slug == "acme"

    def test_with_last_activity(self) -> None:
        updated = init("acme").with_last_activity(LastActivityFilter.TODAY)
        assert updated.last_activity is LastActivityFilter.TODAY
        assert updated.state is PostStateFilter.ALL


class TestClearFilters:
    def test_resets_everything_to_all(self) -> None:
        params = (
            init("acme")
            .with_state(PostStateFilter.OPEN)
            .with_inbox_state(InboxStateFilter.DISMISSED)
            .with_last_activity(LastActivityFilter.WEEK)
        )
        cleared = params.clear_filters()
        assert cleared == Params(
            space_slug="acme",
            state=PostStateFilter.ALL,
            inbox_state=InboxStateFilter.ALL,
            last_activity=LastActivityFilter.ALL,
        )

    def test_differs_from_init(self) -> None:
        assert init("acme").clear_filters().inbox_state is InboxStateFilter.ALL
        assert init("acme").clear_filters() != init("acme")

    def test_idempotent(self) -> None:
        params = init("acme").with_state(PostStateFilter.CLOSED)
        assert params.clear_filters().clear_filters() == params.clear_filters()

    def test_cleared_value_lands_on_feed(self) -> None:
        assert to_string(init("acme").clear_filters()) == "/acme/feed"


class TestView:
    @pytest.mark.parametrize(
        ("inbox_state", "view"),
        [
            (InboxStateFilter.UNDISMISSED, PostsView.INBOX),
            (InboxStateFilter.DISMISSED, PostsView.INBOX),
            (InboxStateFilter.UNREAD, PostsView.FEED),
            (InboxStateFilter.ALL, PostsView.FEED),
        ],
    )
    def test_derived_from_inbox_state(
        self, inbox_state: InboxStateFilter, view: PostsView
    ) -> None:
        assert init("acme").with_inbox_state(inbox_state).view is view


class TestToString:
    def test_defaults(self) -> None:
        assert to_string(init("acme")) == "/acme/inbox"

    def test_dismissed(self) -> None:
        params = init("acme").with_inbox_state(InboxStateFilter.DISMISSED)
        assert to_string(params) == "/acme/inbox?inbox_state=dismissed"

    def test_unread_routes_to_feed_and_drops_inbox_state(self) -> None:
        params = init("acme").with_inbox_state(InboxStateFilter.UNREAD)
        assert to_string(params) == "/acme/feed"

    def test_all_routes_to_feed(self) -> None:
        params = init("acme").with_inbox_state(InboxStateFilter.ALL)
        assert to_string(params) == "/acme/feed"

    def test_inbox_parameter_order(self) -> None:
        params = (
            init("acme")
            .with_last_activity(LastActivityFilter.TODAY)
            .with_inbox_state(InboxStateFilter.DISMISSED)
            .with_state(PostStateFilter.CLOSED)
        )
        assert to_string(params) == (
            "/acme/inbox?state=closed&inbox_state=dismissed&last_activity=today"
        )

    def test_feed_parameter_order(self) -> None:
        params = (
            init("acme")
            .with_inbox_state(InboxStateFilter.ALL)
            .with_last_activity(LastActivityFilter.MONTH)
            .with_state(PostStateFilter.OPEN)
        )
        assert to_string(params) == "/acme/feed?state=open&last_activity=month"

    def test_state_all_is_omitted(self) -> None:
        params = init("acme").with_last_activity(LastActivityFilter.WEEK)
        assert to_string(params) == "/acme/inbox?last_activity=week"

    def test_slug_is_percent_encoded(self) -> None:
        assert to_string(init("a b/c")) == "/a%20b%2Fc/inbox"


class TestParse:
    def test_feed_with_query(self) -> None:
        params = parse("/acme/feed?state=open&last_activity=today")
        assert params == Params(
            space_slug="acme",
            state=PostStateFilter.OPEN,
            inbox_state=InboxStateFilter.ALL,
            last_activity=LastActivityFilter.TODAY,
        )

    def test_feed_ignores_inbox_state(self) -> None:
        params = parse("/acme/feed?inbox_state=dismissed")
        assert params is not None
        assert params.inbox_state is InboxStateFilter.ALL

    def test_inbox_defaults(self) -> None:
        assert parse("/acme/inbox") == init("acme")

    def test_inbox_with_query(self) -> None:
        params = parse("/acme/inbox?state=closed&inbox_state=unread&last_activity=week")
        assert params == Params(
            space_slug="acme",
            state=PostStateFilter.CLOSED,
            inbox_state=InboxStateFilter.UNREAD,
            last_activity=LastActivityFilter.WEEK,
        )

    def test_unknown_inbox_state_defaults(self) -> None:
        params = parse("/acme/inbox?inbox_state=bogus")
        assert params is not None
        assert params.inbox_state is InboxStateFilter.UNDISMISSED

    @pytest.mark.parametrize("value", ["bogus", "OPEN", "Closed", "all", ""])
    def test_unknown_state_defaults(self, value: str) -> None:
        params = parse(f"/acme/feed?state={value}")
        assert params is not None
        assert params.state is PostStateFilter.ALL

    def test_unknown_last_activity_defaults(self) -> None:
        params = parse("/acme/inbox?last_activity=yesterday")
        assert params is not None
        assert params.last_activity is LastActivityFilter.ALL

    def test_first_repeated_value_wins(self) -> None:
        params = parse("/acme/feed?state=closed&state=open")
        assert params is not None
        assert params.state is PostStateFilter.CLOSED

    def test_trailing_slash_tolerated(self) -> None:
        assert parse("/acme/inbox/") == init("acme")

    def test_absolute_url(self) -> None:
        params = parse("https://level.test/acme/feed?state=open")
        assert params is not None
        assert params.state is PostStateFilter.OPEN

    def test_slug_is_percent_decoded(self) -> None:
        params = parse("/a%20b%2Fc/inbox")
        assert params is not None
        assert params.space_slug == "a b/c"

    def test_slug_is_decoded_once(self) -> None:
        params = parse("/a%2541/feed")
        assert params is not None
        assert params.space_slug == "a%41"

    @pytest.mark.parametrize(
        "url",
        [
            "/acme/archive",
            "/feed",
            "/inbox",
            "/",
            "",
            "/acme",
            "/acme/feed/extra",
            "/acme/inbox/extra?state=open",
            "/acme//feed",
            "/acme/feed//",
        ],
    )
    def test_no_match(self, url: str) -> None:
        assert parse(url) is None


class TestRoundTrip:
    @pytest.mark.parametrize(
        ("inbox_state", "expected"),
        [
            (InboxStateFilter.UNDISMISSED, InboxStateFilter.UNDISMISSED),
            (InboxStateFilter.DISMISSED, InboxStateFilter.DISMISSED),
            (InboxStateFilter.ALL, InboxStateFilter.ALL),
            # Unread serializes to the feed URL, which parses as ALL.
            (InboxStateFilter.UNREAD, InboxStateFilter.ALL),
        ],
    )
    def test_inbox_state(
        self, inbox_state: InboxStateFilter, expected: InboxStateFilter
    ) -> None:
        params = (
            init("acme")
            .with_state(PostStateFilter.OPEN)
            .with_last_activity(LastActivityFilter.TODAY)
            .with_inbox_state(inbox_state)
        )
        parsed = parse(to_string(params))
        assert parsed == params.with_inbox_state(expected)

    @pytest.mark.parametrize("state", list(PostStateFilter))
    @pytest.mark.parametrize("last_activity", list(LastActivityFilter))
    def test_state_and_last_activity(
        self, state: PostStateFilter, last_activity: LastActivityFilter
    ) -> None:
        params = init("acme").with_state(state).with_last_activity(last_activity)
        assert parse(to_string(params)) == params

    def test_canonical_strings_are_stable(self) -> None:
        for url in [
            "/acme/inbox",
            "/acme/feed",
            "/acme/feed?state=closed&last_activity=week",
            "/acme/inbox?state=open&inbox_state=dismissed&last_activity=today",
        ]:
            params = parse(url)
            assert params is not None
            assert to_string(params) == url
