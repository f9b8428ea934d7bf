"""Inbox triage filter."""

from enum import Enum


class InboxStateFilter(Enum):
    """Filters posts by the viewer's inbox triage status.

    ``UNDISMISSED`` is the default and is never written to a URL.
    """

    UNDISMISSED = "undismissed"
    UNREAD = "unread"
    DISMISSED = "dismissed"
    ALL = "all"

    @classmethod
    def from_query(cls, value: str | None) -> "InboxStateFilter":
        """Map an ``inbox_state`` query value to a filter.

        Recognizes ``unread``, ``dismissed`` and ``all``; anything else,
        including the literal ``undismissed``, is ``UNDISMISSED``.
        """
        if value == "unread":
            return cls.UNREAD
        if value == "dismissed":
            return cls.DISMISSED
        if value == "all":
            return cls.ALL
        return cls.UNDISMISSED

    def to_query(self) -> str | None:
        if self is InboxStateFilter.UNDISMISSED:
            return None
        return self.value
