"""Open/closed post state filter."""

from enum import Enum


class PostStateFilter(Enum):
    """Filters posts by whether they are open or closed."""

    ALL = "all"
    OPEN = "open"
    CLOSED = "closed"

    @classmethod
    def from_query(cls, value: str | None) -> "PostStateFilter":
        """Map a ``state`` query value to a filter.

        Only the exact tokens ``open`` and ``closed`` are recognized;
        anything else (including ``all``) is ``ALL``.
        """
        if value == "open":
            return cls.OPEN
        if value == "closed":
            return cls.CLOSED
        return cls.ALL

    def to_query(self) -> str | None:
        if self is PostStateFilter.ALL:
            return None
        return self.value
