"""Last-activity recency filter.

Buckets posts by how recently anything happened on them. ``cutoff``
turns a bucket into the earliest activity timestamp it admits::

    now = datetime(2026, 3, 4, 15, 30, tzinfo=UTC)
    LastActivityFilter.TODAY.cutoff(now)  # 2026-03-04 00:00 UTC
    LastActivityFilter.WEEK.cutoff(now)   # 2026-02-25 15:30 UTC
"""

from datetime import datetime, timedelta
from enum import Enum

_WINDOWS: dict[str, timedelta] = {
    "week": timedelta(days=7),
    "month": timedelta(days=30),
}


class LastActivityFilter(Enum):
    """Filters posts by recency of their last activity."""

    ALL = "all"
    TODAY = "today"
    WEEK = "week"
    MONTH = "month"

    @classmethod
    def from_query(cls, value: str | None) -> "LastActivityFilter":
        """Map a ``last_activity`` query value to a filter.

        Unknown tokens and ``all`` fall back to ``ALL``.
        """
        if value is None:
            return cls.ALL
        try:
            return cls(value)
        except ValueError:
            return cls.ALL

    def to_query(self) -> str | None:
        if self is LastActivityFilter.ALL:
            return None
        return self.value

    def cutoff(self, now: datetime) -> datetime | None:
        """Return the earliest admitted activity time, or ``None`` for ``ALL``.

        ``TODAY`` starts at midnight of *now*'s calendar day, in *now*'s
        timezone; the other buckets are rolling windows.
        """
        if self is LastActivityFilter.ALL:
            return None
        if self is LastActivityFilter.TODAY:
            return now.replace(hour=0, minute=0, second=0, microsecond=0)
        return now - _WINDOWS[self.value]
