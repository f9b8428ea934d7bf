"""Post listing filters — closed enums with query-token mappings.

Every filter maps a query string token to a member with ``from_query``
(total: unknown or missing input falls back to the default) and back with
``to_query`` (``None`` for the default, so the parameter is omitted).
"""

from level.filters.inbox_state import InboxStateFilter
from level.filters.last_activity import LastActivityFilter
from level.filters.post_state import PostStateFilter

__all__ = ["InboxStateFilter", "LastActivityFilter", "PostStateFilter"]
