"""Route and RouteMatch frozen dataclasses."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route path.

    Static:  ``/groups``       (is_param=False)
    Param:   ``/{space_slug}`` (is_param=True, param_name="space_slug")
    Typed:   ``/{space_slug:str}`` (is_param=True, param_name="space_slug", param_type="str")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None
    param_type: str = "str"


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition.

    ``handler`` is whatever the owner of the table dispatches to; the
    application route table stores a builder that turns path params and
    a query into a typed route value.
    """

    path: str
    handler: Callable[..., Any]
    methods: frozenset[str] = frozenset({"GET", "HEAD"})
    name: str | None = None


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match.

    ``path_params`` holds decoded, converted captures keyed by name.
    """

    route: Route
    path_params: dict[str, Any]
