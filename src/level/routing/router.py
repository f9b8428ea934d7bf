"""Compiled router with trie-based path matching.

Routes are registered while a route table is built and compiled into an
immutable lookup structure before the first match.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any

from level.errors import ConfigurationError, MethodNotAllowed, NotFound
from level.routing.params import CONVERTERS, convert_param
from level.routing.route import PathSegment, Route, RouteMatch

logger = logging.getLogger("level.routes")

_FLASK_PARAM = re.compile(r"<[^>]*>")


def parse_path(path: str) -> list[PathSegment]:
    """Parse a route path string into segments.

    Examples::

        "/spaces"                  -> [PathSegment("spaces")]
        "/{space_slug}/groups"     -> [PathSegment("{space_slug}", is_param=True, ...),
                                       PathSegment("groups")]

    Raises ``ConfigurationError`` for ``<param>`` placeholders and for
    unknown converters.
    """
    if _FLASK_PARAM.search(path):
        msg = f"Route {path!r} uses <param> placeholders; write them as {{param}}."
        raise ConfigurationError(msg)

    segments: list[PathSegment] = []
    for part in path.strip("/").split("/"):
        if not part:
            continue
        if part.startswith("{") and part.endswith("}"):
            inner = part[1:-1]
            if ":" in inner:
                param_name, param_type = inner.split(":", 1)
            else:
                param_name = inner
                param_type = "str"
            if param_type not in CONVERTERS:
                msg = f"Route {path!r} uses unknown converter {param_type!r}."
                raise ConfigurationError(msg)
            segments.append(
                PathSegment(
                    value=part,
                    is_param=True,
                    param_name=param_name,
                    param_type=param_type,
                )
            )
        else:
            segments.append(PathSegment(value=part))
    return segments


def split_path(path: str) -> list[str] | None:
    """Split a request path into raw segments.

    One trailing slash is tolerated; any other empty segment (``//``)
    makes the path unmatchable and returns ``None``::

        "/acme/feed/"  -> ["acme", "feed"]
        "/"            -> []
        "/acme//feed"  -> None
    """
    if path.startswith("/"):
        path = path[1:]
    if not path:
        return []
    if path.endswith("/"):
        path = path[:-1]
    parts = path.split("/")
    if "" in parts:
        return None
    return parts


class _TrieNode:
    """A node in the route trie. Mutable during compilation only."""

    __slots__ = ("children", "param_child", "routes_by_method")

    def __init__(self) -> None:
        # Static segment children: "groups" -> node
        self.children: dict[str, _TrieNode] = {}
        # Single parameter child (only one param pattern per level)
        self.param_child: _ParamEdge | None = None
        # Routes at this node, keyed by HTTP method
        self.routes_by_method: dict[str, Route] = {}


@dataclass(slots=True)
class _ParamEdge:
    """A parameter edge in the trie."""

    param_name: str
    param_type: str
    regex: re.Pattern[str]
    node: _TrieNode


class Router:
    """Compiled router with trie-based path matching.

    Usage::

        router = Router()
        router.add(Route("/spaces", handler))
        router.add(Route("/{space_slug}/groups/{group_id}", handler))
        router.compile()
        match = router.match("GET", "/acme/groups/42")

    ``match`` takes the path as it appears in the URL (percent-encoded);
    captured parameters are decoded after segment splitting, so an
    encoded ``%2F`` stays inside its segment.
    """

    __slots__ = ("_compiled", "_root")

    def __init__(self) -> None:
        self._root = _TrieNode()
        self._compiled = False

    def add(self, route: Route) -> None:
        """Add a route to the router. Must be called before compile()."""
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)

        node = self._root
        for seg in parse_path(route.path):
            if seg.is_param:
                if node.param_child is None:
                    pattern, _ = CONVERTERS[seg.param_type]
                    node.param_child = _ParamEdge(
                        param_name=seg.param_name or "",
                        param_type=seg.param_type,
                        regex=re.compile(f"^{pattern}$"),
                        node=_TrieNode(),
                    )
                elif node.param_child.param_name != seg.param_name:
                    msg = (
                        f"Route {route.path!r} declares {seg.value} where "
                        f"{{{node.param_child.param_name}}} is already registered."
                    )
                    raise ConfigurationError(msg)
                node = node.param_child.node
            else:
                if seg.value not in node.children:
                    node.children[seg.value] = _TrieNode()
                node = node.children[seg.value]

        # Register methods at the terminal node
        for method in route.methods:
            node.routes_by_method[method] = route

    @property
    def routes(self) -> list[Route]:
        """Return all registered routes.

        Traverses the trie to collect every unique Route object.
        """
        seen: set[int] = set()
        result: list[Route] = []
        self._collect_routes(self._root, seen, result)
        return result

    def _collect_routes(
        self,
        node: _TrieNode,
        seen: set[int],
        result: list[Route],
    ) -> None:
        """Recursively collect routes from the trie."""
        for route in node.routes_by_method.values():
            if id(route) not in seen:
                seen.add(id(route))
                result.append(route)

        for child in node.children.values():
            self._collect_routes(child, seen, result)

        if node.param_child is not None:
            self._collect_routes(node.param_child.node, seen, result)

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._compiled = True

    def match(self, method: str, path: str) -> RouteMatch:
        """Match a request path and method against compiled routes.

        Returns a ``RouteMatch`` on success.
        Raises ``NotFound`` if no route matches the path.
        Raises ``MethodNotAllowed`` if the path matches but the method doesn't.
        """
        parts = split_path(path)
        result = None if parts is None else self._match_node(self._root, parts, 0, {})

        if result is None:
            logger.debug("No route matches %s %r", method, path)
            raise NotFound(f"No route matches {method} {path!r}")

        node, params = result

        if method in node.routes_by_method:
            return RouteMatch(route=node.routes_by_method[method], path_params=params)

        raise MethodNotAllowed(frozenset(node.routes_by_method))

    def _match_node(
        self,
        node: _TrieNode,
        parts: list[str],
        index: int,
        params: dict[str, Any],
    ) -> tuple[_TrieNode, dict[str, Any]] | None:
        """Recursively match path parts against the trie."""
        # All parts consumed, return this node
        if index == len(parts):
            if node.routes_by_method:
                return node, params
            return None

        part = parts[index]

        # 1. Try static child first (exact match)
        if part in node.children:
            result = self._match_node(node.children[part], parts, index + 1, params)
            if result is not None:
                return result

        # 2. Try parameter child
        edge = node.param_child
        if edge is not None and edge.regex.match(part):
            new_params = {**params, edge.param_name: convert_param(part, edge.param_type)}
            return self._match_node(edge.node, parts, index + 1, new_params)

        return None
