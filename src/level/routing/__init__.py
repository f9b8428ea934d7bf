"""Routing — compiled route table with O(path-depth) matching.

Routes are registered while a table is built and compiled into an
immutable lookup structure before first use.
"""

from level.routing.route import PathSegment, Route, RouteMatch
from level.routing.router import Router, parse_path

__all__ = ["PathSegment", "Route", "RouteMatch", "Router", "parse_path"]
