"""Path parameter patterns and conversion.

Route templates name a converter per placeholder; ``{space_slug}`` is
shorthand for ``{space_slug:str}``. The router matches captures against
the converter's regex, then percent-decodes and converts them here.
"""

from collections.abc import Callable
from urllib.parse import unquote

# (regex_pattern, converter) for each supported converter
CONVERTERS: dict[str, tuple[str, Callable[[str], object]]] = {
    "str": (r"[^/]+", str),
}


def convert_param(value: str, param_type: str) -> object:
    """Decode and convert a captured path segment.

    Raises ``KeyError`` if *param_type* is not a registered converter.
    """
    _, converter = CONVERTERS[param_type]
    return converter(unquote(value))
