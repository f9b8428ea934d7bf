"""Immutable query string parameters and canonical query encoding.

``QueryParams`` implements ``Mapping[str, str]`` over a parsed query
string. ``encode_query`` is its inverse for canonical URLs: it keeps the
caller's parameter order and drops parameters that have no value.
"""

from collections.abc import Iterable, Iterator, Mapping
from urllib.parse import parse_qs, urlencode


class QueryParams(Mapping[str, str]):
    """Immutable query string parameters.

    Attributes:
        _data: Parsed query string as field name -> list of values.

    ``__getitem__`` and ``get`` return the first value for a key.
    """

    _data: dict[str, list[str]]

    __slots__ = ("_data",)

    def __init__(self, query_string: str | bytes = "") -> None:
        if isinstance(query_string, bytes):
            query_string = query_string.decode("latin-1")
        parsed = parse_qs(query_string, keep_blank_values=True)
        object.__setattr__(self, "_data", parsed)

    def __getitem__(self, key: str) -> str:
        return self._data[key][0]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self[k]!r}" for k in self)
        return f"QueryParams({{{items}}})"

    def __setattr__(self, name: str, value: object) -> None:
        msg = "QueryParams is immutable"
        raise AttributeError(msg)

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        values = self._data.get(key)
        if values:
            return values[0]
        return default


def encode_query(pairs: Iterable[tuple[str, str | None]]) -> str:
    """Encode ordered *pairs* as a query string, skipping ``None`` values.

    Returns ``""`` when nothing survives, so callers can append the result
    without a dangling ``?``::

        >>> encode_query([("state", "open"), ("inbox_state", None)])
        '?state=open'
        >>> encode_query([("state", None)])
        ''
    """
    kept = [(key, value) for key, value in pairs if value is not None]
    if not kept:
        return ""
    return "?" + urlencode(kept)
