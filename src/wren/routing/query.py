"""Immutable fragment query parameters.

Implements ``Mapping[str, str]``. Parsing follows fragment URL rules
rather than form encoding: ``+`` is kept literally and every key and
value is percent-decoded the way a browser's ``decodeURIComponent`` does.
"""

from collections.abc import Iterator, Mapping
from urllib.parse import unquote


def parse_query(query_string: str) -> dict[str, str]:
    """Parse ``a=1&b=&c`` into ``{"a": "1", "b": "", "c": ""}``.

    A leading ``?`` is ignored. Each pair is split on its first ``=``;
    a key without ``=`` maps to the empty string and pairs with an empty
    key are skipped. A repeated key keeps its last value.
    """
    params: dict[str, str] = {}
    for pair in query_string.removeprefix("?").split("&"):
        key, _, value = pair.partition("=")
        if not key:
            continue
        params[unquote(key)] = unquote(value)
    return params


class QueryParams(Mapping[str, str]):
    """Immutable query string parameters.

    Attributes:
        _data: Parsed query string as field name -> value.
        _raw: Raw query string (the part after ``?``).
    """

    _data: dict[str, str]
    _raw: str

    __slots__ = ("_data", "_raw")

    def __init__(self, query_string: str = "") -> None:
        object.__setattr__(self, "_raw", query_string)
        object.__setattr__(self, "_data", parse_query(query_string))

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"QueryParams({self._data!r})"

    @property
    def raw(self) -> str:
        return self._raw

    def get_int(self, key: str, default: int | None = None) -> int | None:
        """Return value as int, or *default* if missing or not numeric."""
        value = self.get(key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            return default
