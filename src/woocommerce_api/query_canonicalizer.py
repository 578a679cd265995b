"""Deterministic flattening, sorting and percent-encoding of query parameters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple, Union
from urllib.parse import parse_qsl, quote

from .exceptions import InvalidParameterError

QueryPairs = List[Tuple[str, str]]


@dataclass(frozen=True)
class Scalar:
    """A single query value."""

    value: str


@dataclass(frozen=True)
class Nested:
    """Bracketed sub-keys rendered as ``key[subkey]``."""

    items: Tuple[Tuple[str, str], ...]


ParamValue = Union[Scalar, Nested]


def render_value(value: Any) -> str:
    """Render a scalar the way it appears on the wire."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _is_container(value: Any) -> bool:
    return isinstance(value, Mapping) or (
        isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))
    )


def _classify(key: str, value: Any) -> ParamValue:
    if isinstance(value, (Scalar, Nested)):
        return value
    if not _is_container(value):
        return Scalar(render_value(value))

    # Sequences use their indexes as sub-keys: include[0]=1&include[1]=2
    entries = value.items() if isinstance(value, Mapping) else enumerate(value)
    items = []
    for sub_key, sub_value in entries:
        if _is_container(sub_value):
            raise InvalidParameterError(f"{key}[{sub_key}]")
        items.append((str(sub_key), render_value(sub_value)))
    return Nested(tuple(items))


class ParameterSet:
    """Ordered mapping of query keys to scalar or one-level nested values.

    Nested values come from dicts (``key[sub]``) or lists and tuples
    (``key[0]``, ``key[1]``).
    """

    def __init__(self, entries: Optional[Iterable[Tuple[str, ParamValue]]] = None) -> None:
        self._entries: Dict[str, ParamValue] = dict(entries or ())

    @classmethod
    def from_mapping(cls, params: Optional[Mapping[str, Any]]) -> "ParameterSet":
        """Classify a caller-supplied dict into scalar and nested entries."""
        if isinstance(params, ParameterSet):
            return params
        if not params:
            return cls()
        return cls((str(key), _classify(str(key), value)) for key, value in params.items())

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __getitem__(self, key: str) -> ParamValue:
        return self._entries[key]

    def flatten(self) -> QueryPairs:
        """Return ``(key, value)`` pairs with nested keys expanded; later keys win."""
        flat: Dict[str, str] = {}
        for key, value in self._entries.items():
            if isinstance(value, Nested):
                for sub_key, sub_value in value.items:
                    flat[f"{key}[{sub_key}]"] = sub_value
            else:
                flat[key] = value.value
        return list(flat.items())

    def as_dict(self) -> Dict[str, str]:
        """Flattened parameters as a plain dict."""
        return dict(self.flatten())


def percent_encode(text: str) -> str:
    """RFC 3986 encoding: everything outside the unreserved set is escaped."""
    return quote(text, safe="")


def _restore_brackets(encoded_key: str) -> str:
    return encoded_key.replace("%5B", "[").replace("%5D", "]")


def sorted_encoded_pairs(pairs: Iterable[Tuple[str, str]]) -> QueryPairs:
    """Encode each pair and sort ascending by encoded key."""
    merged: Dict[str, str] = {}
    for key, value in pairs:
        merged[key] = value
    encoded = [(percent_encode(key), percent_encode(value)) for key, value in merged.items()]
    encoded.sort(key=lambda pair: pair[0])
    return encoded


def canonical_parameter_string(pairs: Iterable[Tuple[str, str]]) -> str:
    """Sorted ``k=v&...`` string with plain percent-encoding, used for signing."""
    return "&".join(f"{key}={value}" for key, value in sorted_encoded_pairs(pairs))


def split_url(url: str) -> Tuple[str, str]:
    """Split ``url`` into the part before ``?`` and the raw query string."""
    base, _, query = url.partition("?")
    base = base.split("#", 1)[0]
    query = query.split("#", 1)[0]
    return base, query


def parse_query(query: str) -> QueryPairs:
    """Decode a raw query string, keeping blank values."""
    return parse_qsl(query, keep_blank_values=True)


def normalize_query_string(url: str, params: Optional[Mapping[str, Any]] = None) -> str:
    """Merge ``params`` into the query of ``url`` and render it canonically.

    Keys are sorted by their encoded form and percent-encoded, with ``[`` and
    ``]`` left literal in keys so ``filter[date]=2020`` stays readable.
    """
    parameter_set = ParameterSet.from_mapping(params)
    if "?" not in url and not parameter_set:
        return url

    base, query = split_url(url)
    pairs = parse_query(query) + parameter_set.flatten()
    query_string = "&".join(f"{_restore_brackets(key)}={value}" for key, value in sorted_encoded_pairs(pairs))
    return f"{base}?{query_string}"


__all__ = [
    "Nested",
    "ParamValue",
    "ParameterSet",
    "Scalar",
    "canonical_parameter_string",
    "normalize_query_string",
    "parse_query",
    "percent_encode",
    "render_value",
    "sorted_encoded_pairs",
    "split_url",
]
