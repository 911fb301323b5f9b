"""Helpers that coerce loosely typed payload values.

Every helper returns ``None`` (or an empty collection) when ``value`` does not
have the expected shape. None of them raise, which lets the entity parsers treat
server payloads as hints rather than contracts.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final

from pydantic import AnyUrl, TypeAdapter, ValidationError

from notekit.config import get_effective_settings

_URL_ADAPTER: Final[TypeAdapter[AnyUrl]] = TypeAdapter(AnyUrl)


def as_mapping(value: Any) -> Mapping[str, Any] | None:
    """Return ``value`` when it is a mapping, ``None`` otherwise."""

    if isinstance(value, Mapping):
        return value
    return None


def as_mapping_list(value: Any) -> list[Mapping[str, Any]]:
    """Return the mapping items of ``value`` when it is a list or tuple.

    Items that are not mappings are dropped, preserving the order of the rest.
    """

    if not isinstance(value, (list, tuple)):
        return []
    return [item for item in value if isinstance(item, Mapping)]


def as_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def as_int(value: Any) -> int | None:
    """Return ``value`` as an integer.

    Integral floats such as ``10.0`` are converted; booleans, fractional floats
    and strings are rejected.
    """

    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def as_flag(value: Any) -> bool | None:
    """Return the truth value of a JSON boolean or number."""

    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    return None


def as_url(value: Any) -> str | None:
    """Return ``value`` when it is a usable absolute URL.

    Validation uses pydantic ``AnyUrl``, which requires a scheme: relative
    references such as ``/path`` or ``page?x=1`` are rejected even though
    clients resolving them against a base URL would accept them. With
    ``strict_urls`` disabled any non-blank string, relative references
    included, is accepted as-is.
    """

    text = as_str(value)
    if text is None or not text.strip():
        return None
    if not get_effective_settings().strict_urls:
        return text
    try:
        _URL_ADAPTER.validate_python(text)
    except ValidationError:
        return None
    return text


def as_index_range(value: Any) -> tuple[int, int] | None:
    """Return ``(start, end)`` from a two item ``[start, end]`` list."""

    if not isinstance(value, (list, tuple)) or len(value) != 2:
        return None
    start, end = (as_int(item) for item in value)
    if start is None or end is None or start < 0 or end < start:
        return None
    return start, end


__all__ = [
    "as_flag",
    "as_index_range",
    "as_int",
    "as_mapping",
    "as_mapping_list",
    "as_str",
    "as_url",
]
